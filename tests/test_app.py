from restaurants.app import build_app
from restaurants.config import database_url, test_database_url
from restaurants.serializer.models import RestaurantCreateSchema
from restaurants.store import RestaurantStore
from tests.util import generate_restaurant_data


class TestBuildApp:

    def test_routes(self):
        app = build_app(test_database_url)
        assert isinstance(app["store"], RestaurantStore)
        assert "restaurants" in app.router
        assert "restaurant" in app.router

    def test_default_database(self):
        assert build_app()["store"].db_uri == database_url

    async def test_store_lifecycle(self, aiohttp_client):
        """Assert that the app opens its store on startup and closes it on cleanup."""
        app = build_app(test_database_url)
        store = app["store"]
        assert not store.is_open

        client = await aiohttp_client(app)
        try:
            assert store.is_open

            resp = await client.post('/restaurants', json=RestaurantCreateSchema().dump(generate_restaurant_data()))
            assert resp.status == 201
            resp = await client.get('/restaurants')
            assert len((await resp.json())["restaurants"]) == 1
        finally:
            await client.close()

        assert not store.is_open
