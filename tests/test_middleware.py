from tortoise import Tortoise, connections

from restaurants.models import Restaurant
from restaurants.serializer import JSendSchema, JSendStatus
from restaurants.serializer.models import RestaurantCreateSchema
from tests.util import generate_restaurant_data


class TestStoreErrorMiddleware:

    async def test_store_failure(self, client, seeded_restaurants):
        """Assert that a broken store is reported as a server error."""
        await connections.get("default").execute_script("DROP TABLE grade;")
        try:
            resp = await client.get('/restaurants')
        finally:
            await Tortoise.generate_schemas(safe=True)

        assert resp.status == 500
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.ERROR
        assert data["data"]["errors"]

    async def test_failed_create_leaves_nothing(self, client, seeded_restaurants):
        """Assert that a create that fails halfway does not leave a restaurant behind."""
        await connections.get("default").execute_script("DROP TABLE grade;")
        try:
            resp = await client.post('/restaurants', json=RestaurantCreateSchema().dump(generate_restaurant_data()))
            count = await Restaurant.all().count()
        finally:
            await Tortoise.generate_schemas(safe=True)

        assert resp.status == 500
        assert count == len(seeded_restaurants)

    async def test_failed_update_applies_nothing(self, client, store, random_restaurant):
        """Assert that an update that fails halfway leaves every field as it was."""
        update_data = {
            "id": str(random_restaurant.id),
            "name": "half applied",
            "grades": [{"date": "2022-02-02T00:00:00+00:00", "grade": "Z"}],
        }

        await connections.get("default").execute_script("DROP TABLE grade;")
        try:
            resp = await client.put(f'/restaurants/{random_restaurant.id}', json=update_data)
            name = (await Restaurant.get(id=random_restaurant.id)).name
        finally:
            await Tortoise.generate_schemas(safe=True)

        assert resp.status == 500
        assert name == random_restaurant.name

    async def test_missing_route(self, client):
        resp = await client.get('/bikes')
        assert resp.status == 404
