"""
Some tests for the expects and returns decorators, run against the restaurant routes.
"""

from aiohttp import web
from aiohttp.test_utils import TestClient

from restaurants.serializer import JSendSchema, JSendStatus, returns
from restaurants.serializer.models import RestaurantListSchema
from restaurants.views.base import BaseView


class TestExpectDecorator:

    async def test_expects_no_data(self, client: TestClient):
        """Assert that trying to create a restaurant with no data fails."""
        resp = await client.post('/restaurants')
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "only accepts JSON" in data["data"]["message"]
        assert data["status"] == JSendStatus.FAIL
        assert "schema" in data["data"]

    async def test_expects_malformed_json(self, client: TestClient):
        resp = await client.post('/restaurants', data="[", headers={"Content-Type": "application/json"})
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert data["status"] == JSendStatus.FAIL
        assert "Could not parse" in data["data"]["message"]

    async def test_expects_invalid_data(self, client: TestClient):
        """Assert that trying to create a restaurant with the wrong data fails."""
        resp = await client.post('/restaurants', json={"wrong": "data"})
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert data["status"] == JSendStatus.FAIL
        assert "did not validate" in data["data"]["message"]
        for field in ("name", "cuisine", "borough", "address", "grades"):
            assert field in data["data"]["errors"]


class BrokenView(BaseView):
    url = "/broken"

    @returns(RestaurantListSchema())
    async def get(self):
        return {"restaurants": 5}


class TestReturnsDecorator:

    async def test_returns_bad_data(self, aiohttp_client):
        """Assert that data which doesn't fit the schema becomes a server error."""
        app = web.Application()
        BrokenView.register_route(app)
        client = await aiohttp_client(app)

        resp = await client.get('/broken')
        assert resp.status == 500
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.ERROR
        assert "came out wrong" in data["message"]
