import os

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient

from restaurants.middleware import store_error_middleware
from restaurants.models import Grade, Restaurant
from restaurants.signals import register_signals
from restaurants.store import RestaurantStore
from restaurants.views import register_views
from tests.util import generate_restaurant_data


@pytest.fixture(scope="session")
def database_url():
    return os.getenv("TEST_DATABASE_URL", "sqlite://:memory:")


@pytest.fixture
async def store(database_url) -> RestaurantStore:
    store = RestaurantStore(database_url)
    await store.open()
    yield store
    # zero out the database so that no test depends on another
    await Grade.all().delete()
    await Restaurant.all().delete()
    await store.close()


@pytest.fixture
async def client(aiohttp_client, store) -> TestClient:
    app = web.Application(middlewares=[store_error_middleware])
    app['store'] = store

    register_signals(app, init_database=False)  # we get the store from a fixture
    register_views(app, "")

    return await aiohttp_client(app)


@pytest.fixture
async def random_restaurant(store) -> Restaurant:
    """Creates a random restaurant in the database."""
    return await store.insert(generate_restaurant_data())


@pytest.fixture
async def seeded_restaurants(store):
    """Seeds the database with ten random restaurants."""
    return [await store.insert(generate_restaurant_data()) for _ in range(10)]
