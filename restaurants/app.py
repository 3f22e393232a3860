"""
App
-----
"""

import asyncio

import sentry_sdk
from aiohttp import web
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from restaurants import server_mode, logger
from restaurants.config import api_root, database_url, sentry_dsn
from restaurants.middleware import store_error_middleware
from restaurants.signals import register_signals
from restaurants.store import RestaurantStore
from restaurants.version import __version__, name
from restaurants.views import register_views


def build_app(db_uri=None):
    """
    Sets up the app along with the store it owns.

    :param db_uri: The database to back the store with, defaulting to the configured database.
    """
    app = web.Application(middlewares=[store_error_middleware])

    app['store'] = RestaurantStore(db_uri if db_uri is not None else database_url)

    # open the store on startup and close it on cleanup
    register_signals(app)

    # register views
    register_views(app, api_root)

    # set up sentry exception tracking
    if server_mode != "development" and sentry_dsn is not None:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"{name}@{__version__}",
            integrations=[AioHttpIntegration()],
        )

    if server_mode == "development" or server_mode == "testing":
        app.on_startup.append(_enable_debug)

    return app


async def _enable_debug(app):
    asyncio.get_running_loop().set_debug(True)
