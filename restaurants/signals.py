"""
Signals
-------

Defines the signals that the aiohttp server uses to manage the
lifecycle of the restaurant store.

Each signal must accept the ``app`` argument.
"""

from aiohttp.web import Application

from restaurants import logger


async def open_store(app: Application):
    """Opens the store before the server starts taking requests."""
    await app['store'].open()


async def close_store(app: Application):
    """Closes the open database connections."""
    await app['store'].close()


async def log_startup(app: Application):
    logger.info("Serving %s routes", len(app.router.routes()))


def register_signals(app, init_database=True):
    """Registers all the signals at the appropriate hooks."""
    if init_database:
        app.on_startup.append(open_store)
        app.on_cleanup.append(close_store)

    app.on_startup.append(log_startup)
