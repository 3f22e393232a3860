"""
The entry point for the CLI tool
"""

import uvloop
from aiohttp import web

from restaurants.app import build_app
from restaurants.config import database_url, port


def run():
    """Builds the app against the configured database and runs it."""
    uvloop.install()
    web.run_app(build_app(database_url), port=port)


if __name__ == '__main__':
    run()
