"""
The primary entry point to the application.
"""

from restaurants import logger
from restaurants.cli import run
from restaurants.version import __version__, name

if __name__ == '__main__':
    logger.info(f'Starting {name} %s!', __version__)
    run()
