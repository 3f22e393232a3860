"""
The main package for the restaurants API server.
"""

import logging

from restaurants.config import server_mode

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s %(name)-12s %(levelname)-8s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.DEBUG if server_mode == "development" else logging.INFO)
