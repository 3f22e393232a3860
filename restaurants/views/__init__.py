"""
.. autoclasstree:: restaurants.views

This package contains the server API for listing, viewing,
creating, updating and deleting restaurants.

API Conventions
---------------

The API conforms as best as possible to the REST standard. In short, the api must:

* Be ordered in terms of resources (nouns such as restaurant)
* Have multiple ways of accessing the same resource (GET, POST, PUT, DELETE)
* Accept and return JSON

API Expected Responses
----------------------

GET and POST requests respond with the restaurant(s) as plain JSON.
PUT and DELETE requests respond with a 204 no content.
Every failure responds with JSend formatted JSON.
"""

import aiohttp_cors
from aiohttp.web import Application

from restaurants import logger
from .restaurants import RestaurantsView, RestaurantView

views = [
    RestaurantsView, RestaurantView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
        view.enable_cors(cors)
