"""
Decorators
----------

This module defines some decorators that significantly reduce
the boilerplate when handling JSON IO. These are used on the
routes of the system to gracefully deserialize, validate, and
serialize the data coming in and out of the app.

.. note:: Annotating a route with ``@expects(None)`` or ``@returns(None)``
    is purely for clarity and has no effect. It may however make the
    route definitions easier to read.
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError
from typing import Optional

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError
from marshmallow_jsonschema import JSONSchema

from restaurants import logger
from .jsend import JSendSchema, JSendStatus


def expects(schema: Optional[Schema], into="data"):
    """
    A decorator that asserts that the JSON data supplied
    to the route validates the given :class:`~marshmallow.Schema`.

    It also handles missing data, malformed input, and invalid schemas.
    If the data is valid, it is stored on the request under the key
    supplied to the ``into`` parameter, otherwise it displays a
    descriptive error to the user along with the expected schema.
    Either way, the store is never touched with invalid data.

    .. code:: python

        @expects(RestaurantCreateSchema(), "my_data")
        async def post(self):
            valid_data = self.request["my_data"]

    :param schema: The schema to validate.
    :param into: The key to store the validated data in.
    """

    # if schema is none, then bypass the decorator
    if schema is None:
        return lambda x: x

    # assert the schema is of the right type
    if not isinstance(schema, Schema):
        raise TypeError

    json_schema = JSONSchema().dump(schema)["definitions"][type(schema).__name__]

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):

            # if the request is not JSON or missing, return a warning and the valid schema
            if not self.request.body_exists or not self.request.content_type == "application/json":
                response_data = JSendSchema().dump({
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": f"This route ({self.request.method}: {self.request.rel_url}) only accepts JSON.",
                        "schema": json_schema
                    }
                })
                return web.json_response(response_data, status=HTTPStatus.BAD_REQUEST)

            try:
                self.request[into] = schema.load(await self.request.json())
            except JSONDecodeError as err:
                # if the data is not valid json, return a warning
                response_data = JSendSchema().dump({
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": "Could not parse supplied JSON.",
                        "errors": err.args
                    }
                })
                return web.json_response(response_data, status=HTTPStatus.BAD_REQUEST)
            except ValidationError as err:
                # if the json data does not match the schema, return the errors and the valid schema
                response_data = JSendSchema().dump({
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": "The request did not validate properly.",
                        "errors": err.messages,
                        "schema": json_schema
                    }
                })
                return web.json_response(response_data, status=HTTPStatus.BAD_REQUEST)

            # if everything passes, execute the original function
            return await original_function(self, **kwargs)

        return new_func

    return decorator


def returns(schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK):
    """
    A decorator that dumps the data returned from the
    route through the given :class:`~marshmallow.Schema`.

    As long as this decorator is applied to the route,
    it is possible to return plain python dictionaries.

    .. code:: python

        @returns(RestaurantSchema(), HTTPStatus.CREATED)
        async def post(self):
            restaurant = await do_stuff()
            return restaurant.serialize()

    :param schema: The schema that the output data must conform to
    :param return_code: The code to return
    """

    # if no schema is defined, pass through
    if schema is None:
        return lambda x: x

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            response_data = await original_function(self, **kwargs)

            try:
                return web.json_response(schema.dump(response_data), status=return_code)
            except (ValidationError, KeyError, TypeError, ValueError) as err:
                logger.error("Could not serialize the response for %s %s: %r",
                             self.request.method, self.request.rel_url, err)
                response_data = JSendSchema().dump({
                    "status": JSendStatus.ERROR,
                    "data": {"errors": err.messages if isinstance(err, ValidationError) else [str(arg) for arg in err.args]},
                    "message": "We tried to send you data back, but it came out wrong."
                })
                return web.json_response(response_data, status=HTTPStatus.INTERNAL_SERVER_ERROR)

        return new_func

    return decorator
