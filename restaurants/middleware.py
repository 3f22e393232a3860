"""
Middleware
----------
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp.web import Request
from aiohttp.web_middlewares import middleware
from tortoise.exceptions import BaseORMException

from restaurants import logger
from restaurants.serializer import JSendStatus, JSendSchema

response_schema = JSendSchema()


@middleware
async def store_error_middleware(request: Request, handler):
    """
    Turns any failure of the backing store into a JSend error.

    Every write to the store happens in a transaction, so by the
    time the error reaches here nothing has been partially applied.
    """
    try:
        return await handler(request)
    except BaseORMException as error:
        logger.exception("Store failure while handling %s %s", request.method, request.rel_url)
        return web.json_response(response_schema.dump({
            "status": JSendStatus.ERROR,
            "data": {"errors": [str(error)]},
            "message": "The restaurant store could not complete the request."
        }), status=HTTPStatus.INTERNAL_SERVER_ERROR)
