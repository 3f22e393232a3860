"""
Decorators
-------------------------
"""
from functools import wraps
from inspect import isawaitable
from typing import Any, Callable, Dict, Tuple, Union

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from restaurants.serializer import JSendStatus, JSendSchema


def resolve_match_map(request: Request, match_map) -> Dict[str, Any]:
    resolved_matches = {}
    errors = []

    for key, value in match_map.items():
        if isinstance(value, tuple):
            param = request.match_info.get(value[0])
            try:
                resolved_matches[key] = value[1](param)
            except (ValueError, TypeError):
                errors.append(f'Could not convert url parameter "{param}" to expected type {value[1].__name__}.')
        else:
            raise TypeError(f"match_getter incorrectly configured (doesn't support {type(value)})")

    if errors:
        raise ValueError(*errors)

    return resolved_matches


def match_getter(getter: Union[str, Callable], into: str, **match_map: Tuple[str, type]):
    """
    Automatically fetches and includes an item, or 404's if it doesn't exist.

    .. code-block:: python

        # example usage
        @match_getter("find", "restaurant", rid=("id", UUID))
        async def get(self, restaurant: Restaurant)
            return restaurant.serialize()

    :param getter: The function to fetch the item with, or the name of a method on the view's store.
    :param into: The name of the parameter to pass the object as.
    :param match_map: Associates a kwarg on the ``getter`` to a url variable and the type to convert it to.
    :return: A decorator that wraps the response and passes in the object.
    """

    def attach_instance(decorated):

        @wraps(decorated)
        async def new_func(self: View, **kwargs):
            try:
                params = resolve_match_map(self.request, match_map)
            except ValueError as e:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": "Errors with your request.",
                        "errors": e.args
                    }
                }
                raise web.HTTPBadRequest(text=JSendSchema().dumps(response), content_type='application/json')

            getter_function = getattr(self.store, getter) if isinstance(getter, str) else getter
            item = getter_function(**params)
            if isawaitable(item):
                item = await item

            if item is None:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": f'Could not find needed {into} with the given params.',
                        "params": {key: str(value) for key, value in params.items()}
                    }
                }
                raise web.HTTPNotFound(text=JSendSchema().dumps(response), content_type='application/json')

            return await decorated(self, **kwargs, **{into: item})

        return new_func

    return attach_instance
