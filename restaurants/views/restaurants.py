"""
Restaurant Related Views
--------------------------

Handles all the restaurant CRUD.
"""
from http import HTTPStatus
from uuid import UUID

from aiohttp import web

from restaurants import logger
from restaurants.models import Restaurant
from restaurants.serializer import JSendSchema, JSendStatus
from restaurants.serializer.decorators import expects, returns
from restaurants.serializer.models import RestaurantCreateSchema, RestaurantListSchema, RestaurantSchema, \
    RestaurantUpdateSchema
from restaurants.views.base import BaseView
from restaurants.views.decorators import match_getter


class RestaurantsView(BaseView):
    """
    Gets the list of restaurants or adds a new restaurant.
    """
    url = "/restaurants"
    name = "restaurants"

    @returns(RestaurantListSchema())
    async def get(self):
        restaurants = await self.store.find_all()
        return {"restaurants": [restaurant.serialize() for restaurant in restaurants]}

    @expects(RestaurantCreateSchema())
    @returns(RestaurantSchema(), HTTPStatus.CREATED)
    async def post(self):
        restaurant = await self.store.insert(self.request["data"])
        logger.info("Created restaurant %s (%s)", restaurant.id, restaurant.name)
        return restaurant.serialize()


class RestaurantView(BaseView):
    """
    Gets, updates, or deletes a single restaurant by its id.
    """
    url = "/restaurants/{id}"
    name = "restaurant"
    with_restaurant = match_getter("find", "restaurant", rid=("id", UUID))

    @with_restaurant
    @returns(RestaurantSchema())
    async def get(self, restaurant: Restaurant):
        return restaurant.serialize()

    @with_restaurant
    @expects(RestaurantUpdateSchema())
    async def put(self, restaurant: Restaurant):
        changes = dict(self.request["data"])
        body_id = changes.pop("id", None)

        if body_id is not None and body_id != restaurant.id:
            response = {
                "status": JSendStatus.FAIL,
                "data": {
                    "message": f"Request path id ({restaurant.id}) and request body id ({body_id}) must match.",
                }
            }
            return web.json_response(JSendSchema().dump(response), status=HTTPStatus.BAD_REQUEST)

        if not await self.store.update(restaurant, changes):
            response = {
                "status": JSendStatus.FAIL,
                "data": {"message": f"Restaurant {restaurant.id} was removed before it could be updated."}
            }
            return web.json_response(JSendSchema().dump(response), status=HTTPStatus.NOT_FOUND)

        logger.info("Updated restaurant %s (%s)", restaurant.id, ", ".join(sorted(changes)) or "no fields")
        return web.Response(status=HTTPStatus.NO_CONTENT)

    @with_restaurant
    async def delete(self, restaurant: Restaurant):
        await self.store.delete(restaurant)
        logger.info("Deleted restaurant %s", restaurant.id)
        return web.Response(status=HTTPStatus.NO_CONTENT)
