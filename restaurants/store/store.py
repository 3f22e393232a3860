"""
Restaurant Store
----------------

Persists restaurants and their grade history through tortoise.
Writes that touch more than one table happen in a single
transaction so that a failure never leaves a partial write.
"""

from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from tortoise import Tortoise, connections
from tortoise.transactions import in_transaction

from restaurants import logger
from restaurants.models import Grade, Restaurant
from .util import resolve_id


class RestaurantStore:
    """
    The document store for restaurants.

    .. code:: python

        store = RestaurantStore("sqlite://db.sqlite3")
        await store.open()
        restaurant = await store.insert(data)
        await store.close()
    """

    def __init__(self, db_uri: str):
        self.db_uri = db_uri
        self.is_open = False

    async def open(self):
        """Connects to the database and generates the schema if needed."""
        logger.info("Opening restaurant store at %s", self.db_uri)
        await Tortoise.init(
            db_url=self.db_uri,
            modules={'models': ['restaurants.models']},
            use_tz=True,
        )
        await Tortoise.generate_schemas(safe=True)
        self.is_open = True

    async def close(self):
        """Closes the open database connections."""
        if not self.is_open:
            return
        logger.info("Closing restaurant store at %s", self.db_uri)
        await connections.close_all()
        self.is_open = False

    async def insert(self, data: Dict[str, Any]) -> Restaurant:
        """
        Creates a restaurant along with its grade history.

        :param data: The validated restaurant, with ``grades`` as a list of ``date`` and ``grade`` mappings.
        :return: The new restaurant, with its grades fetched.
        """
        data = dict(data)
        grades = data.pop("grades", [])

        async with in_transaction() as connection:
            restaurant = await Restaurant.create(**data, using_db=connection)
            await _replace_grades(restaurant.id, grades, connection)

        await restaurant.fetch_related("grades")
        logger.debug("Inserted restaurant %s", restaurant.id)
        return restaurant

    async def find_all(self) -> List[Restaurant]:
        return await Restaurant.all().prefetch_related("grades")

    async def find(self, rid: UUID) -> Optional[Restaurant]:
        return await Restaurant.filter(id=rid).prefetch_related("grades").first()

    async def update(self, restaurant: Union[Restaurant, UUID], changes: Dict[str, Any]) -> bool:
        """
        Applies the given fields to a restaurant, leaving the others untouched.

        Either all of the changes are applied or none of them are. Supplying
        ``grades`` replaces the whole grade history.

        :param restaurant: The restaurant, or its id.
        :param changes: The fields to change.
        :return: Whether a restaurant with that id exists.
        """
        rid = resolve_id(restaurant)
        changes = dict(changes)
        grades = changes.pop("grades", None)

        async with in_transaction() as connection:
            if not await Restaurant.filter(id=rid).using_db(connection).exists():
                return False
            if changes:
                await Restaurant.filter(id=rid).using_db(connection).update(**changes)
            if grades is not None:
                await _replace_grades(rid, grades, connection)

        logger.debug("Updated restaurant %s", rid)
        return True

    async def delete(self, restaurant: Union[Restaurant, UUID]) -> bool:
        """
        Removes a restaurant and its grade history.

        :return: Whether a restaurant was removed.
        """
        rid = resolve_id(restaurant)

        async with in_transaction() as connection:
            await Grade.filter(restaurant_id=rid).using_db(connection).delete()
            deleted = await Restaurant.filter(id=rid).using_db(connection).delete()

        if deleted:
            logger.debug("Deleted restaurant %s", rid)
        return bool(deleted)

    async def count(self) -> int:
        return await Restaurant.all().count()


async def _replace_grades(rid: UUID, grades, connection):
    """Swaps out the grade history of a restaurant within the given transaction."""
    await Grade.filter(restaurant_id=rid).using_db(connection).delete()
    if grades:
        await Grade.bulk_create(
            [Grade(restaurant_id=rid, date=grade["date"], grade=grade["grade"]) for grade in grades],
            using_db=connection
        )
