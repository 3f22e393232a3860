"""
Restaurant
---------------------------
"""
from typing import Any, Dict

from tortoise import Model, fields

from restaurants.grading import current_grade


BOROUGHS = ("Manhattan", "Queens", "Brooklyn", "Bronx", "Staten Island")
"""The known boroughs. Advisory only, a borough is never checked against them."""


class Restaurant(Model):
    id = fields.UUIDField(primary_key=True)
    name = fields.TextField()
    cuisine = fields.TextField()
    borough = fields.TextField()
    address = fields.JSONField(default=dict)

    def serialize(self) -> Dict[str, Any]:
        """
        Projects the restaurant onto its public representation,
        replacing the grade history with the current grade.

        .. note:: The ``grades`` relation must be fetched beforehand.
        """
        return {
            "id": self.id,
            "name": self.name,
            "cuisine": self.cuisine,
            "borough": self.borough,
            "grade": current_grade(self.grades),
            "address": self.address,
        }
