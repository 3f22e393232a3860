"""
Grade
---------------------------
"""

from tortoise import Model, fields


class Grade(Model):
    """A single inspection grade in the history of a restaurant."""

    id = fields.IntField(primary_key=True)
    restaurant = fields.ForeignKeyField("models.Restaurant", related_name="grades", on_delete=fields.CASCADE)
    date = fields.DatetimeField()
    grade = fields.TextField()
