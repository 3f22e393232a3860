"""
Model Serializers
-----------------

Defines serializers for the restaurant model, both for the
payloads clients send and the projection they get back.
"""

from datetime import timezone

from marshmallow import Schema, EXCLUDE
from marshmallow.fields import String, Nested, AwareDateTime, UUID

from .fields import Many


class AddressSchema(Schema):

    class Meta:
        unknown = EXCLUDE

    building = String(required=True)
    street = String(required=True)
    zipcode = String(required=True)


class GradeSchema(Schema):
    """A single entry in the grade history. Dates without a timezone are taken as UTC."""

    class Meta:
        unknown = EXCLUDE

    date = AwareDateTime(required=True, default_timezone=timezone.utc)
    grade = String(required=True)


class RestaurantSchema(Schema):
    """
    The public projection of the :class:`~restaurants.models.Restaurant` model.
    The grade history is never exposed, only the current ``grade``.
    """

    id = UUID(required=True)
    name = String(required=True)
    cuisine = String(required=True)
    borough = String(required=True)
    grade = String(required=True, allow_none=True)
    address = Nested(AddressSchema(), required=True)


class RestaurantListSchema(Schema):
    restaurants = Many(RestaurantSchema())


class RestaurantCreateSchema(Schema):
    """The schema of the restaurant create request."""

    class Meta:
        unknown = EXCLUDE

    name = String(required=True)
    cuisine = String(required=True)
    borough = String(required=True)
    address = Nested(AddressSchema(), required=True)
    grades = Many(GradeSchema(), required=True)


class RestaurantUpdateSchema(Schema):
    """
    The schema of the restaurant update request. Every field is optional,
    any field that is left out is left unchanged. The ``id``, when sent,
    must match the restaurant being updated.
    """

    class Meta:
        unknown = EXCLUDE

    id = UUID()
    name = String()
    cuisine = String()
    borough = String()
    address = Nested(AddressSchema())
    grades = Many(GradeSchema())
