"""
Fields
-------

Helpers for declaring schema fields.
"""

from marshmallow import fields


def Many(schema, **kwargs):
    return fields.List(fields.Nested(schema), **kwargs)
