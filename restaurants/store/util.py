from typing import Union
from uuid import UUID

from tortoise import Model


def resolve_id(target: Union[Model, UUID]) -> UUID:
    if isinstance(target, Model):
        return target.id
    elif isinstance(target, UUID):
        return target
    else:
        raise TypeError(f"Target {target} is neither a Model or a UUID.")
