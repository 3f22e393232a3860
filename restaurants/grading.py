"""
Grading
-------

Derives the current grade of a restaurant from its grade history.
"""

from operator import attrgetter
from typing import Iterable, Optional


def current_grade(grades: Iterable) -> Optional[str]:
    """
    Gets the grade with the most recent date.

    Accepts anything exposing ``date`` and ``grade`` attributes, such
    as the :class:`~restaurants.models.Grade` model. When two grades share
    the most recent date, the first one in the sequence wins.

    :param grades: The grade history.
    :return: The current grade, or None if there is no history.
    """
    latest = max(grades, key=attrgetter("date"), default=None)
    return latest.grade if latest is not None else None
