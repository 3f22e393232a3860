"""
Handles all the persistence for the application.

The store is an explicit handle: it is constructed with the URI of
the backing database, opened before the server starts accepting
requests and closed when the server shuts down.
"""

from .store import RestaurantStore
from .util import resolve_id
