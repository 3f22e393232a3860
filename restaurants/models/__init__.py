"""
The models package contains all the models persisted by the server.

.. autoclasstree:: restaurants.models
"""

from .grade import Grade
from .restaurant import Restaurant
