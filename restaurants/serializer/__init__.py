"""
.. autoclasstree:: restaurants.serializer

The serializer package houses all the schemas for the input/output in the system.
The serializers are used to validate any raw data (such as JSON) coming into
the system and to project the models onto what goes back out.
"""

from .fields import Many
from .jsend import JSendSchema, JSendStatus
from .decorators import expects, returns
