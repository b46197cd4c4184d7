"""
reflectkit

Convenience entry points over Python's introspection: read fields, invoke
methods and construct instances by name, with declared or inherited lookup
and instance or static access.
"""

__version__ = "0.3.0"


from ._error import *
from ._handle import *
from ._resolve import *
from ._access import *
from ._field import *
from ._method import *
from ._constructor import *
from ._members import *
from . import receiver
