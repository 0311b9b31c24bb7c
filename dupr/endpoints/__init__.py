"""
API endpoint wrappers for the DUPR API.
"""

from .clubs import *
from .matches import *
from .players import *
