"""
Pydantic models for DUPR API responses.
"""

from .club import *
from .common import *
from .match import *
from .player import *
from .profile import *
