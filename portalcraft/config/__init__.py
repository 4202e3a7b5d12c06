# portalcraft/config/__init__.py
"""
Balance constants for every portalcraft system, re-exported here so callers
can write `from portalcraft.config import RARITY_THRESHOLDS`.
"""

from .config_game import *
from .config_items import *
from .config_portal import *
from .config_customers import *
