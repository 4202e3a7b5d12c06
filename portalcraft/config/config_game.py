# portalcraft/config/config_game.py
"""
Configuration for logging and the item level bounds shared by every system.
"""
from portalcraft.utils.logger import LogLevel

# --- Logging ---
LOG_LEVEL_DEFAULT = LogLevel.WARNING
LOG_LEVEL_VERBOSE = LogLevel.DEBUG

# --- Item Level Bounds ---
MIN_ITEM_LEVEL = 1
MAX_ITEM_LEVEL = 99 # Premium attributes stay eligible up to here
