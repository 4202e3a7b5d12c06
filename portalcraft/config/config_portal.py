# portalcraft/config/config_portal.py
"""
Configuration for portal effect resolution.
"""

# --- Neutral Baseline ---
PORTAL_BASE_GOLD_MULTIPLIER = 1.0
PORTAL_BASE_MANA_MULTIPLIER = 1.0

# Multiplicative fields never drop below this after all equipment is folded in.
PORTAL_MULTIPLIER_FLOOR = 0.0

# --- Total Cost Scaling ---
PORTAL_COST_BONUS_STEP = 10      # Every full 10 points of total cost...
PORTAL_COST_BONUS_PER_STEP = 0.05 # ...adds this much gold multiplier
