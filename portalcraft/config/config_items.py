# portalcraft/config/config_items.py
"""
Configuration for procedural equipment: slots, rarity buckets and generation odds.
"""

# --- Attribute Kinds ---
ATTRIBUTE_KIND_PREFIX = "prefix"
ATTRIBUTE_KIND_MATERIAL = "material"
ATTRIBUTE_KIND_SUFFIX = "suffix"

# --- Equipment Slots ---
EQUIPMENT_SLOTS = ["weapon", "armor", "accessory", "consumable"]

# --- Suffix Effect Types ---
SUFFIX_EFFECT_TYPES = ["damage", "defense", "elemental", "special"]

# --- Rarity ---
RARITY_COMMON = "common"
RARITY_UNCOMMON = "uncommon"
RARITY_RARE = "rare"
RARITY_EPIC = "epic"
RARITY_LEGENDARY = "legendary"
RARITY_ORDER = [RARITY_COMMON, RARITY_UNCOMMON, RARITY_RARE, RARITY_EPIC, RARITY_LEGENDARY]

# Ascending, half-open upper bounds: total_cost < bound -> rarity.
# Anything at or above the last bound is legendary.
RARITY_THRESHOLDS = [
    (5, RARITY_COMMON),
    (10, RARITY_UNCOMMON),
    (20, RARITY_RARE),
    (35, RARITY_EPIC),
]

# --- Generation Odds ---
# 1.0 means the slot is always attempted and level gating alone decides.
DEFAULT_PREFIX_CHANCE = 1.0
DEFAULT_MATERIAL_CHANCE = 1.0
DEFAULT_SUFFIX_CHANCE = 1.0

# Loot drop odds, where bare items are wanted more often.
LOOT_PREFIX_CHANCE = 0.6
LOOT_MATERIAL_CHANCE = 0.7
LOOT_SUFFIX_CHANCE = 0.5

# --- Derived Item Stats ---
PORTAL_BONUS_FACTOR = 1.5
ELEMENT_BONUS_PREFIX = 2
ELEMENT_BONUS_MATERIAL = 3
ELEMENT_BONUS_SUFFIX_DEFAULT = 3 # Used when a suffix has no effect value
