# portalcraft/config/config_customers.py
"""
Configuration for customer contracts: modifiers, special rewards and reward tiers.
"""

# --- Contract Modifiers (canonical order) ---
CONTRACT_MODIFIER_TYPES = ["urgent", "bonus", "perfectionist", "bulk_order", "experimental"]

# Difficulty raises each modifier chance by 10% per point, capped at +50%.
MODIFIER_DIFFICULTY_SCALING = 0.1
MODIFIER_CHANCE_CAP_FACTOR = 1.5

# Applied one after another, flooring after each step.
CONTRACT_MODIFIER_PAYMENT_MULTIPLIERS = {
    "urgent": 1.3,
    "bonus": 1.2,
    "perfectionist": 1.25,
    "bulk_order": 1.4,
    "experimental": 1.15,
}

# --- Reward Tiers ---
REWARD_TIER_STANDARD = "standard"
REWARD_TIER_ENHANCED = "enhanced"
REWARD_TIER_RARE = "rare"
REWARD_TIER_UNIQUE = "unique"
REWARD_TIERS = [REWARD_TIER_STANDARD, REWARD_TIER_ENHANCED, REWARD_TIER_RARE, REWARD_TIER_UNIQUE]

# --- Special Rewards ---
REWARD_TYPE_INGREDIENT = "ingredient"
REWARD_TYPE_GENERATED_EQUIPMENT = "generatedEquipment"
REWARD_TYPE_MANA = "mana"
REWARD_TYPE_GOLD = "gold"

# Cumulative upper bounds over a single uniform draw; the remainder is gold.
SPECIAL_REWARD_BANDS = [
    (0.4, REWARD_TYPE_INGREDIENT),
    (0.7, REWARD_TYPE_GENERATED_EQUIPMENT),
    (0.9, REWARD_TYPE_MANA),
]

SPECIAL_REWARD_MANA_BASE = 50
SPECIAL_REWARD_MANA_PER_TIER = 30
SPECIAL_REWARD_MANA_PER_DIFFICULTY = 20
SPECIAL_REWARD_GOLD_BASE_FACTOR = 0.5
SPECIAL_REWARD_GOLD_PER_DIFFICULTY = 0.2
SPECIAL_REWARD_INGREDIENT_PER_DIFFICULTY = 0.5

SPECIAL_REWARD_INGREDIENTS_BY_TIER = {
    1: ["fire_crystal", "water_essence"],
    2: ["earth_shard", "wind_wisp", "iron_ore"],
    3: ["lightning_spark", "copper_wire", "glass_lens", "enchanted_ink"],
    4: ["moon_dust", "ancient_rune", "phoenix_feather"],
    5: ["dragon_scale", "mana_crystal", "philosophers_stone"],
}

# --- Customer Generation ---
CUSTOMER_PATIENCE_JITTER = 30 # Extra seconds of patience, 0..JITTER-1
STARTING_ELEMENTS = ["fire", "water"]
