"""
Element definitions: progression tier, rarity (1-5) and the multipliers an
element applies when it shows up in a portal or a contract.
"""

ELEMENT_TIER_ORDER = ["common", "standard", "rare", "exotic", "legendary"]

TIER_DISPLAY_NAMES = {
    "common": "Common",
    "standard": "Standard",
    "rare": "Rare",
    "exotic": "Exotic",
    "legendary": "Legendary",
}

def _element(name, tier, rarity, portal_effect, reward_bonus, contract_difficulty):
    return {
        "name": name,
        "tier": tier,
        "rarity": rarity,
        "properties": {
            "portal_effect_multiplier": portal_effect,
            "reward_bonus_multiplier": reward_bonus,
            "contract_difficulty_modifier": contract_difficulty,
        },
    }

ELEMENTS = {
    # Common - starting elements
    "fire": _element("Fire", "common", 1, 1.0, 1.0, 1.0),
    "water": _element("Water", "common", 1, 1.0, 1.0, 1.0),

    # Standard - early research
    "earth": _element("Earth", "standard", 2, 1.1, 1.1, 1.2),
    "air": _element("Air", "standard", 2, 1.1, 1.1, 1.2),

    # Rare - mid-game research
    "ice": _element("Ice", "rare", 3, 1.3, 1.2, 1.5),
    "lightning": _element("Lightning", "rare", 3, 1.4, 1.2, 1.5),
    "metal": _element("Metal", "rare", 3, 1.2, 1.3, 1.5),
    "nature": _element("Nature", "rare", 3, 1.2, 1.4, 1.5),

    # Exotic - late-game research
    "shadow": _element("Shadow", "exotic", 4, 1.6, 1.5, 2.0),
    "light": _element("Light", "exotic", 4, 1.6, 1.5, 2.0),
    "void": _element("Void", "exotic", 4, 1.8, 1.4, 2.0),
    "crystal": _element("Crystal", "exotic", 4, 1.5, 1.6, 2.0),
    "arcane": _element("Arcane", "exotic", 4, 1.7, 1.5, 2.0),

    # Legendary - secret recipes and rare rewards
    "time": _element("Time", "legendary", 5, 2.0, 2.0, 3.0),
    "chaos": _element("Chaos", "legendary", 5, 2.5, 1.8, 3.0),
    "life": _element("Life", "legendary", 5, 1.8, 2.5, 3.0),
    "death": _element("Death", "legendary", 5, 2.2, 1.9, 3.0),
}
