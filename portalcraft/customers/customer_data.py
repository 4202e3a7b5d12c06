"""
Customer templates, from novice mages up to the special visitors.
Templates are ordered by difficulty; the spawner indexes into this list.
"""
from portalcraft.customers.models import CustomerTemplate

CUSTOMER_TEMPLATES = (
    # Tier 1: Novice customers
    CustomerTemplate(
        name_pool=["Novice Mage", "Apprentice Wizard", "Student Alchemist", "Hedge Witch"],
        icon_pool=["🧙", "🧝", "🧚", "👤"],
        base_payment=50, payment_variance=20, base_patience=120,
        difficulty_multiplier=1, tier=1,
        modifier_chances={"urgent": 0.05, "bonus": 0.1},
    ),
    # Tier 2: Intermediate customers
    CustomerTemplate(
        name_pool=["Journeyman Sorcerer", "Battle Mage", "Elemental Knight", "Arcane Scholar"],
        icon_pool=["⚔️", "🏹", "🛡️", "📚"],
        base_payment=100, payment_variance=40, base_patience=90,
        difficulty_multiplier=1.5, tier=2,
        modifier_chances={"urgent": 0.1, "bonus": 0.15, "perfectionist": 0.05},
    ),
    # Tier 3: Advanced customers
    CustomerTemplate(
        name_pool=["Master Conjurer", "High Priestess", "Archmage", "Dragon Tamer"],
        icon_pool=["🌟", "👑", "🐉", "🔮"],
        base_payment=200, payment_variance=80, base_patience=60,
        difficulty_multiplier=2, tier=3,
        modifier_chances={"urgent": 0.15, "bonus": 0.2, "perfectionist": 0.1, "bulk_order": 0.05},
    ),
    # Tier 4: Elite customers
    CustomerTemplate(
        name_pool=["Void Walker", "Crystal Sage", "Shadow Master", "Light Bringer"],
        icon_pool=["🌑", "💎", "🕳️", "✨"],
        base_payment=400, payment_variance=100, base_patience=45,
        difficulty_multiplier=2.5, tier=4, special_reward_chance=0.1,
        modifier_chances={"urgent": 0.2, "bonus": 0.25, "perfectionist": 0.15,
                          "bulk_order": 0.1, "experimental": 0.05},
    ),
    # Tier 5: Master customers
    CustomerTemplate(
        name_pool=["Temporal Mage", "Chaos Lord", "Life Weaver", "Death Knight"],
        icon_pool=["⏳", "🌀", "💚", "💀"],
        base_payment=800, payment_variance=200, base_patience=30,
        difficulty_multiplier=3, tier=5, special_reward_chance=0.15,
        modifier_chances={"urgent": 0.25, "bonus": 0.3, "perfectionist": 0.2,
                          "bulk_order": 0.15, "experimental": 0.1},
    ),
    # Tier 5: Legendary customers
    CustomerTemplate(
        name_pool=["Planeswalker", "Dimensional Archon", "Cosmic Weaver", "Reality Shaper"],
        icon_pool=["🌌", "♾️", "🎆", "🔱"],
        base_payment=1200, payment_variance=300, base_patience=40,
        difficulty_multiplier=3.5, tier=5, special_reward_chance=0.2,
        modifier_chances={"urgent": 0.2, "bonus": 0.35, "perfectionist": 0.25,
                          "bulk_order": 0.2, "experimental": 0.15},
    ),
    # Special: Wealthy Merchant (high payment, simpler requirements)
    CustomerTemplate(
        name_pool=["Wealthy Merchant", "Noble Collector", "Royal Emissary", "Trade Prince"],
        icon_pool=["💰", "👔", "🎩", "💎"],
        base_payment=500, payment_variance=200, base_patience=150,
        difficulty_multiplier=1.8, tier=3, is_special=True, special_reward_chance=0.3,
        modifier_chances={"bonus": 0.5, "bulk_order": 0.3},
    ),
    # Special: Experimental Researcher (complex requirements, unique rewards)
    CustomerTemplate(
        name_pool=["Mad Scientist", "Experimental Alchemist", "Portal Researcher", "Arcane Theorist"],
        icon_pool=["🧪", "🔬", "📡", "🧬"],
        base_payment=300, payment_variance=150, base_patience=200,
        difficulty_multiplier=2.2, tier=3, is_special=True, special_reward_chance=0.5,
        modifier_chances={"experimental": 0.6, "perfectionist": 0.3, "bonus": 0.2},
    ),
    # Special: Ancient Entity (extreme requirements, legendary rewards)
    CustomerTemplate(
        name_pool=["Ancient Dragon", "Forgotten God", "Primordial Being", "Eldritch Entity"],
        icon_pool=["🐲", "👁️", "🦑", "🌠"],
        base_payment=2000, payment_variance=500, base_patience=60,
        difficulty_multiplier=4, tier=5, is_special=True, special_reward_chance=0.8,
        modifier_chances={"perfectionist": 0.4, "bulk_order": 0.3, "experimental": 0.2},
    ),
    # Special: Time Traveler (unusual requirements, varied rewards)
    CustomerTemplate(
        name_pool=["Time Traveler", "Chrono Wanderer", "Temporal Tourist", "Future Seeker"],
        icon_pool=["⏰", "🌀", "⌛", "🔮"],
        base_payment=600, payment_variance=250, base_patience=90,
        difficulty_multiplier=2.8, tier=4, is_special=True, special_reward_chance=0.4,
        modifier_chances={"urgent": 0.4, "experimental": 0.35, "bonus": 0.25},
    ),
)

CUSTOMER_ADJECTIVES = [
    "Eager", "Patient", "Demanding", "Mysterious", "Wealthy",
    "Skeptical", "Friendly", "Grumpy", "Excited", "Nervous",
]

# Element combinations a contract can ask for, roughly ordered by complexity.
ELEMENT_REQUIREMENTS = [
    # Common
    ["fire"], ["water"], ["fire", "water"],
    # Standard
    ["earth"], ["air"], ["earth", "air"], ["fire", "earth"], ["water", "air"],
    # Rare
    ["ice"], ["lightning"], ["metal"], ["nature"],
    ["fire", "lightning"], ["water", "ice"], ["earth", "metal"], ["air", "nature"], ["ice", "nature"],
    # Exotic
    ["shadow"], ["light"], ["void"], ["crystal"], ["arcane"],
    ["shadow", "light"], ["void", "crystal"], ["lightning", "arcane"], ["shadow", "void"], ["light", "crystal"],
    # Legendary
    ["time"], ["chaos"], ["life"], ["death"],
    ["time", "chaos"], ["life", "death"], ["time", "void"], ["chaos", "arcane"],
]
