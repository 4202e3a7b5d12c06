"""
Definitions for procedural equipment attributes (Prefixes, Materials, Suffixes, Gear Types).

Cost contribution scale:
  negative    low quality (Rusted, Worn)
  0 to +5     basic quality
  +6 to +10   high quality
  +11 and up  premium / legendary

Level ranges: 1-3 low tier, 4-6 mid tier, 7-9 high tier, 10+ premium.
"""
from portalcraft.config import MAX_ITEM_LEVEL
from portalcraft.items.models import (
    GearTypeAttribute, LevelRange, MaterialAttribute, PrefixAttribute, SuffixAttribute
)

LOW_TIER = LevelRange(1, 3)
MID_TIER = LevelRange(4, 6)
HIGH_TIER = LevelRange(7, 9)
PREMIUM_TIER = LevelRange(10, MAX_ITEM_LEVEL)

PREFIX_POOL = (
    PrefixAttribute("rusted", "Rusted", -2, LOW_TIER, "Covered in rust, reducing effectiveness"),
    PrefixAttribute("worn", "Worn", -1, LOW_TIER, "Shows signs of heavy use"),
    PrefixAttribute("cracked", "Cracked", -1, LOW_TIER, "Has visible cracks affecting durability"),

    PrefixAttribute("sturdy", "Sturdy", 2, MID_TIER, "Built to last"),
    PrefixAttribute("polished", "Polished", 3, MID_TIER, "Gleaming with care"),
    PrefixAttribute("reinforced", "Reinforced", 3, MID_TIER, "Strengthened construction"),

    PrefixAttribute("tempered", "Tempered", 5, HIGH_TIER, "Heat-treated for superior strength"),
    PrefixAttribute("masterwork", "Masterwork", 7, HIGH_TIER, "Crafted by a master artisan"),
    PrefixAttribute("gleaming", "Gleaming", 5, HIGH_TIER, "Radiates with inner light"),

    PrefixAttribute("enchanted", "Enchanted", 10, PREMIUM_TIER, "Imbued with magical power",
                    element_affinity="light"),
    PrefixAttribute("legendary", "Legendary", 15, PREMIUM_TIER, "A legendary item of great renown"),
    PrefixAttribute("ancient", "Ancient", 12, PREMIUM_TIER, "From a forgotten age",
                    element_affinity="void"),
)

MATERIAL_POOL = (
    MaterialAttribute("iron", "Iron", 0, LOW_TIER, "Common iron ore", element_affinity="earth"),
    MaterialAttribute("wood", "Wooden", 0, LOW_TIER, "Simple wooden construction"),
    MaterialAttribute("leather", "Leather", 0, LOW_TIER, "Tanned animal hide"),

    MaterialAttribute("steel", "Steel", 2, MID_TIER, "Forged steel alloy", element_affinity="earth"),
    MaterialAttribute("bronze", "Bronze", 1, MID_TIER, "Classic bronze alloy", element_affinity="fire"),
    MaterialAttribute("bone", "Bone", 2, MID_TIER, "Carved from bone"),

    MaterialAttribute("silver", "Silver", 4, HIGH_TIER, "Pure silver metal", element_affinity="light"),
    MaterialAttribute("mithril", "Mithril", 6, HIGH_TIER, "Legendary light metal", element_affinity="air"),
    MaterialAttribute("dragonscale", "Dragonscale", 6, HIGH_TIER, "Scales from a dragon",
                      element_affinity="fire"),

    MaterialAttribute("obsidian", "Obsidian", 8, PREMIUM_TIER, "Volcanic glass of darkness",
                      element_affinity="void"),
    MaterialAttribute("adamantine", "Adamantine", 12, PREMIUM_TIER, "Nearly indestructible metal",
                      element_affinity="earth"),
    MaterialAttribute("crystal", "Crystal", 10, PREMIUM_TIER, "Magically infused crystal",
                      element_affinity="light"),
)

SUFFIX_POOL = (
    SuffixAttribute("novice", "of the Novice", 1, LOW_TIER, "damage", 1,
                    description="Suited for beginners"),

    SuffixAttribute("strength", "of Strength", 3, MID_TIER, "damage", 3,
                    description="Grants increased power"),
    SuffixAttribute("vigor", "of Vigor", 3, MID_TIER, "defense", 3,
                    description="Enhances vitality"),

    SuffixAttribute("flames", "of Flames", 5, HIGH_TIER, "elemental", 5,
                    description="Burns with inner fire", element_affinity="fire"),
    SuffixAttribute("frost", "of Frost", 5, HIGH_TIER, "elemental", 5,
                    description="Chills to the bone", element_affinity="water"),
    SuffixAttribute("storms", "of Storms", 6, HIGH_TIER, "elemental", 6,
                    description="Crackles with electricity", element_affinity="lightning"),

    SuffixAttribute("annihilation", "of Annihilation", 15, PREMIUM_TIER, "special", 15,
                    description="Destroys all in its path"),
    SuffixAttribute("void", "of the Void", 12, PREMIUM_TIER, "elemental", 12,
                    description="Connected to the endless void", element_affinity="void"),
    SuffixAttribute("eternity", "of Eternity", 10, PREMIUM_TIER, "special", 10,
                    description="Timeless and eternal", element_affinity="light"),
)

GEAR_TYPE_POOL = (
    # Weapons
    GearTypeAttribute("sword", "Sword", "weapon", 5, "⚔️", "A standard blade"),
    GearTypeAttribute("dagger", "Dagger", "weapon", 3, "🗡️", "A small quick blade"),
    GearTypeAttribute("staff", "Staff", "weapon", 4, "🪄", "A magical staff"),
    GearTypeAttribute("axe", "Axe", "weapon", 6, "🪓", "A heavy chopping weapon"),
    GearTypeAttribute("bow", "Bow", "weapon", 5, "🏹", "A ranged weapon"),

    # Armor
    GearTypeAttribute("helmet", "Helmet", "armor", 4, "⛑️", "Head protection"),
    GearTypeAttribute("chestplate", "Chestplate", "armor", 6, "🛡️", "Torso protection"),
    GearTypeAttribute("gauntlets", "Gauntlets", "armor", 3, "🧤", "Hand protection"),
    GearTypeAttribute("boots", "Boots", "armor", 3, "👢", "Foot protection"),
    GearTypeAttribute("robes", "Robes", "armor", 4, "👘", "Magical robes"),

    # Accessories
    GearTypeAttribute("ring", "Ring", "accessory", 2, "💍", "A finger ring"),
    GearTypeAttribute("amulet", "Amulet", "accessory", 3, "📿", "A neck amulet"),
    GearTypeAttribute("bracelet", "Bracelet", "accessory", 2, "⌚", "A wrist bracelet"),
    GearTypeAttribute("orb", "Orb", "accessory", 4, "🔮", "A magical orb"),

    # Consumables
    GearTypeAttribute("potion", "Potion", "consumable", 2, "🧪", "A magical potion"),
    GearTypeAttribute("scroll", "Scroll", "consumable", 3, "📜", "An enchanted scroll"),
    GearTypeAttribute("gem", "Gem", "consumable", 4, "💎", "A magical gem"),
)
