# portalcraft/portal/effects.py
"""
Folds the attributes of the equipment consumed by a portal into one
PortalEffectModifiers record.

Each item contributes four independent passes (prefix, material, suffix,
total cost/rarity). A pass only adds to or subtracts from the running totals
and never reads what another pass wrote, so numeric results do not depend on
item order. Only the order of `special_effects` follows the input order.

No randomness is consulted here; all of it happened when the items were generated.
"""
import math
from typing import Dict, Iterable, List, Optional, Tuple

from portalcraft.config import (
    PORTAL_COST_BONUS_PER_STEP, PORTAL_COST_BONUS_STEP, PORTAL_MULTIPLIER_FLOOR,
    RARITY_EPIC, RARITY_LEGENDARY, RARITY_RARE
)
from portalcraft.items.models import (
    GeneratedEquipment, MaterialAttribute, PrefixAttribute, SuffixAttribute
)
from portalcraft.portal.modifiers import PortalEffectModifiers

# attr_id -> (special effect label or None, {field: delta})
PREFIX_OVERRIDES: Dict[str, Tuple[Optional[str], Dict[str, float]]] = {
    "enchanted": ("Magical Resonance", {"mana_multiplier": 0.5}),
    "legendary": ("Legendary Aura", {"equipment_chance": 0.2}),
    "ancient": ("Ancient Power", {"rarity_bonus": 1}),
    "gleaming": (None, {"color_shift": 30, "intensity_bonus": 0.1}), # Lighter color
}

MATERIAL_OVERRIDES: Dict[str, Tuple[Optional[str], Dict[str, float]]] = {
    "dragonscale": ("Dragon Essence", {"rarity_bonus": 1}),
    "mithril": ("Mithril Glow", {"intensity_bonus": 0.15}),
    "obsidian": ("Void Touch", {"color_shift": -45}), # Darker color
    "crystal": ("Crystal Clarity", {"recipe_discovery_bonus": 0.15}),
    "adamantine": ("Unbreakable", {"gold_multiplier": 0.2}),
}

SUFFIX_OVERRIDES: Dict[str, Tuple[Optional[str], Dict[str, float]]] = {
    "flames": ("Burning", {"color_shift": 15}), # Warmer
    "frost": ("Frozen", {"color_shift": -60}), # Cooler
    "storms": ("Electrified", {"intensity_bonus": 0.25}),
    "annihilation": ("Destructive Force", {"equipment_chance": 0.3}),
    "void": ("Void Touched", {"rarity_bonus": 2}),
    "eternity": ("Timeless", {"mana_multiplier": 0.5}),
}

ELEMENTAL_AFFINITY_PER_MATERIAL = 5


def resolve_portal_effects(equipment: Iterable[GeneratedEquipment]) -> PortalEffectModifiers:
    """Calculates portal modifiers for the given items. An empty list yields the neutral baseline."""
    modifiers = PortalEffectModifiers.neutral()

    for item in equipment:
        if item.prefix:
            apply_prefix_effects(modifiers, item.prefix)
        if item.material:
            apply_material_effects(modifiers, item.material)
        if item.suffix:
            apply_suffix_effects(modifiers, item.suffix)
        apply_total_cost_effects(modifiers, item.total_cost, item.rarity)

    modifiers.gold_multiplier = max(PORTAL_MULTIPLIER_FLOOR, modifiers.gold_multiplier)
    modifiers.mana_multiplier = max(PORTAL_MULTIPLIER_FLOOR, modifiers.mana_multiplier)
    return modifiers


def apply_prefix_effects(modifiers: PortalEffectModifiers, prefix: PrefixAttribute):
    cost = prefix.cost_contribution

    if cost >= 10:
        modifiers.gold_multiplier += 0.5
        modifiers.rarity_bonus += 2
        modifiers.intensity_bonus += 0.3
        modifiers.recipe_discovery_bonus += 0.1
        modifiers.special_effects.append(f"{prefix.name} Quality")
    elif cost >= 5:
        modifiers.gold_multiplier += 0.3
        modifiers.rarity_bonus += 1
        modifiers.intensity_bonus += 0.2
        modifiers.recipe_discovery_bonus += 0.05
    elif cost >= 2:
        modifiers.gold_multiplier += 0.15
        modifiers.intensity_bonus += 0.1
    elif cost < 0:
        # Shoddy gear pays less but teaches more
        modifiers.gold_multiplier -= 0.1
        modifiers.recipe_discovery_bonus += 0.05

    _apply_override(modifiers, PREFIX_OVERRIDES.get(prefix.attr_id))


def apply_material_effects(modifiers: PortalEffectModifiers, material: MaterialAttribute):
    if material.element_affinity:
        modifiers.add_affinity(material.element_affinity, ELEMENTAL_AFFINITY_PER_MATERIAL)

    cost = material.cost_contribution
    if cost >= 8:
        modifiers.gold_multiplier += 0.4
        modifiers.equipment_chance += 0.15
    elif cost >= 4:
        modifiers.gold_multiplier += 0.25
        modifiers.ingredient_chance += 0.1
    elif cost >= 2:
        modifiers.gold_multiplier += 0.1

    _apply_override(modifiers, MATERIAL_OVERRIDES.get(material.attr_id))


def apply_suffix_effects(modifiers: PortalEffectModifiers, suffix: SuffixAttribute):
    # A zero effect value counts as 1
    effect_value = suffix.effect_value or 1
    cost = suffix.cost_contribution

    if cost >= 10:
        modifiers.gold_multiplier += 0.6
        modifiers.rarity_bonus += 2
        modifiers.equipment_chance += 0.25
    elif cost >= 5:
        modifiers.gold_multiplier += 0.3
        modifiers.rarity_bonus += 1
        modifiers.ingredient_chance += 0.15
    elif cost >= 3:
        modifiers.gold_multiplier += 0.15

    if suffix.element_affinity:
        modifiers.add_affinity(suffix.element_affinity, effect_value)

    if suffix.effect_type == "damage":
        modifiers.gold_multiplier += effect_value * 0.05
    elif suffix.effect_type == "defense":
        modifiers.mana_multiplier += effect_value * 0.05
    elif suffix.effect_type == "elemental":
        modifiers.ingredient_chance += effect_value * 0.02
        modifiers.intensity_bonus += effect_value * 0.02
    elif suffix.effect_type == "special":
        modifiers.equipment_chance += effect_value * 0.02
        modifiers.recipe_discovery_bonus += effect_value * 0.01

    _apply_override(modifiers, SUFFIX_OVERRIDES.get(suffix.attr_id))


def apply_total_cost_effects(modifiers: PortalEffectModifiers, total_cost: int, rarity: str):
    steps = math.floor(total_cost / PORTAL_COST_BONUS_STEP)
    modifiers.gold_multiplier += steps * PORTAL_COST_BONUS_PER_STEP

    if rarity == RARITY_LEGENDARY:
        modifiers.rarity_bonus += 3
        modifiers.equipment_chance += 0.2
        modifiers.recipe_discovery_bonus += 0.15
    elif rarity == RARITY_EPIC:
        modifiers.rarity_bonus += 2
        modifiers.equipment_chance += 0.1
        modifiers.recipe_discovery_bonus += 0.1
    elif rarity == RARITY_RARE:
        modifiers.rarity_bonus += 1
        modifiers.ingredient_chance += 0.05
        modifiers.recipe_discovery_bonus += 0.05


def _apply_override(modifiers: PortalEffectModifiers,
                    override: Optional[Tuple[Optional[str], Dict[str, float]]]):
    if not override:
        return
    label, deltas = override
    if label:
        modifiers.special_effects.append(label)
    for field_name, delta in deltas.items():
        setattr(modifiers, field_name, getattr(modifiers, field_name) + delta)


def describe_portal_effects(modifiers: PortalEffectModifiers) -> List[str]:
    """Human readable lines for the portal summary panel."""
    lines = []

    if modifiers.gold_multiplier > 1.0:
        lines.append(f"+{_percent(modifiers.gold_multiplier - 1.0)}% Gold Rewards")
    elif modifiers.gold_multiplier < 1.0:
        lines.append(f"-{_percent(1.0 - modifiers.gold_multiplier)}% Gold Rewards")

    if modifiers.mana_multiplier > 1.0:
        lines.append(f"+{_percent(modifiers.mana_multiplier - 1.0)}% Mana Rewards")

    if modifiers.ingredient_chance > 0:
        lines.append(f"+{_percent(modifiers.ingredient_chance)}% Ingredient Drop Chance")

    if modifiers.equipment_chance > 0:
        lines.append(f"+{_percent(modifiers.equipment_chance)}% Equipment Drop Chance")

    if modifiers.rarity_bonus > 0:
        lines.append(f"+{_number(modifiers.rarity_bonus)} Reward Rarity")

    if modifiers.recipe_discovery_bonus > 0:
        lines.append(f"+{_percent(modifiers.recipe_discovery_bonus)}% Recipe Discovery Chance")

    for effect in modifiers.special_effects:
        lines.append(f"Special: {effect}")

    for element, bonus in modifiers.elemental_affinities.items():
        if bonus > 0:
            lines.append(f"+{_number(bonus)} {element} affinity")

    return lines


def _percent(fraction: float) -> int:
    # Half rounds up
    return math.floor(fraction * 100 + 0.5)


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
