# portalcraft/portal/modifiers.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

from portalcraft.config import PORTAL_BASE_GOLD_MULTIPLIER, PORTAL_BASE_MANA_MULTIPLIER


@dataclass
class PortalEffectModifiers:
    """
    Aggregated reward bias for one portal. Multipliers start at 1.0, every other
    numeric field at 0. `special_effects` keeps duplicates and insertion order.
    """
    # Reward modifiers
    gold_multiplier: float = PORTAL_BASE_GOLD_MULTIPLIER
    mana_multiplier: float = PORTAL_BASE_MANA_MULTIPLIER
    ingredient_chance: float = 0.0
    equipment_chance: float = 0.0
    rarity_bonus: int = 0

    # Visual modifiers
    intensity_bonus: float = 0.0
    color_shift: int = 0 # Hue shift in degrees

    recipe_discovery_bonus: float = 0.0

    elemental_affinities: Dict[str, float] = field(default_factory=dict)
    special_effects: List[str] = field(default_factory=list)

    @classmethod
    def neutral(cls) -> 'PortalEffectModifiers':
        return cls()

    def add_affinity(self, element: str, amount: float):
        self.elemental_affinities[element] = self.elemental_affinities.get(element, 0) + amount

    def copy(self) -> 'PortalEffectModifiers':
        return PortalEffectModifiers.from_dict(self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gold_multiplier": self.gold_multiplier,
            "mana_multiplier": self.mana_multiplier,
            "ingredient_chance": self.ingredient_chance,
            "equipment_chance": self.equipment_chance,
            "rarity_bonus": self.rarity_bonus,
            "intensity_bonus": self.intensity_bonus,
            "color_shift": self.color_shift,
            "recipe_discovery_bonus": self.recipe_discovery_bonus,
            "elemental_affinities": dict(self.elemental_affinities),
            "special_effects": list(self.special_effects),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PortalEffectModifiers':
        return cls(
            gold_multiplier=data.get("gold_multiplier", PORTAL_BASE_GOLD_MULTIPLIER),
            mana_multiplier=data.get("mana_multiplier", PORTAL_BASE_MANA_MULTIPLIER),
            ingredient_chance=data.get("ingredient_chance", 0.0),
            equipment_chance=data.get("equipment_chance", 0.0),
            rarity_bonus=data.get("rarity_bonus", 0),
            intensity_bonus=data.get("intensity_bonus", 0.0),
            color_shift=data.get("color_shift", 0),
            recipe_discovery_bonus=data.get("recipe_discovery_bonus", 0.0),
            elemental_affinities=dict(data.get("elemental_affinities", {})),
            special_effects=list(data.get("special_effects", [])),
        )
