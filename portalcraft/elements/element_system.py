# portalcraft/elements/element_system.py
from typing import Any, Dict, List, Optional

from portalcraft.elements.element_data import ELEMENT_TIER_ORDER, ELEMENTS, TIER_DISPLAY_NAMES


def get_element_definition(element: str) -> Optional[Dict[str, Any]]:
    return ELEMENTS.get(element)

def get_element_tier(element: str) -> Optional[str]:
    definition = ELEMENTS.get(element)
    return definition["tier"] if definition else None

def get_element_rarity(element: str) -> int:
    definition = ELEMENTS.get(element)
    return definition["rarity"] if definition else 1

def get_elements_by_tier(tier: str) -> List[str]:
    return [element for element, data in ELEMENTS.items() if data["tier"] == tier]

def get_tier_display_name(tier: str) -> str:
    return TIER_DISPLAY_NAMES.get(tier, tier.title())


def get_highest_element_tier(elements: List[str]) -> str:
    """Highest tier among `elements`; unknown elements and an empty list count as common."""
    highest_index = 0
    for element in elements:
        tier = get_element_tier(element)
        if tier:
            highest_index = max(highest_index, ELEMENT_TIER_ORDER.index(tier))
    return ELEMENT_TIER_ORDER[highest_index]


def _average_property(elements: List[str], key: str) -> float:
    if not elements:
        return 1.0
    total = 0.0
    for element in elements:
        definition = ELEMENTS.get(element)
        total += definition["properties"][key] if definition else 1.0
    return total / len(elements)

def calculate_contract_difficulty_from_elements(elements: List[str]) -> float:
    return _average_property(elements, "contract_difficulty_modifier")

def calculate_reward_bonus_from_elements(elements: List[str]) -> float:
    return _average_property(elements, "reward_bonus_multiplier")

def calculate_payment_bonus_from_elements(elements: List[str]) -> float:
    """Harder elements pay better: the bonus is the contract difficulty modifier itself."""
    return calculate_contract_difficulty_from_elements(elements)
