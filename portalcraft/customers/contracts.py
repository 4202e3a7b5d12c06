# portalcraft/customers/contracts.py
"""
Contract economy: turns a customer template plus a difficulty scalar into
contract modifiers, an optional special reward and a reward tier, and wraps
them with the customer's payment, patience and element requirements.
"""
import math
import random
from typing import List, Optional, Sequence

from portalcraft.config import (
    CONTRACT_MODIFIER_PAYMENT_MULTIPLIERS, CONTRACT_MODIFIER_TYPES, CUSTOMER_PATIENCE_JITTER,
    MODIFIER_CHANCE_CAP_FACTOR, MODIFIER_DIFFICULTY_SCALING,
    REWARD_TIER_ENHANCED, REWARD_TIER_RARE, REWARD_TIER_STANDARD, REWARD_TIER_UNIQUE,
    REWARD_TYPE_GENERATED_EQUIPMENT, REWARD_TYPE_GOLD, REWARD_TYPE_INGREDIENT, REWARD_TYPE_MANA,
    SPECIAL_REWARD_BANDS, SPECIAL_REWARD_GOLD_BASE_FACTOR, SPECIAL_REWARD_GOLD_PER_DIFFICULTY,
    SPECIAL_REWARD_INGREDIENT_PER_DIFFICULTY, SPECIAL_REWARD_INGREDIENTS_BY_TIER,
    SPECIAL_REWARD_MANA_BASE, SPECIAL_REWARD_MANA_PER_DIFFICULTY, SPECIAL_REWARD_MANA_PER_TIER,
    STARTING_ELEMENTS
)
from portalcraft.customers.customer_data import (
    CUSTOMER_ADJECTIVES, CUSTOMER_TEMPLATES, ELEMENT_REQUIREMENTS
)
from portalcraft.customers.models import Contract, ContractRequirements, CustomerTemplate, Reward
from portalcraft.elements.element_data import ELEMENT_TIER_ORDER
from portalcraft.elements.element_system import get_highest_element_tier
from portalcraft.utils.logger import Logger


# --- Modifiers, Special Rewards, Reward Tier ---

def adjusted_modifier_chance(base_chance: float, difficulty: float) -> float:
    """Difficulty raises a chance by 10% per point, never past 1.5x the base chance."""
    return min(base_chance * (1 + difficulty * MODIFIER_DIFFICULTY_SCALING),
               base_chance * MODIFIER_CHANCE_CAP_FACTOR)


def generate_contract_modifiers(template: CustomerTemplate, difficulty: float, rng=None) -> List[str]:
    """
    Rolls every modifier type independently against the template's chance table.
    The result has no duplicates and follows CONTRACT_MODIFIER_TYPES order.
    """
    rng = rng or random
    modifiers = []
    if not template.modifier_chances:
        return modifiers

    for modifier_type in CONTRACT_MODIFIER_TYPES:
        chance = template.modifier_chances.get(modifier_type, 0)
        if rng.random() < adjusted_modifier_chance(chance, difficulty):
            modifiers.append(modifier_type)
    return modifiers


def generate_special_reward(template: CustomerTemplate, difficulty: float, rng=None) -> Optional[Reward]:
    rng = rng or random
    if not template.has_special_reward_chance:
        return None
    if rng.random() >= template.special_reward_chance:
        return None

    roll = rng.random()
    reward_type = REWARD_TYPE_GOLD
    for upper_bound, band_type in SPECIAL_REWARD_BANDS:
        if roll < upper_bound:
            reward_type = band_type
            break

    tier = template.tier or 1

    if reward_type == REWARD_TYPE_INGREDIENT:
        ingredients = SPECIAL_REWARD_INGREDIENTS_BY_TIER.get(tier, SPECIAL_REWARD_INGREDIENTS_BY_TIER[1])
        return Reward(
            reward_type=REWARD_TYPE_INGREDIENT,
            amount=math.floor(1 + difficulty * SPECIAL_REWARD_INGREDIENT_PER_DIFFICULTY),
            item_id=ingredients[math.floor(rng.random() * len(ingredients))],
        )

    if reward_type == REWARD_TYPE_GENERATED_EQUIPMENT:
        # The item itself is rolled by the reward resolver when the contract pays out
        return Reward(reward_type=REWARD_TYPE_GENERATED_EQUIPMENT)

    if reward_type == REWARD_TYPE_MANA:
        return Reward(
            reward_type=REWARD_TYPE_MANA,
            amount=math.floor(SPECIAL_REWARD_MANA_BASE + tier * SPECIAL_REWARD_MANA_PER_TIER
                              + difficulty * SPECIAL_REWARD_MANA_PER_DIFFICULTY),
        )

    return Reward(
        reward_type=REWARD_TYPE_GOLD,
        amount=math.floor(template.base_payment * (SPECIAL_REWARD_GOLD_BASE_FACTOR
                                                   + difficulty * SPECIAL_REWARD_GOLD_PER_DIFFICULTY)),
    )


def determine_reward_tier(template: CustomerTemplate, modifiers: Sequence[str]) -> str:
    tier = template.tier or 1
    has_special_reward = template.has_special_reward_chance
    modifier_count = len(modifiers)

    # Ancient entities and other top-tier specials
    if tier >= 5 and template.is_special and has_special_reward:
        return REWARD_TIER_UNIQUE

    if tier >= 4 or (tier >= 3 and modifier_count >= 2):
        return REWARD_TIER_RARE

    if tier >= 2 and (modifier_count >= 1 or has_special_reward):
        return REWARD_TIER_ENHANCED

    return REWARD_TIER_STANDARD


def calculate_adjusted_payment(base_payment: int, modifiers: Optional[Sequence[str]] = None) -> int:
    """Applies each modifier's payment multiplier in turn, flooring after every step."""
    if not modifiers:
        return base_payment

    adjusted = base_payment
    for modifier in modifiers:
        multiplier = CONTRACT_MODIFIER_PAYMENT_MULTIPLIERS.get(modifier)
        if multiplier is None:
            Logger.warning("Contracts", f"Unknown contract modifier '{modifier}' ignored for payment.")
            continue
        adjusted = math.floor(adjusted * multiplier)
    return adjusted


# --- Customer Details ---

def select_template(difficulty_level: int, rng=None,
                    templates: Sequence[CustomerTemplate] = CUSTOMER_TEMPLATES) -> CustomerTemplate:
    """Higher difficulty levels unlock templates further down the list."""
    rng = rng or random
    index = min(math.floor(rng.random() * difficulty_level), len(templates) - 1)
    return templates[index]


def generate_customer_name(template: CustomerTemplate, rng=None) -> str:
    rng = rng or random
    return f"{rng.choice(CUSTOMER_ADJECTIVES)} {rng.choice(template.name_pool)}"


def generate_customer_icon(template: CustomerTemplate, rng=None) -> str:
    return (rng or random).choice(template.icon_pool)


def generate_payment(template: CustomerTemplate, rng=None) -> int:
    """Base payment plus or minus up to the template's variance."""
    variance = ((rng or random).random() - 0.5) * 2 * template.payment_variance
    return math.floor(template.base_payment + variance)


def generate_patience(template: CustomerTemplate, rng=None) -> int:
    return template.base_patience + math.floor((rng or random).random() * CUSTOMER_PATIENCE_JITTER)


# --- Element Requirements ---

def _unlocked_requirements(unlocked_elements: Sequence[str]) -> List[List[str]]:
    unlocked = set(unlocked_elements)
    return [req for req in ELEMENT_REQUIREMENTS if all(el in unlocked for el in req)]


def select_element_requirements(unlocked_elements: Sequence[str], difficulty: float, rng=None) -> List[str]:
    """
    Picks a requirement built only from unlocked elements. Higher difficulty
    widens the pick toward the more complex end of the list.
    """
    rng = rng or random
    available = _unlocked_requirements(unlocked_elements)
    if not available:
        return list(unlocked_elements[:1])

    max_index = min(math.floor(difficulty * len(available)), len(available) - 1)
    index = math.floor(rng.random() * (max_index + 1))
    return list(available[index])


def select_element_requirements_by_tier(unlocked_elements: Sequence[str], preferred_tier: str,
                                        rng=None) -> List[str]:
    """
    Prefers requirements whose highest tier is exactly `preferred_tier`, else anything at or below it.
    An unknown tier matches nothing and falls back to the first unlocked element.
    """
    rng = rng or random
    if preferred_tier not in ELEMENT_TIER_ORDER:
        return list(unlocked_elements[:1])
    max_tier_index = ELEMENT_TIER_ORDER.index(preferred_tier)

    available = [
        req for req in _unlocked_requirements(unlocked_elements)
        if ELEMENT_TIER_ORDER.index(get_highest_element_tier(req)) <= max_tier_index
    ]
    if not available:
        return list(unlocked_elements[:1])

    preferred = [req for req in available if get_highest_element_tier(req) == preferred_tier]
    candidates = preferred or available
    return list(candidates[math.floor(rng.random() * len(candidates))])


def generate_requirements(template: CustomerTemplate, unlocked_elements: Sequence[str],
                          rng=None) -> ContractRequirements:
    return ContractRequirements(
        min_level=max(1, math.floor(template.difficulty_multiplier * 2)),
        required_elements=select_element_requirements(unlocked_elements, template.difficulty_multiplier, rng),
        min_element_amount=math.ceil(template.difficulty_multiplier * 3),
    )


# --- Full Contract ---

def create_contract(template: CustomerTemplate, difficulty: Optional[float] = None,
                    unlocked_elements: Optional[Sequence[str]] = None, rng=None) -> Contract:
    """
    Builds the complete contract for one spawned customer. `difficulty`
    defaults to the template's own difficulty multiplier.
    """
    rng = rng or random
    if difficulty is None:
        difficulty = template.difficulty_multiplier
    if unlocked_elements is None:
        unlocked_elements = STARTING_ELEMENTS

    modifiers = generate_contract_modifiers(template, difficulty, rng)
    special_reward = generate_special_reward(template, difficulty, rng)
    payment = generate_payment(template, rng)

    contract = Contract(
        customer_name=generate_customer_name(template, rng),
        icon=generate_customer_icon(template, rng),
        tier=template.tier,
        payment=payment,
        adjusted_payment=calculate_adjusted_payment(payment, modifiers),
        patience=generate_patience(template, rng),
        requirements=generate_requirements(template, unlocked_elements, rng),
        modifiers=modifiers,
        special_reward=special_reward,
        reward_tier=determine_reward_tier(template, modifiers),
    )
    Logger.debug("Contracts",
                 f"Contract for {contract.customer_name}: pay {contract.adjusted_payment}, "
                 f"modifiers {modifiers or 'none'}, tier {contract.reward_tier}")
    return contract
