# portalcraft/items/attribute_pool.py
"""
Level-gated queries over the attribute catalogs, plus cost -> rarity classification.
None of these raise: a level with no matches simply yields nothing.
"""
import random
from typing import Optional, Sequence, TypeVar, List

from portalcraft.config import RARITY_LEGENDARY, RARITY_THRESHOLDS
from portalcraft.items.attribute_data import (
    GEAR_TYPE_POOL, MATERIAL_POOL, PREFIX_POOL, SUFFIX_POOL
)
from portalcraft.items.models import (
    GearTypeAttribute, MaterialAttribute, PrefixAttribute, SuffixAttribute
)

T = TypeVar("T")


def get_eligible(pool: Sequence[T], level: int) -> List[T]:
    """All entries whose inclusive level range contains `level`."""
    return [attr for attr in pool if attr.level_range.contains(level)]


def pick_random(pool: Sequence[T], level: int, rng=None) -> Optional[T]:
    """A uniformly random eligible entry, or None when nothing fits the level."""
    eligible = get_eligible(pool, level)
    if not eligible:
        return None
    return (rng or random).choice(eligible)


def find_by_id(pool: Sequence[T], attr_id: str) -> Optional[T]:
    for attr in pool:
        if attr.attr_id == attr_id:
            return attr
    return None


def classify(total_cost: int) -> str:
    """Rarity bucket for a total cost. Buckets are half-open: 5 is uncommon, not common."""
    for upper_bound, rarity in RARITY_THRESHOLDS:
        if total_cost < upper_bound:
            return rarity
    return RARITY_LEGENDARY


def get_prefix_by_id(attr_id: str) -> Optional[PrefixAttribute]:
    return find_by_id(PREFIX_POOL, attr_id)

def get_material_by_id(attr_id: str) -> Optional[MaterialAttribute]:
    return find_by_id(MATERIAL_POOL, attr_id)

def get_suffix_by_id(attr_id: str) -> Optional[SuffixAttribute]:
    return find_by_id(SUFFIX_POOL, attr_id)

def get_gear_type_by_id(attr_id: str) -> Optional[GearTypeAttribute]:
    return find_by_id(GEAR_TYPE_POOL, attr_id)


class AttributePool:
    """
    Bundles the four catalogs so generators can be handed a custom set
    (tests, upgraded pools) instead of reaching for the module globals.
    """

    def __init__(self,
                 prefixes: Sequence[PrefixAttribute] = PREFIX_POOL,
                 materials: Sequence[MaterialAttribute] = MATERIAL_POOL,
                 suffixes: Sequence[SuffixAttribute] = SUFFIX_POOL,
                 gear_types: Sequence[GearTypeAttribute] = GEAR_TYPE_POOL):
        self.prefixes = tuple(prefixes)
        self.materials = tuple(materials)
        self.suffixes = tuple(suffixes)
        self.gear_types = tuple(gear_types)

    def eligible_prefixes(self, level: int) -> List[PrefixAttribute]:
        return get_eligible(self.prefixes, level)

    def eligible_materials(self, level: int) -> List[MaterialAttribute]:
        return get_eligible(self.materials, level)

    def eligible_suffixes(self, level: int) -> List[SuffixAttribute]:
        return get_eligible(self.suffixes, level)

    def random_prefix(self, level: int, rng=None) -> Optional[PrefixAttribute]:
        return pick_random(self.prefixes, level, rng)

    def random_material(self, level: int, rng=None) -> Optional[MaterialAttribute]:
        return pick_random(self.materials, level, rng)

    def random_suffix(self, level: int, rng=None) -> Optional[SuffixAttribute]:
        return pick_random(self.suffixes, level, rng)

    def random_gear_type(self, rng=None) -> Optional[GearTypeAttribute]:
        if not self.gear_types:
            return None
        return (rng or random).choice(self.gear_types)

    def prefix(self, attr_id: str) -> Optional[PrefixAttribute]:
        return find_by_id(self.prefixes, attr_id)

    def material(self, attr_id: str) -> Optional[MaterialAttribute]:
        return find_by_id(self.materials, attr_id)

    def suffix(self, attr_id: str) -> Optional[SuffixAttribute]:
        return find_by_id(self.suffixes, attr_id)

    def gear_type(self, attr_id: str) -> Optional[GearTypeAttribute]:
        return find_by_id(self.gear_types, attr_id)
