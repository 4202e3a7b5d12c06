# portalcraft/items/equipment_generator.py
import math
import random
import uuid
from typing import Dict, List, Optional

from portalcraft.config import (
    DEFAULT_MATERIAL_CHANCE, DEFAULT_PREFIX_CHANCE, DEFAULT_SUFFIX_CHANCE,
    ELEMENT_BONUS_MATERIAL, ELEMENT_BONUS_PREFIX, ELEMENT_BONUS_SUFFIX_DEFAULT,
    MIN_ITEM_LEVEL, PORTAL_BONUS_FACTOR
)
from portalcraft.items.attribute_pool import AttributePool, classify
from portalcraft.items.models import (
    GearTypeAttribute, GeneratedEquipment, MaterialAttribute, PrefixAttribute, SuffixAttribute
)
from portalcraft.utils.logger import Logger


class EquipmentGenerator:
    """
    Assembles a gear type plus zero-or-one prefix, material and suffix into a
    scored item. Every random decision goes through `self.rng`.
    """

    def __init__(self, pool: Optional[AttributePool] = None, rng=None):
        self.pool = pool or AttributePool()
        self.rng = rng or random

    def generate(self, level: int = 1,
                 prefix_chance: float = DEFAULT_PREFIX_CHANCE,
                 material_chance: float = DEFAULT_MATERIAL_CHANCE,
                 suffix_chance: float = DEFAULT_SUFFIX_CHANCE,
                 forced_gear_type: Optional[str] = None,
                 forced_prefix: Optional[str] = None,
                 forced_material: Optional[str] = None,
                 forced_suffix: Optional[str] = None) -> GeneratedEquipment:
        """
        Generates a single item for `level`.
        Forced ids bypass both the slot roll and level gating.
        """
        if level < MIN_ITEM_LEVEL:
            Logger.error("EquipmentGenerator", f"Refusing to generate equipment for level {level}.")
            raise ValueError(f"Item level must be at least {MIN_ITEM_LEVEL}, got {level}")

        # 1. Gear type (always required)
        gear_type = self._select_gear_type(forced_gear_type)

        # 2. Optional attributes, each rolled independently
        prefix = self._maybe_select(forced_prefix, prefix_chance,
                                    self.pool.prefix, self.pool.random_prefix, level)
        material = self._maybe_select(forced_material, material_chance,
                                      self.pool.material, self.pool.random_material, level)
        suffix = self._maybe_select(forced_suffix, suffix_chance,
                                    self.pool.suffix, self.pool.random_suffix, level)

        # 3. Assemble and score
        equipment = self.build_equipment(gear_type, prefix, material, suffix, level)
        Logger.debug("EquipmentGenerator",
                     f"Generated '{equipment.name}' (L{level}, cost {equipment.total_cost}, {equipment.rarity})")
        return equipment

    def generate_multiple(self, count: int, **options) -> List[GeneratedEquipment]:
        return [self.generate(**options) for _ in range(count)]

    def generate_for_level_range(self, min_level: int, max_level: int, **options) -> GeneratedEquipment:
        """Picks a uniformly random level in [min_level, max_level] and generates for it."""
        if min_level > max_level:
            Logger.error("EquipmentGenerator", f"Inverted level range {min_level}-{max_level}.")
            raise ValueError(f"min_level ({min_level}) is greater than max_level ({max_level})")
        level = self.rng.randint(min_level, max_level)
        return self.generate(level=level, **options)

    def build_equipment(self, gear_type: GearTypeAttribute,
                        prefix: Optional[PrefixAttribute],
                        material: Optional[MaterialAttribute],
                        suffix: Optional[SuffixAttribute],
                        level: int) -> GeneratedEquipment:
        total_cost = calculate_total_cost(gear_type, prefix, material, suffix)
        return GeneratedEquipment(
            item_id=uuid.uuid4().hex,
            name=build_name(gear_type, prefix, material, suffix),
            description=build_description(gear_type, prefix, material, suffix),
            gear_type=gear_type,
            total_cost=total_cost,
            rarity=classify(total_cost),
            item_level=level,
            portal_bonus=math.floor(total_cost * PORTAL_BONUS_FACTOR),
            prefix=prefix,
            material=material,
            suffix=suffix,
            element_bonus=calculate_element_bonus(prefix, material, suffix),
        )

    def _select_gear_type(self, forced_id: Optional[str]) -> GearTypeAttribute:
        if forced_id:
            forced = self.pool.gear_type(forced_id)
            if forced:
                return forced
            Logger.warning("EquipmentGenerator", f"Unknown forced gear type '{forced_id}', rolling instead.")

        gear_type = self.pool.random_gear_type(self.rng)
        if gear_type is None:
            Logger.critical("EquipmentGenerator", "Gear type pool is empty.")
            raise RuntimeError("Gear type pool is empty; equipment cannot be generated")
        return gear_type

    def _maybe_select(self, forced_id, chance, find, pick, level):
        if forced_id:
            return find(forced_id)
        # A chance of 1.0 or more never consumes a roll
        if chance < 1.0 and self.rng.random() >= chance:
            return None
        return pick(level, self.rng)


def calculate_total_cost(gear_type: GearTypeAttribute,
                         prefix: Optional[PrefixAttribute] = None,
                         material: Optional[MaterialAttribute] = None,
                         suffix: Optional[SuffixAttribute] = None) -> int:
    total = gear_type.base_cost
    for attr in (prefix, material, suffix):
        if attr:
            total += attr.cost_contribution
    return total


def calculate_element_bonus(prefix: Optional[PrefixAttribute] = None,
                            material: Optional[MaterialAttribute] = None,
                            suffix: Optional[SuffixAttribute] = None) -> Dict[str, int]:
    bonus: Dict[str, int] = {}

    def add(element: Optional[str], value: int):
        if element:
            bonus[element] = bonus.get(element, 0) + value

    if prefix:
        add(prefix.element_affinity, ELEMENT_BONUS_PREFIX)
    if material:
        add(material.element_affinity, ELEMENT_BONUS_MATERIAL)
    if suffix:
        add(suffix.element_affinity, int(suffix.effect_value or ELEMENT_BONUS_SUFFIX_DEFAULT))
    return bonus


def build_name(gear_type: GearTypeAttribute,
               prefix: Optional[PrefixAttribute] = None,
               material: Optional[MaterialAttribute] = None,
               suffix: Optional[SuffixAttribute] = None) -> str:
    """Format: [Prefix] [Material] GearType [Suffix]"""
    parts = []
    if prefix: parts.append(prefix.name)
    if material: parts.append(material.name)
    parts.append(gear_type.name)
    if suffix: parts.append(suffix.name)
    return " ".join(parts)


def build_description(gear_type: GearTypeAttribute,
                      prefix: Optional[PrefixAttribute] = None,
                      material: Optional[MaterialAttribute] = None,
                      suffix: Optional[SuffixAttribute] = None) -> str:
    descriptions = [gear_type.description]
    for attr in (prefix, material, suffix):
        if attr and attr.description:
            descriptions.append(attr.description)
    return ". ".join(descriptions) + "."
