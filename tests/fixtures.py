# tests/fixtures.py
import unittest
import sys
import os
from typing import List, Optional

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'portalcraft'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from portalcraft.items.attribute_pool import (
    get_gear_type_by_id, get_material_by_id, get_prefix_by_id, get_suffix_by_id
)
from portalcraft.items.equipment_generator import EquipmentGenerator
from portalcraft.items.models import (
    GearTypeAttribute, GeneratedEquipment, LevelRange, MaterialAttribute,
    PrefixAttribute, SuffixAttribute
)
from portalcraft.utils.logger import Logger, LogLevel


class ScriptedRandom:
    """
    Stand-in for random.Random that replays fixed values.
    random() pops from `rolls`; choice() picks by index from `picks` (default first item).
    """
    def __init__(self, rolls: Optional[List[float]] = None, picks: Optional[List[int]] = None):
        self.rolls = list(rolls or [])
        self.picks = list(picks or [])
        self.random_calls = 0

    def random(self) -> float:
        self.random_calls += 1
        if not self.rolls:
            raise AssertionError("ScriptedRandom ran out of rolls")
        return self.rolls.pop(0)

    def choice(self, seq):
        index = self.picks.pop(0) if self.picks else 0
        return seq[index]

    def randint(self, a: int, b: int) -> int:
        return a


class PortalCraftTestBase(unittest.TestCase):
    """Base class for all portalcraft tests."""

    def setUp(self):
        self._previous_log_level = Logger.get_level()
        Logger.set_level(LogLevel.SILENT)
        Logger.clear_history()

    def tearDown(self):
        Logger.set_level(self._previous_log_level)

    # --- Builders ---

    def make_prefix(self, attr_id="test_prefix", name="Test", cost=0, level_range=(1, 99),
                    affinity=None) -> PrefixAttribute:
        return PrefixAttribute(attr_id, name, cost, LevelRange(*level_range), element_affinity=affinity)

    def make_material(self, attr_id="test_material", name="Testium", cost=0, level_range=(1, 99),
                      affinity=None) -> MaterialAttribute:
        return MaterialAttribute(attr_id, name, cost, LevelRange(*level_range), element_affinity=affinity)

    def make_suffix(self, attr_id="test_suffix", name="of Testing", cost=0, effect_type="damage",
                    effect_value=1, level_range=(1, 99), affinity=None) -> SuffixAttribute:
        return SuffixAttribute(attr_id, name, cost, LevelRange(*level_range), effect_type, effect_value,
                               element_affinity=affinity)

    def make_gear(self, attr_id="test_gear", name="Widget", slot="weapon", base_cost=1) -> GearTypeAttribute:
        return GearTypeAttribute(attr_id, name, slot, base_cost)

    def make_equipment(self, gear_id="sword", prefix_id=None, material_id=None, suffix_id=None,
                       level=10) -> GeneratedEquipment:
        """Builds real catalog equipment through the generator's deterministic assembly step."""
        gear = get_gear_type_by_id(gear_id)
        prefix = get_prefix_by_id(prefix_id) if prefix_id else None
        material = get_material_by_id(material_id) if material_id else None
        suffix = get_suffix_by_id(suffix_id) if suffix_id else None
        for attr_id, attr in ((gear_id, gear), (prefix_id, prefix), (material_id, material), (suffix_id, suffix)):
            if attr_id and attr is None:
                self.fail(f"Unknown catalog id '{attr_id}' in test setup")
        return EquipmentGenerator().build_equipment(gear, prefix, material, suffix, level)
