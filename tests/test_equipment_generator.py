# tests/test_equipment_generator.py
import random
from tests.fixtures import PortalCraftTestBase, ScriptedRandom
from portalcraft.items.attribute_pool import AttributePool, classify
from portalcraft.items.equipment_generator import (
    EquipmentGenerator, build_name, calculate_element_bonus, calculate_total_cost
)

class TestEquipmentGenerator(PortalCraftTestBase):

    def test_level_below_one_is_rejected(self):
        generator = EquipmentGenerator(rng=ScriptedRandom())
        with self.assertRaises(ValueError):
            generator.generate(level=0)
        with self.assertRaises(ValueError):
            generator.generate(level=-4)

    def test_empty_gear_pool_is_a_configuration_error(self):
        generator = EquipmentGenerator(pool=AttributePool(gear_types=[]), rng=ScriptedRandom())
        with self.assertRaises(RuntimeError):
            generator.generate(level=1)

    def test_every_slot_is_attempted_by_default(self):
        """With default odds no roll is consumed and level gating alone decides."""
        rng = ScriptedRandom(picks=[0, 0, 0, 0])
        item = EquipmentGenerator(rng=rng).generate(level=1)

        self.assertEqual(rng.random_calls, 0)
        self.assertEqual(item.name, "Rusted Iron Sword of the Novice")
        self.assertEqual(item.total_cost, 4) # 5 - 2 + 0 + 1
        self.assertEqual(item.rarity, "common")
        self.assertEqual(item.item_level, 1)
        self.assertEqual(item.portal_bonus, 6)
        self.assertEqual(item.element_bonus, {"earth": 3})
        self.assertEqual(item.slot, "weapon")

    def test_slot_rolls_can_skip_attributes(self):
        # prefix roll 0.7 >= 0.6 skips, material 0.1 < 0.7 takes, suffix 0.9 >= 0.5 skips
        rng = ScriptedRandom(rolls=[0.7, 0.1, 0.9], picks=[0, 0])
        item = EquipmentGenerator(rng=rng).generate(
            level=1, prefix_chance=0.6, material_chance=0.7, suffix_chance=0.5)

        self.assertIsNone(item.prefix)
        self.assertEqual(item.material.attr_id, "iron")
        self.assertIsNone(item.suffix)
        self.assertEqual(item.name, "Iron Sword")
        self.assertEqual(item.total_cost, 5)
        self.assertEqual(item.rarity, "uncommon")

    def test_no_eligible_attribute_is_a_valid_absence(self):
        pool = AttributePool(
            prefixes=[self.make_prefix(level_range=(5, 9))],
            materials=[], suffixes=[],
            gear_types=[self.make_gear(base_cost=3)],
        )
        item = EquipmentGenerator(pool=pool, rng=ScriptedRandom()).generate(level=2)
        self.assertEqual(list(item.attributes()), [])
        self.assertEqual(item.total_cost, 3)
        self.assertEqual(item.name, "Widget")

    def test_forced_attributes_bypass_rolls_and_gating(self):
        item = EquipmentGenerator(rng=random.Random(3)).generate(
            level=1, prefix_chance=0.0,
            forced_gear_type="sword", forced_material="mithril", forced_suffix="storms")

        self.assertIsNone(item.prefix)
        self.assertEqual(item.name, "Mithril Sword of Storms")
        self.assertEqual(item.total_cost, 17)
        self.assertEqual(item.rarity, "rare")
        self.assertEqual(item.item_level, 1)
        self.assertEqual(item.element_bonus, {"air": 3, "lightning": 6})
        self.assertEqual(item.description, "A standard blade. Legendary light metal. Crackles with electricity.")

    def test_unknown_forced_gear_type_falls_back_to_a_roll(self):
        # Zero chances still consume one roll each
        rng = ScriptedRandom(rolls=[0.5, 0.5, 0.5], picks=[2])
        item = EquipmentGenerator(rng=rng).generate(
            level=1, prefix_chance=0.0, material_chance=0.0, suffix_chance=0.0,
            forced_gear_type="trebuchet")
        self.assertEqual(item.gear_type.attr_id, "staff")
        self.assertEqual(item.total_cost, 4)

    def test_generated_items_hold_their_invariants(self):
        generator = EquipmentGenerator(rng=random.Random(42))
        for level in range(1, 13):
            for item in generator.generate_multiple(15, level=level):
                expected = item.gear_type.base_cost + sum(a.cost_contribution for a in item.attributes())
                self.assertEqual(item.total_cost, expected)
                self.assertEqual(item.rarity, classify(item.total_cost))
                self.assertEqual(item.item_level, level)
                for attr in item.attributes():
                    self.assertTrue(attr.level_range.contains(level),
                                    f"{attr.attr_id} is not eligible at level {level}")

    def test_generate_multiple_gives_unique_ids(self):
        items = EquipmentGenerator(rng=random.Random(1)).generate_multiple(5, level=8)
        self.assertEqual(len(items), 5)
        self.assertEqual(len({item.item_id for item in items}), 5)

    def test_generate_for_level_range(self):
        rng = ScriptedRandom(picks=[0, 0, 0, 0])
        item = EquipmentGenerator(rng=rng).generate_for_level_range(10, 12)
        self.assertEqual(item.item_level, 10)
        self.assertEqual(item.name, "Enchanted Obsidian Sword of Annihilation")
        self.assertEqual(item.total_cost, 38)
        self.assertEqual(item.rarity, "legendary")

        with self.assertRaises(ValueError):
            EquipmentGenerator(rng=ScriptedRandom()).generate_for_level_range(5, 2)


class TestEquipmentHelpers(PortalCraftTestBase):

    def test_total_cost_is_an_exact_sum(self):
        gear = self.make_gear(base_cost=2)
        prefix = self.make_prefix(cost=-2)
        self.assertEqual(calculate_total_cost(gear, prefix), 0)
        self.assertEqual(calculate_total_cost(gear), 2)

    def test_element_bonus_weights(self):
        prefix = self.make_prefix(affinity="light")
        material = self.make_material(affinity="light")
        suffix = self.make_suffix(affinity="fire", effect_value=0)
        self.assertEqual(calculate_element_bonus(prefix, material, suffix), {"light": 5, "fire": 3})
        self.assertEqual(calculate_element_bonus(), {})

    def test_name_order(self):
        gear = self.make_gear(name="Orb")
        self.assertEqual(build_name(gear, suffix=self.make_suffix(name="of Vigor")), "Orb of Vigor")
        self.assertEqual(build_name(gear, self.make_prefix(name="Worn"), self.make_material(name="Bone")),
                         "Worn Bone Orb")
