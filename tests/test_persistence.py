# tests/test_persistence.py
import dataclasses
import json
import random
from tests.fixtures import PortalCraftTestBase
from portalcraft.customers.models import Contract, ContractRequirements, Reward
from portalcraft.items.equipment_generator import EquipmentGenerator
from portalcraft.items.models import GeneratedEquipment
from portalcraft.portal.effects import resolve_portal_effects
from portalcraft.portal.modifiers import PortalEffectModifiers

class TestEquipmentPersistence(PortalCraftTestBase):

    def test_generated_items_survive_a_json_round_trip(self):
        generator = EquipmentGenerator(rng=random.Random(9))
        for item in generator.generate_multiple(20, level=12):
            restored = GeneratedEquipment.from_dict(json.loads(json.dumps(item.to_dict())))
            self.assertEqual(restored, item)

    def test_saved_item_does_not_need_the_pools(self):
        custom = self.make_equipment("sword")
        item = EquipmentGenerator().build_equipment(
            custom.gear_type,
            self.make_prefix("homebrew", "Homebrew", cost=7, affinity="chaos"),
            None,
            self.make_suffix("of_tests", "of Tests", cost=2, effect_type="special", effect_value=5),
            3,
        )
        data = item.to_dict()
        self.assertTrue(data["is_generated"])
        self.assertEqual(data["attributes"]["prefix"]["kind"], "prefix")
        self.assertIsNone(data["attributes"]["material"])

        restored = GeneratedEquipment.from_dict(data)
        self.assertEqual(restored.prefix.attr_id, "homebrew")
        self.assertEqual(restored.total_cost, 14)
        self.assertEqual(restored.element_bonus, {"chaos": 2})
        self.assertEqual(resolve_portal_effects([restored]), resolve_portal_effects([item]))

    def test_missing_attributes_block_is_an_error(self):
        data = self.make_equipment("ring").to_dict()
        del data["attributes"]
        with self.assertRaises(KeyError):
            GeneratedEquipment.from_dict(data)


class TestContractPersistence(PortalCraftTestBase):

    def test_modifiers_round_trip(self):
        item = self.make_equipment("sword", material_id="mithril", suffix_id="storms")
        modifiers = resolve_portal_effects([item])
        restored = PortalEffectModifiers.from_dict(json.loads(json.dumps(modifiers.to_dict())))
        self.assertEqual(restored, modifiers)

    def test_reward_keeps_granted_equipment(self):
        reward = Reward("generatedEquipment", generated_equipment=self.make_equipment("orb", material_id="crystal"))
        data = reward.to_dict()
        self.assertEqual(data["type"], "generatedEquipment")
        self.assertNotIn("amount", data)
        self.assertEqual(Reward.from_dict(data), reward)

    def test_contract_defaults_when_fields_are_missing(self):
        contract = Contract.from_dict({"customer_name": "Eager Novice Mage", "payment": 40})
        self.assertEqual(contract.adjusted_payment, 40)
        self.assertEqual(contract.requirements, ContractRequirements(min_level=1))
        self.assertEqual(contract.modifiers, [])
        self.assertIsNone(contract.special_reward)
        self.assertEqual(contract.reward_tier, "standard")


class TestFrozenModels(PortalCraftTestBase):

    def test_generated_equipment_is_hashable(self):
        item = self.make_equipment("sword", material_id="mithril")
        twin = GeneratedEquipment.from_dict(item.to_dict())
        self.assertEqual(hash(item), hash(twin))
        self.assertEqual(len({item, twin}), 1)

    def test_element_bonus_cannot_change_after_craft(self):
        item = self.make_equipment("sword", material_id="mithril")
        with self.assertRaises(TypeError):
            item.element_bonus["air"] = 999
        self.assertEqual(item.element_bonus, {"air": 3})

    def test_element_bonus_is_copied_from_the_caller(self):
        bonus = {"fire": 2}
        item = self.make_equipment("ring")
        rebuilt = dataclasses.replace(item, element_bonus=bonus)
        bonus["fire"] = 50
        self.assertEqual(rebuilt.element_bonus, {"fire": 2})
        self.assertEqual(rebuilt.to_dict()["element_bonus"], {"fire": 2})
        self.assertIs(type(rebuilt.to_dict()["element_bonus"]), dict)
