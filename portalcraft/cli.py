# portalcraft/cli.py
import argparse
import random

from portalcraft.config import (
    LOG_LEVEL_DEFAULT, LOG_LEVEL_VERBOSE, LOOT_MATERIAL_CHANCE, LOOT_PREFIX_CHANCE, LOOT_SUFFIX_CHANCE
)
from portalcraft.customers.contracts import create_contract
from portalcraft.customers.customer_data import CUSTOMER_TEMPLATES
from portalcraft.items.equipment_generator import EquipmentGenerator
from portalcraft.portal.effects import describe_portal_effects, resolve_portal_effects
from portalcraft.utils.logger import Logger

def main():
    parser = argparse.ArgumentParser(description='Portal crafting economy sandbox')
    parser.add_argument('--level', '-l', type=int, default=1,
                        help='Item level to generate equipment for (default: 1)')
    parser.add_argument('--count', '-c', type=int, default=3,
                        help='Number of items to feed into the portal (default: 3)')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='Seed for reproducible rolls')
    parser.add_argument('--customer', type=int, default=0,
                        help=f'Customer template index, 0-{len(CUSTOMER_TEMPLATES) - 1} (default: 0)')
    parser.add_argument('--difficulty', '-d', type=float, default=None,
                        help="Contract difficulty (default: the template's own)")
    parser.add_argument('--loot', action='store_true',
                        help='Use loot drop odds, so some items come out bare')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')
    args = parser.parse_args()

    Logger.set_level(LOG_LEVEL_VERBOSE if args.verbose else LOG_LEVEL_DEFAULT)
    rng = random.Random(args.seed)

    generator = EquipmentGenerator(rng=rng)
    odds = {}
    if args.loot:
        odds = dict(prefix_chance=LOOT_PREFIX_CHANCE, material_chance=LOOT_MATERIAL_CHANCE,
                    suffix_chance=LOOT_SUFFIX_CHANCE)
    items = generator.generate_multiple(args.count, level=args.level, **odds)

    print(f"=== Equipment (level {args.level}) ===")
    for item in items:
        print(f"  {item.icon} {item.name} - cost {item.total_cost}, {item.rarity}")

    print("=== Portal Effects ===")
    lines = describe_portal_effects(resolve_portal_effects(items))
    for line in lines or ["No effects."]:
        print(f"  {line}")

    template = CUSTOMER_TEMPLATES[max(0, min(args.customer, len(CUSTOMER_TEMPLATES) - 1))]
    contract = create_contract(template, args.difficulty, rng=rng)

    print("=== Contract ===")
    print(f"  {contract.icon} {contract.customer_name} (tier {contract.tier})")
    print(f"  Needs: {', '.join(contract.requirements.required_elements)} "
          f"x{contract.requirements.min_element_amount}, level {contract.requirements.min_level}+")
    print(f"  Pays: {contract.adjusted_payment} gold (base {contract.payment})")
    print(f"  Modifiers: {', '.join(contract.modifiers) or 'none'}")
    if contract.special_reward:
        reward = contract.special_reward
        print(f"  Special reward: {reward.reward_type} {reward.item_id or ''} {reward.amount or ''}".rstrip())
    print(f"  Reward tier: {contract.reward_tier}")
