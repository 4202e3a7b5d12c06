# portalcraft/customers/models.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from portalcraft.items.models import GeneratedEquipment
from portalcraft.utils.frozen_mapping import FrozenMapping


@dataclass(frozen=True)
class CustomerTemplate:
    name_pool: Tuple[str, ...]
    icon_pool: Tuple[str, ...]
    base_payment: int
    payment_variance: int
    base_patience: int # Seconds
    difficulty_multiplier: float
    tier: int = 1
    modifier_chances: Mapping[str, float] = field(default_factory=FrozenMapping)
    special_reward_chance: Optional[float] = None
    is_special: bool = False

    def __post_init__(self):
        # Templates are shared process-wide and stay read-only
        object.__setattr__(self, "name_pool", tuple(self.name_pool))
        object.__setattr__(self, "icon_pool", tuple(self.icon_pool))
        object.__setattr__(self, "modifier_chances", FrozenMapping(self.modifier_chances))

    @property
    def has_special_reward_chance(self) -> bool:
        return bool(self.special_reward_chance and self.special_reward_chance > 0)


@dataclass
class Reward:
    reward_type: str # "ingredient", "generatedEquipment", "mana", "gold"
    amount: Optional[int] = None
    item_id: Optional[str] = None
    # Filled in later by whoever grants a generatedEquipment reward
    generated_equipment: Optional[GeneratedEquipment] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.reward_type}
        if self.amount is not None: data["amount"] = self.amount
        if self.item_id is not None: data["item_id"] = self.item_id
        if self.generated_equipment is not None:
            data["generated_equipment"] = self.generated_equipment.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Reward':
        equipment_data = data.get("generated_equipment")
        return cls(
            reward_type=data["type"],
            amount=data.get("amount"),
            item_id=data.get("item_id"),
            generated_equipment=GeneratedEquipment.from_dict(equipment_data) if equipment_data else None,
        )


@dataclass
class ContractRequirements:
    min_level: int
    required_elements: List[str] = field(default_factory=list)
    min_element_amount: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_level": self.min_level,
            "required_elements": list(self.required_elements),
            "min_element_amount": self.min_element_amount,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContractRequirements':
        return cls(
            min_level=data.get("min_level", 1),
            required_elements=list(data.get("required_elements", [])),
            min_element_amount=data.get("min_element_amount", 0),
        )


@dataclass
class Contract:
    """Everything the customer queue stores for one spawned customer."""
    customer_name: str
    icon: str
    tier: int
    payment: int
    adjusted_payment: int
    patience: int
    requirements: ContractRequirements
    modifiers: List[str] = field(default_factory=list)
    special_reward: Optional[Reward] = None
    reward_tier: str = "standard"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customer_name": self.customer_name,
            "icon": self.icon,
            "tier": self.tier,
            "payment": self.payment,
            "adjusted_payment": self.adjusted_payment,
            "patience": self.patience,
            "requirements": self.requirements.to_dict(),
            "modifiers": list(self.modifiers),
            "special_reward": self.special_reward.to_dict() if self.special_reward else None,
            "reward_tier": self.reward_tier,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Contract':
        reward_data = data.get("special_reward")
        return cls(
            customer_name=data["customer_name"],
            icon=data.get("icon", ""),
            tier=data.get("tier", 1),
            payment=data["payment"],
            adjusted_payment=data.get("adjusted_payment", data["payment"]),
            patience=data.get("patience", 0),
            requirements=ContractRequirements.from_dict(data.get("requirements", {})),
            modifiers=list(data.get("modifiers", [])),
            special_reward=Reward.from_dict(reward_data) if reward_data else None,
            reward_tier=data.get("reward_tier", "standard"),
        )
