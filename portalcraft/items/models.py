# portalcraft/items/models.py
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from portalcraft.config import (
    ATTRIBUTE_KIND_MATERIAL, ATTRIBUTE_KIND_PREFIX, ATTRIBUTE_KIND_SUFFIX
)
from portalcraft.utils.frozen_mapping import FrozenMapping


@dataclass(frozen=True)
class LevelRange:
    min: int
    max: int

    def contains(self, level: int) -> bool:
        return self.min <= level <= self.max

    def to_dict(self) -> Dict[str, int]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LevelRange':
        return cls(min=int(data["min"]), max=int(data["max"]))


@dataclass(frozen=True)
class PrefixAttribute:
    attr_id: str
    name: str
    cost_contribution: int
    level_range: LevelRange
    description: str = ""
    element_affinity: Optional[str] = None
    tags: Tuple[str, ...] = ()

    kind = ATTRIBUTE_KIND_PREFIX

    def to_dict(self) -> Dict[str, Any]:
        return _leveled_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PrefixAttribute':
        return cls(**_leveled_kwargs(data))


@dataclass(frozen=True)
class MaterialAttribute:
    attr_id: str
    name: str
    cost_contribution: int
    level_range: LevelRange
    description: str = ""
    element_affinity: Optional[str] = None
    tags: Tuple[str, ...] = ()

    kind = ATTRIBUTE_KIND_MATERIAL

    def to_dict(self) -> Dict[str, Any]:
        return _leveled_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MaterialAttribute':
        return cls(**_leveled_kwargs(data))


@dataclass(frozen=True)
class SuffixAttribute:
    attr_id: str
    name: str
    cost_contribution: int
    level_range: LevelRange
    effect_type: str
    effect_value: float
    description: str = ""
    element_affinity: Optional[str] = None
    tags: Tuple[str, ...] = ()

    kind = ATTRIBUTE_KIND_SUFFIX

    def to_dict(self) -> Dict[str, Any]:
        data = _leveled_to_dict(self)
        data["effect_type"] = self.effect_type
        data["effect_value"] = self.effect_value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SuffixAttribute':
        return cls(
            effect_type=data["effect_type"],
            effect_value=data.get("effect_value", 0),
            **_leveled_kwargs(data)
        )


Attribute = Union[PrefixAttribute, MaterialAttribute, SuffixAttribute]


def _leveled_to_dict(attr: Attribute) -> Dict[str, Any]:
    return {
        "kind": attr.kind,
        "id": attr.attr_id,
        "name": attr.name,
        "cost_contribution": attr.cost_contribution,
        "level_range": attr.level_range.to_dict(),
        "description": attr.description,
        "element_affinity": attr.element_affinity,
        "tags": list(attr.tags),
    }


def _leveled_kwargs(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "attr_id": data["id"],
        "name": data["name"],
        "cost_contribution": int(data["cost_contribution"]),
        "level_range": LevelRange.from_dict(data["level_range"]),
        "description": data.get("description", ""),
        "element_affinity": data.get("element_affinity"),
        "tags": tuple(data.get("tags", ())),
    }


@dataclass(frozen=True)
class GearTypeAttribute:
    """The base kind of an item. Gear types are never level gated."""
    attr_id: str
    name: str
    slot: str
    base_cost: int
    icon: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.attr_id,
            "name": self.name,
            "slot": self.slot,
            "base_cost": self.base_cost,
            "icon": self.icon,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GearTypeAttribute':
        return cls(
            attr_id=data["id"],
            name=data["name"],
            slot=data["slot"],
            base_cost=int(data["base_cost"]),
            icon=data.get("icon", ""),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class GeneratedEquipment:
    """
    A crafted item snapshot. Attributes are embedded by value so a saved item
    never needs the pools again to know its cost, rarity or level.
    """
    item_id: str
    name: str
    description: str
    gear_type: GearTypeAttribute
    total_cost: int
    rarity: str
    item_level: int
    portal_bonus: int
    prefix: Optional[PrefixAttribute] = None
    material: Optional[MaterialAttribute] = None
    suffix: Optional[SuffixAttribute] = None
    element_bonus: Mapping[str, int] = field(default_factory=FrozenMapping)

    def __post_init__(self):
        object.__setattr__(self, "element_bonus", FrozenMapping(self.element_bonus))

    @property
    def slot(self) -> str:
        return self.gear_type.slot

    @property
    def icon(self) -> str:
        return self.gear_type.icon

    def attributes(self) -> Iterator[Attribute]:
        """Yields whichever of prefix, material and suffix are present, in that order."""
        for attr in (self.prefix, self.material, self.suffix):
            if attr is not None:
                yield attr

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "description": self.description,
            "slot": self.slot,
            "icon": self.icon,
            "rarity": self.rarity,
            "total_cost": self.total_cost,
            "item_level": self.item_level,
            "portal_bonus": self.portal_bonus,
            "element_bonus": dict(self.element_bonus),
            "is_generated": True,
            "attributes": {
                "gear_type": self.gear_type.to_dict(),
                "prefix": self.prefix.to_dict() if self.prefix else None,
                "material": self.material.to_dict() if self.material else None,
                "suffix": self.suffix.to_dict() if self.suffix else None,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneratedEquipment':
        attrs = data["attributes"]
        prefix_data = attrs.get("prefix")
        material_data = attrs.get("material")
        suffix_data = attrs.get("suffix")
        return cls(
            item_id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            gear_type=GearTypeAttribute.from_dict(attrs["gear_type"]),
            total_cost=int(data["total_cost"]),
            rarity=data["rarity"],
            item_level=int(data["item_level"]),
            portal_bonus=int(data.get("portal_bonus", 0)),
            prefix=PrefixAttribute.from_dict(prefix_data) if prefix_data else None,
            material=MaterialAttribute.from_dict(material_data) if material_data else None,
            suffix=SuffixAttribute.from_dict(suffix_data) if suffix_data else None,
            element_bonus=dict(data.get("element_bonus") or {}),
        )
