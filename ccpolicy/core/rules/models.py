from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ccpolicy.core.options.resolver import StrictnessMode


class RuleKind(str, Enum):
    LIBRARY = "library"
    BINARY = "binary"
    TEST = "test"


class TestCategory(str, Enum):
    UNIT = "unit"
    INTEGRATION = "integration"


# Name for a unit test
UNIT = TestCategory.UNIT

# Name for an integration test
INTEGRATION = TestCategory.INTEGRATION

# Native attribute names owned by the policy layer; `attributes` may not set them.
RESERVED_ATTRIBUTES = frozenset({"name", "srcs", "deps", "copts", "tags", "nocopts"})


class TargetSpec(BaseModel):
    """
    Declarative description of one build target.

    Only `exclusions`, `options` and `tags` are read by the policy layer.
    `sources`, `dependencies` and `attributes` are opaque and forwarded as is.
    `exclusions` lists catalog flags this target opts out of; use judiciously.

    Sequence fields are tuples and every derived spec gets its own deep copy
    of `attributes`, so a forwarded spec never shares state with the
    caller's.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    sources: Tuple[Any, ...] = ()
    dependencies: Tuple[Any, ...] = ()
    options: Tuple[str, ...] = ()
    exclusions: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("attributes")
    @classmethod
    def _no_reserved_attributes(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        clash = sorted(RESERVED_ATTRIBUTES.intersection(v))
        if clash:
            raise ValueError(f"attributes may not set policy-owned keys: {', '.join(clash)}")
        return v

    def derive(self, **update: Any) -> "TargetSpec":
        return self.model_copy(update=update, deep=True)

    def with_options(self, options) -> "TargetSpec":
        return self.derive(options=tuple(options), exclusions=())

    def with_tag(self, tag: str) -> "TargetSpec":
        if tag in self.tags:
            return self.derive()
        return self.derive(tags=(*self.tags, tag))


@dataclass(frozen=True)
class DeclaredRule:
    kind: RuleKind
    spec: TargetSpec


__all__ = [
    "DeclaredRule",
    "INTEGRATION",
    "RESERVED_ATTRIBUTES",
    "RuleKind",
    "StrictnessMode",
    "TargetSpec",
    "TestCategory",
    "UNIT",
]
