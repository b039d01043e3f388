from __future__ import annotations

from typing import Any, Dict, List, Protocol

from ccpolicy.core.errors import ConfigurationError

from .models import DeclaredRule, RuleKind, TargetSpec


class RuleSink(Protocol):
    """Anything that accepts a finished target declaration."""

    def declare(self, kind: RuleKind, spec: TargetSpec) -> None:
        ...


class RecordingRuleSink:
    """Keeps its own copy of each forwarded declaration, in call order."""

    def __init__(self) -> None:
        self._declared: List[DeclaredRule] = []

    def declare(self, kind: RuleKind, spec: TargetSpec) -> None:
        self._declared.append(DeclaredRule(kind=kind, spec=spec.derive()))

    @property
    def declared(self) -> List[DeclaredRule]:
        return list(self._declared)

    def names(self) -> List[str]:
        return [d.spec.name for d in self._declared]

    def clear(self) -> None:
        self._declared.clear()


def native_attrs(spec: TargetSpec) -> Dict[str, Any]:
    """
    Map a TargetSpec onto the attribute names of the native cc_* rules.

    Engine-specific `attributes` go in first; the policy-owned keys are
    written after them and always win.
    """
    attrs: Dict[str, Any] = dict(spec.attributes)
    attrs.pop("nocopts", None)
    attrs["name"] = spec.name
    for key, value in (
        ("srcs", spec.sources),
        ("deps", spec.dependencies),
        ("copts", spec.options),
        ("tags", spec.tags),
    ):
        if value:
            attrs[key] = list(value)
        else:
            attrs.pop(key, None)
    return attrs


class NativeRuleSink:
    """
    Forwards declarations to an engine object exposing cc_library,
    cc_binary and cc_test (e.g. a build file's `native` module).
    """

    def __init__(self, native: Any):
        self._native = native

    def declare(self, kind: RuleKind, spec: TargetSpec) -> None:
        rule_name = f"cc_{kind.value}"
        rule = getattr(self._native, rule_name, None)
        if not callable(rule):
            raise ConfigurationError(
                f"Build engine does not provide the {rule_name} rule",
                target=spec.name,
                value=rule_name,
            )
        rule(**native_attrs(spec))
