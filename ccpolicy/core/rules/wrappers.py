from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from ccpolicy.core.observability.metrics import record_declaration
from ccpolicy.core.options.catalog import DEFAULT_OPTION_CATALOG
from ccpolicy.core.options.resolver import StrictnessMode, resolve_options

from .classifier import classify_test
from .models import RuleKind, TargetSpec, TestCategory
from .sink import RuleSink

log = logging.getLogger("ccpolicy.rules")

PASSTHROUGH = "passthrough"


class RuleDeclarer:
    """
    Entry points that put organisation policy onto target declarations.

    Production targets (cc_library, cc_binary) are compiled with the pedantic
    marker; tool targets (cc_tool_library, cc_tool) are not. Test libraries
    and tests get no injected options.

    Option precedence: the computed defaults are appended after the caller's
    own `options`, so they take precedence unless the engine defines
    otherwise for repeated flags.
    """

    def __init__(self, sink: RuleSink, catalog: Sequence[str] = DEFAULT_OPTION_CATALOG):
        self._sink = sink
        self._catalog = tuple(catalog)

    def _forward(self, kind: RuleKind, spec: TargetSpec, mode: str) -> TargetSpec:
        self._sink.declare(kind, spec)
        record_declaration(kind.value, mode)
        log.info(
            "%s",
            {
                "event": "rule.declared",
                "kind": kind.value,
                "mode": mode,
                "name": spec.name,
                "options": len(spec.options),
                "tags": list(spec.tags),
            },
        )
        return spec

    def _with_policy(self, kind: RuleKind, spec: TargetSpec, mode: StrictnessMode) -> TargetSpec:
        computed = resolve_options(spec.exclusions, mode, catalog=self._catalog)
        forwarded = spec.with_options([*spec.options, *computed])
        return self._forward(kind, forwarded, mode.value)

    def cc_library(self, spec: TargetSpec) -> TargetSpec:
        """Production library: default options plus the pedantic marker."""
        return self._with_policy(RuleKind.LIBRARY, spec, StrictnessMode.PEDANTIC)

    def cc_tool_library(self, spec: TargetSpec) -> TargetSpec:
        """Non-production library: default options, no pedantic marker."""
        return self._with_policy(RuleKind.LIBRARY, spec, StrictnessMode.NON_PEDANTIC)

    def cc_binary(self, spec: TargetSpec) -> TargetSpec:
        """Production binary: default options plus the pedantic marker."""
        return self._with_policy(RuleKind.BINARY, spec, StrictnessMode.PEDANTIC)

    def cc_tool(self, spec: TargetSpec) -> TargetSpec:
        """Non-production binary: default options, no pedantic marker."""
        return self._with_policy(RuleKind.BINARY, spec, StrictnessMode.NON_PEDANTIC)

    def cc_test_library(self, spec: TargetSpec) -> TargetSpec:
        """Library used only by tests; forwarded as an unchanged copy."""
        return self._forward(RuleKind.LIBRARY, spec.derive(), PASSTHROUGH)

    def cc_test(
        self,
        name: str,
        category: Union[TestCategory, str],
        spec: Optional[TargetSpec] = None,
    ) -> TargetSpec:
        tagged = classify_test(name, category, spec)
        return self._forward(RuleKind.TEST, tagged, PASSTHROUGH)


# -------------------------------------------------------------------
# Function-style entry points
# -------------------------------------------------------------------
def cc_library(spec: TargetSpec, sink: RuleSink) -> TargetSpec:
    return RuleDeclarer(sink).cc_library(spec)


def cc_tool_library(spec: TargetSpec, sink: RuleSink) -> TargetSpec:
    return RuleDeclarer(sink).cc_tool_library(spec)


def cc_binary(spec: TargetSpec, sink: RuleSink) -> TargetSpec:
    return RuleDeclarer(sink).cc_binary(spec)


def cc_tool(spec: TargetSpec, sink: RuleSink) -> TargetSpec:
    return RuleDeclarer(sink).cc_tool(spec)


def cc_test_library(spec: TargetSpec, sink: RuleSink) -> TargetSpec:
    return RuleDeclarer(sink).cc_test_library(spec)

