from __future__ import annotations

import logging
from typing import Any, Optional

from ccpolicy.core.errors import invalid_category
from ccpolicy.core.observability.metrics import record_category_rejection

from .models import TargetSpec, TestCategory
from .sink import RuleSink

log = logging.getLogger("ccpolicy.rules")


def parse_category(name: str, category: Any) -> TestCategory:
    """
    Accepts a TestCategory or its exact label ("unit" / "integration").
    Anything else is a ConfigurationError.
    """
    if isinstance(category, TestCategory):
        return category
    if isinstance(category, str):
        for c in TestCategory:
            if category == c.value:
                return c

    record_category_rejection()
    log.warning("%s", {"event": "test.category_rejected", "name": name, "category": repr(category)})
    raise invalid_category(name, category, [c.value for c in TestCategory])


def classify_test(name: str, category: Any, spec: Optional[TargetSpec] = None) -> TargetSpec:
    """Validated, tagged copy of `spec` named `name`; nothing is declared."""
    parsed = parse_category(name, category)
    base = spec if spec is not None else TargetSpec(name=name)
    if base.name != name:
        base = base.derive(name=name)
    return base.with_tag(parsed.value)


def declare_test(
    name: str,
    category: Any,
    spec: Optional[TargetSpec],
    sink: RuleSink,
) -> TargetSpec:
    """
    Declare a test tagged with its category.

    The tag lets the engine run the categories separately, e.g.
    `bazel test --test_tag_filters=unit //...`.
    """
    from .wrappers import RuleDeclarer

    return RuleDeclarer(sink).cc_test(name, category, spec)
