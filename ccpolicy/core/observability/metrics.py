from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

# Named counters (in-process, test friendly)
_NAMED = Counter()

RULES_DECLARED_TOTAL = PromCounter(
    "ccpolicy_rules_declared_total",
    "Target declarations forwarded to the rule sink",
    ["kind", "mode"],
)

TEST_CATEGORY_REJECTIONS_TOTAL = PromCounter(
    "ccpolicy_test_category_rejections_total",
    "Test declarations rejected for an invalid category",
)


def reset_metrics() -> None:
    """
    Test helper: clears the named counters.
    Prometheus collectors are process-wide and are left alone.
    """
    _NAMED.clear()


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    _NAMED[name] += int(value)


def record_declaration(kind: str, mode: str) -> None:
    RULES_DECLARED_TOTAL.labels(kind=kind, mode=mode).inc()
    inc_named(f"declared_{kind}_{mode}")


def record_category_rejection() -> None:
    TEST_CATEGORY_REJECTIONS_TOTAL.inc()
    inc_named("test_category_rejected")


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
