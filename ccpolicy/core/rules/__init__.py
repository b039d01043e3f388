from .classifier import classify_test, declare_test
from .models import INTEGRATION, UNIT, DeclaredRule, RuleKind, TargetSpec, TestCategory
from .sink import NativeRuleSink, RecordingRuleSink, RuleSink
from .wrappers import (
    RuleDeclarer,
    cc_binary,
    cc_library,
    cc_test_library,
    cc_tool,
    cc_tool_library,
)

__all__ = [
    "DeclaredRule",
    "INTEGRATION",
    "NativeRuleSink",
    "RecordingRuleSink",
    "RuleDeclarer",
    "RuleKind",
    "RuleSink",
    "TargetSpec",
    "TestCategory",
    "UNIT",
    "cc_binary",
    "cc_library",
    "cc_test_library",
    "cc_tool",
    "cc_tool_library",
    "classify_test",
    "declare_test",
]
