from __future__ import annotations

import pytest

from ccpolicy.core.errors import ConfigurationError
from ccpolicy.core.observability.metrics import snapshot_named
from ccpolicy.core.rules import (
    INTEGRATION,
    UNIT,
    RecordingRuleSink,
    RuleKind,
    TargetSpec,
    TestCategory as Category,
    classify_test,
    declare_test,
)


def test_unit_test_tagged_and_forwarded(sink):
    out = declare_test("foo", UNIT, TargetSpec(name="foo", sources=["foo_test.c"]), sink)

    assert "unit" in out.tags
    assert sink.declared[0].kind == RuleKind.TEST
    assert sink.declared[0].spec == out


def test_integration_label_string_accepted(sink):
    out = declare_test("bar", "integration", None, sink)
    assert out.name == "bar"
    assert out.tags == ("integration",)


def test_invalid_category_rejected_before_forwarding(sink):
    with pytest.raises(ConfigurationError) as exc:
        declare_test("bar", "bogus", TargetSpec(name="bar"), sink)

    assert sink.declared == []
    assert exc.value.target == "bar"
    assert exc.value.value == "bogus"
    assert snapshot_named()["test_category_rejected"] == 1


@pytest.mark.parametrize("category", ["Unit", "UNIT", " unit", None, 1])
def test_category_must_match_exactly(sink, category):
    with pytest.raises(ConfigurationError):
        declare_test("t", category, None, sink)
    assert sink.declared == []


def test_existing_tags_preserved_without_duplicates(sink):
    spec = TargetSpec(name="foo", tags=["slow", "unit"])
    out = declare_test("foo", Category.UNIT, spec, sink)
    assert out.tags == ("slow", "unit")


def test_name_argument_wins_over_spec_name(sink):
    out = declare_test("renamed", INTEGRATION, TargetSpec(name="orig"), sink)
    assert out.name == "renamed"


def test_no_options_injected(sink):
    out = declare_test("foo", UNIT, TargetSpec(name="foo", options=["-O0"]), sink)
    assert out.options == ("-O0",)


def test_classify_does_not_declare():
    spec = TargetSpec(name="foo")
    out = classify_test("foo", UNIT, spec)
    assert out.tags == ("unit",)
    assert spec.tags == ()


def test_declarer_cc_test(declarer, sink):
    declarer.cc_test("foo", UNIT)
    declarer.cc_test("foo_it", INTEGRATION)
    assert sink.names() == ["foo", "foo_it"]
    assert [d.spec.tags for d in sink.declared] == [("unit",), ("integration",)]


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        declare_test("x", "smoke", None, RecordingRuleSink())
