import pytest

from ccpolicy.core.observability.metrics import reset_metrics
from ccpolicy.core.rules import RecordingRuleSink, RuleDeclarer, TargetSpec


@pytest.fixture(autouse=True)
def _clean_metrics():
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture()
def sink():
    return RecordingRuleSink()


@pytest.fixture()
def declarer(sink):
    return RuleDeclarer(sink)


@pytest.fixture()
def spec():
    return TargetSpec(
        name="nav",
        sources=["src/nav.c"],
        dependencies=["//third_party:libm"],
        options=["-O2"],
        exclusions=["-Wconversion", "-Wshadow"],
        tags=["core"],
        attributes={"linkstatic": True},
    )
