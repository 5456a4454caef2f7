import pytest

from hmnguard.circles import (
    Circle,
    CircleAgent,
    EarthContext,
    TrustScore,
    get_current_context,
)


def test_default_trust_is_not_sufficient():
    assert TrustScore().sufficient() is False


@pytest.mark.parametrize("value, expected", [(0.6, True), (1.0, True), (0.59, False), (0.0, False)])
def test_trust_threshold(value, expected):
    assert TrustScore(value).sufficient() is expected


def test_request_join_is_never_granted():
    circle = Circle("circle-a")
    assert circle.request_join("peer-1") is False
    assert circle.circle_id == "circle-a"


def test_unknown_peer_cannot_message():
    circle = Circle("circle-a")
    assert circle.allow_message("stranger") is False


def test_joined_peer_with_default_trust_cannot_message():
    circle = Circle("circle-a")
    circle.request_join("peer-1")
    assert circle.allow_message("peer-1") is False


def test_leave_then_message_is_refused():
    circle = Circle("circle-a")
    circle.request_join("peer-1")
    circle.leave("peer-1")
    circle.leave("never-joined")
    assert circle.allow_message("peer-1") is False


def test_circle_agent_counts_messages():
    agent = CircleAgent("circle-a")
    for text in ("hello", "again", "more"):
        agent.observe_message(text)
    assert agent.message_count == 3
    assert agent.circle_id == "circle-a"


def test_circle_agent_pauses_after_thirty_messages():
    agent = CircleAgent("circle-a")
    for _ in range(30):
        agent.observe_message("m")
    assert agent.should_pause() is False
    agent.observe_message("m")
    assert agent.should_pause() is True


def test_current_context_values():
    context = get_current_context()
    assert context == EarthContext(climate_stress=0.6, social_tension=0.7)


def test_current_context_in_range():
    context = get_current_context()
    assert 0.0 <= context.climate_stress <= 1.0
    assert 0.0 <= context.social_tension <= 1.0