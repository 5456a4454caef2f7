import pytest

from hmnguard.inheritance import (
    AgentAdapter,
    AgentConstraint,
    DecisionContract,
    IBCSTrace,
    LifeCyclePhase,
    MeaningFilter,
)


@pytest.mark.parametrize(
    "content",
    ["you should rest", "this must happen", "mustard is yellow", "You must go"],
)
def test_directive_content_disallowed(content):
    assert AgentConstraint.allow_suggestion(content) is False


@pytest.mark.parametrize(
    "content", ["perhaps a walk could help", "", "You Should consider it"]
)
def test_plain_content_allowed(content):
    assert AgentConstraint.allow_suggestion(content) is True


def test_sanitize_blocks_directive():
    assert (
        AgentAdapter().sanitize_output("you should do this")
        == "[BLocked] : disrective language detected"
    )


def test_sanitize_passes_plain_text_unchanged():
    text = "one option is to take a break"
    assert AgentAdapter().sanitize_output(text) == text


def test_sanitize_is_idempotent():
    adapter = AgentAdapter()
    once = adapter.sanitize_output("you must listen")
    assert adapter.sanitize_output(once) == once


def test_meaning_preserved_when_explainable_with_path():
    trace = IBCSTrace(thought_path="observe -> weigh -> suggest", explainable=True)
    assert MeaningFilter.preserve_human_meaning(trace) is True


def test_meaning_lost_without_path():
    assert MeaningFilter.preserve_human_meaning(IBCSTrace("", True)) is False


def test_meaning_lost_when_not_explainable():
    assert MeaningFilter.preserve_human_meaning(IBCSTrace("a -> b", False)) is False


def test_decision_contract_defaults_to_no_ack():
    contract = DecisionContract(intent="schedule", context="calendar")
    assert contract.requires_human_ack is False
    assert contract == DecisionContract("schedule", "calendar", False)


def test_decision_contract_with_ack():
    contract = DecisionContract("delete", "files", requires_human_ack=True)
    assert contract.requires_human_ack is True
    assert contract != DecisionContract("delete", "files")


def test_lifecycle_phase_round_trips_by_value_in_order():
    phases = [LifeCyclePhase(phase.value) for phase in LifeCyclePhase]
    assert [p.name for p in phases] == [
        "PRE_DECISION",
        "POST_DECISION",
        "PRE_ACTION",
        "POST_ACTION",
    ]