"""Constraints on agent output, meaning preservation and decision contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = [
    "AgentConstraint",
    "AgentAdapter",
    "IBCSTrace",
    "MeaningFilter",
    "DecisionContract",
    "LifeCyclePhase",
]

_BLOCKED_MESSAGE = "[BLocked] : disrective language detected"
_DIRECTIVE_PHRASES = ("you should", "must")


class AgentConstraint:
    """Rules on what an agent may say to a person."""

    @staticmethod
    def allow_suggestion(content: str) -> bool:
        """Return False when ``content`` uses directive language."""
        return not any(phrase in content for phrase in _DIRECTIVE_PHRASES)


class AgentAdapter:
    """Filters agent output before it reaches a person."""

    def sanitize_output(self, raw: str) -> str:
        """Return ``raw``, or a block notice if it is directive."""
        if not AgentConstraint.allow_suggestion(raw):
            return _BLOCKED_MESSAGE
        return raw


@dataclass
class IBCSTrace:
    """A thought path together with whether it can be explained."""

    thought_path: str
    explainable: bool


class MeaningFilter:
    """Checks that a trace still carries meaning a person can follow."""

    @staticmethod
    def preserve_human_meaning(trace: IBCSTrace) -> bool:
        """True when the trace is explainable and has a thought path."""
        return trace.explainable and bool(trace.thought_path)


@dataclass
class DecisionContract:
    """What a decision intends, in which context, and whether a person must confirm it."""

    intent: str
    context: str
    requires_human_ack: bool = False


class LifeCyclePhase(Enum):
    """Points in a decision's life at which hooks can run."""

    PRE_DECISION = auto()
    POST_DECISION = auto()
    PRE_ACTION = auto()
    POST_ACTION = auto()