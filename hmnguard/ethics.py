"""Decision traces and the ethical gate that evaluates them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Callable, Optional

__all__ = [
    "ReasoningStep",
    "DecisionTrace",
    "BlockLevel",
    "BlockResult",
    "BlockPolicy",
    "EthicalGate",
    "IntrospectionHook",
]

_EPOCH = datetime.fromtimestamp(0, timezone.utc)


@dataclass
class ReasoningStep:
    """One step of reasoning and the module that produced it."""

    description: str
    source_module: str


@dataclass
class DecisionTrace:
    """The record of how a decision was reached."""

    decision_id: str = ""
    intent: str = ""
    steps: list[ReasoningStep] = field(default_factory=list)
    timestamp: datetime = _EPOCH

    def explainable(self) -> bool:
        """A trace is explainable when it has both an intent and steps."""
        return bool(self.steps) and bool(self.intent)


class BlockLevel(Enum):
    """How strongly a decision is held back."""

    NONE = auto()
    SLOW_DOWN = auto()
    REQUIRE_REFLECTION = auto()
    HARD_BLOCK = auto()


@dataclass(frozen=True)
class BlockResult:
    """The verdict on a decision trace."""

    level: BlockLevel
    reason: str


Detector = Callable[[DecisionTrace], bool]


def _never(trace: DecisionTrace) -> bool:
    return False


class BlockPolicy:
    """Rules that decide whether a decision may go ahead.

    The manipulation, authority-simulation and value-drift detectors are
    supplied by the caller; any left out never fires.
    """

    def __init__(
        self,
        manipulation: Optional[Detector] = None,
        authority_simulation: Optional[Detector] = None,
        value_drift: Optional[Detector] = None,
    ) -> None:
        self._manipulation = manipulation or _never
        self._authority_simulation = authority_simulation or _never
        self._value_drift = value_drift or _never

    def evaluate(self, trace: DecisionTrace) -> BlockResult:
        """Return the first rule's verdict that applies to ``trace``."""
        if not trace.explainable():
            return BlockResult(
                BlockLevel.REQUIRE_REFLECTION, "Decision is not explainable to human"
            )
        if self._manipulation(trace):
            return BlockResult(
                BlockLevel.HARD_BLOCK, "Potential manipulation of human agency"
            )
        if self._authority_simulation(trace):
            return BlockResult(BlockLevel.HARD_BLOCK, "Authority simulation detected")
        if self._value_drift(trace):
            return BlockResult(BlockLevel.SLOW_DOWN, "Value drift risk detected")
        return BlockResult(BlockLevel.NONE, "")


class EthicalGate:
    """Passes every decision trace through a block policy."""

    def __init__(self, policy: Optional[BlockPolicy] = None) -> None:
        self.policy = policy if policy is not None else BlockPolicy()

    def inspect(self, trace: DecisionTrace) -> BlockResult:
        """Evaluate ``trace`` with the gate's policy."""
        return self.policy.evaluate(trace)


class IntrospectionHook:
    """Opens a trace before a decision and records its outcome after."""

    def pre_decision(self, intent: str) -> DecisionTrace:
        """Start a trace for ``intent``, stamped with the current time."""
        return DecisionTrace(intent=intent, timestamp=datetime.now(timezone.utc))

    def post_decision(self, trace: DecisionTrace, outcome: str) -> None:
        """Append the final outcome to ``trace`` as a reasoning step."""
        trace.steps.append(
            ReasoningStep("Final outcome :" + outcome, "HMN :: postDecision")
        )