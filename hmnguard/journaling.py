"""Journal entries, introspection records, bias tracking and value conflicts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, auto
from itertools import combinations
from typing import Optional

__all__ = [
    "JournalEntry",
    "BiasTrace",
    "ContextSnapshot",
    "ActionSummary",
    "ReasoningSummary",
    "ConflictTag",
    "ValueTag",
    "IntrospectionEntry",
    "IntrospectionEngine",
    "MoralWeight",
    "PressureType",
    "PressureSignal",
    "detect_conflicts",
]

_BIAS_NORMALIZATION = 100.0
_HIGH_TENSION = 0.7
_ATTENTION_THRESHOLD = 3
_CONFLICT_TENSION_STEP = 0.1
_MAX_TENSION = 1.0

# Ordered pairs of values that pull against each other; a heuristic, not a rule.
_CONFLICT_PAIRS = frozenset({("efficiency", "dignity"), ("Safety", "Autonomy")})


@dataclass
class JournalEntry:
    """A personal journal note with its time and emotional weight."""

    content: str
    timestamp: int
    emotional_weight: float


class BiasTrace:
    """Counts how often each kind of bias has been observed."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def record(self, bias_type: str) -> None:
        """Note one occurrence of ``bias_type``."""
        self._counts[bias_type] += 1

    def bias_intensity(self, bias_type: str) -> float:
        """Normalised frequency of ``bias_type``; 0.0 if never seen."""
        return self._counts.get(bias_type, 0) / _BIAS_NORMALIZATION


@dataclass
class ContextSnapshot:
    """Where and in what situation something happened."""

    environment: str = ""
    situation: str = ""


@dataclass
class ActionSummary:
    """What was done and how it turned out."""

    description: str = ""
    outcome: str = ""


@dataclass
class ReasoningSummary:
    """Abstracted, post-processed reasoning."""

    considerations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ConflictTag:
    """Two values found to be in tension."""

    a: str
    b: str


@dataclass(frozen=True)
class ValueTag:
    """A value at stake, such as autonomy or safety."""

    name: str


@dataclass
class IntrospectionEntry:
    """A reflective record of an action and the values it touched."""

    time: int = 0
    subject: str = ""
    context: ContextSnapshot = field(default_factory=ContextSnapshot)
    action: ActionSummary = field(default_factory=ActionSummary)
    reasoning: ReasoningSummary = field(default_factory=ReasoningSummary)
    values_involved: list[ValueTag] = field(default_factory=list)
    conflicts_detected: list[ConflictTag] = field(default_factory=list)
    moral_tension_score: float = 0.0
    external_pressure_score: float = 0.0
    human_reference: Optional[str] = None


class IntrospectionEngine:
    """Collects introspection entries and flags when a person should look."""

    def __init__(self) -> None:
        self._entries: list[IntrospectionEntry] = []

    def submit(self, entry: IntrospectionEntry) -> None:
        """Add ``entry`` to the record."""
        self._entries.append(entry)

    def requires_human_attention(self) -> bool:
        """True once three or more entries show high moral or external tension."""
        high_tension = sum(
            1
            for e in self._entries
            if e.moral_tension_score > _HIGH_TENSION
            or e.external_pressure_score > _HIGH_TENSION
        )
        return high_tension >= _ATTENTION_THRESHOLD


@dataclass
class MoralWeight:
    """A value's weight with cultural and temporal modifiers."""

    base: float
    cultural_modifier: float
    temporal_modifier: float

    def effective(self) -> float:
        """The weight after both modifiers are applied."""
        return self.base * self.cultural_modifier * self.temporal_modifier


class PressureType(Enum):
    """The kind of pressure acting on a decision."""

    TIME = auto()
    AUTHORITY = auto()
    MAJORITY = auto()
    INCENTIVE = auto()
    SURVIVAL = auto()
    UNKNOWN = auto()


@dataclass
class PressureSignal:
    """A pressure of some type, its intensity and where it came from."""

    type: PressureType
    intensity: float
    source: str


def detect_conflicts(entry: IntrospectionEntry) -> None:
    """Tag conflicting value pairs in ``entry`` and raise its moral tension.

    Each conflicting pair adds 0.1 to the tension, which is capped at 1.0.
    """
    for first, second in combinations(entry.values_involved, 2):
        if (first.name, second.name) in _CONFLICT_PAIRS:
            entry.conflicts_detected.append(ConflictTag(first.name, second.name))
            entry.moral_tension_score += _CONFLICT_TENSION_STEP
    entry.moral_tension_score = min(entry.moral_tension_score, _MAX_TENSION)