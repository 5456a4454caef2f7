"""Group-level adaptation, node lifecycle, resource fairness and edge sync policy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = [
    "AdaptiveSignal",
    "GroupState",
    "SelfHeal",
    "Node",
    "ResourceAccounting",
    "fair_use",
    "EdgeSync",
]

_PAUSE_PRESSURE = 0.6
_CPU_LIMIT = 0.0
_STORAGE_LIMIT = 0.9


class AdaptiveSignal(Enum):
    """The condition a group is observed to be in."""

    STABLE = auto()
    OVERLOAD = auto()
    CONFLICT = auto()
    MEANING_DILUTION = auto()


@dataclass
class GroupState:
    """Social signals measured for a group."""

    pressure_level: float
    cohesion_level: float
    manipulation_risk: bool


class SelfHeal:
    """Decides when a group should stop and recover."""

    def should_pause(self, state: GroupState) -> bool:
        """Pause when pressure is high and manipulation is a risk."""
        return state.pressure_level > _PAUSE_PRESSURE and state.manipulation_risk


class Node:
    """A node in the shared infrastructure network."""

    def __init__(self) -> None:
        self.running = False

    def start(self) -> bool:
        """Start the node; returns whether it is running."""
        self.running = True
        return True

    def stop(self) -> None:
        """Stop the node."""
        self.running = False


@dataclass
class ResourceAccounting:
    """Share of CPU and storage a participant is using."""

    cpu_usage: float
    storage_usage: float


def fair_use(acc: ResourceAccounting) -> bool:
    """Return whether the recorded usage stays within the fair-use limits."""
    return acc.cpu_usage < _CPU_LIMIT and acc.storage_usage < _STORAGE_LIMIT


class EdgeSync:
    """Policy for synchronising local edge state with peers."""

    def sync_allowed(self) -> bool:
        """Automatic synchronisation is off by default."""
        return False