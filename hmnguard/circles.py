"""Trust circles between peers, circle agents and global context signals."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "TrustScore",
    "Circle",
    "CircleAgent",
    "EarthContext",
    "get_current_context",
]

_TRUST_THRESHOLD = 0.6
_PAUSE_AFTER_MESSAGES = 30


@dataclass
class TrustScore:
    """Trust held for a peer inside one circle, from 0.0 to 1.0.

    Trust is not a public reputation; it exists only within its circle.
    """

    value: float = 0.5

    def sufficient(self) -> bool:
        """Whether the trust is high enough to accept messages."""
        return self.value >= _TRUST_THRESHOLD


class Circle:
    """A closed group of peers that only talks to trusted members."""

    def __init__(self, circle_id: str) -> None:
        self.circle_id = circle_id
        self._members: list[str] = []
        self._trust: dict[str, TrustScore] = {}

    def request_join(self, peer_id: str) -> bool:
        """Register a join request; admission needs separate review, so never granted here."""
        self._trust[peer_id] = TrustScore()
        return False

    def leave(self, peer_id: str) -> None:
        """Forget the trust held for ``peer_id``."""
        self._trust.pop(peer_id, None)

    def allow_message(self, peer_id: str) -> bool:
        """Whether messages from ``peer_id`` are accepted."""
        score = self._trust.get(peer_id)
        return score is not None and score.sufficient()


class CircleAgent:
    """Watches traffic in a circle and asks it to slow down when busy."""

    def __init__(self, circle_id: str) -> None:
        self.circle_id = circle_id
        self.message_count = 0

    def observe_message(self, message: str) -> None:
        """Count one message seen in the circle."""
        self.message_count += 1

    def should_pause(self) -> bool:
        """Too many interactions mean the circle should slow down."""
        return self.message_count > _PAUSE_AFTER_MESSAGES


@dataclass(frozen=True)
class EarthContext:
    """Global stress signals, each from 0.0 to 1.0."""

    climate_stress: float
    social_tension: float


def get_current_context() -> EarthContext:
    """Return the current global context (fixed values for now)."""
    return EarthContext(climate_stress=0.6, social_tension=0.7)