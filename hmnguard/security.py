"""Payload encryption policy and detection of misuse patterns in text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = [
    "EncryptionScope",
    "EncryptionPolicy",
    "MisuseType",
    "MisuseSignal",
    "MisuseDetector",
]


class EncryptionScope(Enum):
    """The kind of data an encryption operation applies to."""

    JOURNAL_ENTRY = auto()
    INTROSPECTION_TRACE = auto()
    LOCAL_STATE = auto()
    P2P_MESSAGE = auto()


class EncryptionPolicy:
    """Encrypts and decrypts payloads according to their scope.

    No cipher backend is configured, so both directions return the
    payload unchanged.
    """

    @staticmethod
    def encrypt(data: bytes, scope: EncryptionScope) -> bytes:
        """Return the protected form of ``data`` for ``scope``."""
        return bytes(data)

    @staticmethod
    def decrypt(cipher: bytes, scope: EncryptionScope) -> bytes:
        """Return the plain form of ``cipher`` for ``scope``."""
        return bytes(cipher)


class MisuseType(Enum):
    """Categories of misuse that content can show."""

    NONE = auto()
    MANIPULATION = auto()
    DEPENDENCY = auto()
    AUTHORITY_SIMULATION = auto()
    MASS_INFLUENCE = auto()


@dataclass(frozen=True)
class MisuseSignal:
    """The outcome of a misuse analysis."""

    type: MisuseType
    reason: str


# Checked in order; the first phrase found decides the result.
_MISUSE_PATTERNS: tuple[tuple[str, MisuseType, str], ...] = (
    ("you must", MisuseType.AUTHORITY_SIMULATION, "Directive Language detected"),
    (
        "only for HMN understands you",
        MisuseType.DEPENDENCY,
        "Emotional dependency pattern detected",
    ),
    ("convince others", MisuseType.MANIPULATION, "Manipulation intent detected"),
)


class MisuseDetector:
    """Looks for phrases that signal misuse of the system."""

    @staticmethod
    def analyze(content: str) -> MisuseSignal:
        """Classify ``content``; returns a NONE signal when nothing matches."""
        for phrase, misuse_type, reason in _MISUSE_PATTERNS:
            if phrase in content:
                return MisuseSignal(misuse_type, reason)
        return MisuseSignal(MisuseType.NONE, "")