"""Ethical guardrails for human-centred agents: ethics runtime, misuse detection, circles and journaling."""

__version__ = "0.1.0"
__all__ = ["circles", "distributed", "ethics", "inheritance", "journaling", "security"]