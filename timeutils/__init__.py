"""Monotonic durations, sleeping helpers and a step-driven countdown timer."""

__version__ = "1.0.0"
__all__ = ["duration", "timer"]