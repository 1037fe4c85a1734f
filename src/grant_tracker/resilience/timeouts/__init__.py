"""Resilience – timeout policy for the retrieval boundary."""
from grant_tracker.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
