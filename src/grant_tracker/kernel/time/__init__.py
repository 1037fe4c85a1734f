"""Kernel time – Clock port + implementations."""
from grant_tracker.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
