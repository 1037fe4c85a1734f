"""Kernel – pure building blocks with no I/O: errors, result type, clock, codec."""
