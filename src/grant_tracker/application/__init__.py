"""Application layer – use cases orchestrating kernel and adapters."""
