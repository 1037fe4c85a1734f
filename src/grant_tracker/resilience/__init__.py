"""Resilience – guards applied at I/O boundaries."""
