"""MediFlow clinic console: appointment reminder service."""

__version__ = "0.1.0"
