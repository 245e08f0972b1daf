"""Discrete-event simulation of parcels routed and transported between warehouses."""

__version__ = "0.1.0"
__all__ = ["__version__"]