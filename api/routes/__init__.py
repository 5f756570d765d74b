"""API routes package"""

from . import clients, cooks, dishes, health

__all__ = ["clients", "cooks", "dishes", "health"]
