"""
Crop interaction session.

This package keeps the state of one crop editing session and implements the
Strategy pattern for the interactions that edit it.
"""

from .model import CropSessionModel
from .strategies import InteractionStrategy, PanStrategy, ResizeStrategy, RotateStrategy

__all__ = [
    "CropSessionModel",
    "InteractionStrategy",
    "PanStrategy",
    "ResizeStrategy",
    "RotateStrategy",
]
