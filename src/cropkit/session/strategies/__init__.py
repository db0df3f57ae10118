"""
Interaction strategies for crop mode.

This package implements the Strategy pattern for different crop interactions
(pan, resize, rotate), allowing clean separation of logic.
"""

from .abstract import InteractionStrategy
from .pan_strategy import PanStrategy
from .resize_strategy import ResizeStrategy
from .rotate_strategy import RotateStrategy

__all__ = [
    "InteractionStrategy",
    "PanStrategy",
    "ResizeStrategy",
    "RotateStrategy",
]
