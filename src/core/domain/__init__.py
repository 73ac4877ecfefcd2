"""
Domain models and value objects.

Contains the curve entities: LinearFunction, Point, Curve.
"""

from src.core.domain.curve import Curve, LinearFunction, Point

__all__ = [
    "Curve",
    "LinearFunction",
    "Point",
]
