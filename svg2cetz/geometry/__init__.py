"""Affine geometry for svg2cetz."""

from svg2cetz.geometry.transform import Point, Transform, apply, compose

__all__ = ["Point", "Transform", "apply", "compose"]
