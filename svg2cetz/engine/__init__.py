"""Traversal engine for svg2cetz.

This subpackage provides:
- The context stack inherited through element nesting
- Per-element interpreters producing output primitives
- The event-driven traversal engine tying them together
"""

from svg2cetz.engine.context import ContextFrame, ContextStack
from svg2cetz.engine.traversal import TraversalEngine, convert_events

__all__ = ["ContextFrame", "ContextStack", "TraversalEngine", "convert_events"]
