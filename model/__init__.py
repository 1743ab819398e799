"""
model/
------
Core data layer.  Public API:

    from model import Element, ElementState, wrap

Array factories live in model.generator and are imported from there,
so loading the element type never pulls in the engine.
"""

from model.element import Element, ElementState, wrap

__all__ = ["Element", "ElementState", "wrap"]
