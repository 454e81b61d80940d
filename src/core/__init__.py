"""
Core geometry kernel and numerical primitives.

Pure, side-effect-free building blocks with no dependency on I/O or
external systems.
"""
