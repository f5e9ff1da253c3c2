"""
Core value types and numerical primitives.

This module contains the Vector2 value type and the float helpers it is
built on. It has no I/O and no dependency on external systems.
"""
