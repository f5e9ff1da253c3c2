"""
Test suite for vec2d

Contains:
- tests/unit/          : Unit tests for Vector2, RectBounds and numerical primitives
"""
