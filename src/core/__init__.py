"""
Core domain models and mathematical primitives.

This module contains the foundational building blocks of the tangent
calculation pipeline, independent of any presentation layer.
"""
