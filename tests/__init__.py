"""
Test suite for the tangent calculator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
