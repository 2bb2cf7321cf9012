"""
Test suite for celestis-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
