"""
Core numeric primitives and small domain utilities.

This module contains the foundational building blocks the geometry types
depend on: finiteness checks, the fast inverse square root, unit
conversions and the unordered pair.
"""
