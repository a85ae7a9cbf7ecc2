"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of decimal-strings:
literal validation, magnitude arithmetic and the signed operations on top.
"""
