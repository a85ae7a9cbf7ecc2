"""
Test suite for decimal-strings

Contains:
- tests/unit/          : Unit tests for individual modules
"""
