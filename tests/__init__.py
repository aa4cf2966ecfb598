"""
Test suite for BigNatural

Contains:
- tests/unit/          : Unit tests for individual modules
"""
