"""
Test suite for fixed-vector

Contains:
- tests/unit/          : Unit tests for individual modules
"""
