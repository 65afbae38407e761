"""
Test suite for jprim

Contains:
- tests/unit/          : Unit tests for individual modules
"""
