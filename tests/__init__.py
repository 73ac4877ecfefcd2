"""
Test suite for the supply & demand diagram core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
