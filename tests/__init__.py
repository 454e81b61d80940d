"""
Test suite for geom-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
