"""
Test suite for the L2 order client

Contains:
- tests/unit/          : Unit tests for individual modules
"""
