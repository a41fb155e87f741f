"""
Test suite for secure_random

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/conftest.py    : Scripted entropy source shared by the unit tests
"""
