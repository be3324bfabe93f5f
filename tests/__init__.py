"""
Test suite for FactorialForge

Contains:
- tests/unit/          : Unit tests for individual modules
"""
