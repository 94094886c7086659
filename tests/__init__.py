"""
Test suite for datecalc

Contains:
- tests/unit/          : Unit tests for calendar primitives, domain models, contracts and calculators
"""
