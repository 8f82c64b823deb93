"""
Test suite for finance-stats

Contains:
- tests/unit/          : Unit tests for operators, market models and contracts
"""
