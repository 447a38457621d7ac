"""
Test suite для cantor

Contains:
- tests/unit/          : Unit и property-based тесты модулей
"""
