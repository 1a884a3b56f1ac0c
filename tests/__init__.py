"""
Test Suite for the YNAB Clear Assistant

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end CLI tests against an on-disk YNAB cache
- performance/: Search timing with realistic ledger sizes

Test Data:
All test data uses synthetic financial information.
"""
