"""Test suite for crm-core.

Test structure follows the test pyramid:
- unit/: Unit tests - one layer at a time, in-memory repositories or mocks
- integration/: Requests through the Dispatcher, every layer wired together
"""
