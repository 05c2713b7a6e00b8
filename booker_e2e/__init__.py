"""End-to-end and API test suite for the booking service and login UI.

The package holds the reusable pieces; the specs themselves live under
``tests/`` and ``features/``.
"""
