"""Place Mapper Test Suite.

This package contains unit tests for the Place Mapper project.

Test Structure:
- unit/: Unit tests for individual functions and classes
"""

__version__ = "0.1.0"
