"""
authkit test suite
==================

Test Modules
------------
- test_models.py: Tests for the Template and settings models
- test_config.py: Tests for settings resolution
- test_registry.py: Tests for README parsing and template discovery
- test_copier.py: Tests for the template tree copy
- test_scaffold.py: Tests for the interactive init flow
- test_envcheck.py: Tests for PATH tool checks
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=src/authkit

    # Run specific module
    pytest tests/test_copier.py
"""
