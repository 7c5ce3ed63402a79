"""Pytest configuration and shared fixtures for the markdiff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from markdiff import DiffOptions

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def options() -> DiffOptions:
    """Provide default diff options.

    Returns
    -------
    DiffOptions
        Options with every default value.

    """
    return DiffOptions()


@pytest.fixture
def sample_markdown() -> str:
    """Provide a sample document touching every block kind the engine diffs.

    Returns
    -------
    str
        Markdown source with headings, lists, a table, code and a blockquote.

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

## Section 2

Here is a list:

- Item 1
- Item 2
- Item 3

```python
def hello_world():
    print("Hello, World!")
```

| Header 1 | Header 2 |
|----------|----------|
| Row 1    | Data 1   |
| Row 2    | Data 2   |

> Quoted text.
"""
