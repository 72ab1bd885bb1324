"""Shared pytest configuration for urlshort examples.

``example_app`` runs the ``app.py`` next to the requesting test and
returns its module-level ``app``. Each test gets a fresh run.
"""

import runpy
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Load a fresh App from the sibling app.py next to the test file."""
    app_path = Path(request.path).parent / "app.py"
    namespace = runpy.run_path(str(app_path), run_name=f"example_{app_path.parent.name}")
    return namespace["app"]
