"""pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def form_errors():
    """Nested error map as kept by a form-state store."""
    return {
        "user": {
            "name": {"message": "Required"},
            "email": {"message": "Invalid"},
        },
    }


@pytest.fixture
def dirty_fields():
    """Nested dirty-field flags."""
    return {
        "user": {
            "name": True,
            "email": True,
        },
        "settings": True,
    }


@pytest.fixture
def items_doc():
    """Document with a list of records."""
    return {
        "items": [
            {"name": "first"},
            {"name": "second"},
            {"name": "third"},
        ],
    }
