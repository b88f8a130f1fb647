"""Pytest configuration for dataknobs_schema tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_schema import (  # noqa: E402
    array,
    discriminated_union,
    lazy,
    literal,
    number,
    object_,
    string,
)


@pytest.fixture
def shape_schema():
    """Discriminated union of circle and square objects keyed on 'kind'."""
    return discriminated_union("kind", [
        object_({"kind": literal("circle"), "radius": number()}),
        object_({"kind": literal("square"), "size": number()}),
    ])


@pytest.fixture
def category_schema():
    """Self-referential category tree."""
    category = lazy(lambda: object_({
        "name": string(),
        "subcategories": array(category),
    }))
    return category


@pytest.fixture
def category_tree():
    """Three levels of categories."""
    return {
        "name": "Electronics",
        "subcategories": [
            {
                "name": "Computers",
                "subcategories": [
                    {"name": "Laptops", "subcategories": []},
                ],
            },
            {"name": "Phones", "subcategories": []},
        ],
    }
