"""
Pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.label_generation.label_row import ColumnSet, LabelRow


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def minimal_columns():
    """Single row with only the required columns filled."""
    return [["B1"], ["P1"], ["5"], ["M1"], [], [], []]


@pytest.fixture
def sample_columns():
    """Three full rows of label data."""
    return [
        ["LOT123456-A", "LOT123457-B", "ABCDEFGH"],
        ["MTU-OF-4568", "KOH-AF-9902", "MTU-FF-4569"],
        ["12", "8", "15"],
        ["OF4568-QVL", "AF9902-QVL", "FF4569-QVL"],
        ["MTU", "", "Kohler"],
        ["tw", "", "cn"],
        ["Oil filter", "Air filter", "Fuel filter"],
    ]


@pytest.fixture
def sample_column_set(sample_columns):
    """Column set built from sample_columns."""
    return ColumnSet.from_columns(sample_columns)


@pytest.fixture
def sample_row():
    """A single fully populated row."""
    return LabelRow(
        box_id="LOT123456-A",
        part_number="MTU-OF-4568",
        quantity="12",
        mpn="OF4568-QVL",
        maker="MTU",
        four_l="tw",
        description="Oil filter"
    )
