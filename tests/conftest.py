"""Shared pytest fixtures for corner-grocer tests."""

import pytest

from corner_grocer.frequency import FrequencyTable

SAMPLE_LINES = [
    "Cranberries",
    "Apples",
    "  apples ",
    "",
    "Crackers",
    "APPLES",
    "cranberries",
    "Zucchini",
    "   ",
    "Peas",
]


@pytest.fixture
def input_file(tmp_path):
    """A small purchase log with mixed case and blank lines."""
    path = tmp_path / "input.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n")
    return path


@pytest.fixture
def table(input_file):
    """A FrequencyTable loaded from input_file."""
    ft = FrequencyTable()
    ft.load_file(input_file)
    return ft
