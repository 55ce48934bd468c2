"""Shared fixtures for calculator tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from model import SlideType, ShoeRackInput, compute_shoe_rack


@pytest.fixture
def shoe_rack_input() -> ShoeRackInput:
    """Two hidden-slide trays in a 50 cm opening."""
    return ShoeRackInput(
        width="50",
        side_height="6",
        opening_height="40",
        depth="35",
        slide_size=35,
        slide_type=SlideType.HIDDEN,
        count=2,
    )


@pytest.fixture
def shoe_rack_cut_list(shoe_rack_input):
    return compute_shoe_rack(shoe_rack_input)
