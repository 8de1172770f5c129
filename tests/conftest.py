"""Shared fixtures for layout tests.

The stub measure charges 7px per character so every geometry assertion
can be worked out by hand.
"""

import pytest

from jsonnode import LayoutConfig, build_layout

CHAR_WIDTH = 7


def stub_measure(text, font):
    return len(text) * CHAR_WIDTH


@pytest.fixture
def measure():
    return stub_measure


@pytest.fixture
def layout_of():
    def _layout_of(value, **overrides):
        return build_layout(value, LayoutConfig(**overrides), stub_measure)

    return _layout_of
