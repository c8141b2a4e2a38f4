"""Tests for node layouts."""

import math

import pytest

from chromagraph.graph.layout import circular_layout, hub_and_rim_layout, two_row_layout


class TestCircularLayout:
    def test_first_node_on_positive_x_axis(self):
        x, y = circular_layout(4)[0]

        assert x == pytest.approx(450.0)
        assert y == pytest.approx(250.0)

    def test_nodes_on_circle(self):
        for x, y in circular_layout(7, radius=100.0):
            assert math.hypot(x - 150.0, y - 150.0) == pytest.approx(100.0)


class TestTwoRowLayout:
    def test_rows(self):
        positions = two_row_layout(5, part_size=3)

        assert positions == [
            (100.0, 100.0),
            (100.0, 170.0),
            (100.0, 240.0),
            (300.0, 100.0),
            (300.0, 170.0),
        ]


class TestHubAndRimLayout:
    def test_hub_then_rim(self):
        positions = hub_and_rim_layout(5)

        assert positions[0] == (250.0, 250.0)
        assert len(positions) == 5
        for x, y in positions[1:]:
            assert math.hypot(x - 250.0, y - 250.0) == pytest.approx(200.0)
