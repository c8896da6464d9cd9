# -*- coding: utf-8 -*-
"""Test cases for the constraint checker."""
import unittest

from tests.tools import CANONICAL_SOLUTION, classic_puzzle
from sudokit.core.checker import (
    box_index,
    box_origin,
    box_values,
    col_values,
    is_valid_placement,
    peers,
    row_values,
)


class TestPeerValues(unittest.TestCase):
    def test_row_col_box_values_include_zeros(self):
        grid = classic_puzzle()
        self.assertEqual(row_values(grid, 0, 5), [5, 3, 0, 0, 7, 0, 0, 0, 0])
        self.assertEqual(col_values(grid, 4, 0), [5, 6, 0, 8, 4, 7, 0, 0, 0])
        self.assertEqual(box_values(grid, 1, 1), [5, 3, 0, 6, 0, 0, 0, 9, 8])
        self.assertEqual(box_values(grid, 8, 8), [2, 8, 0, 0, 0, 5, 0, 7, 9])

    def test_box_geometry(self):
        self.assertEqual(box_origin(4, 7), (3, 6))
        self.assertEqual(box_index(0, 0), 0)
        self.assertEqual(box_index(4, 4), 4)
        self.assertEqual(box_index(8, 2), 6)

    def test_peers(self):
        cell_peers = peers(4, 4)
        self.assertEqual(len(cell_peers), 20)
        self.assertEqual(len(set(cell_peers)), 20)
        self.assertNotIn((4, 4), cell_peers)
        self.assertIn((4, 0), cell_peers)
        self.assertIn((0, 4), cell_peers)
        self.assertIn((3, 5), cell_peers)
        self.assertNotIn((0, 0), cell_peers)


class TestIsValidPlacement(unittest.TestCase):
    def test_zero_is_always_valid(self):
        grid = classic_puzzle()
        self.assertTrue(is_valid_placement(grid, 0, 2, 0))
        self.assertTrue(is_valid_placement(grid, 0, 0, 0))

    def test_row_column_and_box_violations(self):
        grid = classic_puzzle()
        self.assertFalse(is_valid_placement(grid, 0, 2, 3))  # row
        self.assertFalse(is_valid_placement(grid, 2, 0, 8))  # column
        self.assertFalse(is_valid_placement(grid, 1, 1, 9))  # box
        self.assertTrue(is_valid_placement(grid, 0, 2, 4))

    def test_ignores_the_cell_itself(self):
        # every filled cell of a solved grid is a valid placement of its own value
        for r in range(9):
            for c in range(9):
                self.assertTrue(is_valid_placement(CANONICAL_SOLUTION, r, c, CANONICAL_SOLUTION[r][c]))

    def test_duplicate_in_row_is_invalid_for_both_cells(self):
        grid = classic_puzzle()
        grid[0][2] = 5
        self.assertFalse(is_valid_placement(grid, 0, 0, 5))
        self.assertFalse(is_valid_placement(grid, 0, 2, 5))

    def test_does_not_mutate(self):
        grid = classic_puzzle()
        before = [row[:] for row in grid]
        is_valid_placement(grid, 0, 2, 4)
        row_values(grid, 0, 0)
        box_values(grid, 0, 0)
        self.assertEqual(grid, before)
