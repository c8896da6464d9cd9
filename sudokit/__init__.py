# -*- coding: utf-8 -*-
"""Sudoku puzzle generation, solving and play assistance."""

__version__ = "0.1.0"
