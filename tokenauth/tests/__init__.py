"""Tests for :mod:`tokenauth`."""
