"""Tests for :mod:`tokenauth.credentials`."""
