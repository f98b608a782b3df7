"""Tests for :mod:`tokenauth.auth`."""
