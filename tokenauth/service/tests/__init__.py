"""Tests for :mod:`tokenauth.service`."""
