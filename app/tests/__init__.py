"""Test suite for relocalization."""
