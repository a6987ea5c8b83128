"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalogue,
    make_engine,
    write_catalogue,
    write_raw_catalogue,
)

__all__ = [
    "make_catalogue",
    "make_engine",
    "write_catalogue",
    "write_raw_catalogue",
]
