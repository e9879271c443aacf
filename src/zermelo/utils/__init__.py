"""Utility helpers."""

from zermelo.utils.timestamps import day_bounds, to_datetime

__all__ = ["day_bounds", "to_datetime"]
