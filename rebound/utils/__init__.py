"""Utility functions."""

from .config import load_config, get_default_config, merge_config
from .datetime_utils import calendar_days_between, parse_date, round_half_up, to_date

__all__ = [
    'load_config',
    'get_default_config',
    'merge_config',
    'calendar_days_between',
    'parse_date',
    'round_half_up',
    'to_date',
]
