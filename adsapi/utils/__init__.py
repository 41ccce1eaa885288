"""Small helpers used across the library."""

from .naming import camel_case, fix_case_up, safe_identifier, snake_case

__all__ = [
    "camel_case",
    "fix_case_up",
    "safe_identifier",
    "snake_case",
]
