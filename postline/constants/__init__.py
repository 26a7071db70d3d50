"""Constants package for the Postline API."""

from .roles import Roles, parse_roles

__all__ = [
    "Roles",
    "parse_roles",
]
