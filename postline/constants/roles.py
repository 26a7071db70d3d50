"""
Role constants

Roles are granted by the identity provider and travel inside the access
token; the API only checks them.
"""

from enum import Enum


class Roles(str, Enum):
    """Enumeration of privileged roles."""

    MODERATOR = "moderator"


def parse_roles(values: list[str] | None) -> list[Roles]:
    """Keep the known roles from a raw claim, dropping anything else."""
    roles = []
    for value in values or []:
        try:
            roles.append(Roles(value))
        except ValueError:
            continue
    return roles
