"""Language actions: the static table and string normalization."""

from .base import CommandTemplate, ecosystem_for_project, normalize_ecosystem, normalize_verb
from .table import build_action_table

__all__ = [
    "CommandTemplate",
    "build_action_table",
    "ecosystem_for_project",
    "normalize_ecosystem",
    "normalize_verb",
]
