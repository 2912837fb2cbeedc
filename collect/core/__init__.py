"""
Core operations for collect.

This package contains the sequence and mapping transforms.
"""

from collect.core.mappings import keys, values
from collect.core.sequences import apply, reject, select, unique

__all__ = ["apply", "keys", "reject", "select", "unique", "values"]
