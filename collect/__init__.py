"""
collect: small transforms over sequences and mappings

Pure helpers that build new lists from caller-supplied sequences and mappings:
apply a function to every element, keep or drop elements by predicate,
deduplicate while preserving order, and materialize the keys or values of a
mapping. Inputs are never modified.
"""

from collect.core.mappings import keys, values
from collect.core.sequences import apply, reject, select, unique

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "apply",
    "keys",
    "reject",
    "select",
    "unique",
    "values",
]
