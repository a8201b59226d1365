"""Utilities for cacheaside."""

from cacheaside.utils.hashing import hash_value, normalize_signature
from cacheaside.utils.patterns import compile_glob, glob_match

__all__ = [
    "compile_glob",
    "glob_match",
    "hash_value",
    "normalize_signature",
]
