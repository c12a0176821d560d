"""
Core deterministic ID primitives.

This module provides:
- Hashing: simple / djb2 / fnv1a 32-bit string hashes
- HashCache: bounded memo of raw hashes
- Catalog: default star names and the real-star metadata catalog
- GenerationOptions: formatting options and their validation
- StellarIDGenerator: the generation pipeline
"""

from .errors import StellarIDError, InvalidInputError, InvalidOptionsError
from .hashing import HASH_ALGORITHMS, simple_hash, djb2_hash, fnv1a_hash, hash_number, list_hash_algorithms
from .cache import DEFAULT_CACHE_CAPACITY, HashCache
from .catalog import (
    DEFAULT_STAR_NAMES,
    REAL_STARS,
    StarRecord,
    get_real_star_data,
    get_star_info,
    list_default_star_names,
    list_real_star_names,
)
from .options import GenerationOptions, validate_input, validate_options
from .generator import IDParts, StellarIDGenerator, extract_parts, validate_format

__all__ = [
    "StellarIDError",
    "InvalidInputError",
    "InvalidOptionsError",
    "HASH_ALGORITHMS",
    "simple_hash",
    "djb2_hash",
    "fnv1a_hash",
    "hash_number",
    "list_hash_algorithms",
    "DEFAULT_CACHE_CAPACITY",
    "HashCache",
    "DEFAULT_STAR_NAMES",
    "REAL_STARS",
    "StarRecord",
    "get_real_star_data",
    "get_star_info",
    "list_default_star_names",
    "list_real_star_names",
    "GenerationOptions",
    "validate_input",
    "validate_options",
    "IDParts",
    "StellarIDGenerator",
    "extract_parts",
    "validate_format",
]
