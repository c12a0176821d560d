"""
Stellar ID

Deterministic, human-readable identifiers of the form PREFIX-HHHH-STARNAME.

The module-level functions share one default generator whose cache size comes
from STELLAR_ID_CACHE_CAPACITY. Create a StellarIDGenerator for an independent
cache.
"""

from typing import Dict, Iterable, Optional

from .batch import BatchResult, generate_batch as _generate_batch
from .config import Settings
from .core import (
    DEFAULT_STAR_NAMES,
    REAL_STARS,
    GenerationOptions,
    HashCache,
    IDParts,
    InvalidInputError,
    InvalidOptionsError,
    StarRecord,
    StellarIDError,
    StellarIDGenerator,
    extract_parts,
    get_real_star_data,
    get_star_info,
    list_default_star_names,
    list_hash_algorithms,
    list_real_star_names,
    validate_format,
)
from .core.generator import OptionsLike

__version__ = "1.0.0"

_default_generator = StellarIDGenerator(cache_capacity=Settings.from_env().cache_capacity)


def get_default_generator() -> StellarIDGenerator:
    return _default_generator


def generate(text: str, options: OptionsLike = None) -> str:
    """Generate a stellar ID with the default generator."""
    return _default_generator.generate(text, options)


def generate_batch(
    inputs: Iterable[str],
    options: OptionsLike = None,
    generator: Optional[StellarIDGenerator] = None,
) -> BatchResult:
    return _generate_batch(inputs, options, generator or _default_generator)


def clear_cache() -> int:
    """Clear the default generator's cache; returns entries removed."""
    return _default_generator.clear_cache()


def cache_stats() -> Dict[str, int]:
    return _default_generator.cache_stats()


__all__ = [
    "__version__",
    "generate",
    "generate_batch",
    "validate_format",
    "extract_parts",
    "list_default_star_names",
    "list_real_star_names",
    "list_hash_algorithms",
    "get_star_info",
    "get_real_star_data",
    "clear_cache",
    "cache_stats",
    "get_default_generator",
    "BatchResult",
    "GenerationOptions",
    "HashCache",
    "IDParts",
    "StarRecord",
    "StellarIDGenerator",
    "StellarIDError",
    "InvalidInputError",
    "InvalidOptionsError",
    "DEFAULT_STAR_NAMES",
    "REAL_STARS",
    "Settings",
]
