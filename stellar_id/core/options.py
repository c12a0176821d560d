"""
Generation options and validation.

Validation always runs before any hashing so a bad request never yields a
partial ID.
"""

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .errors import InvalidInputError, InvalidOptionsError
from .hashing import HASH_ALGORITHMS

MAX_INPUT_LENGTH = 1000
MIN_ID_LENGTH = 1
MAX_ID_LENGTH = 100
MAX_PREFIX_LENGTH = 20
MAX_SALT_LENGTH = 100

CASE_MODES = ("upper", "lower", "mixed")
STAR_CATALOGS = ("default", "real")

PREFIX_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# Keys accepted by from_dict() in addition to the field names
_ALIASES = {
    "useSpecialChars": "use_special_chars",
    "hashAlgorithm": "hash_algorithm",
    "customStarNames": "custom_star_names",
    "enableCache": "enable_cache",
    "starCatalog": "star_catalog",
}


@dataclass(frozen=True)
class GenerationOptions:
    """
    Formatting options for a stellar ID.

    Fields:
        prefix: Leading segment (default "STAR")
        length: Exact output length, or None to keep the natural length
        use_special_chars: Allow punctuation in padding and inject symbols
        case: "upper", "lower" or "mixed"
        hash_algorithm: "simple", "djb2" or "fnv1a"
        custom_star_names: Ordered names overriding the catalog
        format: Template using {prefix}, {hash}, {star}, {input}
        salt: Appended to the input before hashing
        enable_cache: Consult the generator's hash cache
        star_catalog: "default" (10 names) or "real" (full catalog)
    """
    prefix: str = "STAR"
    length: Optional[int] = None
    use_special_chars: bool = False
    case: str = "upper"
    hash_algorithm: str = "simple"
    custom_star_names: Optional[Tuple[str, ...]] = None
    format: Optional[str] = None
    salt: Optional[str] = None
    enable_cache: bool = True
    star_catalog: str = "default"

    def __post_init__(self) -> None:
        # Unordered collections are left as-is so validate_options() rejects them
        if isinstance(self.custom_star_names, list):
            object.__setattr__(self, "custom_star_names", tuple(self.custom_star_names))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GenerationOptions":
        """
        Build options from a mapping of snake_case or camelCase keys.

        Raises:
            InvalidOptionsError: On unknown keys
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidOptionsError(f"Unknown option: {key}", field=key)
            kwargs[name] = value
        return cls(**kwargs)


def validate_input(value: Any) -> None:
    """
    Check the raw input string.

    Raises:
        InvalidInputError: If value is not a non-blank string of at most 1000 chars
    """
    if not isinstance(value, str) or not value:
        raise InvalidInputError("Input must be a non-empty string")
    if not value.strip():
        raise InvalidInputError("Input must not be whitespace only")
    if len(value) > MAX_INPUT_LENGTH:
        raise InvalidInputError(
            f"Input length must be at most {MAX_INPUT_LENGTH} characters, got {len(value)}"
        )


def _validate_star_names(names: Any) -> None:
    if isinstance(names, (str, bytes)) or not isinstance(names, Sequence):
        raise InvalidOptionsError(
            "Custom star names must be an ordered list or tuple", field="custom_star_names"
        )
    if len(names) == 0:
        raise InvalidOptionsError("Custom star names must be a non-empty list", field="custom_star_names")
    for name in names:
        if not isinstance(name, str) or not name:
            raise InvalidOptionsError(
                "Custom star names must all be non-empty strings", field="custom_star_names"
            )


def validate_options(options: GenerationOptions) -> None:
    """
    Check every option against its constraint.

    Raises:
        InvalidOptionsError: With .field set to the first offending option
    """
    length = options.length
    if length is not None:
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidOptionsError("Length must be an integer", field="length")
        if length < MIN_ID_LENGTH or length > MAX_ID_LENGTH:
            raise InvalidOptionsError(
                f"Length must be between {MIN_ID_LENGTH} and {MAX_ID_LENGTH}, got {length}",
                field="length",
            )

    for flag in ("use_special_chars", "enable_cache"):
        if not isinstance(getattr(options, flag), bool):
            raise InvalidOptionsError(f"{flag} must be a boolean", field=flag)

    prefix = options.prefix
    if (
        not isinstance(prefix, str)
        or len(prefix) > MAX_PREFIX_LENGTH
        or not PREFIX_PATTERN.match(prefix)
    ):
        raise InvalidOptionsError(
            f"Prefix must be alphanumeric, underscore, or hyphen, max {MAX_PREFIX_LENGTH} characters",
            field="prefix",
        )

    if options.custom_star_names is not None:
        _validate_star_names(options.custom_star_names)

    salt = options.salt
    if salt is not None:
        if not isinstance(salt, str):
            raise InvalidOptionsError("Salt must be a string", field="salt")
        if len(salt) > MAX_SALT_LENGTH:
            raise InvalidOptionsError(
                f"Salt must be at most {MAX_SALT_LENGTH} characters", field="salt"
            )

    if options.hash_algorithm not in HASH_ALGORITHMS:
        raise InvalidOptionsError(
            f"Hash algorithm must be one of {', '.join(HASH_ALGORITHMS)}, got {options.hash_algorithm!r}",
            field="hash_algorithm",
        )

    if options.case not in CASE_MODES:
        raise InvalidOptionsError(
            f"Case must be one of {', '.join(CASE_MODES)}, got {options.case!r}",
            field="case",
        )

    if options.format is not None and not isinstance(options.format, str):
        raise InvalidOptionsError("Format must be a string", field="format")

    if options.star_catalog not in STAR_CATALOGS:
        raise InvalidOptionsError(
            f"Star catalog must be one of {', '.join(STAR_CATALOGS)}, got {options.star_catalog!r}",
            field="star_catalog",
        )
