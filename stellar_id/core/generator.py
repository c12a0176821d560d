"""
Stellar ID generator.

Pipeline (each stage is a pure function, applied in this order):
1. validate input and options
2. hash the salted input (through the generator's cache when enabled)
3. pick a star name: names[hash_number % len(names)]
4. assemble: default "PREFIX-HHHH-STAR" or a custom template
5. normalize length (truncate or pad)
6. apply case mode
7. inject special characters (only with use_special_chars AND length)

Same input + same options -> same ID, with or without the cache.
"""

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .cache import DEFAULT_CACHE_CAPACITY, HashCache
from .catalog import DEFAULT_STAR_NAMES, list_real_star_names
from .errors import InvalidOptionsError
from .hashing import HASH_ALGORITHMS, hash_number
from .options import GenerationOptions, validate_input, validate_options

logger = logging.getLogger(__name__)

BASE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
EXTENDED_ALPHABET = BASE_ALPHABET + SPECIAL_CHARS

# Number of raw input characters exposed through {input}
INPUT_TOKEN_CHARS = 10

# Every 5th position (offset by the hash) receives a special character
SPECIAL_CHAR_STRIDE = 5

TEMPLATE_TOKEN = re.compile(r"\{(prefix|hash|star|input)\}")

# Narrow check for default-format, upper-case IDs only
ID_PATTERN = re.compile(r"^[A-Z0-9_-]+-\d{4}-[A-Z]+$")

OptionsLike = Union[GenerationOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class IDParts:
    """Segments of a default-format stellar ID."""
    prefix: str
    hash: str
    star_name: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def coerce_options(options: OptionsLike) -> GenerationOptions:
    if options is None:
        return GenerationOptions()
    if isinstance(options, GenerationOptions):
        return options
    if isinstance(options, Mapping):
        return GenerationOptions.from_dict(options)
    raise InvalidOptionsError(
        f"Options must be GenerationOptions or a mapping, got {type(options).__name__}"
    )


def resolve_star_names(options: GenerationOptions) -> Sequence[str]:
    """Active selection list: custom names, else the configured catalog."""
    if options.custom_star_names:
        return options.custom_star_names
    if options.star_catalog == "real":
        return list_real_star_names()
    return DEFAULT_STAR_NAMES


def select_star(number: int, names: Sequence[str]) -> str:
    return names[number % len(names)]


def render_template(template: str, values: Mapping[str, str]) -> str:
    """
    Substitute {prefix}, {hash}, {star} and {input} in a single pass.

    Only the first occurrence of each token is replaced; repeats stay literal.
    Substituted values are not rescanned, and unknown tokens are left alone.
    """
    seen = set()

    def _sub(match: "re.Match[str]") -> str:
        token = match.group(1)
        if token in seen:
            return match.group(0)
        seen.add(token)
        return values[token]

    return TEMPLATE_TOKEN.sub(_sub, template)


def assemble(
    prefix: str,
    hash_field: str,
    star: str,
    raw_input: str,
    template: Optional[str] = None,
) -> str:
    if template:
        return render_template(
            template,
            {
                "prefix": prefix,
                "hash": hash_field,
                "star": star,
                "input": raw_input[:INPUT_TOKEN_CHARS],
            },
        )
    return f"{prefix}-{hash_field}-{star}"


def normalize_length(value: str, length: Optional[int], number: int, use_special_chars: bool) -> str:
    """
    Truncate or pad value to exactly length characters.

    Padding character at position p is alphabet[(number + p) % len(alphabet)].
    """
    if not length or length <= 0:
        return value
    if len(value) > length:
        return value[:length]
    alphabet = EXTENDED_ALPHABET if use_special_chars else BASE_ALPHABET
    chars = list(value)
    while len(chars) < length:
        chars.append(alphabet[(number + len(chars)) % len(alphabet)])
    return "".join(chars)[:length]


def apply_case(value: str, case: str) -> str:
    """
    Apply case mode.

    upper is a no-op: template literals and custom star names keep their case.
    mixed lowercases A-Z at even indexes only.
    """
    if case == "lower":
        return value.lower()
    if case == "mixed":
        return "".join(
            ch.lower() if i % 2 == 0 and "A" <= ch <= "Z" else ch
            for i, ch in enumerate(value)
        )
    return value


def inject_special_chars(value: str, number: int, length: Optional[int]) -> str:
    """
    Replace characters at positions where (number + i) % 5 == 0.

    No-op unless a target length is set.
    """
    if not length or length <= 0:
        return value
    chars = list(value)
    for i in range(len(chars)):
        offset = number + i
        if offset % SPECIAL_CHAR_STRIDE == 0:
            chars[i] = SPECIAL_CHARS[offset % len(SPECIAL_CHARS)]
    return "".join(chars)[:length]


def validate_format(stellar_id: str) -> bool:
    """
    Check for the default "PREFIX-HHHH-STAR" upper-case shape.

    IDs produced with case lower/mixed, custom templates, or star names
    containing underscores are legitimately generated but do not pass.
    """
    if not isinstance(stellar_id, str):
        return False
    return ID_PATTERN.match(stellar_id) is not None


def extract_parts(stellar_id: str) -> Optional[IDParts]:
    """
    Split a default-format ID into prefix, hash and star name.

    Hash and star are taken from the right so prefixes containing "-" survive.

    Returns:
        IDParts or None if validate_format() rejects the ID
    """
    if not validate_format(stellar_id):
        return None
    prefix, hash_field, star_name = stellar_id.rsplit("-", 2)
    return IDParts(prefix=prefix, hash=hash_field, star_name=star_name)


class StellarIDGenerator:
    """
    Deterministic ID generator owning its own hash cache.

    Usage:
        gen = StellarIDGenerator()
        gen.generate("hello")                     # "STAR-....-...."
        gen.generate("hello", {"prefix": "COSMIC"})
        gen.generate("hello", GenerationOptions(length=12, case="lower"))
    """

    def __init__(self, cache: Optional[HashCache] = None, cache_capacity: int = DEFAULT_CACHE_CAPACITY) -> None:
        self.cache = cache if cache is not None else HashCache(capacity=cache_capacity)

    def compute_hash(self, text: str, algorithm: str = "simple", use_cache: bool = True) -> int:
        """
        Raw hash of text with the named algorithm.

        Raises:
            InvalidOptionsError: If algorithm is unknown
        """
        try:
            fn = HASH_ALGORITHMS[algorithm]
        except KeyError:
            raise InvalidOptionsError(
                f"Hash algorithm must be one of {', '.join(HASH_ALGORITHMS)}, got {algorithm!r}",
                field="hash_algorithm",
            ) from None
        if not use_cache:
            return fn(text)
        return self.cache.get_or_compute(algorithm, text, fn)

    def generate(self, text: str, options: OptionsLike = None) -> str:
        """
        Generate the stellar ID for text.

        Args:
            text: Input string (1-1000 chars, not blank)
            options: GenerationOptions or a mapping of option names

        Returns:
            The ID string

        Raises:
            InvalidInputError: Bad input
            InvalidOptionsError: Bad options
        """
        validate_input(text)
        opts = coerce_options(options)
        validate_options(opts)

        salted = f"{text}{opts.salt}" if opts.salt else text
        raw = self.compute_hash(salted, opts.hash_algorithm, use_cache=opts.enable_cache)
        number = hash_number(raw)
        hash_field = f"{number:04d}"

        star = select_star(number, resolve_star_names(opts))

        result = assemble(opts.prefix, hash_field, star, text, opts.format)
        result = normalize_length(result, opts.length, number, opts.use_special_chars)
        result = apply_case(result, opts.case)
        if opts.use_special_chars:
            result = inject_special_chars(result, number, opts.length)

        logger.debug("Generated stellar ID: algorithm=%s hash=%s", opts.hash_algorithm, hash_field)
        return result

    def clear_cache(self) -> int:
        return self.cache.clear()

    def cache_stats(self) -> Dict[str, int]:
        return self.cache.stats()
