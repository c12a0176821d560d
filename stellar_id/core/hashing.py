"""
String hash functions used to derive the numeric field of a stellar ID.

All three algorithms follow the same fixed-width convention so that results are
identical on every platform:
- input is consumed as UTF-16 code units (astral characters count twice)
- the running value is wrapped to a signed 32-bit integer after every step
- the returned value is the absolute value of the final signed integer

These are NOT cryptographic hashes. Collisions are expected and harmless.
"""

from typing import Callable, Dict, Iterator, List

HashFunction = Callable[[str], int]

# Size of the decimal hash field (4 digits)
HASH_MODULUS = 10000

FNV_OFFSET_BASIS = 0x811C9DC5
DJB2_SEED = 5381


def to_int32(value: int) -> int:
    """Wrap an arbitrary integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        return value - 0x100000000
    return value


def code_units(text: str) -> Iterator[int]:
    """Yield UTF-16 code units of text."""
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def simple_hash(text: str) -> int:
    """Java-style string hash: h = h*31 + c."""
    h = 0
    for c in code_units(text):
        h = to_int32((h << 5) - h + c)
    return abs(h)


def djb2_hash(text: str) -> int:
    """Bernstein's DJB2: h = h*33 + c, seeded with 5381."""
    h = DJB2_SEED
    for c in code_units(text):
        h = to_int32((h << 5) + h + c)
    return abs(h)


def fnv1a_hash(text: str) -> int:
    """
    FNV-1a with the prime multiplication expanded into shifts.

    h*16777619 == h + (h<<1) + (h<<4) + (h<<7) + (h<<8) + (h<<24)
    """
    h = to_int32(FNV_OFFSET_BASIS)
    for c in code_units(text):
        h = to_int32(h ^ c)
        h = to_int32(h + (h << 1) + (h << 4) + (h << 7) + (h << 8) + (h << 24))
    return abs(h)


# Ordered registry; order is the public listing order.
HASH_ALGORITHMS: Dict[str, HashFunction] = {
    "simple": simple_hash,
    "djb2": djb2_hash,
    "fnv1a": fnv1a_hash,
}


def list_hash_algorithms() -> List[str]:
    """Names of the available hash algorithms, in registry order."""
    return list(HASH_ALGORITHMS)


def hash_number(raw: int) -> int:
    """Reduce a raw hash to the 0-9999 range of the hash field."""
    return raw % HASH_MODULUS
