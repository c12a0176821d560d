"""
Batch generation: run generate() over many inputs, keeping going on bad items.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .core.errors import InvalidInputError
from .core.generator import OptionsLike, StellarIDGenerator, coerce_options
from .core.options import validate_options


@dataclass
class BatchResult:
    """
    Outcome of a batch run.

    Fields:
        successes: (input, id) pairs in input order
        failures: (input, error message) pairs in input order
    """
    successes: List[Tuple[Any, str]] = field(default_factory=list)
    failures: List[Tuple[Any, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successes) + len(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "successes": [{"input": i, "id": v} for i, v in self.successes],
            "failures": [{"input": i, "error": e} for i, e in self.failures],
            "total": self.total,
        }


def generate_batch(
    inputs: Iterable[Any],
    options: OptionsLike = None,
    generator: Optional[StellarIDGenerator] = None,
) -> BatchResult:
    """
    Generate IDs for every input with shared options.

    Options are validated once up front; per-item input errors are collected
    as failures.

    Raises:
        InvalidOptionsError: If options are invalid (every item would fail)
    """
    gen = generator or StellarIDGenerator()
    opts = coerce_options(options)
    validate_options(opts)

    result = BatchResult()
    for item in inputs:
        try:
            result.successes.append((item, gen.generate(item, opts)))
        except InvalidInputError as e:
            result.failures.append((item, str(e)))
    return result
