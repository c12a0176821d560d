"""
Tests for batch generation.
"""

import pytest

from stellar_id.batch import generate_batch
from stellar_id.core.errors import InvalidOptionsError
from stellar_id.core.generator import StellarIDGenerator


def test_batch_collects_successes_and_failures():
    gen = StellarIDGenerator()
    result = generate_batch(["hello", "", "x", "   "], generator=gen)

    assert result.successes == [("hello", "STAR-2322-ALTAIR"), ("x", "STAR-0120-SIRIUS")]
    assert [item for item, _ in result.failures] == ["", "   "]
    assert result.total == 4


def test_batch_matches_single_generation():
    gen = StellarIDGenerator()
    inputs = ["alpha", "beta", "gamma"]
    opts = {"prefix": "BATCH", "hash_algorithm": "fnv1a", "length": 20}
    result = generate_batch(inputs, opts, generator=gen)

    assert [v for _, v in result.successes] == [gen.generate(i, opts) for i in inputs]
    assert result.failures == []


def test_batch_invalid_options_fail_up_front():
    with pytest.raises(InvalidOptionsError):
        generate_batch(["hello"], {"case": "title"})


def test_batch_to_dict():
    result = generate_batch(["hello", ""], generator=StellarIDGenerator())
    data = result.to_dict()

    assert data["total"] == 2
    assert data["successes"] == [{"input": "hello", "id": "STAR-2322-ALTAIR"}]
    assert data["failures"][0]["input"] == ""
    assert "non-empty" in data["failures"][0]["error"]
