"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings factory
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from matrixmath.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "gauss_jordan"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gauss_jordan",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "gauss_jordan"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss_jordan"

    def test_timing_none(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_reassign_warnings(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new",)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(value=1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("Inverse is inaccurate: residual 1e-6",),
        )
        assert result.has_warning("inaccurate")
        assert not result.has_warning("degenerate")

    def test_no_warnings(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert not result.has_warning("anything")
