import pytest

from nbssh.core.exceptions import InvalidFormatError, InvalidPortError
from nbssh.core.result import Result, collect_results


class TestResult:
    """Test suite for the Result type."""

    def test_success(self):
        result = Result.success(1)
        assert result.is_success
        assert not result.is_failure
        assert result.value == 1
        assert bool(result) is True
        with pytest.raises(ValueError):
            result.error

    def test_failure(self):
        error = InvalidPortError("a:b")
        result = Result.failure(error)
        assert result.is_failure
        assert result.error is error
        assert bool(result) is False
        with pytest.raises(ValueError):
            result.value

    def test_requires_exactly_one(self):
        """Test that a result cannot be empty or both."""
        with pytest.raises(ValueError):
            Result()
        with pytest.raises(ValueError):
            Result(_value=1, _error=InvalidFormatError())

    def test_unwrap_raises_stored_error(self):
        """Test that unwrap re-raises the failure."""
        assert Result.success("x").unwrap() == "x"
        with pytest.raises(InvalidFormatError):
            Result.failure(InvalidFormatError("a:b:c")).unwrap()


class TestCollectResults:
    """Test suite for collect_results."""

    def test_all_success(self):
        assert collect_results([Result.success(1), Result.success(2)]).value == [1, 2]

    def test_first_failure_wins(self):
        """Test that only the first failure is returned."""
        first = InvalidPortError("a:b")
        results = [Result.success(1), Result.failure(first), Result.failure(InvalidFormatError())]
        assert collect_results(results).error is first
