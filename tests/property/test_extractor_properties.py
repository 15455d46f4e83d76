"""Property-based tests for digit-run extraction."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stackcalc import DIGIT_RUN_MAX, OverflowError, extract_digit_runs

run_values = st.integers(min_value=0, max_value=DIGIT_RUN_MAX)

non_digit_bytes = st.integers(min_value=0, max_value=255).filter(lambda b: not 48 <= b <= 57)

separators = st.lists(non_digit_bytes, min_size=1, max_size=4).map(bytes)


@pytest.mark.property
class TestExtractorProperties:
    """Property-based tests for extract_digit_runs."""

    @given(values=st.lists(run_values, max_size=20), data=st.data())
    def test_recovers_joined_values(self, values: list[int], data):
        """Values joined by non-digit separators come back in order."""
        joined = b""
        for value in values:
            joined += data.draw(separators) + str(value).encode()
        assert extract_digit_runs(joined) == values

    @given(blob=st.binary(max_size=64))
    def test_results_in_range(self, blob: bytes):
        """Any input either fails with OverflowError or yields values in range."""
        try:
            runs = extract_digit_runs(blob)
        except OverflowError:
            return
        assert all(0 <= run <= DIGIT_RUN_MAX for run in runs)
        assert len(runs) <= sum(48 <= b <= 57 for b in blob)

    @given(value=st.integers(min_value=DIGIT_RUN_MAX + 1, max_value=10**6))
    def test_large_run_overflows(self, value: int):
        with pytest.raises(OverflowError):
            extract_digit_runs(b"x" + str(value).encode())

    @given(blob=st.lists(non_digit_bytes, max_size=64).map(bytes))
    def test_no_digits_yields_empty(self, blob: bytes):
        assert extract_digit_runs(blob) == []
