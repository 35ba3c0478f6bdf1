"""Unit tests for transfer amount validation."""

import pytest

from quorumvault.domain.errors import InvalidAmountError
from quorumvault.domain.primitives.amount import fraction_digits, validate_amount


class TestValidateAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1", "1"),
            ("0.5", "0.5"),
            (".5", ".5"),
            ("  100.50 ", "100.50"),
            ("0." + "0" * 17 + "1", "0." + "0" * 17 + "1"),
            ("123456789012345678901234567890", "123456789012345678901234567890"),
        ],
    )
    def test_accepts_positive_decimals(self, raw: str, expected: str) -> None:
        assert validate_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "0.000", "-1", "abc", "", "1e5", "1.", "1,5", "+1"])
    def test_rejects_non_positive_or_malformed(self, raw: str) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_amount(raw)

        assert exc_info.value.reason == "amount must be a positive number"

    @pytest.mark.parametrize(
        "raw",
        [
            "١٢",  # Arabic-Indic digits
            "１２.5",  # fullwidth digits
            "१",  # Devanagari digit one
            "1.٥",
        ],
    )
    def test_rejects_non_ascii_digits(self, raw: str) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_amount(raw)

        assert exc_info.value.reason == "amount must be a positive number"

    def test_rejects_more_than_18_fraction_digits(self) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_amount("1." + "1" * 19)

        assert "maximum 18 decimal places" in exc_info.value.reason

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_amount(10)

        assert exc_info.value.reason == "amount must be a decimal string"


def test_fraction_digits() -> None:
    assert fraction_digits("12") == 0
    assert fraction_digits("12.345") == 3
