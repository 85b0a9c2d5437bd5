"""
Tests for input validation utilities.

Tests: validate_token_id, parse_batch_ids, validate_eth_address
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
from domain.errors import ValidationError
from utils.validators import parse_batch_ids, validate_eth_address, validate_token_id


class TestValidateTokenId:
    """Test suite for token ID validation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("raw,expected", [("1", 1), ("250", 250), ("500", 500), (" 42 ", 42)])
    def test_valid_ids(self, raw, expected):
        assert validate_token_id(raw) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["0", "501", "-1", "abc", "1.5", "12abc", "", None, "0x10"])
    def test_invalid_ids_raise_400(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            validate_token_id(raw)
        assert exc_info.value.status_code == 400
        assert "between 1 and 500" in exc_info.value.message


class TestParseBatchIds:
    """Test suite for batch ID parsing."""

    @pytest.mark.unit
    def test_preserves_order(self):
        assert parse_batch_ids("5,1,3") == [5, 1, 3]

    @pytest.mark.unit
    def test_allows_whitespace(self):
        assert parse_batch_ids(" 2 , 4 ") == [2, 4]

    @pytest.mark.unit
    def test_fifty_ids_allowed(self):
        raw = ",".join(str(i) for i in range(1, 51))
        assert len(parse_batch_ids(raw)) == 50

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_raises_400(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            parse_batch_ids(raw)
        assert exc_info.value.status_code == 400
        assert "1-50" in exc_info.value.message

    @pytest.mark.unit
    def test_fifty_one_ids_raises_400(self):
        raw = ",".join(str(i) for i in range(1, 52))
        with pytest.raises(ValidationError) as exc_info:
            parse_batch_ids(raw)
        assert exc_info.value.details == {"count": 51}

    @pytest.mark.unit
    def test_invalid_member_raises_400(self):
        with pytest.raises(ValidationError):
            parse_batch_ids("1,2,999")

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["1,,2", ",", " , ", "1,2,", ",3"])
    def test_blank_member_raises_400(self, raw):
        """Every comma-separated slot must hold a token ID; blanks are not skipped."""
        with pytest.raises(ValidationError) as exc_info:
            parse_batch_ids(raw)
        assert exc_info.value.status_code == 400
        assert "between 1 and 500" in exc_info.value.message


class TestValidateEthAddress:
    """Test suite for address format validation."""

    @pytest.mark.unit
    def test_lowercase_passes(self):
        address = "0x" + "ab" * 20
        assert validate_eth_address(address) == address

    @pytest.mark.unit
    def test_mixed_case_passes_unchanged(self):
        """No checksum enforcement; any letter case is accepted."""
        address = "0x" + "aB" * 20
        assert validate_eth_address(address) == address

    @pytest.mark.unit
    @pytest.mark.parametrize("address", [
        "",
        None,
        "0x123",
        "ab" * 21,                  # missing 0x
        "0x" + "ab" * 19 + "a",     # 39 digits
        "0x" + "ab" * 20 + "a",     # 41 digits
        "0x" + "zz" * 20,           # non-hex
        "0X" + "ab" * 20,           # uppercase prefix
    ])
    def test_malformed_raises_400(self, address):
        with pytest.raises(ValidationError) as exc_info:
            validate_eth_address(address)
        assert exc_info.value.status_code == 400
