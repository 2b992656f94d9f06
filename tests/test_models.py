"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from crc8_calculator.core.models import (
    CRC8_MAXIM,
    AlgorithmParameters,
    CalculateRequest,
    ComputationResult,
    ErrorResponse,
    HealthResponse,
    HistoryEntry,
)
from crc8_calculator.protocol.constants import InputFormat


class TestAlgorithmParameters:
    """Tests for AlgorithmParameters model."""

    def test_defaults(self):
        """Test defaults describe CRC-8/MAXIM."""
        assert CRC8_MAXIM.polynomial == 0x8C
        assert CRC8_MAXIM.initial_value == 0x00
        assert CRC8_MAXIM.name == "CRC-8/MAXIM"

    def test_immutable(self):
        """Test parameters cannot be modified."""
        with pytest.raises(ValidationError):
            CRC8_MAXIM.polynomial = 0x07

    def test_polynomial_out_of_range(self):
        """Test polynomial must fit in 8 bits."""
        with pytest.raises(ValidationError):
            AlgorithmParameters(polynomial=0x100)

    def test_negative_initial_value(self):
        """Test initial value cannot be negative."""
        with pytest.raises(ValidationError):
            AlgorithmParameters(initial_value=-1)


def make_success(**overrides) -> dict:
    fields = {
        "success": True,
        "value": 12,
        "hex": "0x0C",
        "dec": "12",
        "bin": "00001100",
        "algorithm_name": "CRC-8/MAXIM",
        "polynomial_hex": "0x8C",
        "input_byte_count": 8,
        "elapsed_micros": 3.5,
    }
    fields.update(overrides)
    return fields


class TestComputationResult:
    """Tests for ComputationResult model."""

    def test_success_valid(self):
        """Test a complete successful result."""
        result = ComputationResult(**make_success())

        assert result.value == 12
        assert result.error_message is None

    def test_failure_valid(self):
        """Test a failed result with only a message."""
        result = ComputationResult(success=False, error_message="bad input")

        assert result.success is False
        assert result.value is None

    def test_failure_requires_message(self):
        """Test failed results must explain themselves."""
        with pytest.raises(ValidationError):
            ComputationResult(success=False)

    def test_failure_rejects_computed_fields(self):
        """Test failed results cannot carry a checksum."""
        with pytest.raises(ValidationError):
            ComputationResult(success=False, value=1, error_message="bad input")

    def test_success_requires_all_fields(self):
        """Test successful results must be complete."""
        fields = make_success()
        del fields["bin"]
        with pytest.raises(ValidationError):
            ComputationResult(**fields)

    def test_success_rejects_error_message(self):
        """Test successful results cannot carry an error."""
        with pytest.raises(ValidationError):
            ComputationResult(**make_success(error_message="oops"))

    @pytest.mark.parametrize("hex_value", ["0x0c", "0C", "0x00C", "0xGG"])
    def test_hex_pattern(self, hex_value):
        """Test hex must be 0x plus two uppercase digits."""
        with pytest.raises(ValidationError):
            ComputationResult(**make_success(hex=hex_value))

    @pytest.mark.parametrize("bin_value", ["1100", "000011000", "0000110a"])
    def test_bin_pattern(self, bin_value):
        """Test bin must be exactly 8 binary digits."""
        with pytest.raises(ValidationError):
            ComputationResult(**make_success(bin=bin_value))

    def test_value_range(self):
        """Test value must fit in 8 bits."""
        with pytest.raises(ValidationError):
            ComputationResult(**make_success(value=256))

    def test_serialization(self):
        """Test result serializes to a dict."""
        data = ComputationResult(**make_success()).model_dump()

        assert data["hex"] == "0x0C"
        assert data["error_message"] is None


class TestHistoryEntry:
    """Tests for HistoryEntry model."""

    def test_json_roundtrip(self, sample_result):
        """Test entries survive JSON serialization."""
        entry = HistoryEntry(
            input="123456789",
            input_format=InputFormat.TEXT,
            algorithm=sample_result.algorithm_name,
            result=sample_result.hex,
            full_result=sample_result,
        )

        restored = HistoryEntry.model_validate_json(entry.model_dump_json())

        assert restored == entry
        assert restored.input_format is InputFormat.TEXT


class TestRequestModels:
    """Tests for API request models."""

    def test_calculate_request_default_format(self):
        """Test format defaults to hex."""
        assert CalculateRequest(data="C8").format == InputFormat.HEX

    def test_calculate_request_text(self):
        """Test text format is accepted by value."""
        assert CalculateRequest(data="hi", format="text").format == InputFormat.TEXT

    def test_calculate_request_unknown_format(self):
        """Test unknown formats are rejected."""
        with pytest.raises(ValidationError):
            CalculateRequest(data="hi", format="base64")


class TestResponseModels:
    """Tests for API response models."""

    def test_error_response(self):
        """Test error response defaults."""
        response = ErrorResponse(error="Invalid hexadecimal format")

        assert response.success is False
        assert response.detail is None
        assert response.timestamp is not None

    def test_health_response_negative_count(self):
        """Test history count cannot be negative."""
        with pytest.raises(ValidationError):
            HealthResponse(status="healthy", history_entries=-1)
