"""Data models for the CRC-8 calculator."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from crc8_calculator.protocol.constants import ALGORITHM_NAME, INITIAL_VALUE, POLYNOMIAL, InputFormat


class AlgorithmParameters(BaseModel):
    """Fixed parameters of the bit-serial CRC-8 algorithm."""

    polynomial: int = Field(POLYNOMIAL, ge=0, le=0xFF, description="Reflected feedback polynomial")
    initial_value: int = Field(INITIAL_VALUE, ge=0, le=0xFF, description="Register value before the first byte")
    name: str = Field(ALGORITHM_NAME, min_length=1, description="Display name of the algorithm")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "polynomial": 0x8C,
                "initial_value": 0x00,
                "name": "CRC-8/MAXIM",
            }
        },
    )


# Shared process-wide instance
CRC8_MAXIM = AlgorithmParameters()


class ComputationResult(BaseModel):
    """Outcome of a single checksum computation.

    A successful result carries the checksum in every representation plus
    algorithm metadata. A failed result carries only ``error_message``.
    """

    success: bool = Field(..., description="Whether the input could be decoded")
    value: int | None = Field(None, ge=0, le=0xFF, description="Checksum value")
    hex: str | None = Field(None, pattern=r"^0x[0-9A-F]{2}$", description="Checksum as 0x-prefixed hex")
    dec: str | None = Field(None, pattern=r"^[0-9]{1,3}$", description="Checksum in decimal")
    bin: str | None = Field(None, pattern=r"^[01]{8}$", description="Checksum as 8 binary digits")
    algorithm_name: str | None = Field(None, description="Algorithm display name")
    polynomial_hex: str | None = Field(None, description="Polynomial as 0x-prefixed hex")
    input_byte_count: int | None = Field(None, ge=0, description="Number of decoded input bytes")
    elapsed_micros: float | None = Field(None, ge=0, description="Computation time in microseconds")
    error_message: str | None = Field(None, description="Reason the computation failed")

    @model_validator(mode="after")
    def validate_consistency(self) -> "ComputationResult":
        """Ensure computed fields are present exactly when the computation succeeded."""
        computed = (
            self.value,
            self.hex,
            self.dec,
            self.bin,
            self.algorithm_name,
            self.polynomial_hex,
            self.input_byte_count,
            self.elapsed_micros,
        )
        if self.success:
            if any(field is None for field in computed):
                raise ValueError("Successful result must have all computed fields set")
            if self.error_message is not None:
                raise ValueError("Successful result cannot carry an error message")
        else:
            if any(field is not None for field in computed):
                raise ValueError("Failed result cannot carry computed fields")
            if not self.error_message:
                raise ValueError("Failed result must carry an error message")
        return self

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "success": True,
                "value": 12,
                "hex": "0x0C",
                "dec": "12",
                "bin": "00001100",
                "algorithm_name": "CRC-8/MAXIM",
                "polynomial_hex": "0x8C",
                "input_byte_count": 8,
                "elapsed_micros": 4.125,
                "error_message": None,
            }
        },
    )


class HistoryEntry(BaseModel):
    """A successful computation remembered for later display."""

    timestamp: datetime = Field(default_factory=datetime.now, description="When the computation ran")
    input: str = Field(..., description="Input as entered, truncated for display")
    input_format: InputFormat = Field(..., description="Format the input was entered in")
    algorithm: str = Field(..., description="Algorithm display name")
    result: str = Field(..., description="Checksum as 0x-prefixed hex")
    full_result: ComputationResult = Field(..., description="Complete computation result")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "timestamp": "2026-10-19T10:30:00",
                "input": "C864540000112233",
                "input_format": "hex",
                "algorithm": "CRC-8/MAXIM",
                "result": "0x0C",
                "full_result": {"success": True, "value": 12, "hex": "0x0C"},
            }
        }
    )


# ============================================================================
# API Request/Response Models
# ============================================================================


class CalculateRequest(BaseModel):
    """Request model for POST /api/crc8."""

    data: str = Field(..., description="Hex string or free text")
    format: InputFormat = Field(InputFormat.HEX, description="How to interpret data")

    model_config = ConfigDict(json_schema_extra={"example": {"data": "C8 64 54 00 00 11 22 33", "format": "hex"}})


class GridCalculateRequest(BaseModel):
    """Request model for POST /api/crc8/grid."""

    cells: list[str] = Field(..., description="Hex byte grid cells, two digits each")

    model_config = ConfigDict(json_schema_extra={"example": {"cells": ["C8", "64", "54", "", "00"]}})


class AlgorithmInfoResponse(BaseModel):
    """Response model for GET /api/algorithm."""

    name: str = Field(..., description="Algorithm display name")
    polynomial: int = Field(..., description="Reflected feedback polynomial")
    polynomial_hex: str = Field(..., description="Polynomial as 0x-prefixed hex")
    initial_value: int = Field(..., description="Register value before the first byte")
    reflected: bool = Field(True, description="Bits are processed LSB first")
    final_xor: int = Field(0x00, description="Value XORed into the final register")


class ExamplesResponse(BaseModel):
    """Response model for GET /api/examples."""

    examples: list[list[str]] = Field(..., description="Sample hex byte grids")


class HistoryClearResponse(BaseModel):
    """Response model for DELETE /api/history."""

    success: bool = Field(True, description="Operation success status")
    cleared: int = Field(..., ge=0, description="Number of removed entries")


class ErrorResponse(BaseModel):
    """Response model for errors."""

    success: bool = Field(False, description="Operation success status")
    error: str = Field(..., description="Error message")
    detail: str | None = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.now, description="Error timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Invalid hexadecimal format",
                "detail": "Invalid hexadecimal format: unexpected characters 'ZZ'",
                "timestamp": "2026-10-19T10:30:00",
            }
        }
    )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status (healthy/unhealthy)")
    history_entries: int = Field(..., ge=0, description="Number of remembered computations")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "history_entries": 3,
            }
        }
    )
