"""Rendering of checksum values into result records."""

from crc8_calculator.core.models import CRC8_MAXIM, AlgorithmParameters, ComputationResult


def format_result(
    checksum: int,
    params: AlgorithmParameters = CRC8_MAXIM,
    input_byte_count: int = 0,
    elapsed_micros: float = 0.0,
) -> ComputationResult:
    """
    Build a successful result from a checksum value.

    Args:
        checksum: 8-bit checksum
        params: Parameters the checksum was computed with
        input_byte_count: Number of bytes the checksum covers
        elapsed_micros: Measured computation time

    Returns:
        Result with hex, decimal and binary renderings

    Example:
        >>> r = format_result(12)
        >>> r.hex, r.dec, r.bin
        ('0x0C', '12', '00001100')
    """
    return ComputationResult(
        success=True,
        value=checksum,
        hex=f"0x{checksum:02X}",
        dec=str(checksum),
        bin=f"{checksum:08b}",
        algorithm_name=params.name,
        polynomial_hex=f"0x{params.polynomial:X}",
        input_byte_count=input_byte_count,
        elapsed_micros=round(elapsed_micros, 3),
    )


def format_error(message: str) -> ComputationResult:
    """Build a failed result carrying only the error message."""
    return ComputationResult(success=False, error_message=message)
