"""CRC-8 calculation (reflected, bit-serial)."""

from crc8_calculator.core.models import CRC8_MAXIM, AlgorithmParameters

from .constants import BITS_PER_BYTE, BYTE_MASK


def calculate_crc8(data: bytes, params: AlgorithmParameters = CRC8_MAXIM) -> int:
    """
    Calculate CRC-8 over a byte sequence.

    Bits are processed least-significant first using right shifts:
    - Each byte is XORed into the register
    - For each of its 8 bits, the register is shifted right and the
      polynomial is XORed in when the bit shifted out was set
    - No final XOR is applied

    Args:
        data: Bytes to calculate CRC over
        params: Polynomial and initial value

    Returns:
        8-bit CRC value

    Example:
        >>> calculate_crc8(b"123456789")
        161
    """
    polynomial = params.polynomial
    crc = params.initial_value

    for byte in data:
        crc = (crc ^ byte) & BYTE_MASK
        for _ in range(BITS_PER_BYTE):
            if crc & 0x01:
                crc = (crc >> 1) ^ polynomial
            else:
                crc = crc >> 1

    return crc


def verify_crc8(data: bytes, expected_crc: int, params: AlgorithmParameters = CRC8_MAXIM) -> bool:
    """
    Verify CRC-8 matches expected value.

    Args:
        data: Data bytes (excluding CRC)
        expected_crc: Expected CRC value
        params: Polynomial and initial value

    Returns:
        True if CRC matches, False otherwise

    Example:
        >>> verify_crc8(b"123456789", 0xA1)
        True
    """
    calculated = calculate_crc8(data, params)
    return calculated == expected_crc
