"""Unit tests for CRC-8 calculation."""

from crc8_calculator.core.models import CRC8_MAXIM, AlgorithmParameters
from crc8_calculator.protocol.crc import calculate_crc8, verify_crc8


def test_crc_empty_data():
    """Test CRC of empty data is the initial value."""
    assert calculate_crc8(b"") == CRC8_MAXIM.initial_value == 0x00


def test_crc_empty_data_custom_initial_value():
    """Test empty data returns a non-zero initial value unchanged."""
    params = AlgorithmParameters(initial_value=0x5A)
    assert calculate_crc8(b"", params) == 0x5A


def test_crc_single_zero_byte():
    """Test CRC of a single zero byte."""
    assert calculate_crc8(b"\x00") == 0x00


def test_crc_single_ff_byte():
    """Test CRC of 0xFF (eight shift/XOR steps starting from 0xFF)."""
    assert calculate_crc8(b"\xff") == 0x35


def test_crc_single_one_byte():
    """Test CRC of 0x01 equals the polynomial's first table entry."""
    assert calculate_crc8(b"\x01") == 0x5E


def test_crc_text_a():
    """Test CRC of ASCII 'A'."""
    assert calculate_crc8(b"A") == 0x18


def test_crc_check_value():
    """Test the standard CRC-8/MAXIM check value."""
    assert calculate_crc8(b"123456789") == 0xA1


def test_crc_deterministic():
    """Test that CRC calculation is deterministic."""
    data = b"\xc8\x64\x54\x00\x00\x11\x22\x33"
    assert calculate_crc8(data) == calculate_crc8(data)


def test_crc_order_sensitive():
    """Test that swapping byte order changes the CRC."""
    assert calculate_crc8(b"\x01\x00") == 0xC4
    assert calculate_crc8(b"\x00\x01") == 0x5E


def test_crc_different_data():
    """Test that different data produces different CRC."""
    assert calculate_crc8(b"\x01\x02\x03") != calculate_crc8(b"\x01\x02\x04")


def test_crc_appended_checksum_yields_zero():
    """Test that data followed by its own CRC checks to zero."""
    data = b"\x01\x64\xff\xe2\x00\x00\x00\x11"
    crc = calculate_crc8(data)
    assert calculate_crc8(data + bytes([crc])) == 0


def test_crc_accepts_bytearray():
    """Test CRC works on any byte sequence type."""
    assert calculate_crc8(bytearray(b"123456789")) == 0xA1


def test_verify_crc_valid():
    """Test CRC verification with valid CRC."""
    assert verify_crc8(b"123456789", 0xA1) is True


def test_verify_crc_invalid():
    """Test CRC verification with invalid CRC."""
    assert verify_crc8(b"123456789", 0xA2) is False


def test_crc_range():
    """Test that CRC is always 8-bit."""
    for i in range(256):
        result = calculate_crc8(bytes([i, 0xFF - i, i]))
        assert 0 <= result <= 0xFF
