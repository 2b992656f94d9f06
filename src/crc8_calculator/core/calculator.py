"""Checksum computation pipeline: decode, calculate, format."""

import logging
import time
from typing import Union

from crc8_calculator.core.models import CRC8_MAXIM, AlgorithmParameters, ComputationResult
from crc8_calculator.protocol.codec import DecodeError, cells_to_hex, decode_input
from crc8_calculator.protocol.constants import InputFormat
from crc8_calculator.protocol.crc import calculate_crc8
from crc8_calculator.protocol.formatter import format_error, format_result

logger = logging.getLogger(__name__)


def compute_crc8(
    data: str,
    fmt: Union[InputFormat, str] = InputFormat.HEX,
    params: AlgorithmParameters = CRC8_MAXIM,
) -> ComputationResult:
    """
    Compute the checksum of user input.

    Decoding failures are reported as a failed result rather than raised;
    the checksum engine is not run in that case.

    Args:
        data: Hex string or free text
        fmt: Input format ("hex" or "text")
        params: Algorithm parameters

    Returns:
        Computation result

    Raises:
        ValueError: If the format is not recognized

    Example:
        >>> compute_crc8("31 32 33 34 35 36 37 38 39").hex
        '0xA1'
    """
    start = time.perf_counter()

    try:
        payload = decode_input(data, fmt)
    except DecodeError as e:
        logger.debug("Rejected input: %s", e)
        return format_error(str(e))

    checksum = calculate_crc8(payload, params)
    elapsed_micros = (time.perf_counter() - start) * 1_000_000

    logger.debug("%s over %d bytes = 0x%02X", params.name, len(payload), checksum)

    return format_result(checksum, params, len(payload), elapsed_micros)


def compute_crc8_grid(cells: list[str], params: AlgorithmParameters = CRC8_MAXIM) -> ComputationResult:
    """
    Compute the checksum of a hex byte grid.

    Only fully-filled cells (two digits) are used. A grid with no filled
    cell is reported as a failed result.
    """
    hex_data = cells_to_hex(cells)
    if not hex_data:
        return format_error("No data entered")
    return compute_crc8(hex_data, InputFormat.HEX, params)
