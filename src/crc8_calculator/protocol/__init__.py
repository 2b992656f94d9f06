"""CRC-8 decoding, checksum and formatting."""

from crc8_calculator.protocol.codec import (
    DecodeError,
    InvalidHexFormatError,
    cells_to_hex,
    decode_input,
    hex_to_bytes,
    replace_lone_surrogates,
    text_to_bytes,
)
from crc8_calculator.protocol.constants import ALGORITHM_NAME, INITIAL_VALUE, POLYNOMIAL, InputFormat

# crc and formatter imported lazily to avoid circular import with core.models
# (core.models -> protocol.constants -> protocol.__init__ -> crc -> core.models)


def __getattr__(name: str):
    if name in ("calculate_crc8", "verify_crc8"):
        from crc8_calculator.protocol import crc

        return getattr(crc, name)
    if name in ("format_result", "format_error"):
        from crc8_calculator.protocol import formatter

        return getattr(formatter, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ALGORITHM_NAME",
    "INITIAL_VALUE",
    "POLYNOMIAL",
    "DecodeError",
    "InputFormat",
    "InvalidHexFormatError",
    "calculate_crc8",
    "cells_to_hex",
    "decode_input",
    "format_error",
    "format_result",
    "hex_to_bytes",
    "replace_lone_surrogates",
    "text_to_bytes",
    "verify_crc8",
]
