"""Algorithm constants for CRC-8/MAXIM calculation."""

from enum import Enum

# ============================================================================
# Algorithm Parameters
# ============================================================================

POLYNOMIAL = 0x8C  # Reflected form of x^8 + x^5 + x^4 + 1
INITIAL_VALUE = 0x00
ALGORITHM_NAME = "CRC-8/MAXIM"

BYTE_MASK = 0xFF
BITS_PER_BYTE = 8

# ============================================================================
# Input Formats
# ============================================================================


class InputFormat(str, Enum):
    """Representation of the user-entered data."""

    HEX = "hex"
    TEXT = "text"


# ============================================================================
# History
# ============================================================================

HISTORY_SIZE = 10
HISTORY_INPUT_MAX_LEN = 50  # longer inputs are truncated with "..."

# ============================================================================
# Example Data
# ============================================================================

# Sample byte grids offered to users (8-byte vectors first)
EXAMPLES: list[list[str]] = [
    ["C8", "64", "54", "00", "00", "11", "22", "33"],
    ["01", "64", "FF", "E2", "00", "00", "00", "11"],
    ["48", "65", "6C", "6C", "6F", "20", "57", "6F"],
    ["31", "32", "33", "34", "35", "36", "37", "38"],
    ["C8", "64", "54", "00", "00"],
    ["01", "64", "FF", "E2", "00", "00", "00", "00", "11"],
    ["01", "64", "00", "1E", "00", "00", "01", "00", "B3", "AA"],
]
