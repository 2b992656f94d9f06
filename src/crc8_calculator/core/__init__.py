"""Core application functionality."""

from crc8_calculator.core.config import Settings, setup_logging
from crc8_calculator.core.history import CalculationHistory, JsonFileHistoryStorage, MemoryHistoryStorage
from crc8_calculator.core.models import CRC8_MAXIM, AlgorithmParameters, ComputationResult, HistoryEntry

__all__ = [
    "CRC8_MAXIM",
    "AlgorithmParameters",
    "CalculationHistory",
    "ComputationResult",
    "HistoryEntry",
    "JsonFileHistoryStorage",
    "MemoryHistoryStorage",
    "Settings",
    "setup_logging",
]
