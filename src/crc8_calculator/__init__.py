"""CRC-8/MAXIM checksum calculator."""

__version__ = "1.0.0"
