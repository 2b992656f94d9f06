"""HTTP API for the CRC-8 calculator."""
