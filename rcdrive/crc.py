"""CRC-16 checksum used to frame VESC UART packets (polynomial 0x1021, initial value 0)."""

from __future__ import annotations

from collections.abc import Iterable

_POLYNOMIAL = 0x1021


def _make_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            crc = ((crc << 1) ^ _POLYNOMIAL) if crc & 0x8000 else (crc << 1)
            crc &= 0xFFFF
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


def crc16(data: bytes | bytearray | memoryview | Iterable[int]) -> int:
    """Return the 16-bit checksum of ``data``."""
    checksum = 0
    for byte in bytes(data):
        checksum = _TABLE[((checksum >> 8) ^ byte) & 0xFF] ^ ((checksum << 8) & 0xFFFF)
    return checksum