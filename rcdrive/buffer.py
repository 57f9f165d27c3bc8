"""Big-endian serialisation of integers, scaled floats and booleans for VESC payloads."""

from __future__ import annotations

import math
import struct

_SUBNORMAL_LIMIT = 1.5e-38
_SIG_SCALE = 8388608.0  # 2**23


def _to_float32(number: float) -> float:
    return struct.unpack("<f", struct.pack("<f", number))[0]


class BufferWriter:
    """Accumulates values into a byte string, most significant byte first."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def append_byte(self, value: int) -> None:
        self._data.append(int(value) & 0xFF)

    def append_int16(self, number: int) -> None:
        self._data += (int(number) & 0xFFFF).to_bytes(2, "big")

    def append_uint16(self, number: int) -> None:
        self._data += (int(number) & 0xFFFF).to_bytes(2, "big")

    def append_int32(self, number: int) -> None:
        self._data += (int(number) & 0xFFFFFFFF).to_bytes(4, "big")

    def append_uint32(self, number: int) -> None:
        self._data += (int(number) & 0xFFFFFFFF).to_bytes(4, "big")

    def append_float16(self, number: float, scale: float) -> None:
        """Store ``number * scale`` truncated to a 16-bit integer."""
        self.append_int16(int(number * scale))

    def append_float32(self, number: float, scale: float) -> None:
        """Store ``number * scale`` truncated to a 32-bit integer."""
        self.append_int32(int(number * scale))

    def append_float32_auto(self, number: float) -> None:
        """Store a float in a portable 32-bit exponent/significand form.

        Subnormal magnitudes are stored as zero. Values beyond the single
        precision range raise OverflowError.
        """
        number = _to_float32(number)
        if abs(number) < _SUBNORMAL_LIMIT:
            number = 0.0
        sig, exponent = math.frexp(number)
        sig_abs = abs(sig)
        sig_i = 0
        if sig_abs >= 0.5:
            sig_i = int((sig_abs - 0.5) * 2.0 * _SIG_SCALE)
            exponent += 126
        result = ((exponent & 0xFF) << 23) | (sig_i & 0x7FFFFF)
        if sig < 0:
            result |= 1 << 31
        self.append_uint32(result)

    def append_bool(self, value: bool) -> None:
        self._data.append(1 if value else 0)

    def to_bytes(self) -> bytes:
        return bytes(self._data)


class BufferReader:
    """Reads values back from a byte string, advancing ``index`` as it goes."""

    def __init__(self, data: bytes | bytearray | memoryview, index: int = 0) -> None:
        self.data = bytes(data)
        self.index = index

    def _take(self, count: int) -> bytes:
        end = self.index + count
        if self.index < 0 or end > len(self.data):
            raise IndexError(
                f"cannot read {count} byte(s) at offset {self.index} "
                f"from a buffer of {len(self.data)}"
            )
        chunk = self.data[self.index:end]
        self.index = end
        return chunk

    def get_byte(self) -> int:
        return self._take(1)[0]

    def skip(self, count: int) -> None:
        self._take(count)

    def get_int16(self) -> int:
        return int.from_bytes(self._take(2), "big", signed=True)

    def get_uint16(self) -> int:
        return int.from_bytes(self._take(2), "big")

    def get_int32(self) -> int:
        return int.from_bytes(self._take(4), "big", signed=True)

    def get_uint32(self) -> int:
        return int.from_bytes(self._take(4), "big")

    def get_float16(self, scale: float) -> float:
        return self.get_int16() / scale

    def get_float32(self, scale: float) -> float:
        return self.get_int32() / scale

    def get_float32_auto(self) -> float:
        raw = self.get_uint32()
        exponent = (raw >> 23) & 0xFF
        sig_i = raw & 0x7FFFFF
        negative = bool(raw & (1 << 31))
        sig = 0.0
        if exponent != 0 or sig_i != 0:
            sig = sig_i / (_SIG_SCALE * 2.0) + 0.5
            exponent -= 126
        if negative:
            sig = -sig
        return math.ldexp(sig, exponent)

    def get_bool(self) -> bool:
        return self.get_byte() == 1