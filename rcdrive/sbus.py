"""SBUS receiver frames: parsing, 11-bit channel packing and linear calibration."""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

SBUS_BAUD = 100000
NUM_CHANNELS = 10
MAX_CHANNELS = 16
PACKET_SIZE = 25
HEADER = 0x0F
FOOTER = 0x00
SBUS2_FOOTER = 0x04
SBUS2_MASK = 0x0F
LOST_FRAME = 0x04
FAILSAFE = 0x08
DEFAULT_MIN = 172
DEFAULT_MAX = 1811
TIMEOUT_US = 7000

_PAYLOAD_SIZE = 24
_CHANNEL_BYTES = 22
_FLAGS_INDEX = 22
_CHANNEL_BITS = 11
_CHANNEL_MASK = 0x7FF
_MIN_DECODE_BYTES = 14


@dataclass(frozen=True)
class SbusFrame:
    """Channel values and status flags of one received frame."""

    channels: tuple
    failsafe: bool = False
    lost_frame: bool = False


def decode_channels(payload: bytes | bytearray | Sequence[int]) -> tuple[int, ...]:
    """Unpack the first ten 11-bit channels from the bytes after the header."""
    data = bytes(payload)
    if len(data) < _MIN_DECODE_BYTES:
        raise ValueError(f"need at least {_MIN_DECODE_BYTES} bytes, got {len(data)}")
    bits = int.from_bytes(data[:_CHANNEL_BYTES], "little")
    return tuple(
        (bits >> (_CHANNEL_BITS * channel)) & _CHANNEL_MASK for channel in range(NUM_CHANNELS)
    )


def encode_packet(channels: Iterable[int] | None = None) -> bytes:
    """Build a 25-byte frame carrying up to 16 channels; missing channels are zero."""
    values = [int(v) for v in channels] if channels is not None else []
    if len(values) > MAX_CHANNELS:
        raise ValueError(f"at most {MAX_CHANNELS} channels, got {len(values)}")
    bits = 0
    for channel, value in enumerate(values):
        bits |= (value & _CHANNEL_MASK) << (_CHANNEL_BITS * channel)
    return bytes([HEADER]) + bits.to_bytes(_CHANNEL_BYTES, "little") + bytes([0x00, FOOTER])


def poly_val(coefficients: Sequence[float] | None, x: float) -> float:
    """Evaluate a polynomial, highest order coefficient first."""
    if not coefficients:
        return 0.0
    first, *rest = coefficients
    result = float(first)
    for coefficient in rest:
        result = result * x + coefficient
    return result


def _is_footer(byte: int) -> bool:
    return byte == FOOTER or (byte & SBUS2_MASK) == SBUS2_FOOTER


class SbusParser:
    """Finds frames in a byte stream, resetting after a gap longer than ``timeout_us``."""

    def __init__(self, timeout_us: int = TIMEOUT_US) -> None:
        self.timeout_us = timeout_us
        self._state = 0
        self._prev = FOOTER
        self._payload = bytearray(_PAYLOAD_SIZE)
        self._last_us: int | None = None

    def feed(self, data: bytes | bytearray, now_us: int | None = None) -> list[SbusFrame]:
        """Consume ``data`` received at ``now_us`` and return the frames completed."""
        if now_us is None:
            now_us = time.monotonic_ns() // 1000
        if self._last_us is not None and now_us - self._last_us > self.timeout_us:
            self._state = 0
        frames = []
        for byte in bytes(data):
            self._last_us = now_us
            frame = self._push(byte)
            if frame is not None:
                frames.append(frame)
        return frames

    def _push(self, byte: int) -> SbusFrame | None:
        if self._state == 0:
            if byte == HEADER and _is_footer(self._prev):
                self._state = 1
            self._prev = byte
            return None
        index = self._state - 1
        if index < _PAYLOAD_SIZE:
            self._payload[index] = byte
            self._state += 1
        if self._state - 1 == _PAYLOAD_SIZE:
            # The previous byte is deliberately left as it was before the footer.
            self._state = 0
            return self._frame() if _is_footer(byte) else None
        self._prev = byte
        return None

    def _frame(self) -> SbusFrame:
        flags = self._payload[_FLAGS_INDEX]
        return SbusFrame(
            channels=decode_channels(self._payload),
            failsafe=bool(flags & FAILSAFE),
            lost_frame=bool(flags & LOST_FRAME),
        )


class _Port(Protocol):
    @property
    def in_waiting(self) -> int: ...

    def read(self, size: int = 1) -> bytes: ...

    def write(self, data: bytes) -> int | None: ...


def _check_channel(channel: int) -> None:
    if not 0 <= channel < NUM_CHANNELS:
        raise ValueError(f"channel must be in 0..{NUM_CHANNELS - 1}, got {channel}")


class Sbus:
    """Reads and writes SBUS frames on a serial port (100000 baud, 8E2, inverted)."""

    def __init__(self, port: _Port) -> None:
        self.port = port
        self.parser = SbusParser()
        self._min = [DEFAULT_MIN] * NUM_CHANNELS
        self._max = [DEFAULT_MAX] * NUM_CHANNELS
        self._scale = [0.0] * NUM_CHANNELS
        self._bias = [0.0] * NUM_CHANNELS
        self._read_coeff: list[tuple[float, ...]] = [()] * NUM_CHANNELS
        self._write_coeff: list[tuple[float, ...]] = [()] * NUM_CHANNELS
        self._last_channels: tuple[int, ...] = ()
        for channel in range(NUM_CHANNELS):
            self._update_scale_bias(channel)

    def _update_scale_bias(self, channel: int) -> None:
        low = float(self._min[channel])
        high = float(self._max[channel])
        scale = 2.0 / (high - low)
        self._scale[channel] = scale
        self._bias[channel] = -1.0 * (low + (high - low) / 2.0) * scale

    def read(self) -> SbusFrame | None:
        """Read waiting bytes up to the first complete frame; None if there is none yet."""
        while self.port.in_waiting > 0:
            data = self.port.read(1)
            if not data:
                break
            frames = self.parser.feed(data)
            if frames:
                return frames[0]
        return None

    def read_cal(self) -> SbusFrame | None:
        """Like :meth:`read`, with channels scaled so the end points map to -1 and +1."""
        frame = self.read()
        if frame is None:
            return None
        calibrated = tuple(
            raw * scale + bias for raw, scale, bias in zip(frame.channels, self._scale, self._bias)
        )
        return SbusFrame(calibrated, frame.failsafe, frame.lost_frame)

    def write(self, channels: Iterable[int] | None = None) -> None:
        """Send a frame; with no channels, the last channels written are sent again."""
        values = tuple(int(v) for v in channels) if channels is not None else self._last_channels
        packet = encode_packet(values)
        self._last_channels = values
        self.port.write(packet)

    def write_cal(self, cal_channels: Iterable[float] | None = None) -> None:
        """Send calibrated values (-1 to +1 between the end points) for the ten channels."""
        raw = [0] * NUM_CHANNELS
        if cal_channels is not None:
            values = list(cal_channels)
            if len(values) > NUM_CHANNELS:
                raise ValueError(f"at most {NUM_CHANNELS} channels, got {len(values)}")
            for channel, value in enumerate(values):
                if self._write_coeff[channel]:
                    value = poly_val(self._write_coeff[channel], value)
                level = int((value - self._bias[channel]) / self._scale[channel])
                raw[channel] = min(max(level, 0), _CHANNEL_MASK)
        self.write(raw)

    def set_end_points(self, channel: int, min_value: int, max_value: int) -> None:
        _check_channel(channel)
        if min_value == max_value:
            raise ValueError("end points must differ")
        self._min[channel] = int(min_value)
        self._max[channel] = int(max_value)
        self._update_scale_bias(channel)

    def get_end_points(self, channel: int) -> tuple[int, int]:
        _check_channel(channel)
        return self._min[channel], self._max[channel]

    def set_read_cal(self, channel: int, coeff: Iterable[float]) -> None:
        """Store read calibration coefficients, highest order first."""
        _check_channel(channel)
        coefficients = tuple(float(c) for c in coeff)
        if not coefficients:
            raise ValueError("at least one coefficient is required")
        self._read_coeff[channel] = coefficients

    def get_read_cal(self, channel: int) -> tuple[float, ...]:
        _check_channel(channel)
        return self._read_coeff[channel]

    def set_write_cal(self, channel: int, coeff: Iterable[float]) -> None:
        """Set a polynomial applied to calibrated values before :meth:`write_cal` sends them."""
        _check_channel(channel)
        coefficients = tuple(float(c) for c in coeff)
        if not coefficients:
            raise ValueError("at least one coefficient is required")
        self._write_coeff[channel] = coefficients

    def get_write_cal(self, channel: int) -> tuple[float, ...]:
        _check_channel(channel)
        return self._write_coeff[channel]