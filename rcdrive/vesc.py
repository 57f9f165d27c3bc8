"""Talk to a VESC motor controller over its UART packet protocol."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from rcdrive.buffer import BufferReader, BufferWriter
from rcdrive.crc import crc16
from rcdrive.packets import CommPacketId, FaultCode

_SHORT_START = 2
_LONG_START = 3
_END_BYTE = 3
_MAX_MESSAGE = 256
_MIN_VALUES_PAYLOAD = 56


class VescError(Exception):
    """Raised when a message cannot be sent, received or understood."""


class SerialLike(Protocol):
    def read(self, size: int = 1) -> bytes: ...

    def write(self, data: bytes) -> int | None: ...


@dataclass
class VescData:
    """Telemetry returned by the controller."""

    avg_motor_current: float = 0.0
    avg_input_current: float = 0.0
    duty_cycle_now: float = 0.0
    rpm: float = 0.0
    inp_voltage: float = 0.0
    amp_hours: float = 0.0
    amp_hours_charged: float = 0.0
    watt_hours: float = 0.0
    watt_hours_charged: float = 0.0
    tachometer: int = 0
    tachometer_abs: int = 0
    temp_mosfet: float = 0.0
    temp_motor: float = 0.0
    pid_pos: float = 0.0
    id: int = 0
    error: FaultCode | int = FaultCode.NONE


@dataclass
class NunchuckState:
    """Joystick and button values sent to the nunchuk application."""

    value_x: int = 127
    value_y: int = 127
    upper_button: bool = False
    lower_button: bool = False


@dataclass
class FirmwareVersion:
    major: int = 0
    minor: int = 0


def pack_payload(payload: bytes | bytearray) -> bytes:
    """Frame ``payload`` with start byte, length, CRC and end byte."""
    payload = bytes(payload)
    length = len(payload)
    if length > 0xFFFF:
        raise VescError(f"payload of {length} bytes is too long")
    if length <= 0xFF:
        header = bytes([_SHORT_START, length])
    else:
        header = bytes([_LONG_START]) + length.to_bytes(2, "big")
    return header + payload + crc16(payload).to_bytes(2, "big") + bytes([_END_BYTE])


def unpack_message(message: bytes | bytearray) -> bytes:
    """Check a short framed message and return the payload it carries."""
    message = bytes(message)
    if len(message) < 5:
        raise VescError("message too short")
    if message[0] != _SHORT_START:
        raise VescError(f"unsupported start byte {message[0]}")
    length = message[1]
    if len(message) != length + 5:
        raise VescError(f"message length {len(message)} does not match payload length {length}")
    if message[-1] != _END_BYTE:
        raise VescError("missing end byte")
    payload = message[2:2 + length]
    received = int.from_bytes(message[-3:-1], "big")
    computed = crc16(payload)
    if received != computed:
        raise VescError(f"CRC mismatch: received {received}, computed {computed}")
    return payload


def _format_bytes(data: bytes) -> str:
    return " ".join(str(b) for b in data)


class VescUart:
    """Sends commands to a VESC and keeps the last values it reported."""

    def __init__(
        self,
        port: SerialLike | None = None,
        timeout_ms: int = 100,
        debug: TextIO | None = None,
    ) -> None:
        self.port = port
        self.timeout_ms = timeout_ms
        self.debug = debug
        self.data = VescData()
        self.nunchuck = NunchuckState()
        self.fw_version = FirmwareVersion()

    def _log(self, text: str) -> None:
        if self.debug is not None:
            self.debug.write(text + "\n")

    @staticmethod
    def _prefix(can_id: int) -> BufferWriter:
        writer = BufferWriter()
        if can_id != 0:
            writer.append_byte(CommPacketId.FORWARD_CAN)
            writer.append_byte(can_id)
        return writer

    def send_payload(self, payload: bytes | bytearray) -> int:
        """Frame and write ``payload``; return the number of bytes framed."""
        message = pack_payload(payload)
        self._log(f"Package to send: {_format_bytes(message)}")
        if self.port is not None:
            self.port.write(message)
        return len(message)

    def receive_message(self) -> bytes:
        """Read one framed message and return its payload."""
        if self.port is None:
            raise VescError("no serial port set")
        buffer = bytearray()
        end = _MAX_MESSAGE
        deadline = time.monotonic() + self.timeout_ms / 1000.0
        complete = False
        while not complete and time.monotonic() < deadline:
            chunk = self.port.read(1)
            if not chunk:
                continue
            buffer += chunk
            if len(buffer) == 2:
                if buffer[0] == _SHORT_START:
                    end = buffer[1] + 5
                elif buffer[0] == _LONG_START:
                    self._log("Message is larger than 256 bytes - not supported")
                else:
                    self._log("Unvalid start bit")
            if len(buffer) >= _MAX_MESSAGE:
                raise VescError("message exceeds 256 bytes")
            if len(buffer) == end and buffer[end - 1] == _END_BYTE:
                self._log("End of message reached!")
                complete = True
        if not complete:
            self._log("Timeout")
            raise VescError("timed out waiting for a message")
        payload = unpack_message(buffer)
        self._log(f"Received: {_format_bytes(bytes(buffer))}")
        self._log(f"Payload :      {_format_bytes(payload)}")
        return payload

    def process_read_packet(self, payload: bytes | bytearray) -> VescData | FirmwareVersion:
        """Decode a reply payload into ``data`` or ``fw_version`` and return it."""
        if not payload:
            raise VescError("empty payload")
        packet_id = payload[0]
        reader = BufferReader(payload, 1)
        try:
            if packet_id == CommPacketId.FW_VERSION:
                self.fw_version = FirmwareVersion(reader.get_byte(), reader.get_byte())
                return self.fw_version
            if packet_id == CommPacketId.GET_VALUES:
                data = VescData()
                data.temp_mosfet = reader.get_float16(10.0)
                data.temp_motor = reader.get_float16(10.0)
                data.avg_motor_current = reader.get_float32(100.0)
                data.avg_input_current = reader.get_float32(100.0)
                reader.skip(4)  # average d-axis current
                reader.skip(4)  # average q-axis current
                data.duty_cycle_now = reader.get_float16(1000.0)
                data.rpm = reader.get_float32(1.0)
                data.inp_voltage = reader.get_float16(10.0)
                data.amp_hours = reader.get_float32(10000.0)
                data.amp_hours_charged = reader.get_float32(10000.0)
                data.watt_hours = reader.get_float32(10000.0)
                data.watt_hours_charged = reader.get_float32(10000.0)
                data.tachometer = reader.get_int32()
                data.tachometer_abs = reader.get_int32()
                fault = reader.get_byte()
                try:
                    data.error = FaultCode(fault)
                except ValueError:
                    data.error = fault
                data.pid_pos = reader.get_float32(1000000.0)
                data.id = reader.get_byte()
                self.data = data
                return data
        except IndexError as exc:
            raise VescError(f"truncated payload: {exc}") from exc
        raise VescError(f"unsupported packet id {packet_id}")

    def get_fw_version(self, can_id: int = 0) -> FirmwareVersion:
        """Ask for the firmware version and return it."""
        writer = self._prefix(can_id)
        writer.append_byte(CommPacketId.FW_VERSION)
        self.send_payload(writer.to_bytes())
        payload = self.receive_message()
        if not payload:
            raise VescError("empty reply")
        result = self.process_read_packet(payload)
        if not isinstance(result, FirmwareVersion):
            raise VescError("reply is not a firmware version")
        return result

    def get_values(self, can_id: int = 0) -> VescData:
        """Ask for telemetry and return it."""
        self._log(f"Command: COMM_GET_VALUES {can_id}")
        writer = self._prefix(can_id)
        writer.append_byte(CommPacketId.GET_VALUES)
        self.send_payload(writer.to_bytes())
        payload = self.receive_message()
        if len(payload) < _MIN_VALUES_PAYLOAD:
            raise VescError(f"values reply of {len(payload)} bytes is too short")
        result = self.process_read_packet(payload)
        if not isinstance(result, VescData):
            raise VescError("reply is not a values packet")
        return result

    def set_nunchuck_values(self, can_id: int = 0) -> None:
        """Send the current ``nunchuck`` state."""
        self._log(f"Command: COMM_SET_CHUCK_DATA {can_id}")
        writer = self._prefix(can_id)
        writer.append_byte(CommPacketId.SET_CHUCK_DATA)
        writer.append_byte(self.nunchuck.value_x)
        writer.append_byte(self.nunchuck.value_y)
        writer.append_bool(self.nunchuck.lower_button)
        writer.append_bool(self.nunchuck.upper_button)
        for _ in range(6):  # unused acceleration data
            writer.append_byte(0)
        self._log("Nunchuck Values:")
        self._log(
            f"x={self.nunchuck.value_x} y={self.nunchuck.value_y} "
            f"LBTN={int(self.nunchuck.lower_button)} UBTN={int(self.nunchuck.upper_button)}"
        )
        self.send_payload(writer.to_bytes())

    def _send_int32(self, command: CommPacketId, value: float, can_id: int) -> None:
        writer = self._prefix(can_id)
        writer.append_byte(command)
        writer.append_int32(int(value))
        self.send_payload(writer.to_bytes())

    def set_current(self, current: float, can_id: int = 0) -> None:
        """Drive the motor with ``current`` amps."""
        self._send_int32(CommPacketId.SET_CURRENT, current * 1000, can_id)

    def set_brake_current(self, brake_current: float, can_id: int = 0) -> None:
        """Brake the motor with ``brake_current`` amps."""
        self._send_int32(CommPacketId.SET_CURRENT_BRAKE, brake_current * 1000, can_id)

    def set_rpm(self, rpm: float, can_id: int = 0) -> None:
        """Hold the electrical RPM at ``rpm``."""
        self._send_int32(CommPacketId.SET_RPM, rpm, can_id)

    def set_duty(self, duty: float, can_id: int = 0) -> None:
        """Set the duty cycle, 0.0 to 1.0."""
        self._send_int32(CommPacketId.SET_DUTY, duty * 100000, can_id)

    def send_keepalive(self, can_id: int = 0) -> None:
        writer = self._prefix(can_id)
        writer.append_byte(CommPacketId.ALIVE)
        self.send_payload(writer.to_bytes())

    def format_values(self) -> str:
        """Return the last telemetry as readable lines."""
        d = self.data
        lines = [
            f"avgMotorCurrent: {d.avg_motor_current:.2f}",
            f"avgInputCurrent: {d.avg_input_current:.2f}",
            f"dutyCycleNow: {d.duty_cycle_now:.2f}",
            f"rpm: {d.rpm:.2f}",
            f"inputVoltage: {d.inp_voltage:.2f}",
            f"ampHours: {d.amp_hours:.2f}",
            f"ampHoursCharged: {d.amp_hours_charged:.2f}",
            f"wattHours: {d.watt_hours:.2f}",
            f"wattHoursCharged: {d.watt_hours_charged:.2f}",
            f"tachometer: {d.tachometer}",
            f"tachometerAbs: {d.tachometer_abs}",
            f"tempMosfet: {d.temp_mosfet:.2f}",
            f"tempMotor: {d.temp_motor:.2f}",
            f"error: {int(d.error)}",
        ]
        return "\n".join(lines)