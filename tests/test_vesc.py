import io

import pytest

from rcdrive.buffer import BufferWriter
from rcdrive.crc import crc16
from rcdrive.packets import CommPacketId, FaultCode
from rcdrive.vesc import (
    FirmwareVersion,
    VescError,
    VescUart,
    pack_payload,
    unpack_message,
)


class FakePort:
    def __init__(self, incoming=b""):
        self.incoming = bytearray(incoming)
        self.written = bytearray()

    def read(self, size=1):
        chunk = bytes(self.incoming[:size])
        del self.incoming[:size]
        return chunk

    def write(self, data):
        self.written += data
        return len(data)


def _values_payload():
    w = BufferWriter()
    w.append_byte(CommPacketId.GET_VALUES)
    w.append_float16(25.5, 10.0)
    w.append_float16(40.0, 10.0)
    w.append_float32(3.25, 100.0)
    w.append_float32(1.5, 100.0)
    w.append_int32(0)
    w.append_int32(0)
    w.append_float16(0.5, 1000.0)
    w.append_float32(1234.0, 1.0)
    w.append_float16(36.5, 10.0)
    w.append_float32(1.25, 10000.0)
    w.append_float32(0.5, 10000.0)
    w.append_float32(2.0, 10000.0)
    w.append_float32(0.25, 10000.0)
    w.append_int32(-500)
    w.append_int32(800)
    w.append_byte(FaultCode.OVER_TEMP_FET)
    w.append_float32(0.5, 1000000.0)
    w.append_byte(9)
    return w.to_bytes()


def test_pack_payload_wire_layout():
    payload = bytes([CommPacketId.GET_VALUES])
    message = pack_payload(payload)
    assert message[:3] == bytes([2, 1, 4])
    assert int.from_bytes(message[3:5], "big") == crc16(payload)
    assert message[-1] == 3


def test_pack_long_payload_uses_two_byte_length():
    payload = bytes(300)
    message = pack_payload(payload)
    assert message[0] == 3
    assert int.from_bytes(message[1:3], "big") == 300
    assert len(message) == 300 + 6


def test_unpack_round_trip():
    payload = bytes(range(20))
    assert unpack_message(pack_payload(payload)) == payload


def test_unpack_rejects_bad_crc():
    message = bytearray(pack_payload(b"\x01\x02\x03"))
    message[2] ^= 0xFF
    with pytest.raises(VescError):
        unpack_message(message)


def test_unpack_rejects_bad_start_byte():
    message = bytearray(pack_payload(b"\x01"))
    message[0] = 7
    with pytest.raises(VescError):
        unpack_message(message)


def test_get_values_decodes_telemetry():
    port = FakePort(pack_payload(_values_payload()))
    vesc = VescUart(port, timeout_ms=50)
    data = vesc.get_values()
    assert bytes(port.written) == pack_payload(bytes([CommPacketId.GET_VALUES]))
    assert data.temp_mosfet == pytest.approx(25.5)
    assert data.temp_motor == pytest.approx(40.0)
    assert data.avg_motor_current == pytest.approx(3.25)
    assert data.avg_input_current == pytest.approx(1.5)
    assert data.duty_cycle_now == pytest.approx(0.5)
    assert data.rpm == pytest.approx(1234.0)
    assert data.inp_voltage == pytest.approx(36.5)
    assert data.amp_hours == pytest.approx(1.25)
    assert data.watt_hours == pytest.approx(2.0)
    assert data.tachometer == -500
    assert data.tachometer_abs == 800
    assert data.error is FaultCode.OVER_TEMP_FET
    assert data.pid_pos == pytest.approx(0.5)
    assert data.id == 9
    assert vesc.data == data


def test_get_values_rejects_short_reply():
    short = bytes([CommPacketId.GET_VALUES]) + bytes(10)
    vesc = VescUart(FakePort(pack_payload(short)), timeout_ms=50)
    with pytest.raises(VescError):
        vesc.get_values()


def test_get_fw_version_through_can():
    port = FakePort(pack_payload(bytes([CommPacketId.FW_VERSION, 6, 2])))
    vesc = VescUart(port, timeout_ms=50)
    version = vesc.get_fw_version(can_id=5)
    assert version == FirmwareVersion(6, 2)
    expected = bytes([CommPacketId.FORWARD_CAN, 5, CommPacketId.FW_VERSION])
    assert bytes(port.written) == pack_payload(expected)


def test_receive_times_out_without_data():
    vesc = VescUart(FakePort(), timeout_ms=20)
    with pytest.raises(VescError):
        vesc.receive_message()


def test_receive_without_port_raises():
    with pytest.raises(VescError):
        VescUart().receive_message()


def test_process_unknown_packet_raises():
    with pytest.raises(VescError):
        VescUart().process_read_packet(bytes([CommPacketId.REBOOT]))


def test_set_current_with_can_forward():
    port = FakePort()
    VescUart(port).set_current(2.5, can_id=7)
    w = BufferWriter()
    w.append_byte(CommPacketId.FORWARD_CAN)
    w.append_byte(7)
    w.append_byte(CommPacketId.SET_CURRENT)
    w.append_int32(2500)
    assert bytes(port.written) == pack_payload(w.to_bytes())


def test_set_duty_brake_rpm_payloads():
    port = FakePort()
    vesc = VescUart(port)
    vesc.set_duty(0.5)
    vesc.set_brake_current(-1.0)
    vesc.set_rpm(3000.0)
    expected = bytearray()
    for command, value in (
        (CommPacketId.SET_DUTY, 50000),
        (CommPacketId.SET_CURRENT_BRAKE, -1000),
        (CommPacketId.SET_RPM, 3000),
    ):
        w = BufferWriter()
        w.append_byte(command)
        w.append_int32(value)
        expected += pack_payload(w.to_bytes())
    assert bytes(port.written) == bytes(expected)


def test_keepalive_and_send_count():
    port = FakePort()
    vesc = VescUart(port)
    vesc.send_keepalive()
    assert bytes(port.written) == pack_payload(bytes([CommPacketId.ALIVE]))
    assert vesc.send_payload(b"\x00\x01") == len(pack_payload(b"\x00\x01"))


def test_nunchuck_payload():
    port = FakePort()
    vesc = VescUart(port)
    vesc.nunchuck.value_y = 200
    vesc.nunchuck.upper_button = True
    vesc.set_nunchuck_values()
    payload = unpack_message(bytes(port.written))
    assert len(payload) == 11
    assert payload[:5] == bytes([CommPacketId.SET_CHUCK_DATA, 127, 200, 0, 1])
    assert payload[5:] == bytes(6)


def test_format_values_and_debug_output():
    debug = io.StringIO()
    port = FakePort(pack_payload(_values_payload()))
    vesc = VescUart(port, timeout_ms=50, debug=debug)
    vesc.get_values()
    text = vesc.format_values()
    assert "rpm: 1234.00" in text.splitlines()
    assert "tachometer: -500" in text.splitlines()
    assert "End of message reached!" in debug.getvalue()