from unittest import mock

import serial

from rcdrive.buffer import BufferWriter
from rcdrive.cli import main
from rcdrive.packets import CommPacketId
from rcdrive.vesc import pack_payload


class FakeSerial:
    def __init__(self, data=b""):
        self.incoming = bytearray(data)
        self.written = bytearray()
        self.closed = False

    def read(self, size=1):
        chunk = bytes(self.incoming[:size])
        del self.incoming[:size]
        return chunk

    def write(self, data):
        self.written += data
        return len(data)

    def close(self):
        self.closed = True


def _values_reply():
    writer = BufferWriter()
    writer.append_byte(CommPacketId.GET_VALUES)
    writer.append_int16(250)  # mosfet temperature
    writer.append_int16(300)  # motor temperature
    writer.append_int32(0)  # motor current
    writer.append_int32(0)  # input current
    writer.append_int32(0)  # d-axis current
    writer.append_int32(0)  # q-axis current
    writer.append_int16(0)  # duty
    writer.append_int32(1234)  # rpm
    writer.append_int16(120)  # input voltage
    writer.append_int32(5000)  # amp hours
    writer.append_int32(0)
    writer.append_int32(0)
    writer.append_int32(0)
    writer.append_int32(7)  # tachometer
    writer.append_int32(42)  # tachometer absolute
    writer.append_byte(0)  # fault
    writer.append_int32(0)  # pid position
    writer.append_byte(1)  # controller id
    return pack_payload(writer.to_bytes())


def test_prints_telemetry(capsys):
    fake = FakeSerial(_values_reply())
    with mock.patch("serial.Serial", return_value=fake):
        code = main(["/dev/null", "--count", "1", "--interval", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "RPM: 1234.00" in out
    assert "Input Voltage: 12.00" in out
    assert "Amp Hours: 0.50" in out
    assert "Tachometer (Absolute): 42" in out
    assert bytes(fake.written) == pack_payload(bytes([CommPacketId.GET_VALUES]))
    assert fake.closed is True


def test_reports_failure_without_reply(capsys):
    fake = FakeSerial()
    with mock.patch("serial.Serial", return_value=fake):
        code = main(["/dev/null", "--count", "2", "--interval", "0", "--timeout-ms", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("Failed to get data!") == 2


def test_open_failure_returns_error(capsys):
    with mock.patch("serial.Serial", side_effect=serial.SerialException("no such port")):
        code = main(["/dev/missing", "--count", "1"])
    assert code == 1
    assert "no such port" in capsys.readouterr().err