# rcdrive

Python tools for the two serial protocols found on a radio-controlled drive:

- **VESC UART**: send commands to a VESC motor controller and read back its
  telemetry (currents, RPM, input voltage, amp hours, tachometer, fault code).
- **SBUS**: find frames in the byte stream a radio receiver sends, decode
  their channels and flags, and build frames to send.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Reading VESC telemetry from the command line

The `rcdrive` command opens a serial port, asks the VESC for its values
repeatedly, and prints the RPM, input voltage, amp hours and absolute
tachometer count, or `Failed to get data!` when no valid reply arrives.

```
rcdrive /dev/ttyUSB0 --baud 115200 --interval 0.5 --count 10 --timeout-ms 100
```

`--count` defaults to polling until interrupted with Ctrl-C. Run
`rcdrive --help` for the full list of options.

## Using the library

### VESC (`rcdrive.vesc`)

```python
import serial
from rcdrive.vesc import VescError, VescUart

with serial.Serial("/dev/ttyUSB0", 115200, timeout=0.01) as port:
    vesc = VescUart(port, timeout_ms=100)
    try:
        data = vesc.get_values()
        print(data.rpm, data.inp_voltage, data.error)
    except VescError as exc:
        print("no reply:", exc)
    vesc.set_current(2.5)
    vesc.send_keepalive()
```

`VescUart` offers `get_values`, `get_fw_version`, `set_current`,
`set_brake_current`, `set_rpm`, `set_duty`, `send_keepalive` and
`set_nunchuck_values` (which sends the `nunchuck` attribute, a
`NunchuckState`). Every command takes an optional `can_id`; when it is not
zero the command is forwarded over CAN to that controller. The last replies
are kept in `vesc.data` (`VescData`) and `vesc.fw_version`
(`FirmwareVersion`); `format_values()` returns the telemetry as text.
Timeouts, bad CRCs, truncated or unknown replies raise `VescError`. Pass a
text stream as `debug=` to log every frame sent and received.

Frames can be built and checked without a port:

```python
from rcdrive.vesc import pack_payload, unpack_message

frame = pack_payload(b"\x04")
assert unpack_message(frame) == b"\x04"
```

`rcdrive.crc.crc16` is the CRC-16 used by the frames, and
`rcdrive.buffer.BufferWriter` / `BufferReader` handle the big-endian
integer, scaled-float, packed-float and boolean fields the VESC uses.
`rcdrive.packets` holds the wire identifiers (`CommPacketId`, `CanPacketId`,
`FaultCode`, `MotePacket`, `NrfPairResult`) and `rcdrive.datatypes` the
configuration enumerations (`AppUse`, `MotorType`, `ControlMode` and others).

### SBUS (`rcdrive.sbus`)

```python
from rcdrive.sbus import SbusParser, decode_channels, encode_packet

packet = encode_packet([992] * 16)
parser = SbusParser()
for frame in parser.feed(b"\x00" + packet, now_us=0):
    print(frame.channels, frame.failsafe, frame.lost_frame)
```

`SbusParser.feed` returns the list of `SbusFrame`s completed by the bytes
given; a gap longer than `timeout_us` (7000 µs by default) between calls
restarts frame search. Frames carry the first ten channels.

`Sbus` wraps a serial port: `read()` returns the next complete frame or
`None`, `write()` sends up to 16 raw channels. Per-channel end points
(`set_end_points`, default 172 and 1811) map raw values linearly to -1 .. +1
in `read_cal()` and back in `write_cal()`. `set_write_cal` sets a polynomial
(`poly_val`, highest order first) applied before `write_cal` sends;
`set_read_cal` only stores coefficients, which `read_cal` does not apply.
The port must already be opened at 100000 baud, 8E2, with the signal
inverted as SBUS requires.

### Rolling average (`rcdrive.rolling`)

```python
from rcdrive.rolling import RollingAverage

avg = RollingAverage(4)
for value in (1.0, 2.0, 3.0):
    avg.push(value)
print(avg.average())  # 2.0
```

## What this package does not do

It does not contain a control loop that turns receiver channels into motor
commands, and it has no support for ODrive controllers; it supplies the
protocol pieces such a loop would be built from. The VESC reply reader
handles only messages under 256 bytes, and only the values and firmware
version replies are decoded.