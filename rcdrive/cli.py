"""Poll a VESC over a serial port and print its telemetry."""

from __future__ import annotations

import argparse
import sys
import time

import serial

from rcdrive.vesc import VescError, VescUart


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rcdrive", description="Print telemetry read from a VESC over UART."
    )
    parser.add_argument("port", help="serial device the VESC is connected to")
    parser.add_argument("--baud", type=int, default=115200, help="baud rate (default 115200)")
    parser.add_argument(
        "--interval", type=float, default=0.5, help="seconds between requests (default 0.5)"
    )
    parser.add_argument("--count", type=int, default=None, help="number of requests (default: forever)")
    parser.add_argument(
        "--timeout-ms", type=int, default=100, help="reply timeout in milliseconds (default 100)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        port = serial.Serial(args.port, args.baud, timeout=0.01)
    except serial.SerialException as exc:
        print(f"cannot open {args.port}: {exc}", file=sys.stderr)
        return 1

    print("VESC UART telemetry", flush=True)
    vesc = VescUart(port, timeout_ms=args.timeout_ms)
    polls = 0
    try:
        while args.count is None or polls < args.count:
            try:
                data = vesc.get_values()
            except VescError:
                print("Failed to get data!", flush=True)
            else:
                print(f"RPM: {data.rpm:.2f}")
                print(f"Input Voltage: {data.inp_voltage:.2f}")
                print(f"Amp Hours: {data.amp_hours:.2f}")
                print(f"Tachometer (Absolute): {data.tachometer_abs}", flush=True)
            polls += 1
            if args.count is None or polls < args.count:
                time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    finally:
        port.close()
    return 0