"""VESC UART and SBUS protocol tools for radio-controlled drive systems."""

__version__ = "0.1.0"