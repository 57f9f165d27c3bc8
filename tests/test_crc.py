import pytest

from rcdrive.crc import crc16


def test_empty_input_is_zero():
    assert crc16(b"") == 0


def test_standard_check_value():
    assert crc16(b"123456789") == 0x31C3


def test_single_byte_matches_table_entry():
    # The table entry for index 1 is the polynomial itself.
    assert crc16(b"\x01") == 0x1021


@pytest.mark.parametrize(
    "data",
    [b"\x00", b"\x04", b"hello world", bytes(range(256)), b"\xff" * 40],
)
def test_appending_checksum_gives_zero_residue(data):
    checksum = crc16(data)
    assert crc16(data + checksum.to_bytes(2, "big")) == 0


def test_accepts_bytearray_and_list_of_ints():
    data = b"\x02\x05\x04"
    assert crc16(bytearray(data)) == crc16(data)
    assert crc16(list(data)) == crc16(data)


def test_result_fits_in_sixteen_bits():
    for length in range(0, 64, 7):
        assert 0 <= crc16(bytes(range(length))) <= 0xFFFF


def test_detects_single_bit_change():
    assert crc16(b"\x10\x20\x30") != crc16(b"\x10\x21\x30")