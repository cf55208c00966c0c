import pytest

from chipeight.opcode import Opcode


BYTE_PAIRS = [
    (0x00, 0x00),
    (0x00, 0xE0),
    (0x00, 0xEE),
    (0x12, 0x34),
    (0xD0, 0x15),
    (0xAB, 0xCD),
    (0xFF, 0xFF),
    (0x8F, 0x7E),
]


def test_fields_of_sample_instruction():
    op = Opcode.from_bytes(0x12, 0x34)
    assert (op.a, op.x, op.y, op.n) == (1, 2, 3, 4)
    assert op.nn == 0x34
    assert op.nnn == 0x234
    assert op.opcode == 0x1234


def test_clear_screen_instruction():
    op = Opcode.from_bytes(0x00, 0xE0)
    assert op.a == 0
    assert op.nn == 0xE0
    assert op.opcode == 0x00E0


@pytest.mark.parametrize("first, second", BYTE_PAIRS)
def test_opcode_is_big_endian_word(first, second):
    op = Opcode.from_bytes(first, second)
    assert op.opcode == int.from_bytes(bytes([first, second]), "big")


@pytest.mark.parametrize("first, second", BYTE_PAIRS)
def test_nibbles_reassemble_to_opcode(first, second):
    op = Opcode.from_bytes(first, second)
    assert (op.a << 12) | (op.x << 8) | (op.y << 4) | op.n == op.opcode


@pytest.mark.parametrize("first, second", BYTE_PAIRS)
def test_nn_is_low_byte_and_nnn_low_twelve_bits(first, second):
    op = Opcode.from_bytes(first, second)
    assert op.nn == second
    assert op.nnn == op.opcode & 0x0FFF
    assert (op.y << 4) | op.n == op.nn


@pytest.mark.parametrize("first, second", BYTE_PAIRS)
def test_fields_are_in_range(first, second):
    op = Opcode.from_bytes(first, second)
    assert all(0 <= nib <= 0xF for nib in (op.a, op.x, op.y, op.n))
    assert 0 <= op.nn <= 0xFF
    assert 0 <= op.nnn <= 0xFFF


def test_string_form_is_four_hex_digits():
    op = Opcode.from_bytes(0xAB, 0xCD)
    assert str(op) == "ABCD"


@pytest.mark.parametrize("first, second", [(256, 0), (0, 256), (-1, 0), (0, -5)])
def test_out_of_range_bytes_are_rejected(first, second):
    with pytest.raises(ValueError):
        Opcode.from_bytes(first, second)


def test_opcode_is_immutable():
    op = Opcode.from_bytes(0x12, 0x34)
    with pytest.raises(AttributeError):
        op.a = 5
    assert op.a == 1
    assert op.opcode == 0x1234