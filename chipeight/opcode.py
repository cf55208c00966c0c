"""Decoding of two-byte CHIP-8 instructions into their nibble fields."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Opcode:
    """A CHIP-8 instruction split into the fields the interpreter dispatches on.

    ``a`` is the first nibble, ``x``, ``y`` and ``n`` the second, third and
    fourth, ``nn`` the low byte and ``nnn`` the low twelve bits.
    """

    opcode: int
    a: int
    x: int
    y: int
    n: int
    nn: int
    nnn: int

    @classmethod
    def from_bytes(cls, first_byte: int, second_byte: int) -> Opcode:
        """Build an opcode from its high and low bytes (big-endian order)."""
        for value in (first_byte, second_byte):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"opcode byte out of range: {value!r}")

        x = first_byte & 0xF
        return cls(
            opcode=int.from_bytes(bytes((first_byte, second_byte)), "big"),
            a=(first_byte >> 4) & 0xF,
            x=x,
            y=(second_byte >> 4) & 0xF,
            n=second_byte & 0xF,
            nn=second_byte,
            nnn=(x << 8) | second_byte,
        )

    def __str__(self) -> str:
        return f"{self.opcode:04X}"