"""CHIP-8 main memory with the built-in hexadecimal font."""

from __future__ import annotations

MEMORY_SIZE = 4056
FONT_START = 0x050
PROGRAM_START = 0x200

FONTSET = bytes(
    (
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    )
)


class Memory:
    """Byte-addressable RAM; the font is always present at ``FONT_START``."""

    def __init__(self) -> None:
        self.data = bytearray(MEMORY_SIZE)
        self.data[FONT_START:FONT_START + len(FONTSET)] = FONTSET

    def __len__(self) -> int:
        return len(self.data)

    def _check_address(self, address: int) -> None:
        if not 0 <= address < len(self.data):
            raise IndexError(f"memory address out of range: {address:#x}")

    def read_byte(self, address: int) -> int:
        """Return the byte stored at ``address``."""
        self._check_address(address)
        return self.data[address]

    def write_byte(self, address: int, byte: int) -> None:
        """Store ``byte`` at ``address``."""
        self._check_address(address)
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"value does not fit in a byte: {byte!r}")
        self.data[address] = byte

    def load_program(self, program: bytes) -> None:
        """Copy ``program`` into memory starting at ``PROGRAM_START``."""
        end = PROGRAM_START + len(program)
        if end > len(self.data):
            raise ValueError(
                f"program of {len(program)} bytes does not fit in memory"
            )
        self.data[PROGRAM_START:end] = program