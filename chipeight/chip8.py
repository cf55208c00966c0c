"""The CHIP-8 interpreter: fetch, decode and execute of single instructions."""

from __future__ import annotations

import logging
import random
from os import PathLike
from pathlib import Path

from chipeight.memory import Memory, PROGRAM_START
from chipeight.opcode import Opcode
from chipeight.timer import Timer

WIDTH = 64
HEIGHT = 32
STACK_DEPTH = 16
REGISTER_COUNT = 16
KEY_COUNT = 16

log = logging.getLogger(__name__)


class Chip8:
    """Machine state of a CHIP-8 interpreter and the instructions acting on it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.memory = Memory()
        self.display = [False] * (WIDTH * HEIGHT)
        self.program_counter = PROGRAM_START
        self.index = 0
        self.stack = [0] * STACK_DEPTH
        self.stack_pointer = 0
        self.registers = [0] * REGISTER_COUNT
        self.delay_timer = Timer()
        self.sound_timer = Timer()
        self.keypad = [False] * KEY_COUNT
        self._rng = rng if rng is not None else random.Random()

    def load_program(self, file_path: str | PathLike[str]) -> None:
        """Read a program image from ``file_path`` into memory."""
        self.memory.load_program(Path(file_path).read_bytes())

    def update_keypad(self, key: int, value: bool) -> None:
        """Mark key ``key`` (0x0 to 0xF) as pressed or released."""
        if not 0 <= key < KEY_COUNT:
            raise IndexError(f"no such key: {key!r}")
        self.keypad[key] = bool(value)
        log.debug("keypad %X set to %s", key, value)

    def run_cycle_once(self) -> None:
        """Fetch the instruction at the program counter and execute it."""
        self._execute(self._fetch())

    def _fetch(self) -> Opcode:
        first = self.memory.read_byte(self.program_counter)
        second = self.memory.read_byte(self.program_counter + 1)
        self.program_counter += 2
        return Opcode.from_bytes(first, second)

    @staticmethod
    def _unimplemented(opcode: Opcode) -> None:
        log.warning("Unimplemented opcode: %s", opcode)

    def _execute(self, opcode: Opcode) -> None:
        match opcode.a:
            case 0x0:
                match opcode.nn:
                    case 0xE0:
                        self._clear_display()
                    case 0xEE:
                        self._return_from_subroutine()
                    case _:
                        self._unimplemented(opcode)
            case 0x1 | 0xB:
                self._jump(opcode)
            case 0x2:
                self._call(opcode)
            case 0x3 | 0x4 | 0x5 | 0x9 | 0xE:
                self._skip(opcode)
            case 0x6 | 0x8 | 0xC:
                self._set_register(opcode)
            case 0x7:
                self._add_to_register(opcode)
            case 0xA:
                self._set_index_register(opcode)
            case 0xD:
                self._draw(opcode)
            case 0xF:
                match opcode.nn:
                    case 0x07:
                        self._set_register(opcode)
                    case 0x0A:
                        self._wait(opcode)
                    case 0x15:
                        self.delay_timer.current_time = self.registers[opcode.x]
                    case 0x18:
                        self.sound_timer.current_time = self.registers[opcode.x]
                    case 0x1E | 0x29:
                        self._set_index_register(opcode)
                    case 0x33:
                        self._store_bcd(opcode)
                    case 0x55:
                        self._store_registers(opcode)
                    case 0x65:
                        self._read_registers(opcode)
                    case _:
                        self._unimplemented(opcode)
            case _:
                self._unimplemented(opcode)

    def _clear_display(self) -> None:
        self.display = [False] * (WIDTH * HEIGHT)

    def _return_from_subroutine(self) -> None:
        if self.stack_pointer == 0:
            raise IndexError("return with an empty call stack")
        self.program_counter = self.stack[self.stack_pointer]
        self.stack_pointer -= 1

    def _jump(self, opcode: Opcode) -> None:
        if opcode.a == 0x1:
            self.program_counter = opcode.nnn
        else:
            self._unimplemented(opcode)

    def _call(self, opcode: Opcode) -> None:
        if self.stack_pointer + 1 >= STACK_DEPTH:
            raise IndexError("call stack overflow")
        self.stack_pointer += 1
        self.stack[self.stack_pointer] = self.program_counter
        self.program_counter = opcode.nnn

    def _skip(self, opcode: Opcode) -> None:
        vx = self.registers[opcode.x]
        vy = self.registers[opcode.y]
        match opcode.a:
            case 0x3:
                taken = vx == opcode.nn
            case 0x4:
                taken = vx != opcode.nn
            case 0x5:
                taken = vx == vy
            case 0x9:
                taken = vx != vy
            case 0xE if opcode.nn == 0x9E:
                taken = self.keypad[vx]
            case 0xE if opcode.nn == 0xA1:
                taken = not self.keypad[vx]
            case _:
                log.warning("Not a skip opcode: %s", opcode)
                taken = False
        if taken:
            self.program_counter += 2

    def _set_register(self, opcode: Opcode) -> None:
        v = self.registers
        x, y = opcode.x, opcode.y
        match opcode.a:
            case 0x6:
                v[x] = opcode.nn
            case 0x8:
                match opcode.n:
                    case 0x0:
                        v[x] = v[y]
                    case 0x1:
                        v[x] = v[x] | v[y]
                    case 0x2:
                        v[x] = v[x] & v[y]
                    case 0x3:
                        v[x] = v[x] ^ v[y]
                    case 0x4:
                        total = v[x] + v[y]
                        v[x] = total & 0xFF
                        v[0xF] = 1 if total > 0xFF else 0
                    case 0x5:
                        borrow = v[y] > v[x]
                        v[x] = (v[x] - v[y]) & 0xFF
                        v[0xF] = 0 if borrow else 1
                    case 0x6:
                        carry = v[x] & 1
                        v[x] >>= 1
                        v[0xF] = carry
                    case 0x7:
                        borrow = v[x] > v[y]
                        v[x] = (v[y] - v[x]) & 0xFF
                        v[0xF] = 0 if borrow else 1
                    case 0xE:
                        carry = (v[x] & 0x80) >> 7
                        v[x] = (v[x] << 1) & 0xFF
                        v[0xF] = carry
                    case _:
                        pass
            case 0xC:
                v[x] = self._rng.randrange(256) & opcode.nn
            case 0xF:
                if opcode.nn == 0x07:
                    v[x] = self.delay_timer.current_time
            case _:
                self._unimplemented(opcode)

    def _add_to_register(self, opcode: Opcode) -> None:
        self.registers[opcode.x] = (self.registers[opcode.x] + opcode.nn) & 0xFF

    def _set_index_register(self, opcode: Opcode) -> None:
        if opcode.a == 0xA:
            self.index = opcode.nnn
        elif opcode.a == 0xF and opcode.nn == 0x1E:
            self.index += self.registers[opcode.x]
        elif opcode.a == 0xF and opcode.nn == 0x29:
            self.index = (self.registers[opcode.x] & 0xF) * 5
        else:
            self._unimplemented(opcode)

    def _draw(self, opcode: Opcode) -> None:
        x_coord = self.registers[opcode.x] % WIDTH
        y_coord = self.registers[opcode.y] % HEIGHT
        self.registers[0xF] = 0

        for row in range(opcode.n):
            sprite = self.memory.read_byte(self.index + row)
            y = y_coord + row
            if y >= HEIGHT:
                break
            for bit in range(8):
                x = x_coord + bit
                if x >= WIDTH:
                    break
                if (sprite >> (7 - bit)) & 1:
                    pos = y * WIDTH + x
                    if self.display[pos]:
                        self.registers[0xF] = 1
                    self.display[pos] = not self.display[pos]

    def _wait(self, opcode: Opcode) -> None:
        pressed = [key for key, down in enumerate(self.keypad) if down]
        if pressed:
            self.registers[opcode.x] = pressed[-1]
        self.program_counter -= 2

    def _store_bcd(self, opcode: Opcode) -> None:
        value = self.registers[opcode.x]
        digits = (value // 100 % 10, value // 10 % 10, value % 10)
        for offset, digit in enumerate(digits):
            self.memory.write_byte(self.index + offset, digit)

    def _store_registers(self, opcode: Opcode) -> None:
        for offset, value in enumerate(self.registers[: opcode.x + 1]):
            self.memory.write_byte(self.index + offset, value)

    def _read_registers(self, opcode: Opcode) -> None:
        for offset in range(opcode.x + 1):
            self.registers[offset] = self.memory.read_byte(self.index + offset)