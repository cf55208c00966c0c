# chipeight

chipeight is a small CHIP-8 interpreter. It loads a program image into
4056 bytes of memory. The program starts at `0x200` and the built-in hex
font sits at `0x050`. The interpreter steps through the program one
instruction at a time and draws the 64×32 monochrome display in a pygame
window scaled up ten times.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running a program

```
chipeight path/to/program.ch8
```

The window runs one instruction per frame. It stays open until you close
it or press Escape. If the file cannot be read, or is too large for
memory, the command prints `Failed to load program: ...` to standard error
and exits with status 1.

### Keypad

The 16-key hex keypad is mapped to the left side of a QWERTY keyboard:

```
Keyboard        CHIP-8
1 2 3 4         1 2 3 C
Q W E R         4 5 6 D
A S D F         7 8 9 E
Z X C V         A 0 B F
```

Pressing a key marks it as down and releasing it marks it as up.

## Using it as a library

```python
from chipeight.chip8 import Chip8

machine = Chip8()
machine.load_program("program.ch8")
for _ in range(100):
    machine.run_cycle_once()

lit = sum(machine.display)   # flat list of 64 * 32 booleans, row by row
```

- `Chip8(rng=None)` creates the machine. The optional `random.Random` is
  used by the `Cxkk` instruction, so passing a seeded one makes runs
  repeatable. The machine state can be inspected through these attributes:
  `memory`, `display`, `program_counter`, `index`, `stack`,
  `stack_pointer`, `registers`, `delay_timer`, `sound_timer` and `keypad`.
- `Chip8.load_program(file_path)` reads a file into memory at `0x200`.
- `Chip8.update_keypad(key, value)` presses or releases key `0x0`–`0xF`.
  Any other key number raises `IndexError`.
- `Chip8.run_cycle_once()` fetches and executes one instruction. A return
  with an empty call stack, or a call past 16 levels, raises `IndexError`.
  Instructions the interpreter does not handle are reported as warnings
  through the `logging` module and are otherwise skipped.

The helpers in `chipeight.app` can be used on their own.
`display_to_buffer(display)` turns the display into `0xRRGGBB` values, white
for lit pixels and black for dark ones. `chip8_key(name)` maps a keyboard
key name to its keypad index, or `None` if the key has no keypad index.

The other building blocks are:

- `chipeight.opcode.Opcode.from_bytes(first_byte, second_byte)` decodes an
  instruction into the fields `a`, `x`, `y`, `n`, `nn` and `nnn`.
- `chipeight.memory.Memory` is RAM with the font already loaded. It has
  `read_byte`, `write_byte` and `load_program`. An address out of range
  raises `IndexError`, and a value that does not fit raises `ValueError`.
- `chipeight.timer.Timer` is an 8-bit countdown. Each call to `tick()`
  lowers it by one until it reaches zero.

## Limitations

- It makes no sound. The sound timer can be set but nothing plays it.
- The delay and sound timers are never counted down while a program runs.
  `Fx07` reads back whatever value was last stored.
- Execution is not paced to any clock. The window runs one instruction per
  frame.
- `Bnnn` (jump with offset) and `0nnn` are not executed. They are reported
  as unimplemented.
- `Fx0A` stores the highest pressed key in `Vx`, but it always repeats
  itself and never moves on to the next instruction.

## Tests

```
pytest
```