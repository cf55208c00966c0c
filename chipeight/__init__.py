"""A CHIP-8 interpreter: opcode decoding, memory, timers, the machine and a pygame front end."""

__version__ = "0.1.0"