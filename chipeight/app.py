"""Windowed front end: runs a program image and maps the keyboard to the keypad."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from chipeight.chip8 import HEIGHT, WIDTH, Chip8

SCALE = 10
WHITE = 0xFFFFFF
BLACK = 0x000000

# Keyboard layout: the left-hand 4x4 block stands in for the hex keypad.
_KEYMAP = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "q": 0x4, "w": 0x5, "e": 0x6, "r": 0xD,
    "a": 0x7, "s": 0x8, "d": 0x9, "f": 0xE,
    "z": 0xA, "x": 0x0, "c": 0xB, "v": 0xF,
}


def chip8_key(key: str) -> int | None:
    """Return the keypad key for a keyboard key name, or None if it has none."""
    return _KEYMAP.get(key.lower())


def display_to_buffer(display: Sequence[bool]) -> list[int]:
    """Turn the monochrome display into a row-major list of RGB colours."""
    if len(display) != WIDTH * HEIGHT:
        raise ValueError(
            f"display must hold {WIDTH * HEIGHT} pixels, got {len(display)}"
        )
    return [WHITE if pixel else BLACK for pixel in display]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a CHIP-8 program.")
    parser.add_argument("file_path", help="path of the program image to run")
    return parser.parse_args(argv)


def _render(pygame, screen, buffer: list[int]) -> None:
    frame = pygame.Surface((WIDTH, HEIGHT))
    for position, color in enumerate(buffer):
        y, x = divmod(position, WIDTH)
        frame.set_at((x, y), color)
    pygame.transform.scale(frame, screen.get_size(), screen)
    pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the program named on the command line and run it in a window."""
    args = _parse_args(argv)

    chip8 = Chip8()
    try:
        chip8.load_program(args.file_path)
    except (OSError, ValueError) as exc:
        print(f"Failed to load program: {exc}", file=sys.stderr)
        return 1

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH * SCALE, HEIGHT * SCALE))
        pygame.display.set_caption("CHIP-8 Emulator")

        running = True
        while running:
            chip8.run_cycle_once()
            _render(pygame, screen, display_to_buffer(chip8.display))

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    key = chip8_key(pygame.key.name(event.key))
                    if key is not None:
                        chip8.update_keypad(key, event.type == pygame.KEYDOWN)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())