import pytest

from chipeight.app import BLACK, WHITE, chip8_key, display_to_buffer, main
from chipeight.chip8 import HEIGHT, WIDTH


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("1", 0x1),
        ("2", 0x2),
        ("3", 0x3),
        ("4", 0xC),
        ("q", 0x4),
        ("w", 0x5),
        ("e", 0x6),
        ("r", 0xD),
        ("a", 0x7),
        ("s", 0x8),
        ("d", 0x9),
        ("f", 0xE),
        ("z", 0xA),
        ("x", 0x0),
        ("c", 0xB),
        ("v", 0xF),
    ],
)
def test_chip8_key_layout(name, expected):
    assert chip8_key(name) == expected


def test_chip8_key_is_case_insensitive():
    assert chip8_key("Q") == chip8_key("q")


@pytest.mark.parametrize("name", ["escape", "5", "p", "space", ""])
def test_chip8_key_unmapped(name):
    assert chip8_key(name) is None


def test_chip8_key_covers_whole_keypad():
    names = "1234qwerasdfzxcv"
    assert sorted(chip8_key(n) for n in names) == list(range(16))


def test_display_to_buffer_blank():
    buffer = display_to_buffer([False] * (WIDTH * HEIGHT))
    assert len(buffer) == WIDTH * HEIGHT
    assert set(buffer) == {BLACK}


def test_display_to_buffer_lit_pixels():
    display = [False] * (WIDTH * HEIGHT)
    display[0] = True
    display[WIDTH + 3] = True
    buffer = display_to_buffer(display)
    assert buffer[0] == WHITE
    assert buffer[WIDTH + 3] == WHITE
    assert buffer.count(WHITE) == 2
    assert buffer[1] == BLACK


def test_display_to_buffer_white_is_full_rgb():
    buffer = display_to_buffer([True] * (WIDTH * HEIGHT))
    assert set(buffer) == {0xFFFFFF}


def test_display_to_buffer_rejects_wrong_size():
    with pytest.raises(ValueError):
        display_to_buffer([False] * 10)


def test_main_requires_file_path():
    with pytest.raises(SystemExit):
        main([])


def test_main_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.ch8"
    assert main([str(missing)]) == 1
    assert "Failed to load program" in capsys.readouterr().err


def test_main_reports_oversized_program(tmp_path, capsys):
    image = tmp_path / "huge.ch8"
    image.write_bytes(bytes(5000))
    assert main([str(image)]) == 1
    assert "Failed to load program" in capsys.readouterr().err