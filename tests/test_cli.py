from pathlib import Path

import pytest

from bmpreveal.cli import main
from bmpreveal.pixels import RgbImage, export_image, load_pixels
from bmpreveal.transforms import xor_bytes

IMAGE_DATA = bytes(range(10, 22))
MASK_DATA = bytes([3, 7, 1, 9, 4, 6, 2, 8, 5, 11, 13, 12])


def _write_images(folder: Path, image_data=IMAGE_DATA, mask_data=MASK_DATA, mask_size=(2, 2)):
    export_image(RgbImage(2, 2, image_data), folder / "I_D.bmp")
    export_image(RgbImage(mask_size[0], mask_size[1], mask_data), folder / "M.bmp")


def _write_clue(path: Path, seed: int, values):
    lines = [str(seed)]
    it = iter(values)
    lines.extend(f"{r} {g} {b}" for r, g, b in zip(it, it, it))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _xor_clue_values():
    xored = xor_bytes(IMAGE_DATA, MASK_DATA)
    return [a + b for a, b in zip(xored, MASK_DATA)]


def test_missing_images_fail(tmp_path):
    assert main([str(tmp_path)]) == 1


def test_no_clue_files_fail(tmp_path):
    _write_images(tmp_path)
    assert main([str(tmp_path)]) == 1


def test_size_mismatch_fails(tmp_path):
    _write_images(tmp_path, mask_data=bytes(3), mask_size=(1, 1))
    _write_clue(tmp_path / "M1.txt", 0, _xor_clue_values())
    assert main([str(tmp_path)]) == 1


def test_detects_xor_and_writes_result(tmp_path, capsys):
    _write_images(tmp_path)
    _write_clue(tmp_path / "M1.txt", 0, _xor_clue_values())

    assert main([str(tmp_path)]) == 0

    result = load_pixels(tmp_path / "I_O.bmp")
    assert result.data == xor_bytes(IMAGE_DATA, MASK_DATA)
    out = capsys.readouterr().out
    assert "XOR" in out
    assert "M1.txt" in out


def test_unmatched_clue_writes_nothing(tmp_path, capsys):
    _write_images(tmp_path)
    _write_clue(tmp_path / "M1.txt", 0, [999] * 12)

    assert main([str(tmp_path)]) == 0

    assert not (tmp_path / "I_O.bmp").exists()
    assert "no transformation detected" in capsys.readouterr().out


def test_start_number_selects_first_clue(tmp_path, capsys):
    _write_images(tmp_path)
    _write_clue(tmp_path / "M0.txt", 0, _xor_clue_values())

    assert main([str(tmp_path)]) == 1
    assert main([str(tmp_path), "--start", "0"]) == 0
    assert "M0.txt" in capsys.readouterr().out


def test_clues_processed_from_last_to_first(tmp_path, capsys):
    _write_images(tmp_path)
    _write_clue(tmp_path / "M1.txt", 0, _xor_clue_values())
    _write_clue(tmp_path / "M2.txt", 0, [999] * 12)

    assert main([str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert out.index("M2.txt") < out.index("M1.txt")


def test_custom_output_name(tmp_path):
    _write_images(tmp_path)
    _write_clue(tmp_path / "M1.txt", 0, _xor_clue_values())

    assert main([str(tmp_path), "--output", "recovered.bmp"]) == 0

    assert load_pixels(tmp_path / "recovered.bmp").data == xor_bytes(IMAGE_DATA, MASK_DATA)
    assert not (tmp_path / "I_O.bmp").exists()


def test_steps_directory_receives_step_images(tmp_path):
    _write_images(tmp_path)
    _write_clue(tmp_path / "M1.txt", 0, _xor_clue_values())
    _write_clue(tmp_path / "M2.txt", 0, [999] * 12)
    steps = tmp_path / "steps"

    assert main([str(tmp_path), "--steps", str(steps)]) == 0

    assert sorted(p.name for p in steps.iterdir()) == ["Paso1.bmp", "Paso2.bmp"]
    assert load_pixels(steps / "Paso1.bmp").data == IMAGE_DATA


def test_clue_longer_than_mask_is_reported(tmp_path, capsys):
    _write_images(tmp_path)
    _write_clue(tmp_path / "M1.txt", 0, [1] * 15)

    assert main([str(tmp_path)]) == 0
    assert "error" in capsys.readouterr().err


@pytest.mark.parametrize("seed", [3, 6])
def test_seed_offsets_comparison(tmp_path, seed):
    _write_images(tmp_path)
    xored = xor_bytes(IMAGE_DATA, MASK_DATA)
    values = [xored[k + seed] + MASK_DATA[k] for k in range(3)]
    _write_clue(tmp_path / "M1.txt", seed, values)

    assert main([str(tmp_path)]) == 0
    assert load_pixels(tmp_path / "I_O.bmp").data == xored