import os

import numpy as np
import pytest

from raycore.image import Image, Pixel, load_ppm, parse_ppm, save_ppm, validate_ppm


def test_save_writes_exact_text_and_validates(tmp_path):
    path = tmp_path / "out" / "scan.ppm"
    out = save_ppm(str(path), Image.generate_red_green_scan(2, 2))
    assert out == str(path)
    assert path.read_text() == "P3 2 2 255\n\n0 0 0\n255 0 0\n0 255 0\n255 255 0\n"
    rep = validate_ppm(str(path))
    assert rep["issues"] == []
    assert (rep["width"], rep["height"]) == (2, 2)


def test_save_load_roundtrip(tmp_path):
    rng = np.random.default_rng(1)
    img = Image.from_array(rng.integers(0, 256, size=(5, 7, 3)))
    path = tmp_path / "rand.ppm"
    save_ppm(path, img)
    assert load_ppm(path) == img


def test_save_leaves_no_temp_files(tmp_path):
    save_ppm(tmp_path / "a.ppm", Image(3, 3))
    assert sorted(os.listdir(tmp_path)) == ["a.ppm"]


def test_save_without_overwrite_refuses_existing(tmp_path):
    path = tmp_path / "a.ppm"
    save_ppm(path, Image(1, 1))
    with pytest.raises(FileExistsError):
        save_ppm(path, Image(2, 2), overwrite=False)
    assert load_ppm(path) == Image(1, 1)


def test_failed_write_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "a.ppm"
    save_ppm(path, Image.generate_red_green_scan(2, 2))
    before = path.read_text()

    def boom(self, sink):
        sink.write("P3 9 9 255\n")
        raise OSError("device lost")

    monkeypatch.setattr(Image, "write_ppm", boom)
    with pytest.raises(OSError, match="device lost"):
        save_ppm(path, Image(9, 9))
    assert path.read_text() == before
    assert sorted(os.listdir(tmp_path)) == ["a.ppm"]


def test_save_to_unwritable_location_raises(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(OSError):
        save_ppm(str(blocker / "sub" / "a.ppm"), Image(1, 1))


def test_parse_accepts_comments_and_free_whitespace():
    text = "P3\n# made by hand\n2 1\n255\n1 2 3   4 5 6\n"
    img = parse_ppm(text)
    assert (img.width, img.height) == (2, 1)
    assert img[1, 0] == Pixel(4, 5, 6)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "P6 1 1 255\n\n0 0 0\n",
        "P3 1 1\n",
        "P3 1 1 65535\n\n0 0 0\n",
        "P3 2 1 255\n\n0 0 0\n",
        "P3 1 1 255\n\n0 0 x\n",
        "P3 1 1 255\n\n0 0 256\n",
        "P3 0 1 255\n\n",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_ppm(text)


@pytest.mark.parametrize(
    "text,fragment",
    [
        ("P3 1 1 255\n0 0 0\n", "blank separator"),
        ("P3 1 1 255\n\n0 0 0", "trailing newline"),
        ("P3 2 1 255\n\n0 0 0\n", "Expected 2 pixel lines"),
        ("P3 1 1 255\n\n0  0 0\n", "malformed pixel"),
        ("P3 1 1 255\n\n0 0 300\n", "out of range"),
        ("P3 1 1 15\n\n0 0 0\n", "Max channel value"),
        ("P6 1 1 255\n\n0 0 0\n", "Malformed header"),
    ],
)
def test_validate_reports_layout_issues(tmp_path, text, fragment):
    path = tmp_path / "bad.ppm"
    path.write_text(text)
    rep = validate_ppm(str(path))
    assert rep["issues"]
    assert any(fragment in s for s in rep["issues"])


def test_validate_missing_file(tmp_path):
    rep = validate_ppm(str(tmp_path / "nope.ppm"))
    assert rep["issues"] and "Cannot read" in rep["issues"][0]


def test_no_overwrite_detects_file_created_during_write(tmp_path, monkeypatch):
    path = tmp_path / "a.ppm"
    original_write = Image.write_ppm

    def write_then_race(self, sink):
        path.write_text("other writer\n")
        original_write(self, sink)

    monkeypatch.setattr(Image, "write_ppm", write_then_race)
    with pytest.raises(FileExistsError):
        save_ppm(path, Image(2, 2), overwrite=False)
    assert path.read_text() == "other writer\n"
    assert sorted(os.listdir(tmp_path)) == ["a.ppm"]


def test_no_overwrite_writes_new_file(tmp_path):
    path = tmp_path / "new.ppm"
    save_ppm(path, Image.generate_red_green_scan(2, 2), overwrite=False)
    assert validate_ppm(str(path))["issues"] == []
    assert sorted(os.listdir(tmp_path)) == ["new.ppm"]
