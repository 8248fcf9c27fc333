import pytest

from raycore.cli import render as render_cli
from raycore.cli import validate as validate_cli
from raycore.image import Image, load_ppm


@pytest.fixture(autouse=True)
def _no_progress(monkeypatch):
    monkeypatch.setenv("RAYCORE_PROGRESS", "0")


def test_render_cli_writes_image(tmp_path):
    out = tmp_path / "cli.ppm"
    render_cli.main(["--out", str(out), "--width", "4", "--height", "3"])
    assert load_ppm(out) == Image.generate_red_green_scan(4, 3)


def test_render_cli_flags_override_config(tmp_path):
    cfg = tmp_path / "render.yaml"
    out = tmp_path / "from_cfg.ppm"
    cfg.write_text(f"width: 9\nheight: 2\ngenerator: black\nout: {out}\n")
    render_cli.main(["--config", str(cfg), "--width", "3"])
    assert load_ppm(out) == Image(3, 2)


def test_render_cli_progress_flag(tmp_path):
    out = tmp_path / "p.ppm"
    render_cli.main(["--out", str(out), "--width", "2", "--height", "2", "--progress"])
    assert out.read_text().startswith("P3 2 2 255\n\n")


def test_validate_cli_exit_codes(tmp_path, capsys):
    good = tmp_path / "good.ppm"
    render_cli.main(["--out", str(good), "--width", "2", "--height", "2"])
    assert validate_cli.main([str(good)]) == 0
    assert "OK: 2x2" in capsys.readouterr().out

    bad = tmp_path / "bad.ppm"
    bad.write_text("P3 2 2 255\n0 0 0\n")
    assert validate_cli.main([str(bad)]) == 1
    assert "blank separator" in capsys.readouterr().out
