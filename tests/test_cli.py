"""
redlsb Command Line Tests
"""

import logging

import pytest

from lsb.config import Framing
from lsb.image import load_grid
import redlsb


def run(*argv):
    return redlsb.main(list(argv))


class TestEncode:
    """Tests for -encode."""

    def test_encode_secret(self, png_path, tmp_path, capsys):
        code = run("-encode", "-image-path", str(png_path), "-secret", "Hi",
                   "-output-dir", str(tmp_path))
        assert code == 0
        assert (tmp_path / "encoded_image.png").exists()
        assert "completed successfully" in capsys.readouterr().out

    def test_encode_secret_path(self, png_path, tmp_path):
        secret = tmp_path / "secret.txt"
        secret.write_bytes(b"\x01\x03")
        code = run("-encode", "-image-path", str(png_path), "-secret-path", str(secret),
                   "-output-dir", str(tmp_path))
        assert code == 0
        grid = load_grid(str(tmp_path / "encoded_image.png"))
        assert list(grid.pixels[0, :3, 0] & 1) == [1, 1, 0]

    def test_missing_secret(self, png_path, capsys):
        assert run("-encode", "-image-path", str(png_path)) == 1
        assert "-secret" in capsys.readouterr().err

    def test_empty_secret(self, png_path, tmp_path, capsys):
        """Test an empty -secret counts as missing."""
        code = run("-encode", "-image-path", str(png_path), "-secret", "",
                   "-output-dir", str(tmp_path))
        assert code == 1
        assert "must pass either" in capsys.readouterr().err
        assert not (tmp_path / "encoded_image.png").exists()

    def test_both_secrets(self, png_path):
        with pytest.raises(SystemExit) as e:
            run("-encode", "-image-path", str(png_path), "-secret", "a", "-secret-path", "b")
        assert e.value.code == 2

    def test_secret_file_missing(self, png_path, tmp_path, capsys):
        code = run("-encode", "-image-path", str(png_path),
                   "-secret-path", str(tmp_path / "nope.txt"))
        assert code == 1
        assert "could not open secret" in capsys.readouterr().err

    def test_capacity_exceeded(self, png_path, tmp_path, capsys):
        code = run("-encode", "-image-path", str(png_path), "-secret", "x" * 450,
                   "-output-dir", str(tmp_path))
        assert code == 1
        assert "does not fit" in capsys.readouterr().err
        assert not (tmp_path / "encoded_image.png").exists()

    def test_encode_goes_through_hide_in_image(self, png_path, tmp_path, monkeypatch):
        """Test the CLI hands the secret and config to hide_in_image."""
        calls = []

        def fake_hide(image_path, payload, output_dir, config):
            calls.append((image_path, payload, output_dir, config))
            return str(tmp_path / "encoded_image.png")

        monkeypatch.setattr(redlsb, "hide_in_image", fake_hide)
        code = run("-encode", "-image-path", str(png_path), "-secret", "Hi",
                   "-output-dir", str(tmp_path), "-framing", "length")
        assert code == 0
        assert calls[0][:3] == (str(png_path), b"Hi", str(tmp_path))
        assert calls[0][3].framing is Framing.LENGTH

    def test_verbose(self, png_path, tmp_path, capsys):
        code = run("-encode", "-image-path", str(png_path), "-secret", "Hi",
                   "-output-dir", str(tmp_path), "-verbose")
        assert code == 0
        out = capsys.readouterr().out
        assert "Capacity: 450.00 B" in out
        assert logging.getLogger().level == logging.DEBUG

    def test_strict_rejects_ambiguous(self, png_path, tmp_path, capsys):
        """Test -strict refuses a secret ending in an even byte."""
        code = run("-encode", "-image-path", str(png_path), "-secret", "ab",
                   "-output-dir", str(tmp_path), "-strict")
        assert code == 1
        assert "Error" in capsys.readouterr().err


class TestDecode:
    """Tests for -decode."""

    def test_decode_symbols(self, png_path, tmp_path, capsys):
        run("-encode", "-image-path", str(png_path), "-secret", "Hi",
            "-output-dir", str(tmp_path))
        capsys.readouterr()

        code = run("-decode", "-image-path", str(tmp_path / "encoded_image.png"))
        assert code == 0
        assert "Hidden message: 01" in capsys.readouterr().out

    def test_decode_framed(self, png_path, tmp_path, capsys):
        run("-encode", "-image-path", str(png_path), "-secret", "Secret message",
            "-output-dir", str(tmp_path), "-framing", "length", "-scan-order", "serpentine")
        capsys.readouterr()

        code = run("-decode", "-image-path", str(tmp_path / "encoded_image.png"),
                   "-framing", "length", "-scan-order", "serpentine")
        assert code == 0
        assert "Hidden message: Secret message" in capsys.readouterr().out

    def test_decode_unreadable(self, tmp_path, capsys):
        path = tmp_path / "broken.png"
        path.write_bytes(b"garbage")
        assert run("-decode", "-image-path", str(path)) == 1
        assert "failed to decode image" in capsys.readouterr().err


class TestUsage:
    """Tests for argument validation."""

    def test_requires_mode(self, png_path):
        with pytest.raises(SystemExit) as e:
            run("-image-path", str(png_path))
        assert e.value.code == 2

    def test_modes_exclusive(self, png_path):
        with pytest.raises(SystemExit) as e:
            run("-encode", "-decode", "-image-path", str(png_path))
        assert e.value.code == 2

    def test_requires_image_path(self):
        with pytest.raises(SystemExit) as e:
            run("-decode")
        assert e.value.code == 2

    def test_bad_extension(self, tmp_path, capsys):
        assert run("-decode", "-image-path", str(tmp_path / "image.gif")) == 1
        assert "must end in" in capsys.readouterr().err
