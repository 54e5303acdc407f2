"""Tests for the command-line entry point.

Tests cover:
- Argument parsing and the default output name
- Successful render to P3 and PNG
- Error reporting and exit status on unwritable destinations
"""

from __future__ import annotations

from pathlib import Path

import pytest


class TestParseArgs:
    """Tests for argument parsing."""

    def test_default_output(self):
        """Test the output path defaults to image.ppm."""
        from raycaster.cli import DEFAULT_FILENAME, parse_args

        assert DEFAULT_FILENAME == "image.ppm"
        assert parse_args([]).output == "image.ppm"

    def test_positional_output(self):
        """Test a single positional argument sets the output path."""
        from raycaster.cli import parse_args

        assert parse_args(["scene.ppm"]).output == "scene.ppm"

    def test_rejects_extra_arguments(self):
        """Test more than one positional argument is an error."""
        from raycaster.cli import parse_args

        with pytest.raises(SystemExit):
            parse_args(["a.ppm", "b.ppm"])


class TestMain:
    """Tests for main()."""

    def test_renders_ppm(self, tmp_path: Path, capsys) -> None:
        """Test a full render of the demo scene to P3."""
        from raycaster.cli import main

        output = tmp_path / "demo.ppm"
        assert main([str(output)]) == 0

        lines = output.read_text().splitlines()
        assert lines[0] == "P3"
        assert lines[1] == f"# {output}"
        assert lines[2] == "800 600"
        assert lines[3] == "255"
        assert len(lines) == 4 + 600

        # Center pixel of the demo scene is the green sphere
        center_row = lines[4 + 299].split()
        assert center_row[400 * 3 : 400 * 3 + 3] == ["0", "200", "0"]

        assert f"rendering into '{output}'" in capsys.readouterr().out

    def test_renders_png(self, tmp_path: Path) -> None:
        """Test a .png output path writes a PNG."""
        from PIL import Image as PILImage

        from raycaster.cli import main

        output = tmp_path / "demo.png"
        assert main([str(output)]) == 0

        with PILImage.open(output) as image:
            assert image.size == (800, 600)
            assert image.convert("RGB").getpixel((0, 0)) == (0, 0, 128)

    def test_unwritable_destination(self, tmp_path: Path, capsys) -> None:
        """Test I/O failures are reported on stderr with exit status 1."""
        from raycaster.cli import main

        output = tmp_path / "missing" / "demo.ppm"
        assert main([str(output)]) == 1

        assert "Error:" in capsys.readouterr().err
        assert not output.exists()

    def test_directory_destination(self, tmp_path: Path, capsys) -> None:
        """Test an existing directory as output fails cleanly."""
        from raycaster.cli import main

        output = tmp_path / "renders"
        output.mkdir()
        assert main([str(output)]) == 1

        assert "Error:" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == [output]
        assert list(output.iterdir()) == []
