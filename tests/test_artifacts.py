"""
Tests for artifact file writing.
"""

import os
import stat
import sys
import pytest
from src.rendering import artifacts
from src.rendering.artifacts import write_artifact


def failing_replace(src, dst):
    raise OSError("rename failed")


class TestWriteArtifact:
    """Test atomic writes."""

    def test_creates_directory_and_file(self, tmp_path):
        """Test nested directories are created on first use."""
        target = write_artifact(tmp_path / "a" / "b", "chart.svg", "<svg/>")

        assert target == tmp_path / "a" / "b" / "chart.svg"
        assert target.read_text(encoding="utf-8") == "<svg/>"
        assert os.listdir(tmp_path / "a" / "b") == ["chart.svg"]

    def test_failed_replace_leaves_no_temp_file(self, tmp_path, monkeypatch):
        """Test a failing final rename removes the temporary file."""
        monkeypatch.setattr(artifacts.os, "replace", failing_replace)

        with pytest.raises(OSError, match="rename failed"):
            write_artifact(tmp_path, "chart.svg", "<svg/>")

        assert os.listdir(tmp_path) == []

    def test_failed_replace_keeps_previous_file(self, tmp_path, monkeypatch):
        """Test an existing artifact is untouched when a rewrite fails."""
        write_artifact(tmp_path, "chart.svg", "<svg>old</svg>")
        monkeypatch.setattr(artifacts.os, "replace", failing_replace)

        with pytest.raises(OSError):
            write_artifact(tmp_path, "chart.svg", "<svg>new</svg>")

        assert (tmp_path / "chart.svg").read_text(encoding="utf-8") == "<svg>old</svg>"
        assert not [name for name in os.listdir(tmp_path) if name.endswith(".tmp")]

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_world_readable(self, tmp_path):
        """Test artifacts are not left with the temp file's private mode."""
        target = write_artifact(tmp_path, "chart.svg", "<svg/>")

        assert stat.S_IMODE(os.stat(target).st_mode) == 0o644
