"""
Tests for image discovery.
"""
import pytest

from letterbox.discovery import list_images
from letterbox.errors import DiscoveryError

from conftest import write_jpeg


class TestListImages:

    def test_filters_by_extension(self, tmp_path):
        """Only .jpg/.jpeg files are returned, matched case-insensitively."""
        for name in ["a.jpg", "b.JPEG", "c.Jpg"]:
            write_jpeg(tmp_path / name)
        (tmp_path / "d.png").write_bytes(b"")
        (tmp_path / "notes.txt").write_text("x")

        found = list_images(str(tmp_path))

        assert sorted(found) == sorted(str(tmp_path / n) for n in ["a.jpg", "b.JPEG", "c.Jpg"])

    def test_not_recursive(self, tmp_path):
        """Subdirectories are not scanned, even when named like images."""
        sub = tmp_path / "nested"
        sub.mkdir()
        write_jpeg(sub / "inner.jpg")
        (tmp_path / "folder.jpg").mkdir()

        assert list_images(str(tmp_path)) == []

    def test_current_directory_paths_are_clean(self, tmp_path, monkeypatch):
        """Scanning '.' yields bare file names."""
        write_jpeg(tmp_path / "a.jpg")
        monkeypatch.chdir(tmp_path)

        assert list_images(".") == ["a.jpg"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DiscoveryError):
            list_images(str(tmp_path / "missing"))
