"""Base test class for unit tests that need a project directory."""

import shutil
import tempfile
import unittest
from pathlib import Path

from release_props.build.config.models import ProjectLayout


class BaseProjectTest(unittest.TestCase):
    """
    Creates an app tree per test and removes it afterwards.

    self.source is the Flutter source directory (pubspec.yaml) and
    self.root its android/ subdirectory (property files).
    """

    def setUp(self):
        self.source = Path(tempfile.mkdtemp(prefix="release-props-unit-testing-"))
        self.root = self.source / "android"
        self.root.mkdir()
        self.layout = ProjectLayout(root=self.root)

    def tearDown(self):
        shutil.rmtree(self.source, ignore_errors=True)

    def write(self, name: str, content: str, encoding: str = "iso-8859-1") -> Path:
        """Write a file under the Android project root and return its path."""
        return self._write(self.root / name, content, encoding)

    def write_source(self, name: str, content: str) -> Path:
        """Write a file under the Flutter source directory and return its path."""
        return self._write(self.source / name, content, "utf-8")

    def _write(self, path: Path, content: str, encoding: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
        return path
