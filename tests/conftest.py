"""Pytest configuration and shared fixtures.

Fixtures build mod artifacts (archives and folders) under tmp_path.
"""

import json
import zipfile
from pathlib import Path

import pytest


@pytest.fixture
def make_archive(tmp_path):
    """Return a factory writing a zip archive with the given entries."""

    def _make(name, entries):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as jar:
            for entry_name, content in entries.items():
                if isinstance(content, (dict, list)):
                    content = json.dumps(content)
                jar.writestr(entry_name, content)
        return path

    return _make


@pytest.fixture
def make_folder(tmp_path):
    """Return a factory creating an unpacked mod folder."""

    def _make(name, files):
        folder = tmp_path / name
        folder.mkdir()
        for file_name, content in files.items():
            if isinstance(content, (dict, list)):
                content = json.dumps(content)
            if isinstance(content, str):
                content = content.encode("utf-8")
            (folder / file_name).write_bytes(content)
        return folder

    return _make