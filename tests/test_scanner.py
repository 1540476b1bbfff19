import pytest

from modmeta.models import ArtifactType
from modmeta.scanner import ModScanner, classify_artifact

MCMOD = [{"modid": "legacy", "name": "Legacy", "version": "1.0"}]
FABRIC = {"schemaVersion": 1, "id": "fabricmod", "version": "2.0"}


@pytest.fixture
def mods_folder(tmp_path, make_archive, make_folder):
    make_archive("legacy.jar", {"mcmod.info": MCMOD})
    make_archive("fabric.zip", {"fabric.mod.json": FABRIC})
    make_archive("voxel.litemod", {"litemod.json": {"name": "VoxelMap", "version": "1.9"}})
    make_archive("plain-1.0.jar", {"readme.txt": "no metadata here"})
    make_archive("old.jar.disabled", {"fabric.mod.json": dict(FABRIC, id="oldmod")})
    make_folder("unpacked", {"mcmod.info": [{"modid": "unpacked", "name": "Unpacked"}]})
    (tmp_path / "notes.txt").write_text("hello")
    (tmp_path / ".hidden.jar").write_bytes(b"")
    return tmp_path


def test_classify_artifact(mods_folder):
    assert classify_artifact(mods_folder / "legacy.jar") is ArtifactType.ARCHIVE
    assert classify_artifact(mods_folder / "fabric.zip") is ArtifactType.ARCHIVE
    assert classify_artifact(mods_folder / "voxel.litemod") is ArtifactType.LITEMOD_ARCHIVE
    assert classify_artifact(mods_folder / "old.jar.disabled") is ArtifactType.ARCHIVE
    assert classify_artifact(mods_folder / "unpacked") is ArtifactType.DIRECTORY
    assert classify_artifact(mods_folder / "notes.txt") is ArtifactType.SINGLE_FILE
    assert classify_artifact(mods_folder / "missing.jar") is ArtifactType.UNKNOWN


def test_scan_folder(mods_folder):
    result = ModScanner(workers=2).scan_folder(mods_folder)
    by_file = {entry.filename: entry for entry in result.entries}

    assert set(by_file) == {"legacy.jar", "fabric.zip", "voxel.litemod", "plain-1.0.jar", "unpacked", "notes.txt"}
    assert result.total_files == 6
    assert by_file["legacy.jar"].details.mod_id == "legacy"
    assert by_file["fabric.zip"].version == "2.0"
    assert by_file["voxel.litemod"].name == "VoxelMap"
    assert by_file["unpacked"].name == "Unpacked"
    assert by_file["plain-1.0.jar"].details is None
    assert by_file["plain-1.0.jar"].name == "plain-1.0"
    assert by_file["notes.txt"].details is None
    assert len(result.without_metadata) == 2
    assert result.generated_at is not None


def test_scan_includes_disabled(mods_folder):
    result = ModScanner().scan_folder(mods_folder, include_disabled=True)
    disabled = [entry for entry in result.entries if not entry.enabled]

    assert [entry.filename for entry in disabled] == ["old.jar.disabled"]
    assert disabled[0].details.mod_id == "oldmod"


def test_scan_excludes_patterns(mods_folder):
    result = ModScanner().scan_folder(mods_folder, exclude_patterns=["*.txt", "plain-*"])
    names = {entry.filename for entry in result.entries}

    assert "notes.txt" not in names
    assert "plain-1.0.jar" not in names


def test_progress_callback(mods_folder):
    calls = []
    ModScanner(workers=3).scan_folder(mods_folder, progress_callback=lambda *args: calls.append(args))

    assert [current for current, _, _ in calls] == list(range(1, 7))
    assert all(total == 6 for _, total, _ in calls)


def test_duplicates(tmp_path, make_archive):
    make_archive("a-1.jar", {"fabric.mod.json": FABRIC})
    make_archive("a-2.jar", {"fabric.mod.json": FABRIC})
    make_archive("b.jar", {"mcmod.info": MCMOD})

    result = ModScanner().scan_folder(tmp_path)

    assert list(result.get_duplicates()) == ["fabricmod"]
    assert len(result.get_duplicates()["fabricmod"]) == 2


def test_empty_folder(tmp_path):
    result = ModScanner().scan_folder(tmp_path)
    assert result.entries == []
    assert result.total_files == 0


def test_bad_folder(tmp_path):
    with pytest.raises(FileNotFoundError):
        ModScanner().scan_folder(tmp_path / "missing")

    file_path = tmp_path / "file.jar"
    file_path.write_bytes(b"")
    with pytest.raises(NotADirectoryError):
        ModScanner().scan_folder(file_path)


def test_sort_and_filter(mods_folder):
    result = ModScanner().scan_folder(mods_folder)

    result.sort_entries(by="name")
    names = [entry.name.lower() for entry in result.entries]
    assert names == sorted(names)

    litemods = result.filter_by_type(ArtifactType.LITEMOD_ARCHIVE)
    assert [entry.filename for entry in litemods] == ["voxel.litemod"]
