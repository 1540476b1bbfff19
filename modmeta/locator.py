"""
Locate the governing metadata file inside a mod artifact.

Each artifact type probes a fixed list of well-known file names. The first
name present wins; if that entry then cannot be read the artifact is treated
as having no metadata, lower-priority names are not tried.
"""

import logging
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .models import ArtifactType, MetadataFormat

logger = logging.getLogger(__name__)

ARCHIVE_PROBE_ORDER: Tuple[MetadataFormat, ...] = (
    MetadataFormat.MCMOD_INFO,
    MetadataFormat.FABRIC,
    MetadataFormat.FORGE_VERSION,
)
LITEMOD_PROBE_ORDER: Tuple[MetadataFormat, ...] = (MetadataFormat.LITEMOD,)

# Errors zipfile can raise while opening or inflating a single entry
ENTRY_READ_ERRORS = (
    OSError,
    RuntimeError,
    NotImplementedError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
)


@dataclass(frozen=True)
class LocatedMetadata:
    """Raw bytes of a metadata file and the format they are in."""
    metadata_format: MetadataFormat
    contents: bytes


def _probe_archive(archive_path: Path, probe_order: Tuple[MetadataFormat, ...]) -> Optional[LocatedMetadata]:
    try:
        jar = zipfile.ZipFile(archive_path, 'r')
    except (OSError, zipfile.BadZipFile) as e:
        logger.debug(f"Cannot open {archive_path.name} as an archive: {e}")
        return None

    with jar:
        names = set(jar.namelist())
        for metadata_format in probe_order:
            if metadata_format.filename not in names:
                continue
            try:
                with jar.open(metadata_format.filename) as f:
                    contents = f.read()
            except ENTRY_READ_ERRORS as e:
                logger.debug(f"Cannot read {metadata_format.filename} in {archive_path.name}: {e}")
                return None
            return LocatedMetadata(metadata_format, contents)

    logger.debug(f"No known metadata file in {archive_path.name}")
    return None


def locate_in_archive(archive_path: Path) -> Optional[LocatedMetadata]:
    """Find mcmod.info, fabric.mod.json or forgeversion.properties, in that order."""
    return _probe_archive(archive_path, ARCHIVE_PROBE_ORDER)


def locate_in_litemod(archive_path: Path) -> Optional[LocatedMetadata]:
    """Find litemod.json in a LiteLoader archive."""
    return _probe_archive(archive_path, LITEMOD_PROBE_ORDER)


def locate_in_directory(folder_path: Path) -> Optional[LocatedMetadata]:
    """Find mcmod.info at the root of an unpacked mod folder."""
    info_path = folder_path / MetadataFormat.MCMOD_INFO.filename
    if not info_path.is_file():
        logger.debug(f"No {info_path.name} in folder {folder_path.name}")
        return None

    try:
        contents = info_path.read_bytes()
    except OSError as e:
        logger.debug(f"Cannot read {info_path}: {e}")
        return None

    if not contents:
        return None
    return LocatedMetadata(MetadataFormat.MCMOD_INFO, contents)


LOCATORS = {
    ArtifactType.ARCHIVE: locate_in_archive,
    ArtifactType.DIRECTORY: locate_in_directory,
    ArtifactType.LITEMOD_ARCHIVE: locate_in_litemod,
}


def locate_metadata(artifact_type: ArtifactType, path: Path) -> Optional[LocatedMetadata]:
    """Run the locator strategy for an artifact type; other types find nothing."""
    locator = LOCATORS.get(artifact_type)
    if locator is None:
        return None
    return locator(Path(path))
