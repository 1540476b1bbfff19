"""
Data models for mod metadata parsing.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class ArtifactType(Enum):
    """How a mod artifact is packaged on disk."""
    UNKNOWN = "unknown"
    ARCHIVE = "archive"
    DIRECTORY = "directory"
    LITEMOD_ARCHIVE = "litemod"
    SINGLE_FILE = "single_file"


class MetadataFormat(Enum):
    """Well-known metadata files. Values are the exact entry names."""
    MCMOD_INFO = "mcmod.info"
    FABRIC = "fabric.mod.json"
    FORGE_VERSION = "forgeversion.properties"
    LITEMOD = "litemod.json"

    @property
    def filename(self) -> str:
        return self.value


@dataclass
class ModDescriptor:
    """Normalized metadata for a single mod."""
    mod_id: str = ""
    name: str = ""
    version: str = ""
    homepage: str = ""
    update_url: str = ""
    description: str = ""
    credits: str = ""
    mc_version: str = ""
    authors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, excluding empty values."""
        result: Dict[str, Any] = {}
        for key in ("mod_id", "name", "version", "homepage", "update_url",
                    "description", "credits", "mc_version"):
            value = getattr(self, key)
            if value:
                result[key] = value
        if self.authors:
            result["authors"] = list(self.authors)
        return result


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse task, keyed by the caller's token."""
    token: Any
    path: Path
    artifact_type: ArtifactType
    details: Optional[ModDescriptor] = None

    @property
    def found(self) -> bool:
        return self.details is not None


def _strip_suffixes(filename: str) -> str:
    if filename.endswith(".disabled"):
        filename = filename[:-len(".disabled")]
    stem, dot, suffix = filename.rpartition(".")
    if dot and stem and suffix.lower() in ("jar", "zip", "litemod"):
        return stem
    return filename


@dataclass
class ModEntry:
    """A mod as seen by the caller: the artifact plus whatever metadata was found."""
    path: Path
    artifact_type: ArtifactType
    enabled: bool = True
    details: Optional[ModDescriptor] = None

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def name(self) -> str:
        if self.details:
            if self.details.name:
                return self.details.name
            if self.details.mod_id:
                return self.details.mod_id
        return _strip_suffixes(self.filename)

    @property
    def version(self) -> str:
        return self.details.version if self.details else ""

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "name": self.name,
            "filename": self.filename,
            "type": self.artifact_type.value,
            "version": self.version,
        }
        if not self.enabled:
            result["disabled"] = True
        if self.details:
            result["details"] = self.details.to_dict()
        return result


@dataclass
class ScanResult:
    """Container for scan results."""
    entries: List[ModEntry] = field(default_factory=list)
    total_files: int = 0
    scan_duration: float = 0.0
    generated_at: Optional[datetime] = None

    @property
    def without_metadata(self) -> List[ModEntry]:
        return [entry for entry in self.entries if entry.details is None]

    def to_dict(self) -> Dict[str, Any]:
        """Convert scan result to dictionary for JSON output."""
        return {
            "mods": [entry.to_dict() for entry in self.entries],
            "total_mods": len(self.entries),
            "without_metadata": len(self.without_metadata),
            "total_files_scanned": self.total_files,
            "scan_duration_seconds": round(self.scan_duration, 2),
            "generated_at": self.generated_at.isoformat() if self.generated_at else datetime.now().isoformat(),
        }

    def get_duplicates(self) -> Dict[str, List[ModEntry]]:
        """Find entries sharing a mod id."""
        duplicates: Dict[str, List[ModEntry]] = {}
        seen: Dict[str, List[ModEntry]] = {}

        for entry in self.entries:
            if not entry.details or not entry.details.mod_id:
                continue
            key = entry.details.mod_id.lower()
            if key in seen:
                seen[key].append(entry)
                duplicates[key] = seen[key]
            else:
                seen[key] = [entry]

        return duplicates

    def filter_by_type(self, artifact_type: ArtifactType) -> List[ModEntry]:
        """Filter entries by artifact type."""
        return [entry for entry in self.entries if entry.artifact_type is artifact_type]

    def sort_entries(self, by: str = "name", reverse: bool = False) -> None:
        """Sort entries by specified field."""
        sort_keys = {
            "name": lambda e: e.name.lower(),
            "version": lambda e: e.version.lower(),
            "filename": lambda e: e.filename.lower(),
        }
        if by in sort_keys:
            self.entries.sort(key=sort_keys[by], reverse=reverse)
