"""
Mod folder scanner: classifies artifacts and runs parse tasks in parallel.
"""

import itertools
import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .models import ArtifactType, ModEntry, ParseResult, ScanResult
from .task import ModParseTask

logger = logging.getLogger(__name__)

DISABLED_SUFFIX = ".disabled"
ARCHIVE_SUFFIXES = (".zip", ".jar")
LITEMOD_SUFFIX = ".litemod"


def is_disabled(path: Path) -> bool:
    return path.name.endswith(DISABLED_SUFFIX)


def classify_artifact(path: Path) -> ArtifactType:
    """
    Decide how a mod artifact is packaged from what is on disk.

    A trailing ``.disabled`` is ignored, so ``foo.jar.disabled`` is an archive.
    """
    path = Path(path)
    if path.is_dir():
        return ArtifactType.DIRECTORY
    if not path.is_file():
        return ArtifactType.UNKNOWN

    name = path.name.lower()
    if name.endswith(DISABLED_SUFFIX):
        name = name[:-len(DISABLED_SUFFIX)]

    if name.endswith(LITEMOD_SUFFIX):
        return ArtifactType.LITEMOD_ARCHIVE
    if name.endswith(ARCHIVE_SUFFIXES):
        return ArtifactType.ARCHIVE
    return ArtifactType.SINGLE_FILE


class ModScanner:
    """Scanner dispatching one parse task per artifact in a mods folder."""

    def __init__(self, workers: int = 4):
        """
        Initialize the scanner.

        Args:
            workers: Number of parallel workers for processing
        """
        self.workers = max(1, workers)
        self._tokens = itertools.count(1)

    def _collect_artifacts(
        self,
        folder_path: Path,
        include_disabled: bool,
        exclude_patterns: Optional[List[str]]
    ) -> List[Path]:
        artifacts = []
        excluded = set()
        for pattern in exclude_patterns or []:
            excluded.update(folder_path.glob(pattern))

        for path in sorted(folder_path.iterdir()):
            if path.name.startswith('.') or path in excluded:
                continue
            if is_disabled(path) and not include_disabled:
                continue
            artifacts.append(path)
        return artifacts

    def scan_folder(
        self,
        folder_path: Path,
        include_disabled: bool = False,
        exclude_patterns: Optional[List[str]] = None,
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> ScanResult:
        """
        Scan a mods folder.

        Args:
            folder_path: Path to the folder to scan
            include_disabled: Whether to include ``*.disabled`` artifacts
            exclude_patterns: List of glob patterns to exclude
            progress_callback: Optional callback for progress updates (current, total, filename)

        Returns:
            ScanResult with one entry per artifact, with or without metadata
        """
        folder_path = Path(folder_path)
        if not folder_path.exists():
            raise FileNotFoundError(f"Folder not found: {folder_path}")

        if not folder_path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {folder_path}")

        artifacts = self._collect_artifacts(folder_path, include_disabled, exclude_patterns)
        if not artifacts:
            logger.warning(f"No mods found in {folder_path}")
            return ScanResult(total_files=0, generated_at=datetime.now())

        logger.info(f"Found {len(artifacts)} artifact(s). Processing with {self.workers} workers...")

        result = ScanResult(total_files=len(artifacts))
        start_time = time.time()

        pending: Dict[int, ModEntry] = {}
        completed = 0
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures: Dict[Future, int] = {}
            for path in artifacts:
                token = next(self._tokens)
                artifact_type = classify_artifact(path)
                pending[token] = ModEntry(path=path, artifact_type=artifact_type, enabled=not is_disabled(path))
                task = ModParseTask(token, artifact_type, path)
                futures[executor.submit(task.run)] = token

            for future in as_completed(futures):
                parsed: ParseResult = future.result()
                entry = pending[parsed.token]
                entry.details = parsed.details
                completed += 1

                if not parsed.found:
                    logger.debug(f"No mod metadata found in {entry.filename}")
                if progress_callback:
                    progress_callback(completed, len(artifacts), entry.filename)

        result.entries = [pending[token] for token in sorted(pending)]
        result.scan_duration = time.time() - start_time
        result.generated_at = datetime.now()

        logger.info(f"Scan completed in {result.scan_duration:.2f}s. Found {len(result.entries)} mods.")

        return result
