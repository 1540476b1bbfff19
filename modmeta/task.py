"""
Parse task: locate and decode the metadata of a single mod artifact.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from .decoders import get_decoder
from .locator import locate_metadata
from .models import ArtifactType, ModDescriptor, ParseResult

logger = logging.getLogger(__name__)


class ModParseTask:
    """
    One unit of work for a worker thread.

    The task touches only its own artifact and returns a fresh result, so
    tasks can run concurrently without locking. ``run`` never raises: an
    artifact with missing or broken metadata simply yields a result without
    details. The completion callback fires exactly once per run, after all
    files are closed.
    """

    def __init__(
        self,
        token: Any,
        artifact_type: ArtifactType,
        path: Path,
        on_finished: Optional[Callable[[ParseResult], None]] = None
    ):
        """
        Args:
            token: Opaque value handed back in the result
            artifact_type: How the artifact is packaged
            path: Path to the mod file or folder
            on_finished: Optional callback receiving the result
        """
        self.token = token
        self.artifact_type = artifact_type
        self.path = Path(path)
        self.on_finished = on_finished

    def _parse(self) -> Optional[ModDescriptor]:
        located = locate_metadata(self.artifact_type, self.path)
        if located is None:
            return None

        decoder = get_decoder(located.metadata_format)
        logger.debug(f"Using {decoder.name} decoder for {self.path.name}")
        return decoder.decode(located.contents)

    def run(self) -> ParseResult:
        try:
            details = self._parse()
        except Exception as e:
            logger.error(f"Error parsing mod metadata from {self.path.name}: {e}")
            details = None

        result = ParseResult(
            token=self.token,
            path=self.path,
            artifact_type=self.artifact_type,
            details=details
        )
        if self.on_finished:
            self.on_finished(result)
        return result


def parse_artifact(path: Path, artifact_type: ArtifactType) -> Optional[ModDescriptor]:
    """Parse one artifact synchronously and return its descriptor, if any."""
    return ModParseTask(None, artifact_type, path).run().details
