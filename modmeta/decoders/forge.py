"""
Forge version decoder (forgeversion.properties).

This file only ships inside the Forge loader jar itself, so the identity of
the descriptor is fixed and only the version comes from the file.
"""

import logging
import re
from typing import Dict, Optional

from .base import safe_decode
from ..models import MetadataFormat, ModDescriptor

logger = logging.getLogger(__name__)

FORGE_ID = "Forge"
FORGE_NAME = "Minecraft Forge"
FORGE_HOMEPAGE = "http://www.minecraftforge.net/forum/"
VERSION_KEYS = (
    "forge.major.number",
    "forge.minor.number",
    "forge.revision.number",
    "forge.build.number",
)

# An unescaped '#' starts a comment anywhere on a line
_COMMENT = re.compile(r"(?<!\\)#.*")
_SEPARATOR = re.compile(r"[=:]")


def parse_properties(contents: bytes) -> Dict[str, str]:
    """
    Parse Java-style key=value properties.

    Lines are read independently: blank lines, comments and lines without a
    separator are skipped. Keys are case-sensitive; later keys win.
    """
    properties = {}
    for line in safe_decode(contents).splitlines():
        line = _COMMENT.sub("", line.strip()).strip()
        if not line or line.startswith("!"):
            continue
        parts = _SEPARATOR.split(line, maxsplit=1)
        if len(parts) != 2:
            logger.debug(f"Skipping properties line without a value: {line!r}")
            continue
        key, value = parts[0].strip(), parts[1].strip().replace("\\#", "#")
        if key:
            properties[key] = value
    return properties


class ForgeVersionDecoder:
    """Decoder for forgeversion.properties."""

    name = "Forge"
    metadata_format = MetadataFormat.FORGE_VERSION

    def decode(self, contents: bytes) -> Optional[ModDescriptor]:
        details = ModDescriptor(mod_id=FORGE_ID, name=FORGE_NAME, homepage=FORGE_HOMEPAGE)
        properties = parse_properties(contents)
        if not any(key in properties for key in VERSION_KEYS):
            logger.warning("forgeversion.properties carries no version numbers")

        details.version = ".".join(properties.get(key, "0") for key in VERSION_KEYS)
        return details
