"""
LiteLoader mod metadata decoder (litemod.json).
"""

import logging
from typing import Optional

from .base import as_object, get_string, load_json
from ..models import MetadataFormat, ModDescriptor

logger = logging.getLogger(__name__)


def _revision(data: dict) -> str:
    # Usually written as a bare integer build number
    value = data.get("revision")
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, int) or (isinstance(value, float) and value.is_integer()):
        return str(int(value))
    return ""


class LiteModDecoder:
    """Decoder for LiteLoader mods (litemod.json)."""

    name = "LiteLoader"
    metadata_format = MetadataFormat.LITEMOD

    def decode(self, contents: bytes) -> Optional[ModDescriptor]:
        raw = load_json(contents)
        if not isinstance(raw, dict):
            logger.warning("litemod.json is not a JSON object, fields left empty")
        data = as_object(raw)

        details = ModDescriptor()
        if "name" in data:
            details.mod_id = details.name = get_string(data, "name")
        if "version" in data:
            details.version = get_string(data, "version")
        else:
            details.version = _revision(data)
        details.mc_version = get_string(data, "mcversion")

        # Only a single author is supported by this format
        author = get_string(data, "author")
        if author:
            details.authors.append(author)

        details.description = get_string(data, "description")
        details.homepage = get_string(data, "url")
        return details
