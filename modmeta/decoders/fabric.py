"""
Fabric mod metadata decoder (fabric.mod.json).
"""

import logging
from typing import Any, Optional

from .base import as_object, get_array, get_object, get_string, load_json
from ..models import MetadataFormat, ModDescriptor

logger = logging.getLogger(__name__)


def _schema_version(data: dict) -> int:
    value = data.get("schemaVersion", 0)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _author_name(author: Any) -> str:
    # Authors are either plain names or person objects: {"name": ..., "contact": {...}}
    if isinstance(author, dict):
        return get_string(author, "name")
    return author if isinstance(author, str) else ""


class FabricModDecoder:
    """Decoder for Fabric mods (fabric.mod.json)."""

    name = "Fabric"
    metadata_format = MetadataFormat.FABRIC

    def decode(self, contents: bytes) -> Optional[ModDescriptor]:
        raw = load_json(contents)
        if not isinstance(raw, dict):
            logger.warning("fabric.mod.json is not a JSON object, fields left empty")
        data = as_object(raw)
        schema_version = _schema_version(data)

        details = ModDescriptor()
        details.mod_id = get_string(data, "id")
        details.version = get_string(data, "version")
        details.name = get_string(data, "name") if "name" in data else details.mod_id
        details.description = get_string(data, "description")

        # Schema 0 predates authors and contact information.
        if schema_version >= 1:
            details.authors = [_author_name(author) for author in get_array(data, "authors")]
            if "contact" in data:
                contact = get_object(data, "contact")
                if "homepage" in contact:
                    details.homepage = get_string(contact, "homepage")

        logger.debug(f"Decoded Fabric mod: {details.mod_id} v{details.version} (schema {schema_version})")
        return details
