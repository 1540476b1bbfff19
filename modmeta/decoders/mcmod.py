"""
Legacy Forge mod metadata decoder (mcmod.info).

Two historical layouts exist: the early bare array of mod objects, and
the versioned object wrapping that array (``modListVersion``/``modinfoversion``
must be 2).
"""

import logging
import math
from typing import Any, List, Optional

from .base import get_array, get_string, load_json, safe_decode
from ..models import MetadataFormat, ModDescriptor

logger = logging.getLogger(__name__)

# Name left in place by people who copied the FML example mod verbatim
PLACEHOLDER_NAME = "Example Mod"
URL_SCHEMES = ("http://", "https://", "ftp://")
SUPPORTED_LIST_VERSION = 2


def normalize_homepage(url: str) -> str:
    """Trim a homepage URL and give it an explicit scheme when it lacks one."""
    url = url.strip()
    if url and not url.startswith(URL_SCHEMES):
        url = "http://" + url
    return url


def _member(data: dict, key: str, legacy_key: str) -> Any:
    return data[key] if key in data else data.get(legacy_key)


def _is_supported_version(version: Any) -> bool:
    # Fractional versions truncate; inf and NaN never match
    if isinstance(version, bool) or not isinstance(version, (int, float)):
        return False
    if isinstance(version, int):
        return version == SUPPORTED_LIST_VERSION
    return math.isfinite(version) and int(version) == SUPPORTED_LIST_VERSION


class McModInfoDecoder:
    """Decoder for mcmod.info files."""

    name = "Legacy Forge"
    metadata_format = MetadataFormat.MCMOD_INFO

    def decode(self, contents: bytes) -> Optional[ModDescriptor]:
        data = load_json(contents)

        if isinstance(data, list):
            return self._from_mod_list(data)

        if isinstance(data, dict):
            version = _member(data, "modinfoversion", "modListVersion")
            if not _is_supported_version(version):
                logger.warning(f"Unsupported mcmod.info version {version!r}:\n{safe_decode(contents)}")
                return None
            mod_list = _member(data, "modlist", "modList")
            if isinstance(mod_list, list):
                return self._from_mod_list(mod_list)

        logger.debug("mcmod.info does not contain a mod list")
        return None

    def _from_mod_list(self, mod_list: List[Any]) -> Optional[ModDescriptor]:
        # Only the first mod is described; multi-mod files are not supported.
        if not mod_list or not isinstance(mod_list[0], dict):
            logger.warning("First mcmod.info entry is not an object")
            return None
        mod = mod_list[0]

        details = ModDescriptor()
        details.mod_id = get_string(mod, "modid")
        name = get_string(mod, "name")
        if name != PLACEHOLDER_NAME:
            details.name = name
        details.version = get_string(mod, "version")
        details.update_url = get_string(mod, "updateUrl")
        details.homepage = normalize_homepage(get_string(mod, "url"))
        details.description = get_string(mod, "description")

        authors = get_array(mod, "authorList")
        if not authors:
            authors = get_array(mod, "authors")
        details.authors = [author if isinstance(author, str) else "" for author in authors]

        details.credits = get_string(mod, "credits")
        return details


__all__ = ["McModInfoDecoder", "normalize_homepage", "PLACEHOLDER_NAME"]
