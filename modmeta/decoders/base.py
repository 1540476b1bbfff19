"""
Decoder interface and JSON helpers shared by the metadata decoders.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Protocol

from ..models import MetadataFormat, ModDescriptor

logger = logging.getLogger(__name__)


class Decoder(Protocol):
    """Turns the raw bytes of one metadata file into a descriptor."""

    name: str
    metadata_format: MetadataFormat

    def decode(self, contents: bytes) -> Optional[ModDescriptor]:
        ...


def safe_decode(content: bytes, encoding: str = 'utf-8') -> str:
    """Safely decode bytes to string."""
    try:
        return content.decode(encoding).lstrip('\ufeff')
    except UnicodeDecodeError:
        return content.decode('latin-1')


def load_json(contents: bytes) -> Any:
    """Parse JSON, returning None when the payload is not valid JSON."""
    try:
        return json.loads(safe_decode(contents))
    except ValueError as e:
        logger.debug(f"Unparseable JSON metadata: {e}")
        return None


def get_string(obj: Dict[str, Any], key: str, default: str = "") -> str:
    """
    Read a string member.

    Missing keys and values of any other JSON type both yield the default.
    """
    value = obj.get(key)
    return value if isinstance(value, str) else default


def get_object(obj: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = obj.get(key)
    return value if isinstance(value, dict) else {}


def get_array(obj: Dict[str, Any], key: str) -> List[Any]:
    value = obj.get(key)
    return value if isinstance(value, list) else []


def as_object(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}
