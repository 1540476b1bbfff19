"""
Mod metadata decoders, one per mod-loader convention.
"""

from typing import Dict, Optional

from .base import Decoder
from .fabric import FabricModDecoder
from .forge import ForgeVersionDecoder
from .litemod import LiteModDecoder
from .mcmod import McModInfoDecoder
from ..models import MetadataFormat

DECODERS: Dict[MetadataFormat, Decoder] = {
    MetadataFormat.MCMOD_INFO: McModInfoDecoder(),
    MetadataFormat.FABRIC: FabricModDecoder(),
    MetadataFormat.FORGE_VERSION: ForgeVersionDecoder(),
    MetadataFormat.LITEMOD: LiteModDecoder(),
}


def get_decoder(metadata_format: MetadataFormat) -> Optional[Decoder]:
    """Get the decoder for a metadata file format."""
    return DECODERS.get(metadata_format)


__all__ = [
    'Decoder',
    'McModInfoDecoder',
    'FabricModDecoder',
    'ForgeVersionDecoder',
    'LiteModDecoder',
    'DECODERS',
    'get_decoder',
]
