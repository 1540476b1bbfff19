"""
modmeta - read mod metadata from Minecraft mod archives and folders.
"""

__version__ = "1.0.0"

from .models import ArtifactType, MetadataFormat, ModDescriptor, ModEntry, ParseResult, ScanResult
from .task import ModParseTask, parse_artifact
from .scanner import ModScanner, classify_artifact

__all__ = [
    '__version__',
    'ArtifactType',
    'MetadataFormat',
    'ModDescriptor',
    'ModEntry',
    'ParseResult',
    'ScanResult',
    'ModParseTask',
    'parse_artifact',
    'ModScanner',
    'classify_artifact',
]
