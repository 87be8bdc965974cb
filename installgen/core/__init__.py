"""Core manifest resolution components"""

from .manifest import ManifestTree, ManifestDocument, Job
from .resolver import PropertyResolver, ResolvedInstall, ConsulSettings, parse_flag
from .secrets import (
    derive_encrypt_key,
    extract_bbs,
    extract_consul,
    extract_metron,
    write_bundles,
)
from .renderer import ScriptRenderer

__all__ = [
    "ManifestTree",
    "ManifestDocument",
    "Job",
    "PropertyResolver",
    "ResolvedInstall",
    "ConsulSettings",
    "parse_flag",
    "derive_encrypt_key",
    "extract_bbs",
    "extract_consul",
    "extract_metron",
    "write_bundles",
    "ScriptRenderer",
]
