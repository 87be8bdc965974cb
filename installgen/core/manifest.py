"""
Manifest Tree

The decoded deployment manifest as a generic nested mapping/sequence tree.
Lookups walk dotted paths and return None when any segment is absent; a YAML
null is treated the same as a missing key.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

import yaml

from installgen.exceptions import ManifestError


def split_path(path: str) -> List[str]:
    return [segment for segment in path.split(".") if segment]


class ManifestTree:
    """Read-only view over one property set."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data = data if isinstance(data, Mapping) else {}

    def lookup(self, path: str) -> Optional[Any]:
        """
        Resolve a dotted path.

        Mapping segments are matched by key; sequence segments must be
        decimal indexes (`consul.encrypt_keys.0`).

        Args:
            path: Dotted path relative to this tree

        Returns:
            The value found, or None when any segment is missing
        """
        node: Any = self._data
        for segment in split_path(path):
            if isinstance(node, Mapping):
                node = node.get(segment)
            elif isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
                if not segment.isdigit() or int(segment) >= len(node):
                    return None
                node = node[int(segment)]
            else:
                return None
            if node is None:
                return None
        return node

    def contains(self, path: str) -> bool:
        return self.lookup(path) is not None

    def get_str(self, path: str) -> Optional[str]:
        """Resolve a scalar and normalize it to its string form."""
        value = self.lookup(path)
        if value is None or isinstance(value, (Mapping, list)):
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def get_list(self, path: str) -> List[Any]:
        """Resolve a sequence; anything else yields an empty list."""
        value = self.lookup(path)
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return []

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"ManifestTree(keys={sorted(str(k) for k in self._data)})"


@dataclass
class Job:
    """One job (role/process group) of the deployment."""

    name: str
    properties: ManifestTree = field(default_factory=ManifestTree)

    def __repr__(self) -> str:
        return f"Job(name={self.name})"


@dataclass
class ManifestDocument:
    """A full deployment manifest: jobs plus global properties."""

    name: str = ""
    jobs: List[Job] = field(default_factory=list)
    properties: ManifestTree = field(default_factory=ManifestTree)

    @property
    def job_names(self) -> List[str]:
        return [job.name for job in self.jobs]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ManifestDocument":
        jobs = []
        for job in data.get("jobs") or []:
            if not isinstance(job, Mapping):
                continue
            jobs.append(
                Job(
                    name=str(job.get("name") or ""),
                    properties=ManifestTree(job.get("properties")),
                )
            )
        return cls(
            name=str(data.get("name") or ""),
            jobs=jobs,
            properties=ManifestTree(data.get("properties")),
        )

    @classmethod
    def from_yaml(cls, text: str) -> "ManifestDocument":
        """
        Decode manifest text.

        Raises:
            ManifestError: If the text is not YAML or not a mapping
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ManifestError("Deployment manifest is not valid YAML", context=str(e))

        if not isinstance(data, Mapping):
            raise ManifestError(
                "Deployment manifest is empty or not a mapping",
                context=f"Decoded type: {type(data).__name__}",
            )
        return cls.from_dict(data)

    def __repr__(self) -> str:
        return f"ManifestDocument(name={self.name}, jobs={len(self.jobs)})"
