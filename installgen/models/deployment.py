"""
Deployment Models

Dataclass models for the director's deployment listing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set


@dataclass(frozen=True)
class Release:
    """A release bundled into a deployment."""

    name: str
    version: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Release":
        """Create from a listing entry."""
        return cls(
            name=str(data.get("name") or ""),
            version=str(data.get("version") or ""),
        )


@dataclass
class DeploymentSummary:
    """One entry of the `/deployments` listing."""

    name: str
    releases: List[Release] = field(default_factory=list)

    @property
    def release_names(self) -> Set[str]:
        """Names of all releases in this deployment."""
        return {release.name for release in self.releases}

    def has_releases(self, names) -> bool:
        """Check that every name in `names` is one of this deployment's releases."""
        return set(names).issubset(self.release_names)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeploymentSummary":
        """Create from a listing entry."""
        releases = [
            Release.from_dict(release)
            for release in data.get("releases") or []
            if isinstance(release, dict)
        ]
        return cls(name=str(data.get("name") or ""), releases=releases)

    def __repr__(self) -> str:
        names = ", ".join(sorted(self.release_names))
        return f"DeploymentSummary(name={self.name}, releases=[{names}])"
