"""
Director Models

Dataclass models for director authentication and responses.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from installgen.constants import AUTH_TYPE_UAA
from installgen.exceptions import ManifestError


@dataclass(frozen=True)
class AuthContext:
    """Resolved authentication for the lifetime of one run."""

    auth_type: str
    username: str
    password: str
    token: Optional[str] = None
    expires_in: Optional[int] = None

    @property
    def uses_token(self) -> bool:
        """Check if requests carry a bearer token instead of basic auth."""
        return self.auth_type == AUTH_TYPE_UAA and self.token is not None

    def headers(self) -> Dict[str, str]:
        """Headers attached to every director request."""
        if self.uses_token:
            return {"Authorization": f"bearer {self.token}"}
        return {}

    def basic_auth(self) -> Optional[tuple]:
        """Basic auth tuple for requests, or None in token mode."""
        if self.uses_token:
            return None
        return (self.username, self.password)

    def __repr__(self) -> str:
        return f"AuthContext(type={self.auth_type}, user={self.username})"


@dataclass(frozen=True)
class DirectorResponse:
    """Status and raw body of a director request."""

    status_code: int
    body: str

    @property
    def is_success(self) -> bool:
        return self.status_code == 200

    def json(self) -> Any:
        """Decode the body as JSON."""
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise ManifestError(
                "Director returned a response that is not valid JSON",
                context=str(e),
            )

    def __repr__(self) -> str:
        return f"DirectorResponse(status={self.status_code}, bytes={len(self.body)})"
