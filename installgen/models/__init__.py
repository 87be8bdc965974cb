"""
installgen Domain Models

Clean dataclass-based models for type-safe data handling.
"""

from .deployment import (
    Release,
    DeploymentSummary,
)
from .director import (
    AuthContext,
    DirectorResponse,
)
from .installer import (
    TlsFeature,
    SecretBundle,
    InstallerArguments,
)

__all__ = [
    # Deployment
    "Release",
    "DeploymentSummary",
    # Director
    "AuthContext",
    "DirectorResponse",
    # Installer
    "TlsFeature",
    "SecretBundle",
    "InstallerArguments",
]
