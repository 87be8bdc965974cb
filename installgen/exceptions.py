"""
installgen Exception Hierarchy

Every failure is terminal for a run. Stages raise one of these; the command
boundary decides how it is shown and which exit status is used.
"""

from typing import Optional, Sequence

from installgen.constants import (
    ERROR_AMBIGUOUS_DEPLOYMENT,
    ERROR_CERT_EXTRACTION,
    ERROR_DIRECTOR_UNREACHABLE,
    ERROR_NO_REP_JOB,
    ERROR_UNEXPECTED_RESPONSE,
)


class InstallGenError(Exception):
    """Base exception for all installgen errors."""

    exit_code = 1

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class DirectorError(InstallGenError):
    """Raised when talking to the BOSH director fails."""

    pass


class DirectorUnreachableError(DirectorError):
    """Raised on DNS failures, refused connections, and timeouts."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason
        super().__init__(ERROR_DIRECTOR_UNREACHABLE, context=reason)


class AuthRequiredError(DirectorError):
    """Raised when credentials are missing before any request is made."""

    pass


class UnauthorizedError(DirectorError):
    """Raised when the director (or UAA) answers with a non-200 status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            ERROR_UNEXPECTED_RESPONSE.format(status=status_code, body=body)
        )


class AmbiguousDeploymentError(InstallGenError):
    """Raised when zero or several deployments carry the required releases."""

    def __init__(self, candidates: Sequence[str]):
        self.candidates = list(candidates)
        context = None
        if self.candidates:
            context = f"Matching deployments: {', '.join(self.candidates)}"
        super().__init__(ERROR_AMBIGUOUS_DEPLOYMENT, context=context)


class ManifestError(InstallGenError):
    """Raised when a director payload or manifest cannot be decoded."""

    pass


class MissingRepScopeError(ManifestError):
    """Raised when no job in the manifest hosts the rep."""

    def __init__(self, job_names: Sequence[str]):
        self.job_names = list(job_names)
        context = f"Jobs in manifest: {', '.join(self.job_names) or 'none'}"
        super().__init__(ERROR_NO_REP_JOB, context=context)


class RequiredPropertyMissingError(ManifestError):
    """Raised when a required setting resolves in neither scope."""

    def __init__(
        self, setting: str, paths: Sequence[str], message: Optional[str] = None
    ):
        self.setting = setting
        self.paths = list(paths)
        super().__init__(
            message or f"Could not resolve {setting} from the deployment manifest",
            context=f"Tried: {', '.join(self.paths)}",
        )


class CertExtractionError(InstallGenError):
    """Raised when a TLS feature is enabled but one of its fields is absent."""

    def __init__(self, feature: str, path: str):
        self.feature = feature
        self.path = path
        super().__init__(
            f"{ERROR_CERT_EXTRACTION}: {feature} requires {path}",
        )


class NetworkDiscoveryError(InstallGenError):
    """Raised when the machine IP cannot be discovered."""

    pass
