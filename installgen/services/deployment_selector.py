"""
Deployment Selection

Picks the single deployment that carries every required release. There is no
tie-breaking: generating against the wrong cluster is worse than stopping.
"""

from typing import Iterable, List, Sequence

from installgen.constants import REQUIRED_RELEASES
from installgen.exceptions import AmbiguousDeploymentError
from installgen.models.deployment import DeploymentSummary


def find_qualifying(
    deployments: Sequence[DeploymentSummary],
    required: Iterable[str] = REQUIRED_RELEASES,
) -> List[int]:
    """Indexes of every deployment whose releases include all of `required`."""
    required = tuple(required)
    return [
        index
        for index, deployment in enumerate(deployments)
        if deployment.has_releases(required)
    ]


def select_deployment(
    deployments: Sequence[DeploymentSummary],
    required: Iterable[str] = REQUIRED_RELEASES,
) -> int:
    """
    Index of the one qualifying deployment.

    Args:
        deployments: Director listing
        required: Release names that must all be present

    Returns:
        Index into `deployments`

    Raises:
        AmbiguousDeploymentError: If zero or more than one deployment qualifies
    """
    matches = find_qualifying(deployments, required)
    if len(matches) != 1:
        raise AmbiguousDeploymentError([deployments[i].name for i in matches])
    return matches[0]
