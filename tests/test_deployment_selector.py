"""Deployment selection over director listings."""

from __future__ import annotations

import pytest

from installgen.exceptions import AmbiguousDeploymentError
from installgen.models import DeploymentSummary
from installgen.services import find_qualifying, select_deployment
from tests._helpers import CF_DIEGO_RELEASES, listing


def _summaries(*deployments: tuple[str, tuple[str, ...]]) -> list[DeploymentSummary]:
    return [DeploymentSummary.from_dict(item) for item in listing(*deployments)]


def test_selects_the_only_qualifying_deployment() -> None:
    deployments = _summaries(
        ("cf", ("cf", "etcd")),
        ("cf-diego", CF_DIEGO_RELEASES),
        ("redis", ("redis",)),
    )
    assert select_deployment(deployments) == 1


def test_all_three_releases_are_required() -> None:
    deployments = _summaries(("cf-diego", ("cf", "diego")))
    assert find_qualifying(deployments) == []
    with pytest.raises(AmbiguousDeploymentError) as excinfo:
        select_deployment(deployments)
    assert excinfo.value.candidates == []


def test_no_deployments_is_ambiguous() -> None:
    with pytest.raises(AmbiguousDeploymentError) as excinfo:
        select_deployment([])
    assert excinfo.value.message == (
        "BOSH Director does not have exactly one deployment containing a cf and diego release."
    )


def test_two_qualifying_deployments_are_ambiguous() -> None:
    deployments = _summaries(
        ("cf-diego-a", CF_DIEGO_RELEASES),
        ("cf-diego-b", ("garden-linux", "diego", "cf")),
    )
    with pytest.raises(AmbiguousDeploymentError) as excinfo:
        select_deployment(deployments)
    assert excinfo.value.candidates == ["cf-diego-a", "cf-diego-b"]
    assert "cf-diego-a, cf-diego-b" in excinfo.value.context


def test_custom_required_releases() -> None:
    deployments = _summaries(("cf", ("cf",)), ("cf-diego", CF_DIEGO_RELEASES))
    assert find_qualifying(deployments, required=("cf",)) == [0, 1]
