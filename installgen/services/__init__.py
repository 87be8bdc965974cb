"""
installgen Services Layer

Director access, deployment selection, and host network discovery.
"""

from .director_client import DirectorClient, mask_url, split_credentials
from .deployment_selector import find_qualifying, select_deployment
from .network import discover_machine_ip

__all__ = [
    "DirectorClient",
    "mask_url",
    "split_credentials",
    "find_qualifying",
    "select_deployment",
    "discover_machine_ip",
]
