"""
Installer Models

Dataclass models for the resolved installer parameters and the secret
material written next to the install script.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class TlsFeature(Enum):
    """TLS-backed features that ship certificate files."""

    BBS = "bbs"
    CONSUL = "consul"
    METRON = "metron"


@dataclass
class SecretBundle:
    """All files for one TLS feature, validated before anything is written."""

    feature: TlsFeature
    files: Dict[str, str] = field(default_factory=dict)

    @property
    def filenames(self) -> list[str]:
        return sorted(self.files)

    def __repr__(self) -> str:
        return f"SecretBundle(feature={self.feature.value}, files={self.filenames})"


@dataclass
class InstallerArguments:
    """
    Flat record handed to the script renderer.

    TLS flags stay False until the matching SecretBundle has been written;
    use `enable()` rather than setting them directly.
    """

    etcd_cluster: str = ""
    shared_secret: str = ""
    zone: str = ""
    machine_ip: str = ""
    consul_ips: str = ""
    consul_domain: str = ""
    syslog_host_ip: Optional[str] = None
    syslog_port: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    bbs_require_ssl: bool = False
    consul_require_ssl: bool = False
    metron_prefer_tls: bool = False

    @property
    def has_syslog(self) -> bool:
        return bool(self.syslog_host_ip)

    @property
    def has_admin_credentials(self) -> bool:
        return bool(self.username and self.password)

    def enable(self, feature: TlsFeature) -> None:
        """Mark a TLS feature as shipped."""
        if feature is TlsFeature.BBS:
            self.bbs_require_ssl = True
        elif feature is TlsFeature.CONSUL:
            self.consul_require_ssl = True
        elif feature is TlsFeature.METRON:
            self.metron_prefer_tls = True

    def is_enabled(self, feature: TlsFeature) -> bool:
        return {
            TlsFeature.BBS: self.bbs_require_ssl,
            TlsFeature.CONSUL: self.consul_require_ssl,
            TlsFeature.METRON: self.metron_prefer_tls,
        }[feature]

    def __repr__(self) -> str:
        return (
            f"InstallerArguments(etcd={self.etcd_cluster}, consul={self.consul_ips}, "
            f"zone={self.zone}, machine_ip={self.machine_ip})"
        )
