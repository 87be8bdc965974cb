"""
Property Resolver

Resolves installer settings from a deployment manifest. Every setting follows
the same scoped fallback: read from the rep job's properties when the setting's
anchor section is present there, otherwise from the manifest's global
properties. A required value missing from an anchored job section is looked
up in the global properties as well. All fields of one setting come from the
same scope, so related values (consul servers and consul certificates) never
mix scopes.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from installgen.constants import (
    BBS_ANCHOR,
    BBS_REQUIRE_SSL_PATH,
    CONSUL_ANCHOR,
    CONSUL_DOMAIN_PATH,
    CONSUL_REQUIRE_SSL_PATH,
    CONSUL_SERVERS_PATH,
    DEFAULT_CONSUL_DOMAIN,
    DEFAULT_REDUNDANCY_ZONE,
    ERROR_NO_CONSUL_SERVERS,
    ETCD_ANCHOR,
    ETCD_MACHINES_PATH,
    METRON_PROTOCOL_PATH,
    METRON_TLS_PROTOCOL,
    REP_MARKER_PATH,
    SHARED_SECRET_ANCHOR,
    SHARED_SECRET_PATH,
    SYSLOG_ADDRESS_PATH,
    SYSLOG_ANCHOR,
    SYSLOG_PORT_PATH,
)
from installgen.core.manifest import Job, ManifestDocument, ManifestTree
from installgen.core.secrets import extract_bbs, extract_consul, extract_metron
from installgen.exceptions import MissingRepScopeError, RequiredPropertyMissingError
from installgen.models.installer import InstallerArguments, SecretBundle


def parse_flag(value: Any, default: bool) -> bool:
    """
    Interpret a manifest boolean.

    Manifests carry these either as YAML booleans or as strings; only an
    explicit false (case-insensitive for strings) turns a flag off when the
    default is True.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "false":
        return False
    if text == "true":
        return True
    return default


@dataclass
class ConsulSettings:
    """Consul agent settings resolved from one scope."""

    servers: List[str]
    domain: str
    require_ssl: bool
    bundle: Optional[SecretBundle] = None


@dataclass
class ResolvedInstall:
    """Installer arguments plus the secret bundles that still need writing."""

    arguments: InstallerArguments
    bundles: List[SecretBundle] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class PropertyResolver:
    """Resolves every installer setting from one manifest."""

    def __init__(self, manifest: ManifestDocument):
        self.manifest = manifest
        self._rep_job: Optional[Job] = None

    @property
    def rep_job(self) -> Job:
        return self.locate_rep_job()

    def locate_rep_job(self) -> Job:
        """
        First job whose properties carry the rep marker.

        Raises:
            MissingRepScopeError: If no job hosts the rep
        """
        if self._rep_job is None:
            for job in self.manifest.jobs:
                if job.properties.contains(REP_MARKER_PATH):
                    self._rep_job = job
                    break
            else:
                raise MissingRepScopeError(self.manifest.job_names)
        return self._rep_job

    def scope_for(self, anchor: str) -> ManifestTree:
        """Job scope when it holds `anchor`, otherwise global scope."""
        job_scope = self.rep_job.properties
        if job_scope.contains(anchor):
            return job_scope
        return self.manifest.properties

    def _scope_label(self, scope: ManifestTree, path: str) -> str:
        if scope is self.manifest.properties:
            return f"properties.{path}"
        return f"jobs[{self.rep_job.name}].properties.{path}"

    def require(
        self,
        setting: str,
        anchor: str,
        path: str,
        read: Callable[[ManifestTree], Any],
        message: Optional[str] = None,
    ) -> Tuple[Any, ManifestTree]:
        """
        Read a required setting and the scope it came from.

        The anchored scope is read first; when that is the job scope and the
        value is missing there, the global scope is read as well.

        Raises:
            RequiredPropertyMissingError: Naming every path that was read
        """
        scopes = [self.scope_for(anchor)]
        if scopes[0] is not self.manifest.properties:
            scopes.append(self.manifest.properties)

        tried = []
        for scope in scopes:
            tried.append(self._scope_label(scope, path))
            value = read(scope)
            if value:
                return value, scope
        raise RequiredPropertyMissingError(setting, tried, message=message)

    def resolve_etcd_cluster(self) -> str:
        machines, _ = self.require(
            "etcd cluster",
            ETCD_ANCHOR,
            ETCD_MACHINES_PATH,
            lambda scope: scope.get_list(ETCD_MACHINES_PATH),
        )
        return str(machines[0])

    def resolve_shared_secret(self) -> str:
        secret, _ = self.require(
            "loggregator shared secret",
            SHARED_SECRET_ANCHOR,
            SHARED_SECRET_PATH,
            lambda scope: scope.get_str(SHARED_SECRET_PATH),
        )
        return secret

    def resolve_metron(self) -> Optional[SecretBundle]:
        """Metron TLS bundle when the preferred protocol is tls, else None."""
        scope = self.scope_for(METRON_PROTOCOL_PATH)
        if scope.get_str(METRON_PROTOCOL_PATH) != METRON_TLS_PROTOCOL:
            return None
        return extract_metron(scope)

    def resolve_syslog(self) -> Tuple[Optional[str], Optional[str]]:
        """Syslog host and port; both None when no address is configured."""
        scope = self.scope_for(SYSLOG_ANCHOR)
        address = scope.get_str(SYSLOG_ADDRESS_PATH)
        if not address:
            return None, None
        return address, scope.get_str(SYSLOG_PORT_PATH)

    def resolve_consul(self) -> ConsulSettings:
        # the remaining consul fields come from the scope that held the servers
        servers, scope = self.require(
            "consul servers",
            CONSUL_ANCHOR,
            CONSUL_SERVERS_PATH,
            lambda scope: [str(server) for server in scope.get_list(CONSUL_SERVERS_PATH)],
            message=ERROR_NO_CONSUL_SERVERS,
        )

        # missing require_ssl implies true
        require_ssl = parse_flag(scope.lookup(CONSUL_REQUIRE_SSL_PATH), default=True)

        return ConsulSettings(
            servers=servers,
            domain=scope.get_str(CONSUL_DOMAIN_PATH) or DEFAULT_CONSUL_DOMAIN,
            require_ssl=require_ssl,
            bundle=extract_consul(scope) if require_ssl else None,
        )

    def resolve_bbs(self) -> Optional[SecretBundle]:
        """BBS TLS bundle unless require_ssl is explicitly false."""
        scope = self.scope_for(BBS_ANCHOR)
        # missing require_ssl implies true
        if not parse_flag(scope.lookup(BBS_REQUIRE_SSL_PATH), default=True):
            return None
        return extract_bbs(scope)

    def resolve(
        self,
        discover_machine_ip: Callable[[str], str],
        machine_ip: Optional[str] = None,
        zone: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> ResolvedInstall:
        """
        Run every resolution pass.

        Nothing is written here; TLS flags on the returned arguments stay off
        until the caller has written the bundles.

        Args:
            discover_machine_ip: Called with the first consul server when no
                machine IP was supplied
            machine_ip: Operator supplied machine IP
            zone: Redundancy zone label
            username: Windows admin username to embed
            password: Windows admin password to embed

        Returns:
            ResolvedInstall with arguments, pending bundles, and warnings
        """
        self.locate_rep_job()

        result = ResolvedInstall(
            arguments=InstallerArguments(
                zone=zone or DEFAULT_REDUNDANCY_ZONE,
                username=username or None,
                password=password or None,
            )
        )
        args = result.arguments

        args.etcd_cluster = self.resolve_etcd_cluster()
        args.shared_secret = self.resolve_shared_secret()

        metron = self.resolve_metron()
        if metron:
            result.bundles.append(metron)

        host, port = self.resolve_syslog()
        if host and not port:
            result.warnings.append(
                f"Syslog address {host} has no port; syslog forwarding skipped"
            )
        elif host:
            args.syslog_host_ip, args.syslog_port = host, port

        consul = self.resolve_consul()
        args.consul_ips = ",".join(consul.servers)
        args.consul_domain = consul.domain
        if consul.bundle:
            result.bundles.append(consul.bundle)

        args.machine_ip = machine_ip or discover_machine_ip(consul.servers[0])

        bbs = self.resolve_bbs()
        if bbs:
            result.bundles.append(bbs)

        if (username or password) and not args.has_admin_credentials:
            result.warnings.append(
                "Windows admin credentials need both a username and a password; "
                "ADMIN_USERNAME/ADMIN_PASSWORD omitted"
            )

        return result
