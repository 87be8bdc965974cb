"""
installgen Constants

Centralized constants for director endpoints, manifest paths, defaults, and
output file names.
"""

# Director HTTP Configuration
DIRECTOR_TIMEOUT_SECONDS = 10
DIRECTOR_INFO_PATH = "/info"
DIRECTOR_DEPLOYMENTS_PATH = "/deployments"

# UAA Token Exchange
UAA_CLIENT_ID = "bosh_cli"
UAA_CLIENT_SECRET = ""
UAA_SCOPE = "bosh.read"
UAA_TOKEN_PATH = "oauth/token"
AUTH_TYPE_BASIC = "basic"
AUTH_TYPE_UAA = "uaa"

# Deployment Selection
REQUIRED_RELEASES = ("cf", "diego", "garden-linux")

# Manifest Property Paths
REP_MARKER_PATH = "diego.rep"

ETCD_ANCHOR = "loggregator"
ETCD_MACHINES_PATH = "loggregator.etcd.machines"

SHARED_SECRET_ANCHOR = "metron_endpoint"
SHARED_SECRET_PATH = "metron_endpoint.shared_secret"

METRON_PROTOCOL_PATH = "metron_agent.preferred_protocol"
METRON_TLS_PROTOCOL = "tls"

SYSLOG_ANCHOR = "syslog_daemon_config"
SYSLOG_ADDRESS_PATH = "syslog_daemon_config.address"
SYSLOG_PORT_PATH = "syslog_daemon_config.port"

CONSUL_ANCHOR = "consul"
CONSUL_SERVERS_PATH = "consul.agent.servers.lan"
CONSUL_REQUIRE_SSL_PATH = "consul.require_ssl"
CONSUL_DOMAIN_PATH = "consul.agent.domain"

BBS_ANCHOR = "diego.rep.bbs"
BBS_REQUIRE_SSL_PATH = "diego.rep.bbs.require_ssl"

# Defaults
DEFAULT_CONSUL_DOMAIN = "cf.internal"
DEFAULT_REDUNDANCY_ZONE = "windows"
DEFAULT_STACK = "windows2012R2"
ETCD_CLIENT_PORT = 4001

# Machine IP Discovery
DISCOVERY_PROBE_PORT = 65530

# Encrypt Key Derivation
ENCRYPT_KEY_LENGTH = 16
ENCRYPT_KEY_ITERATIONS = 20000
ENCRYPT_KEY_DIGEST = "sha1"

# Secret File Layout (basename -> manifest path)
BBS_FILES = {
    "bbs_client.crt": "diego.rep.bbs.client_cert",
    "bbs_client.key": "diego.rep.bbs.client_key",
    "bbs_ca.crt": "diego.rep.bbs.ca_cert",
}

CONSUL_FILES = {
    "consul_agent.crt": "consul.agent_cert",
    "consul_agent.key": "consul.agent_key",
    "consul_ca.crt": "consul.ca_cert",
}
CONSUL_ENCRYPT_FILE = "consul_encrypt.key"
CONSUL_ENCRYPT_KEYS_PATH = "consul.encrypt_keys"

METRON_LEGACY_CA_PATH = "loggregator.tls.ca_cert"
METRON_LEGACY_FILES = {
    "metron_agent.crt": "metron_agent.tls.client_cert",
    "metron_agent.key": "metron_agent.tls.client_key",
    "metron_ca.crt": "loggregator.tls.ca_cert",
}
METRON_FILES = {
    "metron_agent.crt": "metron_agent.tls_client.cert",
    "metron_agent.key": "metron_agent.tls_client.key",
    "metron_ca.crt": "loggregator.tls.ca",
}

SECRET_FILE_PERMISSIONS = 0o644

# Output
INSTALL_SCRIPT_NAME = "install.bat"
INSTALL_TEMPLATE_NAME = "install.bat.j2"

# Configuration
ENV_PREFIX = "INSTALLGEN_"
DEFAULT_CONFIG_DIR = "~/.installgen"
LOG_DATE_FORMAT = "%Y-%m-%d"
LOG_TIME_FORMAT = "%H-%M-%S"

# Error Messages
ERROR_DIRECTOR_UNREACHABLE = "Unable to establish connection to BOSH Director."
ERROR_CREDENTIALS_REQUIRED = "Director username and password are required."
ERROR_PASSWORD_REQUIRED = "Director password is required."
ERROR_UNEXPECTED_RESPONSE = "Unexpected BOSH director response: {status}, {body}"
ERROR_AMBIGUOUS_DEPLOYMENT = (
    "BOSH Director does not have exactly one deployment "
    "containing a cf and diego release."
)
ERROR_NO_REP_JOB = (
    "Could not find a job with diego.rep properties in the deployment manifest"
)
ERROR_NO_CONSUL_SERVERS = "Could not find any Consul VMs in your BOSH deployment"
ERROR_CERT_EXTRACTION = "Failed to extract cert from deployment"

# Sensitive Keywords (for log masking)
SENSITIVE_KEYWORDS = [
    "PASSWORD",
    "TOKEN",
    "SECRET",
    "KEY",
]
