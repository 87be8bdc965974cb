"""
Secret Extraction

Pulls certificate and key material out of a resolved property scope, derives
the consul encrypt key, and writes each feature's files as one unit.
"""

import base64
import binascii
import hashlib
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List

from installgen.constants import (
    BBS_FILES,
    CONSUL_ENCRYPT_FILE,
    CONSUL_ENCRYPT_KEYS_PATH,
    CONSUL_FILES,
    ENCRYPT_KEY_DIGEST,
    ENCRYPT_KEY_ITERATIONS,
    ENCRYPT_KEY_LENGTH,
    METRON_FILES,
    METRON_LEGACY_CA_PATH,
    METRON_LEGACY_FILES,
    SECRET_FILE_PERMISSIONS,
)
from installgen.core.manifest import ManifestTree
from installgen.exceptions import CertExtractionError
from installgen.models.installer import SecretBundle, TlsFeature


def derive_encrypt_key(value: str) -> str:
    """
    Turn a consul encrypt key into its final base64 form.

    A value that strictly decodes as base64 into exactly 16 bytes is already a
    key and is returned unchanged. Line breaks are ignored while decoding, so
    a key written as a YAML block scalar still counts. Anything else is a
    passphrase and goes through PBKDF2-HMAC-SHA1 (20000 iterations, empty
    salt, 16 bytes).

    Args:
        value: Key or passphrase from the manifest

    Returns:
        Base64 encoded 16 byte key
    """
    try:
        decoded = base64.b64decode(
            value.replace("\r", "").replace("\n", ""), validate=True
        )
    except (binascii.Error, ValueError):
        decoded = b""

    if len(decoded) == ENCRYPT_KEY_LENGTH:
        return value

    key = hashlib.pbkdf2_hmac(
        ENCRYPT_KEY_DIGEST,
        value.encode("utf-8"),
        b"",
        ENCRYPT_KEY_ITERATIONS,
        ENCRYPT_KEY_LENGTH,
    )
    return base64.b64encode(key).decode("ascii")


def _collect(
    feature: TlsFeature, scope: ManifestTree, layout: Dict[str, str]
) -> Dict[str, str]:
    files: Dict[str, str] = {}
    for filename, path in layout.items():
        value = scope.get_str(path)
        if not value:
            raise CertExtractionError(feature.value, path)
        files[filename] = value
    return files


def extract_bbs(scope: ManifestTree) -> SecretBundle:
    """BBS client cert, client key, and CA."""
    return SecretBundle(TlsFeature.BBS, _collect(TlsFeature.BBS, scope, BBS_FILES))


def extract_consul(scope: ManifestTree) -> SecretBundle:
    """Consul agent cert, agent key, CA, and the derived encrypt key."""
    files = _collect(TlsFeature.CONSUL, scope, CONSUL_FILES)

    keys = scope.get_list(CONSUL_ENCRYPT_KEYS_PATH)
    if not keys or not str(keys[0]):
        raise CertExtractionError(
            TlsFeature.CONSUL.value, f"{CONSUL_ENCRYPT_KEYS_PATH}[0]"
        )
    files[CONSUL_ENCRYPT_FILE] = derive_encrypt_key(str(keys[0]))

    return SecretBundle(TlsFeature.CONSUL, files)


def extract_metron(scope: ManifestTree) -> SecretBundle:
    """
    Metron agent cert, key, and CA.

    Older manifests keep the client pair under `metron_agent.tls` next to
    `loggregator.tls.ca_cert`; newer ones use `metron_agent.tls_client` and
    `loggregator.tls.ca`. Both land in the same three files.
    """
    if scope.get_str(METRON_LEGACY_CA_PATH):
        layout = METRON_LEGACY_FILES
    else:
        layout = METRON_FILES
    return SecretBundle(TlsFeature.METRON, _collect(TlsFeature.METRON, scope, layout))


def write_bundles(bundles: Iterable[SecretBundle], output_dir: Path) -> List[Path]:
    """
    Write every bundle into output_dir.

    All files are first written to temporary names in output_dir and only
    renamed into place once every write succeeded, so a failure leaves no
    partial set behind. Existing files with the target names are replaced.

    Args:
        bundles: Validated bundles
        output_dir: Existing output directory

    Returns:
        Paths of the written files
    """
    staged: List[tuple[Path, Path]] = []
    try:
        for bundle in bundles:
            for filename, content in bundle.files.items():
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{filename}.", suffix=".tmp", dir=output_dir
                )
                tmp_path = Path(tmp_name)
                staged.append((tmp_path, output_dir / filename))
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                    handle.write(content)
                os.chmod(tmp_path, SECRET_FILE_PERMISSIONS)
    except OSError:
        for tmp_path, _ in staged:
            tmp_path.unlink(missing_ok=True)
        raise

    written = []
    for tmp_path, target in staged:
        os.replace(tmp_path, target)
        written.append(target)
    return written
