"""install.bat rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from installgen.core import ScriptRenderer
from installgen.models import InstallerArguments, TlsFeature


@pytest.fixture
def args() -> InstallerArguments:
    return InstallerArguments(
        etcd_cluster="10.0.0.20",
        shared_secret="s3cret",
        zone="windows",
        machine_ip="10.0.0.5",
        consul_ips="10.0.16.4,10.0.32.4",
        consul_domain="cf.internal",
    )


def test_minimal_script(args: InstallerArguments) -> None:
    expected = (
        "msiexec /passive /norestart /i %~dp0\\DiegoWindows.msi ^\r\n"
        "  CONSUL_DOMAIN=cf.internal ^\r\n"
        "  CONSUL_IPS=10.0.16.4,10.0.32.4 ^\r\n"
        "  CF_ETCD_CLUSTER=http://10.0.0.20:4001 ^\r\n"
        "  STACK=windows2012R2 ^\r\n"
        "  REDUNDANCY_ZONE=windows ^\r\n"
        "  LOGGREGATOR_SHARED_SECRET=s3cret ^\r\n"
        "  MACHINE_IP=10.0.0.5\r\n"
        "\r\n"
        "msiexec /passive /norestart /i %~dp0\\GardenWindows.msi ^\r\n"
        "  MACHINE_IP=10.0.0.5\r\n"
    )
    assert ScriptRenderer.render(args) == expected


def test_every_line_ends_with_crlf(args: InstallerArguments) -> None:
    for feature in TlsFeature:
        args.enable(feature)
    args.syslog_host_ip, args.syslog_port = "10.0.0.50", "514"

    script = ScriptRenderer.render(args)
    assert script.endswith("\r\n")
    assert "\n" not in script.replace("\r\n", "")


def test_tls_clauses_follow_flags(args: InstallerArguments) -> None:
    script = ScriptRenderer.render(args)
    assert "BBS_CA_FILE" not in script
    assert "CONSUL_ENCRYPT_FILE" not in script
    assert "METRON_CA_FILE" not in script

    args.enable(TlsFeature.BBS)
    args.enable(TlsFeature.CONSUL)
    args.enable(TlsFeature.METRON)
    lines = ScriptRenderer.render(args).split("\r\n")

    assert lines[1] == "  BBS_CA_FILE=%~dp0\\bbs_ca.crt ^"
    assert lines[2] == "  BBS_CLIENT_CERT_FILE=%~dp0\\bbs_client.crt ^"
    assert lines[3] == "  BBS_CLIENT_KEY_FILE=%~dp0\\bbs_client.key ^"
    assert "  CONSUL_ENCRYPT_FILE=%~dp0\\consul_encrypt.key ^" in lines
    assert "  CONSUL_AGENT_KEY_FILE=%~dp0\\consul_agent.key ^" in lines
    assert "  METRON_AGENT_KEY_FILE=%~dp0\\metron_agent.key" in lines


def test_syslog_lines_in_both_invocations(args: InstallerArguments) -> None:
    args.syslog_host_ip, args.syslog_port = "10.0.0.50", "514"
    script = ScriptRenderer.render(args)

    assert script.count("SYSLOG_HOST_IP=10.0.0.50") == 2
    assert script.count("SYSLOG_PORT=514") == 2
    assert "  MACHINE_IP=10.0.0.5 ^\r\n  SYSLOG_HOST_IP=10.0.0.50" in script


def test_admin_credentials(args: InstallerArguments) -> None:
    args.username, args.password = "Administrator", "pa ss"
    script = ScriptRenderer.render(args)

    assert "  ADMIN_USERNAME=Administrator ^\r\n" in script
    assert '  ADMIN_PASSWORD="""pa ss"""\r\n' in script


def test_write_replaces_previous_script(args: InstallerArguments, tmp_path: Path) -> None:
    (tmp_path / "install.bat").write_text("old")
    path = ScriptRenderer.write(args, tmp_path)

    assert path == tmp_path / "install.bat"
    data = path.read_bytes()
    assert data.startswith(b"msiexec /passive /norestart /i %~dp0\\DiegoWindows.msi ^\r\n")
    assert b"old" not in data
