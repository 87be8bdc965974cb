"""installgen - Generate command"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

import click
import requests

from installgen.base import BaseCommand
from installgen.config import Settings
from installgen.constants import DEFAULT_REDUNDANCY_ZONE, ENV_PREFIX
from installgen.core import ManifestDocument, PropertyResolver, ScriptRenderer, write_bundles
from installgen.services import (
    DirectorClient,
    discover_machine_ip,
    mask_url,
    select_deployment,
)
from installgen.ui_components import show_written_files


@dataclass
class GenerateOptions:
    """Per-run options collected from the command line."""

    bosh_url: str
    output_dir: Path
    machine_ip: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    zone: str = DEFAULT_REDUNDANCY_ZONE
    windows_username: Optional[str] = None
    windows_password: Optional[str] = None


class GenerateCommand(BaseCommand):
    """
    Discover a cell's configuration from the director and write install.bat.

    Steps run strictly in order; the first failure aborts the run before any
    further step. Secret files are written only after every setting has been
    resolved and every bundle validated, and install.bat is written last.
    """

    def __init__(
        self,
        options: GenerateOptions,
        verbose: bool = False,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        discover: Callable[[str], str] = discover_machine_ip,
    ):
        super().__init__(verbose=verbose, settings=settings)
        self.options = options
        self.session = session
        self.discover = discover
        self.written: List[Path] = []

    def execute(self) -> None:
        """Execute generate command."""
        options = self.options
        director = mask_url(options.bosh_url)

        self.show_header(
            title="Generate Install Script",
            details={
                "Director": director,
                "Output": options.output_dir,
                "Zone": options.zone,
            },
        )

        logger = self.init_logger("generate")
        logger.log(f"Director: {director}")
        logger.log(f"Output directory: {options.output_dir}")

        client = DirectorClient(
            options.bosh_url,
            username=options.username,
            password=options.password,
            session=self.session,
            timeout=self.settings.timeout,
        )

        logger.step("Authenticating with BOSH director")
        auth = client.authenticate()
        logger.success(f"Authenticated ({auth.auth_type})")

        logger.step("Selecting deployment")
        deployments = client.list_deployments()
        logger.debug(f"Director has {len(deployments)} deployment(s)")
        deployment = deployments[select_deployment(deployments)]
        logger.success(f"Using deployment {deployment.name}")

        logger.step("Fetching deployment manifest")
        manifest = ManifestDocument.from_yaml(client.fetch_manifest(deployment.name))
        logger.success(f"Manifest has {len(manifest.jobs)} job(s)")

        logger.step("Resolving installer properties")
        resolved = PropertyResolver(manifest).resolve(
            self.discover,
            machine_ip=options.machine_ip,
            zone=options.zone,
            username=options.windows_username,
            password=options.windows_password,
        )
        args = resolved.arguments
        for warning in resolved.warnings:
            logger.warning(warning)
        logger.log(f"etcd cluster: {args.etcd_cluster}")
        logger.log(f"consul servers: {args.consul_ips} ({args.consul_domain})")
        logger.log(f"machine ip: {args.machine_ip}")
        if args.has_syslog:
            logger.log(f"syslog: {args.syslog_host_ip}:{args.syslog_port}")
        logger.success(
            "TLS features: "
            + (", ".join(b.feature.value for b in resolved.bundles) or "none")
        )

        logger.step("Writing output files")
        options.output_dir.mkdir(parents=True, exist_ok=True)
        self.written = write_bundles(resolved.bundles, options.output_dir)
        for bundle in resolved.bundles:
            args.enable(bundle.feature)
            logger.debug(f"Wrote {bundle.feature.value} files: {', '.join(bundle.filenames)}")

        script = ScriptRenderer.write(args, options.output_dir)
        self.written.append(script)
        logger.success(f"Wrote {script}")

        if not self.verbose:
            self.console.print()
            self.print_success(f"Generated {len(self.written)} file(s)")
            show_written_files(self.written, console=self.console)
            if logger.log_path:
                self.console.print(f"\n[dim]Logs saved to:[/dim] {logger.log_path}\n")


@click.command(name="generate")
@click.option(
    "--bosh-url",
    required=True,
    envvar=f"{ENV_PREFIX}BOSH_URL",
    help="BOSH director URL, e.g. https://admin:pw@10.0.0.6:25555",
)
@click.option(
    "--output-dir",
    required=True,
    envvar=f"{ENV_PREFIX}OUTPUT_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for install.bat and certificate files",
)
@click.option("--machine-ip", help="IP address of this cell (discovered if omitted)")
@click.option(
    "--username",
    envvar=f"{ENV_PREFIX}BOSH_USERNAME",
    help="Director username (overrides the URL)",
)
@click.option(
    "--password",
    envvar=f"{ENV_PREFIX}BOSH_PASSWORD",
    help="Director password (overrides the URL)",
)
@click.option(
    "--redundancy-zone",
    default=DEFAULT_REDUNDANCY_ZONE,
    show_default=True,
    help="Redundancy zone label for this cell",
)
@click.option("--windows-username", help="Windows admin username to embed")
@click.option("--windows-password", help="Windows admin password to embed")
@click.option("--verbose", "-v", is_flag=True, help="Show all log output")
def generate(
    bosh_url,
    output_dir,
    machine_ip,
    username,
    password,
    redundancy_zone,
    windows_username,
    windows_password,
    verbose,
):
    """
    Generate install.bat for a Windows cell

    Reads the cf/diego deployment from the BOSH director and writes the
    msiexec invocations plus TLS material into OUTPUT_DIR.

    Example:
        installgen generate --bosh-url https://admin:pw@10.0.0.6:25555 --output-dir out
    """
    options = GenerateOptions(
        bosh_url=bosh_url,
        output_dir=output_dir,
        machine_ip=machine_ip,
        username=username,
        password=password,
        zone=redundancy_zone,
        windows_username=windows_username,
        windows_password=windows_password,
    )
    cmd = GenerateCommand(options, verbose=verbose)
    cmd.run()
