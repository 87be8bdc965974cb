"""
Install Script Rendering

Turns finished InstallerArguments into install.bat.
"""

from pathlib import Path

from jinja2 import Template

from installgen.constants import (
    DEFAULT_STACK,
    ETCD_CLIENT_PORT,
    INSTALL_SCRIPT_NAME,
    INSTALL_TEMPLATE_NAME,
)
from installgen.models.installer import InstallerArguments


class ScriptRenderer:
    """Renders the msiexec invocations from the bundled template."""

    PACKAGE_ROOT = Path(__file__).parent.parent

    @classmethod
    def load_template(cls) -> str:
        """
        Load the install script template.

        Returns:
            Template file contents

        Raises:
            FileNotFoundError: If the template is missing from the package
        """
        stub_file = cls.PACKAGE_ROOT / "stubs" / INSTALL_TEMPLATE_NAME

        if not stub_file.exists():
            raise FileNotFoundError(f"Template stub not found: {stub_file}")

        return stub_file.read_text(encoding="utf-8")

    @classmethod
    def render(cls, args: InstallerArguments) -> str:
        """Render the script with Windows line endings."""
        template = Template(
            cls.load_template(), newline_sequence="\r\n", keep_trailing_newline=True
        )
        return template.render(
            args=args,
            stack=DEFAULT_STACK,
            etcd_port=ETCD_CLIENT_PORT,
        )

    @classmethod
    def write(cls, args: InstallerArguments, output_dir: Path) -> Path:
        """Render and write install.bat, replacing any previous script."""
        script_path = output_dir / INSTALL_SCRIPT_NAME
        with open(script_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(cls.render(args))
        return script_path
