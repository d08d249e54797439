"""Checks for external tools the helpers depend on."""

import shutil

import structlog

from .exceptions import MissingPrerequisitesError

logger = structlog.get_logger()

INSTALL_LINKS: dict[str, tuple[str, str]] = {
    "pwsh": (
        "PowerShell",
        "https://docs.microsoft.com/en-us/powershell/scripting/install/installing-powershell",
    ),
    "az": ("Azure CLI", "https://docs.microsoft.com/en-us/cli/azure/install-azure-cli"),
    "packer": ("Packer", "https://www.packer.io/downloads"),
}


class PrerequisiteChecker:
    """Verifies that required executables are discoverable on PATH."""

    def __init__(self, required_tools: list[str]) -> None:
        self.required_tools = required_tools

    def missing_tools(self) -> list[str]:
        """Return required tools that cannot be found, in declaration order."""
        missing = [tool for tool in self.required_tools if shutil.which(tool) is None]
        logger.debug("Checked prerequisites", required=self.required_tools, missing=missing)
        return missing

    def ensure(self) -> None:
        """Raise MissingPrerequisitesError if any required tool is absent."""
        missing = self.missing_tools()
        if missing:
            logger.warning("Missing prerequisites", missing=missing)
            raise MissingPrerequisitesError(missing)

    @staticmethod
    def install_hints(missing_tools: list[str]) -> list[str]:
        """Build one install guidance line per missing tool."""
        hints = []
        for tool in missing_tools:
            if tool in INSTALL_LINKS:
                name, url = INSTALL_LINKS[tool]
                hints.append(f"  - {name}: {url}")
            else:
                hints.append(f"  - {tool}")
        return hints
