"""Invocation of PowerShell helper modules."""

import subprocess
from pathlib import Path

import structlog

from .exceptions import HelperNotFoundError
from .models import HelperResult
from .output import err_console

logger = structlog.get_logger()


def quote_literal(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""
    return "'" + value.replace("'", "''") + "'"


class PowerShellRunner:
    """Runs a function from a PowerShell helper module in a child pwsh process."""

    def __init__(self, executable: str = "pwsh") -> None:
        self.executable = executable

    def build_script(self, module_path: Path, function: str, arguments: dict[str, str]) -> str:
        """Build the script passed to ``pwsh -Command``."""
        call = " ".join(
            [function] + [f"-{name} {quote_literal(value)}" for name, value in arguments.items()]
        )
        return f"Import-Module {quote_literal(str(module_path))}\n{call}"

    def build_command(
        self, module_path: Path, function: str, arguments: dict[str, str]
    ) -> list[str]:
        """Build the full argv for the child process."""
        return [
            self.executable,
            "-NoProfile",
            "-NonInteractive",
            "-Command",
            self.build_script(module_path, function, arguments),
        ]

    def invoke(self, module_path: Path, function: str, arguments: dict[str, str]) -> HelperResult:
        """
        Import a helper module and call one of its functions.

        Standard output is inherited so helper progress streams to the
        terminal; standard error is captured as the failure detail.

        Args:
            module_path: Path to the .ps1 helper module
            function: Function exported by the module
            arguments: PowerShell parameter names mapped to values

        Returns:
            HelperResult with the exit code and captured stderr

        Raises:
            HelperNotFoundError: If the helper module does not exist
        """
        if not module_path.is_file():
            raise HelperNotFoundError(
                f"Helper script not found: {module_path} "
                "(set RUNNER_IMAGES_HELPERS_DIR to the helpers directory)"
            )

        cmd = self.build_command(module_path, function, arguments)
        logger.info(
            "Invoking helper",
            module=str(module_path),
            function=function,
            parameters=sorted(arguments),
        )

        try:
            proc = subprocess.run(cmd, stderr=subprocess.PIPE, text=True, check=False)
        except OSError as e:
            logger.error("Failed to start helper", executable=self.executable, error=str(e))
            return HelperResult(returncode=127, stderr=str(e))

        result = HelperResult(returncode=proc.returncode, stderr=proc.stderr or "")
        logger.info("Helper finished", function=function, returncode=result.returncode)

        if result.ok and result.stderr.strip():
            err_console.print(result.stderr.rstrip(), markup=False)
        return result
