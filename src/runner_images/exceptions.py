"""Exceptions raised by the runner image CLI."""


class RunnerImagesError(Exception):
    """Base exception for runner image errors."""

    exit_code = 1


class MissingPrerequisitesError(RunnerImagesError):
    """Required executables are not on PATH."""

    def __init__(self, missing_tools: list[str]) -> None:
        self.missing_tools = missing_tools
        super().__init__(f"Missing required tools: {' '.join(missing_tools)}")


class ParameterValidationError(RunnerImagesError):
    """Command parameters are missing or invalid."""


class HelperNotFoundError(RunnerImagesError):
    """A PowerShell helper module does not exist on disk."""


class HelperExecutionError(RunnerImagesError):
    """A PowerShell helper exited unsuccessfully."""

    def __init__(self, action: str, detail: str) -> None:
        self.action = action
        self.detail = detail
        super().__init__(f"{action} failed: {detail}" if detail else f"{action} failed")
