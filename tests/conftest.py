"""Pytest fixtures for runner image CLI tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from runner_images.cli import configure_logging
from runner_images.config import Settings
from runner_images.models import BuildParameters, DeployParameters


@pytest.fixture(autouse=True)
def structured_logging() -> None:
    """Route structlog through stdlib logging so pytest captures it."""
    configure_logging("DEBUG")


@pytest.fixture
def helpers_dir(tmp_path: Path) -> Path:
    """Create a helpers directory with both PowerShell modules."""
    directory = tmp_path / "helpers"
    directory.mkdir()
    (directory / "GenerateResourcesAndImage.ps1").write_text("function GenerateResourcesAndImage {}\n")
    (directory / "CreateAzureVMFromPackerTemplate.ps1").write_text(
        "function CreateAzureVMFromPackerTemplate {}\n"
    )
    return directory


@pytest.fixture
def settings(helpers_dir: Path) -> Settings:
    """Create test settings pointing at the temporary helpers."""
    return Settings(helpers_dir=helpers_dir)


@pytest.fixture
def cli_env(helpers_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at the temporary helpers, away from any local .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RUNNER_IMAGES_HELPERS_DIR", str(helpers_dir))
    monkeypatch.delenv("RUNNER_IMAGES_REQUIRED_TOOLS", raising=False)
    monkeypatch.delenv("RUNNER_IMAGES_POWERSHELL_EXECUTABLE", raising=False)
    return helpers_dir


@pytest.fixture
def tools_present():
    """Report every executable as installed."""
    with patch(
        "runner_images.prerequisites.shutil.which",
        side_effect=lambda tool: f"/usr/bin/{tool}",
    ) as mock_which:
        yield mock_which


@pytest.fixture
def mock_run():
    """Stub the child pwsh process with a successful exit."""
    with patch("runner_images.powershell.subprocess.run") as run:
        run.return_value = MagicMock(returncode=0, stderr="")
        yield run


@pytest.fixture
def build_params() -> BuildParameters:
    """Create complete build parameters."""
    return BuildParameters(
        image_type="ubuntu2404",
        subscription_id="S",
        resource_group="R",
        location="eastus",
    )


@pytest.fixture
def deploy_params() -> DeployParameters:
    """Create complete deploy parameters."""
    return DeployParameters(
        image_name="I",
        vm_name="V",
        subscription_id="S",
        resource_group="R",
        location="eastus",
        admin_username="U",
        admin_password="P@ss'word",
    )
