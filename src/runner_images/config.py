"""Configuration management for the runner image CLI."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="RUNNER_IMAGES_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # PowerShell helper scripts
    helpers_dir: Path = Field(
        default=Path("helpers"), description="Directory holding the PowerShell helper modules"
    )
    build_helper: str = Field(
        default="GenerateResourcesAndImage.ps1", description="Image build helper module"
    )
    deploy_helper: str = Field(
        default="CreateAzureVMFromPackerTemplate.ps1", description="VM deploy helper module"
    )
    powershell_executable: str = Field(default="pwsh", description="PowerShell executable")

    # Tools that must be on PATH before build or deploy
    required_tools: list[str] = Field(
        default_factory=lambda: ["pwsh", "az", "packer"],
        description="Executables required on PATH",
    )

    log_level: str = Field(default="WARNING", description="Log level for structured logs")

    @property
    def build_helper_path(self) -> Path:
        """Full path of the image build helper."""
        return self.helpers_dir / self.build_helper

    @property
    def deploy_helper_path(self) -> Path:
        """Full path of the VM deploy helper."""
        return self.helpers_dir / self.deploy_helper


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
