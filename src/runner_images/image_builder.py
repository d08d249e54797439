"""Managed image builds through the GenerateResourcesAndImage helper."""

import structlog

from .config import Settings
from .exceptions import HelperExecutionError
from .models import BuildParameters
from .output import print_info, print_success
from .powershell import PowerShellRunner

logger = structlog.get_logger()

BUILD_FUNCTION = "GenerateResourcesAndImage"


class ImageBuilder:
    """Validates build parameters and hands them to the image helper."""

    def __init__(self, settings: Settings, runner: PowerShellRunner | None = None) -> None:
        """Initialize image builder."""
        self.settings = settings
        self.runner = runner or PowerShellRunner(settings.powershell_executable)

    def build(self, params: BuildParameters) -> None:
        """
        Build a managed image.

        Raises:
            ParameterValidationError: If parameters are missing or invalid
            HelperNotFoundError: If the helper module is missing
            HelperExecutionError: If the helper exits unsuccessfully
        """
        image_type = params.validate()

        print_info(f"Building {image_type.value} image...")
        print_info(f"Subscription: {params.subscription_id}")
        print_info(f"Resource Group: {params.resource_group}")
        print_info(f"Location: {params.location}")
        if params.credentials.client_id:
            print_info(f"Service principal: {params.credentials.client_id}")

        logger.info(
            "Starting image build",
            image_type=image_type.value,
            resource_group=params.resource_group,
            location=params.location,
        )
        result = self.runner.invoke(
            self.settings.build_helper_path, BUILD_FUNCTION, params.helper_arguments()
        )
        if not result.ok:
            logger.error("Image build failed", returncode=result.returncode)
            raise HelperExecutionError("Image build", result.detail)

        print_success("Image build completed successfully!")
