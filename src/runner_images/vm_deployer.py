"""VM deployment through the CreateAzureVMFromPackerTemplate helper."""

import structlog

from .config import Settings
from .exceptions import HelperExecutionError
from .models import DeployParameters
from .output import print_info, print_success
from .powershell import PowerShellRunner

logger = structlog.get_logger()

DEPLOY_FUNCTION = "CreateAzureVMFromPackerTemplate"


class VMDeployer:
    """Deploys a VM from a managed image."""

    def __init__(self, settings: Settings, runner: PowerShellRunner | None = None) -> None:
        self.settings = settings
        self.runner = runner or PowerShellRunner(settings.powershell_executable)

    def deploy(self, params: DeployParameters) -> None:
        """Validate parameters, run the deploy helper and report the outcome."""
        params.validate()

        print_info("Deploying VM from image...")
        print_info(f"Image: {params.image_name}")
        print_info(f"VM Name: {params.vm_name}")
        print_info(f"Subscription: {params.subscription_id}")
        print_info(f"Resource Group: {params.resource_group}")
        print_info(f"Location: {params.location}")

        logger.info("Starting VM deployment", vm_name=params.vm_name, image=params.image_name)
        result = self.runner.invoke(
            self.settings.deploy_helper_path, DEPLOY_FUNCTION, params.helper_arguments()
        )
        if not result.ok:
            logger.error("VM deployment failed", returncode=result.returncode)
            raise HelperExecutionError("VM deployment", result.detail)

        print_success("VM deployment completed successfully!")
