"""Data models for the runner image CLI."""

from dataclasses import dataclass, field, fields
from enum import Enum

from .exceptions import ParameterValidationError


class ImageType(Enum):
    """Runner images that can be built."""

    UBUNTU_2204 = "ubuntu2204"
    UBUNTU_2404 = "ubuntu2404"
    WINDOWS_2019 = "windows2019"
    WINDOWS_2022 = "windows2022"
    WINDOWS_2025 = "windows2025"

    @classmethod
    def values(cls) -> list[str]:
        """Return the accepted image type strings."""
        return [member.value for member in cls]


def _flag(name: str) -> str:
    return "--" + name.replace("_", "-")


def _missing_flags(params: object, required: tuple[str, ...]) -> list[str]:
    return [_flag(name) for name in required if not getattr(params, name)]


@dataclass
class ServicePrincipal:
    """Optional service principal credentials for non-interactive login."""

    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    tenant_id: str = ""

    def helper_arguments(self) -> dict[str, str]:
        """Map each provided credential to its helper parameter."""
        args = {}
        if self.client_id:
            args["AzureClientId"] = self.client_id
        if self.client_secret:
            args["AzureClientSecret"] = self.client_secret
        if self.tenant_id:
            args["AzureTenantId"] = self.tenant_id
        return args


@dataclass
class BuildParameters:
    """Parameters for building a managed image."""

    image_type: str = ""
    subscription_id: str = ""
    resource_group: str = ""
    location: str = ""
    credentials: ServicePrincipal = field(default_factory=ServicePrincipal)

    REQUIRED = ("image_type", "subscription_id", "resource_group", "location")

    def missing_flags(self) -> list[str]:
        """Return CLI flags of required parameters that are empty."""
        return _missing_flags(self, self.REQUIRED)

    def validate(self) -> ImageType:
        """Check required parameters and return the parsed image type.

        Raises:
            ParameterValidationError: If a parameter is missing or the
                image type is not one of ImageType.
        """
        missing = self.missing_flags()
        if missing:
            raise ParameterValidationError(
                f"Missing required arguments for build command: {', '.join(missing)}"
            )
        try:
            return ImageType(self.image_type)
        except ValueError:
            raise ParameterValidationError(f"Invalid image type: {self.image_type}") from None

    def helper_arguments(self) -> dict[str, str]:
        """Parameters passed to GenerateResourcesAndImage."""
        args = {
            "SubscriptionId": self.subscription_id,
            "ResourceGroupName": self.resource_group,
            "ImageType": self.image_type,
            "AzureLocation": self.location,
        }
        args.update(self.credentials.helper_arguments())
        return args


@dataclass
class DeployParameters:
    """Parameters for deploying a VM from a managed image."""

    image_name: str = ""
    vm_name: str = ""
    subscription_id: str = ""
    resource_group: str = ""
    location: str = ""
    admin_username: str = ""
    admin_password: str = field(default="", repr=False)

    def missing_flags(self) -> list[str]:
        """Return CLI flags of required parameters that are empty."""
        return _missing_flags(self, tuple(f.name for f in fields(self)))

    def validate(self) -> None:
        """Check that every parameter is present.

        Raises:
            ParameterValidationError: If any parameter is empty.
        """
        missing = self.missing_flags()
        if missing:
            raise ParameterValidationError(
                f"Missing required arguments for deploy command: {', '.join(missing)}"
            )

    def helper_arguments(self) -> dict[str, str]:
        """Parameters passed to CreateAzureVMFromPackerTemplate."""
        return {
            "SubscriptionId": self.subscription_id,
            "ResourceGroupName": self.resource_group,
            "ManagedImageName": self.image_name,
            "VirtualMachineName": self.vm_name,
            "AdminUsername": self.admin_username,
            "AdminPassword": self.admin_password,
            "AzureLocation": self.location,
        }


@dataclass
class HelperResult:
    """Outcome of a PowerShell helper invocation."""

    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Check if the helper exited successfully."""
        return self.returncode == 0

    @property
    def detail(self) -> str:
        """Failure detail reported by the helper."""
        return self.stderr.strip() or f"exit code {self.returncode}"
