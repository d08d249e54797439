"""Console output and usage text."""

from rich.console import Console

from .models import ImageType

PROG_NAME = "runner-images"

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

USAGE = """\
Usage: {prog} <command> [options]

Commands:
    build       Build a runner image using Packer
    deploy      Deploy a VM from a built image
    help        Show this help message

Build options:
    --image-type <type>         Image type: {image_types} (required)
    --subscription-id <id>      Azure subscription ID (required)
    --resource-group <name>     Resource group name (required)
    --location <location>       Azure location, e.g., eastus (required)
    --client-id <id>            Service principal client ID
    --client-secret <secret>    Service principal client secret
    --tenant-id <id>            Azure tenant ID

Deploy options:
    --image-name <name>         Name of the managed image (required)
    --vm-name <name>            Name for the new VM (required)
    --subscription-id <id>      Azure subscription ID (required)
    --resource-group <name>     Resource group name (required)
    --location <location>       Azure location (required)
    --admin-username <user>     VM admin username (required)
    --admin-password <pass>     VM admin password (required)

Examples:
    # Build Ubuntu 24.04 image
    {prog} build --image-type ubuntu2404 --subscription-id <id> --resource-group myRG --location eastus

    # Deploy VM from image
    {prog} deploy --image-name myImage --vm-name myVM --subscription-id <id> --resource-group myRG --location eastus --admin-username admin --admin-password 'SecurePass123!'
"""


def usage_text() -> str:
    return USAGE.format(prog=PROG_NAME, image_types=", ".join(ImageType.values()))


def print_usage() -> None:
    console.print(usage_text(), markup=False)


def print_error(message: str) -> None:
    err_console.print(f"Error: {message}", style="red", markup=False)


def print_success(message: str) -> None:
    console.print(message, style="green", markup=False)


def print_info(message: str) -> None:
    console.print(message, style="yellow", markup=False)


def print_plain(message: str) -> None:
    console.print(message, markup=False)
