"""CLI entrypoint for building runner images and deploying VMs from them."""

import logging
import sys
from typing import Optional

import structlog
import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError

from .config import Settings, get_settings
from .exceptions import (
    MissingPrerequisitesError,
    ParameterValidationError,
    RunnerImagesError,
)
from .image_builder import ImageBuilder
from .models import BuildParameters, DeployParameters, ServicePrincipal
from .output import PROG_NAME, print_error, print_plain, print_usage
from .prerequisites import PrerequisiteChecker
from .vm_deployer import VMDeployer

HELP_WORDS = ("--help", "-h")

# typer may parse with click or with its own bundled parser; take the usage
# error base from whichever lineage its public BadParameter belongs to
USAGE_ERRORS = tuple(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError")

# Help is rendered from the static usage text, not click's generated help
app = typer.Typer(
    name=PROG_NAME,
    help="Build runner images with Packer and deploy VMs from them",
    add_completion=False,
    context_settings={"help_option_names": []},
)

logger = structlog.get_logger()


def configure_logging(level: str) -> None:
    """Route structlog through stdlib logging on stderr."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(level.upper())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _show_help(value: bool) -> None:
    if value:
        print_usage()
        raise typer.Exit(0)


def help_option():
    return typer.Option(None, "--help", "-h", is_eager=True, callback=_show_help)


NO_AUTO_HELP = {"help_option_names": []}


def _check_prerequisites(settings: Settings) -> None:
    PrerequisiteChecker(settings.required_tools).ensure()


def _fail(e: RunnerImagesError) -> typer.Exit:
    """Report a RunnerImagesError and build the matching exit."""
    print_error(str(e))
    if isinstance(e, MissingPrerequisitesError):
        print_plain("Please install the following:")
        for hint in PrerequisiteChecker.install_hints(e.missing_tools):
            print_plain(hint)
    elif isinstance(e, ParameterValidationError):
        print_usage()
    return typer.Exit(e.exit_code)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Build runner images with Packer and deploy VMs from them."""
    if ctx.invoked_subcommand == "help":
        return
    try:
        settings = get_settings()
    except (ValidationError, SettingsError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    configure_logging(settings.log_level)
    logger.debug("Loaded settings", helpers_dir=str(settings.helpers_dir))
    ctx.obj = settings


@app.command("build", context_settings=NO_AUTO_HELP)
def build_command(
    ctx: typer.Context,
    image_type: str = typer.Option("", "--image-type", help="Image type to build"),
    subscription_id: str = typer.Option("", "--subscription-id", help="Azure subscription ID"),
    resource_group: str = typer.Option("", "--resource-group", help="Resource group name"),
    location: str = typer.Option("", "--location", help="Azure location, e.g. eastus"),
    client_id: str = typer.Option("", "--client-id", help="Service principal client ID"),
    client_secret: str = typer.Option(
        "", "--client-secret", help="Service principal client secret"
    ),
    tenant_id: str = typer.Option("", "--tenant-id", help="Azure tenant ID"),
    show_help: Optional[bool] = help_option(),
) -> None:
    """Build a runner image using Packer."""
    settings: Settings = ctx.obj
    params = BuildParameters(
        image_type=image_type,
        subscription_id=subscription_id,
        resource_group=resource_group,
        location=location,
        credentials=ServicePrincipal(
            client_id=client_id,
            client_secret=client_secret,
            tenant_id=tenant_id,
        ),
    )

    try:
        _check_prerequisites(settings)
        ImageBuilder(settings).build(params)
    except RunnerImagesError as e:
        raise _fail(e)


@app.command("deploy", context_settings=NO_AUTO_HELP)
def deploy_command(
    ctx: typer.Context,
    image_name: str = typer.Option("", "--image-name", help="Name of the managed image"),
    vm_name: str = typer.Option("", "--vm-name", help="Name for the new VM"),
    subscription_id: str = typer.Option("", "--subscription-id", help="Azure subscription ID"),
    resource_group: str = typer.Option("", "--resource-group", help="Resource group name"),
    location: str = typer.Option("", "--location", help="Azure location"),
    admin_username: str = typer.Option("", "--admin-username", help="VM admin username"),
    admin_password: str = typer.Option("", "--admin-password", help="VM admin password"),
    show_help: Optional[bool] = help_option(),
) -> None:
    """Deploy a VM from a built image."""
    settings: Settings = ctx.obj
    params = DeployParameters(
        image_name=image_name,
        vm_name=vm_name,
        subscription_id=subscription_id,
        resource_group=resource_group,
        location=location,
        admin_username=admin_username,
        admin_password=admin_password,
    )

    try:
        _check_prerequisites(settings)
        VMDeployer(settings).deploy(params)
    except RunnerImagesError as e:
        raise _fail(e)


@app.command(
    "help",
    context_settings={**NO_AUTO_HELP, "allow_extra_args": True, "ignore_unknown_options": True},
)
def help_command() -> None:
    """Show this help message."""
    print_usage()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in HELP_WORDS:
        print_usage()
        return 0

    command = typer.main.get_command(app)
    try:
        rv = command.main(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except USAGE_ERRORS as e:
        print_error(e.format_message())
        print_usage()
        return 1
    except typer.Abort:
        print_error("Aborted")
        return 1

    return rv if isinstance(rv, int) else 0


def run() -> None:
    """Console script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
