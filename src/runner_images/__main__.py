"""Allow running as ``python -m runner_images``."""

from runner_images.cli import run

run()
