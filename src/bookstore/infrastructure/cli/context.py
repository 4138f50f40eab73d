"""Shared wiring for CLI commands: settings, logging and the container."""

from __future__ import annotations

import click

from bookstore.infrastructure.bootstrap import Container, build_container
from bookstore.infrastructure.config import get_settings
from bookstore.infrastructure.logging import setup_logging


def get_container(ctx: click.Context) -> Container:
    """Build the container once per CLI invocation and cache it on the root context."""
    root = ctx.find_root()
    if root.obj is None:
        settings = get_settings()
        setup_logging(settings)
        root.obj = {"settings": settings, "container": build_container(settings)}
    return root.obj["container"]
