"""Utility functions for the CLI."""

from urllib.parse import urlparse

import click

APPLE_DEVELOPER_HOST = "developer.apple.com"


def validate_developer_url(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> str | None:
    """Validate that the input is a developer.apple.com page URL.

    Args:
        _ctx: Click context (unused)
        _param: Click parameter (unused)
        value: The URL to validate

    Returns:
        The validated URL

    Raises:
        click.BadParameter: If the input is invalid
    """
    if not value:
        return value

    if not value.startswith(("http://", "https://")):
        raise click.BadParameter(
            f"Input must be an http(s) URL from {APPLE_DEVELOPER_HOST}, got {value}"
        )

    parsed_url = urlparse(value)
    if parsed_url.hostname != APPLE_DEVELOPER_HOST:
        raise click.BadParameter(
            f"URL must point to {APPLE_DEVELOPER_HOST}, got {parsed_url.netloc}"
        )

    return value
