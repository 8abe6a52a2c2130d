"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Comment created", comment_id=comment.id)

    with logfire.span("create_comment.execute", content_item_id=item_id):
        ...
"""

from typing import Any

import logfire

from discuss.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the client.

    Cloud sending is enabled by an explicit setting, otherwise by the
    presence of a token; without either, output stays on the console.

    Args:
        settings: Client settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs: dict[str, Any] = {
        "service_name": "discuss-client",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_httpx() -> None:
    """Trace every outbound request made by the HTTP comment source."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
