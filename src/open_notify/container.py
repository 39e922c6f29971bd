"""Dependency Injection container for the open-notify client.

This module wires the HTTP client, the response codec and the fetch
service together from environment configuration.
"""

import logging
import os
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Lazily builds named services from factories, one instance per name.

    Used as a context manager so that every instance with a ``close()``
    method is closed when the block exits.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Callable[["ServiceContainer"], Any]] = {}
        self._instances: dict[str, Any] = {}

    def register(self, name: str, factory: Callable[["ServiceContainer"], Any]) -> None:
        self._factories[name] = factory

    def resolve(self, name: str) -> Any:
        """Return the instance for ``name``, building it on first use.

        Raises:
            KeyError: If no factory is registered under ``name``.
        """
        if name not in self._instances:
            self._instances[name] = self._factories[name](self)
        return self._instances[name]

    def dispose(self) -> None:
        """Close every built instance that can be closed."""
        for name, instance in self._instances.items():
            close = getattr(instance, "close", None)
            if close is None:
                continue
            try:
                close()
            except Exception:
                logger.exception("Error disposing service: %s", name)
        self._instances.clear()

    def __enter__(self) -> "ServiceContainer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()


def load_config(
    base_url: Optional[str] = None,
    timeout: Optional[tuple[float, float]] = None,
) -> dict[str, Any]:
    """Build client configuration from environment variables.

    Explicit arguments take precedence over the environment.

    Args:
        base_url: Overrides OPEN_NOTIFY_API_ENDPOINT.
        timeout: Overrides OPEN_NOTIFY_CONNECT_TIMEOUT/OPEN_NOTIFY_READ_TIMEOUT.

    Returns:
        Configuration dictionary.

    Raises:
        ValueError: If a timeout variable is not a number.
    """
    if timeout is None:
        timeout = (
            float(os.environ.get("OPEN_NOTIFY_CONNECT_TIMEOUT", "5")),
            float(os.environ.get("OPEN_NOTIFY_READ_TIMEOUT", "30")),
        )
    return {
        "api_endpoint": base_url
        or os.environ.get("OPEN_NOTIFY_API_ENDPOINT", "http://api.open-notify.org"),
        "timeout": timeout,
    }


def create_container(
    base_url: Optional[str] = None,
    timeout: Optional[tuple[float, float]] = None,
) -> ServiceContainer:
    """Create and configure the DI container with all services.

    Args:
        base_url: Optional base URL override.
        timeout: Optional (connect, read) timeout override.

    Returns:
        Configured ServiceContainer instance.
    """
    from open_notify.api_client import APIClient
    from open_notify.processor import ResponseProcessor
    from open_notify.service import OpenNotifyService

    container = ServiceContainer()

    config = load_config(base_url=base_url, timeout=timeout)
    container.register("config", lambda _: config)

    container.register(
        "api_client",
        lambda c: APIClient(
            base_url=c.resolve("config")["api_endpoint"],
            timeout=c.resolve("config")["timeout"],
        ),
    )

    container.register(
        "processor",
        lambda _: ResponseProcessor(),
    )

    container.register(
        "open_notify_service",
        lambda c: OpenNotifyService(
            api_client=c.resolve("api_client"),
            processor=c.resolve("processor"),
        ),
    )

    logger.debug("Container configured with all services")
    return container
