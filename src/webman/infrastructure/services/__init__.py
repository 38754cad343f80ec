"""Infrastructure services that talk to external systems."""

from webman.infrastructure.services.proxy_relay import ProxyRelay

__all__ = ["ProxyRelay"]
