"""Image proxy."""

from pattern_demos.infrastructure.proxies.image_proxy import RealImage, ProxyImage

__all__ = ["RealImage", "ProxyImage"]
