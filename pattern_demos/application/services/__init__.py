"""Application services."""

from pattern_demos.application.services.audio_player import AudioPlayer, DEFAULT_VOLUME
from pattern_demos.application.services.shopping_cart import ShoppingCart

__all__ = ["AudioPlayer", "DEFAULT_VOLUME", "ShoppingCart"]
