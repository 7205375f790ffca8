"""Tests for the lazy loading image proxy."""
from unittest.mock import patch

from pattern_demos.domain.interfaces.image import IImage
from pattern_demos.infrastructure.proxies import image_proxy
from pattern_demos.infrastructure.proxies.image_proxy import RealImage, ProxyImage


def test_real_image_loads_on_creation(capsys):
    RealImage("photo.jpg")
    assert capsys.readouterr().out == "Loading image photo.jpg\n"


def test_proxy_does_not_load_until_displayed(capsys):
    proxy = ProxyImage("photo.jpg")

    assert isinstance(proxy, IImage)
    assert not proxy.is_loaded
    assert capsys.readouterr().out == ""


def test_proxy_loads_once_and_reuses_image(capsys):
    proxy = ProxyImage("photo.jpg")

    proxy.display()
    proxy.display()

    assert proxy.is_loaded
    assert capsys.readouterr().out.splitlines() == [
        "Loading image photo.jpg",
        "Displaying image photo.jpg",
        "Displaying image photo.jpg",
    ]


def test_proxy_creates_a_single_real_image():
    with patch.object(image_proxy, "RealImage", wraps=RealImage) as real_image:
        proxy = ProxyImage("photo.jpg")
        proxy.display()
        proxy.display()

    real_image.assert_called_once_with("photo.jpg")
