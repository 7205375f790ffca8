"""Proxy pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.domain.interfaces.image import IImage
from pattern_demos.infrastructure.proxies.image_proxy import ProxyImage


class ProxyDemo(IDemo):
    """Shows that the proxied image is loaded once, on first display."""
    
    def get_name(self) -> str:
        return "proxy"
    
    def get_description(self) -> str:
        return "Proxy: load an image lazily on first display"
    
    def run(self) -> None:
        image: IImage = ProxyImage("photo.jpg")
        
        print("=== First display (loads from disk) ===")
        image.display()
        
        print("\n=== Second display (already loaded) ===")
        image.display()
