"""Lazy loading images (Proxy Pattern)."""
import logging
from typing import Optional

from pattern_demos.domain.interfaces.image import IImage


logger = logging.getLogger(__name__)


class RealImage(IImage):
    """Image that is loaded from disk as soon as it is created."""
    
    def __init__(self, filename: str):
        self.filename = filename
        self._load_from_disk()
    
    def _load_from_disk(self) -> None:
        print(f"Loading image {self.filename}")
    
    def display(self) -> None:
        print(f"Displaying image {self.filename}")


class ProxyImage(IImage):
    """
    Stand-in for RealImage that defers loading until the first display.
    
    The real image is created once, on the first call to display(), and
    reused for every call after that.
    """
    
    def __init__(self, filename: str):
        self.filename = filename
        self._real_image: Optional[RealImage] = None
    
    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None
    
    def display(self) -> None:
        if self._real_image is None:
            logger.debug(f"First display of {self.filename}, loading real image")
            self._real_image = RealImage(self.filename)
        self._real_image.display()
