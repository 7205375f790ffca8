"""Interface for displayable images (Proxy Pattern)."""
from abc import ABC, abstractmethod


class IImage(ABC):
    """Subject interface shared by the real image and its proxy."""
    
    @abstractmethod
    def display(self) -> None:
        """Display the image, loading it first if needed."""
        pass
