"""Interface for file system components (Composite Pattern)."""
from abc import ABC, abstractmethod


class IFileSystemComponent(ABC):
    """
    Component interface shared by files (leaves) and folders (composites).
    
    Lets clients treat a single file and a whole folder tree uniformly.
    """
    
    @abstractmethod
    def get_name(self) -> str:
        """Get the component name."""
        pass
    
    @abstractmethod
    def get_size(self) -> int:
        """
        Get the component size in KB.
        
        Returns:
            Own size for a file, recursive sum of descendants for a folder
        """
        pass
    
    @abstractmethod
    def show_details(self, indent: str = "") -> None:
        """
        Print this component (and its children) to the console.
        
        Args:
            indent: Prefix printed before this component's line
        """
        pass
