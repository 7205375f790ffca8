"""Files and folders (Composite Pattern)."""
import logging
from typing import List

from pattern_demos.domain.interfaces.file_system_component import IFileSystemComponent


logger = logging.getLogger(__name__)

CHILD_INDENT = "    "


class File(IFileSystemComponent):
    """Leaf component with a fixed size."""
    
    def __init__(self, name: str, size: int):
        """
        Initialize file.
        
        Args:
            name: File name
            size: File size in KB
            
        Raises:
            ValueError: If size is negative
        """
        if size < 0:
            raise ValueError("size must be non-negative")
        self._name = name
        self._size = size
    
    def get_name(self) -> str:
        return self._name
    
    def get_size(self) -> int:
        return self._size
    
    def show_details(self, indent: str = "") -> None:
        print(f"{indent}📄 {self._name} ({self._size} KB)")


class Folder(IFileSystemComponent):
    """
    Composite component holding an ordered list of children.
    
    Children can be added or removed at any time. Duplicates are allowed and
    cycles are not detected, so adding a folder to itself is the caller's
    problem.
    """
    
    def __init__(self, name: str):
        self._name = name
        self._components: List[IFileSystemComponent] = []
    
    def add(self, component: IFileSystemComponent) -> None:
        self._components.append(component)
    
    def remove(self, component: IFileSystemComponent) -> None:
        """
        Remove the first child that is this exact component.
        
        Removing a component that is not a child does nothing.
        """
        for index, child in enumerate(self._components):
            if child is component:
                del self._components[index]
                return
        logger.debug(f"{component.get_name()} is not a child of {self._name}, nothing removed")
    
    def get_children(self) -> List[IFileSystemComponent]:
        return self._components.copy()
    
    def get_name(self) -> str:
        return self._name
    
    def get_size(self) -> int:
        # Recomputed on every call, never cached
        return sum(component.get_size() for component in self._components)
    
    def show_details(self, indent: str = "") -> None:
        print(f"{indent}📁 {self._name} ({self.get_size()} KB total)")
        for component in self._components:
            component.show_details(indent + CHILD_INDENT)
