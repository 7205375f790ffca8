"""Document domain entity (Prototype Pattern)."""
import copy


class Document:
    """
    Document that creates new instances by copying itself.
    
    Clones are independent: changing a clone's content never touches
    the original.
    """
    
    def __init__(self, content: str):
        self._content = content
    
    @property
    def content(self) -> str:
        return self._content
    
    @content.setter
    def content(self, content: str) -> None:
        self._content = content
    
    def clone(self) -> "Document":
        """
        Create a copy of this document.
        
        Returns:
            New Document with the same content
            
        Raises:
            AssertionError: If the document cannot be copied. Documents only
                hold plain values, so this never happens in normal use.
        """
        try:
            return copy.copy(self)
        except copy.Error as e:
            raise AssertionError(f"Document must always be copyable: {e}") from e
