"""Prototype pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.domain.entities.document import Document


class PrototypeDemo(IDemo):
    
    def get_name(self) -> str:
        return "prototype"
    
    def get_description(self) -> str:
        return "Prototype: clone a document and change the copy without touching the original"
    
    def run(self) -> None:
        original = Document("This is the original document.")
        cloned = original.clone()
        
        print(f"Original Document Content: {original.content}")
        print(f"Cloned Document Content: {cloned.content}")
        
        cloned.content = "This is the modified cloned document."
        
        print("After modifying the cloned document:")
        print(f"Original Document Content: {original.content}")
        print(f"Cloned Document Content: {cloned.content}")
