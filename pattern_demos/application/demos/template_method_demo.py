"""Template method pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.domain.entities.beverage import Tea, BrewedCoffee


class TemplateMethodDemo(IDemo):
    
    def get_name(self) -> str:
        return "template_method"
    
    def get_description(self) -> str:
        return "Template Method: prepare tea and coffee with the same fixed recipe"
    
    def run(self) -> None:
        print("=== Preparing Tea ===")
        Tea().prepare()
        
        print("\n=== Preparing Coffee ===")
        BrewedCoffee().prepare()
