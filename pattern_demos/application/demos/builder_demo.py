"""Builder pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.domain.entities.user import UserBuilder


class BuilderDemo(IDemo):
    
    def get_name(self) -> str:
        return "builder"
    
    def get_description(self) -> str:
        return "Builder: create an immutable user step by step with a fluent builder"
    
    def run(self) -> None:
        user = (
            UserBuilder()
            .name("John Doe")
            .age(30)
            .email("john.doe@email.com")
            .active(True)
            .build()
        )
        print(f"User created: {user}")
