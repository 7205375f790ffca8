"""Domain entities."""

from pattern_demos.domain.entities.user import User, UserBuilder
from pattern_demos.domain.entities.document import Document
from pattern_demos.domain.entities.beverage import Beverage, Tea, BrewedCoffee

__all__ = [
    "User",
    "UserBuilder",
    "Document",
    "Beverage",
    "Tea",
    "BrewedCoffee",
]
