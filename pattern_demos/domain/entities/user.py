"""User domain entity built step by step (Builder Pattern)."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity representing a user account."""
    
    name: Optional[str] = None
    age: int = 0
    email: Optional[str] = None
    active: bool = False
    
    def __post_init__(self):
        """Validate user entity."""
        if self.age < 0:
            raise ValueError("age must be non-negative")
    
    def __str__(self) -> str:
        return f"{self.name}, Age: {self.age}, Email: {self.email}, Active: {self.active}"


class UserBuilder:
    """
    Fluent builder for User entities.
    
    Every setter returns the builder so calls can be chained; nothing is
    validated until build() creates the immutable User.
    """
    
    def __init__(self):
        self._name: Optional[str] = None
        self._age: int = 0
        self._email: Optional[str] = None
        self._active: bool = False
    
    def name(self, name: str) -> "UserBuilder":
        self._name = name
        return self
    
    def age(self, age: int) -> "UserBuilder":
        self._age = age
        return self
    
    def email(self, email: str) -> "UserBuilder":
        self._email = email
        return self
    
    def active(self, active: bool) -> "UserBuilder":
        self._active = active
        return self
    
    def build(self) -> User:
        """
        Create the user from the collected values.
        
        Returns:
            New User instance
            
        Raises:
            ValueError: If the collected values are invalid
        """
        return User(
            name=self._name,
            age=self._age,
            email=self._email,
            active=self._active
        )
