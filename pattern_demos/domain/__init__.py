"""Domain layer - capability interfaces and entities.

This layer contains:
- Capability interfaces (one ABC per pattern)
- Domain entities (builder product, prototype, template method recipe)
"""
