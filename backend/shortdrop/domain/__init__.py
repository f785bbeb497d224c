"""Domain layer: pure business rules with no framework dependencies."""
