"""Card and hand value objects."""
