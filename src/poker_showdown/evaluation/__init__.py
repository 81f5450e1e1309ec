"""Hand classification, scoring and winner selection."""
