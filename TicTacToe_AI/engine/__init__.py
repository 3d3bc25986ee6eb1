"""Rules, move validation and engine errors."""
