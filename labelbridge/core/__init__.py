"""Configuration, input and port handling for LP-50 Label Bridge."""
