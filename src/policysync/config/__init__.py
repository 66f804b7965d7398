"""Configuration: settings and the manufacturer source registry."""
