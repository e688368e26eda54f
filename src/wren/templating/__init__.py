"""Templating — kida environment setup and the built-in component templates."""
