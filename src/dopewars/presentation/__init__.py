"""Presentation layers that drive the game core."""
