"""Core utilities shared by every layer: configuration and errors."""
