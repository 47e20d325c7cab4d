"""Core entities shared by every feature: the base classes and users."""
