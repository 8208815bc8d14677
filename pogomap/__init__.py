"""pogomap - read-side map data for spawns and gyms."""

__version__ = "1.0.0"
