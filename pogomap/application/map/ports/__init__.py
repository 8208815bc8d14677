"""Application Ports."""

from pogomap.application.map.ports.gym_reader import GymReader
from pogomap.application.map.ports.spawn_reader import SpawnReader

__all__ = ["SpawnReader", "GymReader"]
