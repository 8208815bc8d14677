"""Domain Entities."""

from pogomap.domain.entities.gym import Gym, GymMember, Raid
from pogomap.domain.entities.spawn import Spawn

__all__ = ["Spawn", "Gym", "Raid", "GymMember"]
