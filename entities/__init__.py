"""entities package – Stat model, player character, and canvas entities."""

from .stats import Archetype, Gender, Attributes, base_attributes
from .character import PlayerCharacter, StatsSnapshot
from .entity import SpatialEntity, EntityKind, classify_by_size
from .player import PlayerAvatar
from .enemy import Enemy, ExperienceOrb
