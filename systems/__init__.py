"""systems package – Entity store, input, simulation, collisions, session, screens."""

from .entity_store import EntityStore, EntityView, WorldSnapshot
from .input_tracker import InputTracker
from .run_state import RunState, RunPhase
from .simulation import SimulationStep, SpawnPolicy, StepReport, movement_direction
from .collision_system import CollisionResolver, ResolutionReport, is_colliding
from .game_session import GameSession, SessionListener, FixedStepClock, TickReport
