"""Narrative World Core Engine"""
__version__ = "0.1.0-alpha"

from src.core.world.models import (
    Action,
    ActionLog,
    ActionTag,
    ActionType,
    ChronicleEntry,
    MeaningEvent,
    MeaningType,
    WorldState,
    create_initial_world,
)
from src.core.meaning.engine import MeaningEngine, create_default_meaning_engine
from src.core.meaning.plugins import MeaningPlugin
from src.core.engine import TurnResult, TurnSummary, simulate_turn

__all__ = [
    "Action",
    "ActionLog",
    "ActionTag",
    "ActionType",
    "ChronicleEntry",
    "MeaningEvent",
    "MeaningType",
    "WorldState",
    "create_initial_world",
    "MeaningEngine",
    "create_default_meaning_engine",
    "MeaningPlugin",
    "TurnResult",
    "TurnSummary",
    "simulate_turn",
]
