"""월드 공용 모델 패키지 — 공개 API"""

from src.core.world.models import (
    ACTION_TAGS,
    Action,
    ActionLog,
    ActionTag,
    ActionType,
    Audience,
    ChronicleEntry,
    ChronicleScope,
    Echo,
    EchoScope,
    EchoTone,
    MeaningEvent,
    MeaningType,
    WorldState,
    create_initial_world,
    type_name,
)

__all__ = [
    "ACTION_TAGS",
    "Action",
    "ActionLog",
    "ActionTag",
    "ActionType",
    "Audience",
    "ChronicleEntry",
    "ChronicleScope",
    "Echo",
    "EchoScope",
    "EchoTone",
    "MeaningEvent",
    "MeaningType",
    "WorldState",
    "create_initial_world",
    "type_name",
]
