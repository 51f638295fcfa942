"""행동 생성/선택 Core 패키지 — 공개 API"""

from src.core.actions.models import GameCharacter, GameState
from src.core.actions.generator import (
    BASE_ACTION_POOL,
    ActionCandidate,
    generate_action,
    generate_actions_for_turn,
)
from src.core.actions.selector import (
    RELATION_DELTAS,
    apply_actions_to_graph,
    create_initial_game_state,
    select_action,
    select_actions_for_turn,
    update_relations_from_action,
)

__all__ = [
    "GameCharacter",
    "GameState",
    "BASE_ACTION_POOL",
    "ActionCandidate",
    "generate_action",
    "generate_actions_for_turn",
    "RELATION_DELTAS",
    "apply_actions_to_graph",
    "create_initial_game_state",
    "select_action",
    "select_actions_for_turn",
    "update_relations_from_action",
]
