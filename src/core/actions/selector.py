"""효용 기반 행동 선택과 행동 후 관계 갱신"""

from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from src.core.actions.models import GameCharacter, GameState
from src.core.belief.inference import create_belief_state
from src.core.social.graph import (
    add_character_node,
    create_empty_social_graph,
    upsert_relationship,
)
from src.core.social.models import SocialGraph
from src.core.utility.decision import select_optimal_action
from src.core.utility.needs import create_default_need_state
from src.core.world.models import ACTION_TAGS, Action, ActionLog, ActionType, WorldState

DEFAULT_INTELLIGENCE = 0.7
DEFAULT_LOCATION = "TOWN"
INITIAL_TRUST = 0.0
INITIAL_INTIMACY = 0.1

# 행동 유형별 관계 변동: (정방향 trust, intimacy), (역방향 trust, intimacy)
RELATION_DELTAS: Dict[ActionType, tuple] = {
    ActionType.SPEAK: ((0.05, 0.08), (0.03, 0.05)),
    ActionType.ATTACK: ((-0.3, -0.1), (-0.5, -0.2)),
}


def select_action(
    actor: GameCharacter,
    characters: Iterable[GameCharacter],
    graph: SocialGraph,
    tendency: Optional[Mapping[str, float]] = None,
) -> Action:
    candidates = [c.to_character_state() for c in characters if c.id != actor.id]
    result = select_optimal_action(actor.to_character_state(), candidates, graph, tendency)
    return Action(
        actor_id=actor.id,
        type=result.action,
        tags=ACTION_TAGS[result.action],
        target_id=result.target_id,
    )


def select_actions_for_turn(game_state: GameState) -> List[Action]:
    characters = list(game_state.characters.values())
    return [
        select_action(
            actor,
            characters,
            game_state.social_graph,
            game_state.world.tendency,
        )
        for actor in characters
    ]


def create_initial_game_state(
    character_ids: Sequence[str],
    world: WorldState,
    names: Optional[Mapping[str, str]] = None,
) -> GameState:
    """기본 욕구, 빈 믿음, 지능 0.7, TOWN 위치.

    모든 캐릭터 쌍에 trust 0 / intimacy 0.1 관계를 만든다.
    """
    names = names or {}
    characters: Dict[str, GameCharacter] = {}
    graph = create_empty_social_graph()

    for character_id in character_ids:
        characters[character_id] = GameCharacter(
            id=character_id,
            name=names.get(character_id, character_id),
            needs=create_default_need_state(),
            beliefs=create_belief_state(character_id),
            intelligence=DEFAULT_INTELLIGENCE,
            location=DEFAULT_LOCATION,
        )
        graph = add_character_node(graph, character_id)

    for id_a in character_ids:
        for id_b in character_ids:
            if id_a != id_b:
                graph = upsert_relationship(
                    graph, id_a, id_b, INITIAL_TRUST, INITIAL_INTIMACY, world.turn
                )

    return GameState(world=world, characters=characters, social_graph=graph)


def update_relations_from_action(
    graph: SocialGraph, action: ActionLog, turn: int
) -> SocialGraph:
    """SPEAK → 신뢰/친밀 소폭 상승, ATTACK → 급감 (양방향). 대상 없으면 그대로."""
    if not action.target_id:
        return graph

    deltas = RELATION_DELTAS.get(action.type)
    if deltas is None:
        return graph

    (fwd_trust, fwd_intimacy), (back_trust, back_intimacy) = deltas
    graph = upsert_relationship(
        graph, action.actor_id, action.target_id, fwd_trust, fwd_intimacy, turn
    )
    graph = upsert_relationship(
        graph, action.target_id, action.actor_id, back_trust, back_intimacy, turn
    )
    return graph


def apply_actions_to_graph(game_state: GameState, logs: Sequence[ActionLog], turn: int) -> GameState:
    graph = game_state.social_graph
    for log in logs:
        graph = update_relations_from_action(graph, log, turn)
    return replace(game_state, social_graph=graph)
