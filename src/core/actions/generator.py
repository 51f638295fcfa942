"""경향성 가중 확률 행동 생성

기본 풀의 확률을 월드 경향성으로 기울인 뒤 시드 RNG로 한 번 굴린다.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from src.core.chronicle.tendency import incline_action_probability
from src.core.social.models import SocialGraph
from src.core.utility.targeting import select_target_for_action
from src.core.world.models import Action, ActionTag, ActionType, WorldState


@dataclass(frozen=True)
class ActionCandidate:
    type: ActionType
    tags: Tuple[ActionTag, ...]
    base_probability: float


BASE_ACTION_POOL: Tuple[ActionCandidate, ...] = (
    ActionCandidate(ActionType.MOVE, (ActionTag.NEUTRAL,), 0.3),
    ActionCandidate(ActionType.WAIT, (ActionTag.SAFE,), 0.25),
    ActionCandidate(ActionType.SPEAK, (ActionTag.SOCIAL,), 0.25),
    ActionCandidate(ActionType.ATTACK, (ActionTag.RISKY, ActionTag.AGGRESSIVE), 0.2),
)

FALLBACK_ACTION = ActionCandidate(ActionType.WAIT, (ActionTag.SAFE,), 0.0)


def weighted_pool(world: WorldState) -> List[Tuple[ActionCandidate, float]]:
    return [
        (c, incline_action_probability(c.base_probability, c.tags, world.tendency))
        for c in BASE_ACTION_POOL
    ]


def generate_action(
    actor_id: str,
    world: WorldState,
    rng: random.Random,
    graph: Optional[SocialGraph] = None,
) -> Action:
    """graph가 주어지면 SPEAK/ATTACK 대상을 관계 휴리스틱으로 고른다."""
    pool = weighted_pool(world)
    roll = rng.random() * sum(weight for _, weight in pool)

    chosen = FALLBACK_ACTION
    for candidate, weight in pool:
        roll -= weight
        if roll <= 0:
            chosen = candidate
            break

    target_id = None
    if graph is not None:
        target_id = select_target_for_action(actor_id, chosen.type, graph)

    return Action(
        actor_id=actor_id, type=chosen.type, tags=chosen.tags, target_id=target_id
    )


def generate_actions_for_turn(
    actor_ids: Sequence[str],
    world: WorldState,
    rng: random.Random,
    graph: Optional[SocialGraph] = None,
) -> List[Action]:
    return [generate_action(actor_id, world, rng, graph) for actor_id in actor_ids]
