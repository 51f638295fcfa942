"""기대 효용 계산과 최적 행동 선택

U(a) = Σ P(o|a) × V(o),  V(o) = Σ w_n × impact_n(o)
제한된 합리성: 지능이 낮을수록 (actor, action, target) 해시 기반 노이즈가 커진다.
"""

from typing import Iterable, Mapping, Optional

from src.core.chronicle.tendency import incline_utility
from src.core.logging import get_logger
from src.core.rng import hash_to_float
from src.core.social.graph import get_relationship
from src.core.social.models import SocialGraph
from src.core.utility.models import CharacterState, UtilityResult
from src.core.utility.needs import calculate_need_weights
from src.core.utility.outcomes import get_action_outcomes
from src.core.world.models import ACTION_TAGS, ActionType

logger = get_logger(__name__)

NOISE_SCALE = 0.3

# 평가 순서 = 동점 처리 순서
TARGETED_ACTIONS = (ActionType.SPEAK, ActionType.ATTACK)
EVALUATION_ORDER = (ActionType.MOVE, ActionType.WAIT, ActionType.SPEAK, ActionType.ATTACK)


def utility_noise(actor: CharacterState, action_type: ActionType, target_id: Optional[str]) -> float:
    """[-scale, +scale] 결정론적 노이즈, scale = (1 - intelligence) × 0.3"""
    scale = (1 - actor.intelligence) * NOISE_SCALE
    sample = hash_to_float(actor.id + action_type.value + (target_id or ""))
    return (sample - 0.5) * 2 * scale


def calculate_expected_utility(
    actor: CharacterState,
    action_type: ActionType,
    target_id: Optional[str],
    graph: SocialGraph,
) -> float:
    weights = calculate_need_weights(actor.needs)

    relationship = None
    if target_id:
        relationship = get_relationship(graph, actor.id, target_id)

    expected = 0.0
    for outcome in get_action_outcomes(action_type, bool(target_id), relationship):
        value = sum(
            weights.get(need, 0.0) * impact
            for need, impact in outcome.need_impacts.items()
        )
        expected += outcome.probability * value

    return expected + utility_noise(actor, action_type, target_id)


def select_optimal_action(
    actor: CharacterState,
    candidates: Iterable[CharacterState],
    graph: SocialGraph,
    tendency: Optional[Mapping[str, float]] = None,
) -> UtilityResult:
    """argmax U(a). MOVE, WAIT, SPEAK×대상, ATTACK×대상 전수 평가.

    tendency가 주어지면 각 후보 효용에 행동 태그 가중치 합을 더한다.
    동점이면 먼저 평가된 후보 유지.
    """
    targets = [c.id for c in candidates if c.id != actor.id]

    weights = calculate_need_weights(actor.needs)
    dominant = max(weights.items(), key=lambda item: item[1])
    reasoning = [f"주요 욕구: {dominant[0]} (가중치: {dominant[1]:.2f})"]

    best = UtilityResult(action=ActionType.WAIT, expected_utility=float("-inf"))

    for action_type in EVALUATION_ORDER:
        target_options = targets if action_type in TARGETED_ACTIONS else [None]
        for target_id in target_options:
            utility = calculate_expected_utility(actor, action_type, target_id, graph)
            utility = incline_utility(utility, ACTION_TAGS[action_type], tendency)

            if utility > best.expected_utility:
                best = UtilityResult(
                    action=action_type,
                    expected_utility=utility,
                    target_id=target_id,
                    reasoning=list(reasoning),
                )

    target_text = f" → {best.target_id}" if best.target_id else ""
    best.reasoning.append(
        f"선택: {best.action.value}{target_text} (효용: {best.expected_utility:.3f})"
    )
    logger.debug(f"{actor.id} 행동 선택: {best.action.value}{target_text}")
    return best
