"""소셜 그래프 기반 대상 선택

SPEAK:  argmax intimacy × (1 + trust)
ATTACK: argmin trust
관계가 없으면 intimacy 0.1, trust 0 으로 본다. 동점이면 먼저 평가된 대상.
"""

from typing import Iterable, List, Optional

from src.core.social.graph import get_relationship
from src.core.social.models import SocialGraph
from src.core.world.models import ActionType

DEFAULT_INTIMACY = 0.1
DEFAULT_TRUST = 0.0


def _candidate_ids(
    actor_id: str, candidates: Optional[Iterable[str]], graph: SocialGraph
) -> List[str]:
    pool = list(candidates) if candidates is not None else list(graph.nodes)
    return [c for c in pool if c != actor_id]


def select_speak_target(
    actor_id: str,
    graph: SocialGraph,
    candidates: Optional[Iterable[str]] = None,
) -> Optional[str]:
    best: Optional[str] = None
    best_score = float("-inf")

    for target_id in _candidate_ids(actor_id, candidates, graph):
        rel = get_relationship(graph, actor_id, target_id)
        intimacy = rel.intimacy if rel else DEFAULT_INTIMACY
        trust = rel.trust if rel else DEFAULT_TRUST

        score = intimacy * (1 + trust)
        if score > best_score:
            best_score = score
            best = target_id

    return best


def select_attack_target(
    actor_id: str,
    graph: SocialGraph,
    candidates: Optional[Iterable[str]] = None,
) -> Optional[str]:
    best: Optional[str] = None
    min_trust = float("inf")

    for target_id in _candidate_ids(actor_id, candidates, graph):
        rel = get_relationship(graph, actor_id, target_id)
        trust = rel.trust if rel else DEFAULT_TRUST
        if trust < min_trust:
            min_trust = trust
            best = target_id

    return best


def select_target_for_action(
    actor_id: str,
    action_type: ActionType,
    graph: SocialGraph,
    candidates: Optional[Iterable[str]] = None,
) -> Optional[str]:
    """MOVE, WAIT는 대상 없음"""
    if action_type == ActionType.SPEAK:
        return select_speak_target(actor_id, graph, candidates)
    if action_type == ActionType.ATTACK:
        return select_attack_target(actor_id, graph, candidates)
    return None
