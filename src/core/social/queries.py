"""나가는 관계 기준 대상 조회

동점이면 먼저 만들어진 관계가 이긴다. 나가는 관계가 없으면 None.
"""

from typing import Callable, Optional

from src.core.social.models import Relationship, SocialGraph


def _pick_outgoing(
    graph: SocialGraph,
    character_id: str,
    score: Callable[[Relationship], float],
) -> Optional[str]:
    node = graph.nodes.get(character_id)
    if node is None:
        return None

    best: Optional[str] = None
    best_score = float("-inf")
    for rel_id in node.outgoing_relations:
        rel = graph.relationships.get(rel_id)
        if rel is None:
            continue
        value = score(rel)
        if value > best_score:
            best_score = value
            best = rel.target_id
    return best


def find_most_trusted(graph: SocialGraph, character_id: str) -> Optional[str]:
    return _pick_outgoing(graph, character_id, lambda r: r.trust)


def find_least_trusted(graph: SocialGraph, character_id: str) -> Optional[str]:
    return _pick_outgoing(graph, character_id, lambda r: -r.trust)


def find_most_intimate(graph: SocialGraph, character_id: str) -> Optional[str]:
    return _pick_outgoing(graph, character_id, lambda r: r.intimacy)
