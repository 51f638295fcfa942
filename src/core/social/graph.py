"""소셜 그래프 생성, 조회, 갱신, 감쇠

모든 함수는 입력 그래프를 수정하지 않고 새 SocialGraph를 반환한다.
"""

from dataclasses import replace
from typing import Dict, List, Optional

from src.core.social.calculations import (
    clamp_intimacy,
    clamp_trust,
    decay_intimacy,
    decay_trust,
)
from src.core.social.models import (
    CharacterNode,
    Relationship,
    SocialGraph,
    create_relationship_id,
)


def create_empty_social_graph() -> SocialGraph:
    return SocialGraph()


def add_character_node(graph: SocialGraph, character_id: str) -> SocialGraph:
    """캐릭터 노드 추가. 이미 있으면 그대로 반환."""
    if character_id in graph.nodes:
        return graph

    nodes = dict(graph.nodes)
    nodes[character_id] = CharacterNode(id=character_id)
    return replace(graph, nodes=nodes)


# ── 조회 ─────────────────────────────────────────────────────


def get_relationship(
    graph: SocialGraph, source_id: str, target_id: str
) -> Optional[Relationship]:
    return graph.relationships.get(create_relationship_id(source_id, target_id))


def get_bidirectional_relationship(
    graph: SocialGraph, id_a: str, id_b: str
) -> Dict[str, float]:
    """양방향 평균. 없는 방향은 0으로 취급."""
    ab = get_relationship(graph, id_a, id_b)
    ba = get_relationship(graph, id_b, id_a)

    trust_a = ab.trust if ab else 0.0
    trust_b = ba.trust if ba else 0.0
    intimacy_a = ab.intimacy if ab else 0.0
    intimacy_b = ba.intimacy if ba else 0.0

    return {
        "trust": (trust_a + trust_b) / 2,
        "intimacy": (intimacy_a + intimacy_b) / 2,
    }


def get_all_relationships_for(
    graph: SocialGraph, character_id: str
) -> List[Relationship]:
    """특정 캐릭터의 나가는 관계 + 들어오는 관계"""
    node = graph.nodes.get(character_id)
    if node is None:
        return []

    relations: List[Relationship] = []
    for rel_id in node.outgoing_relations + node.incoming_relations:
        rel = graph.relationships.get(rel_id)
        if rel is not None:
            relations.append(rel)
    return relations


# ── 갱신 ─────────────────────────────────────────────────────


def upsert_relationship(
    graph: SocialGraph,
    source_id: str,
    target_id: str,
    trust_delta: float = 0.0,
    intimacy_delta: float = 0.0,
    turn: int = 0,
) -> SocialGraph:
    """관계 생성 또는 갱신.

    - 수치는 변동 후 클램프
    - interactions +1, last_interaction_turn = turn
    - 변동량 0이면 수치는 그대로, 상호작용 시점만 갱신
    - 양 끝 노드가 없으면 생성
    """
    graph = add_character_node(graph, source_id)
    graph = add_character_node(graph, target_id)

    rel_id = create_relationship_id(source_id, target_id)
    existing = graph.relationships.get(rel_id)

    if existing is not None:
        updated = replace(
            existing,
            trust=clamp_trust(existing.trust + trust_delta),
            intimacy=clamp_intimacy(existing.intimacy + intimacy_delta),
            interactions=existing.interactions + 1,
            last_interaction_turn=turn,
        )
    else:
        updated = Relationship(
            source_id=source_id,
            target_id=target_id,
            trust=clamp_trust(trust_delta),
            intimacy=clamp_intimacy(intimacy_delta),
            interactions=1,
            last_interaction_turn=turn,
        )

    relationships = dict(graph.relationships)
    relationships[rel_id] = updated

    nodes = dict(graph.nodes)
    source = nodes[source_id]
    if rel_id not in source.outgoing_relations:
        nodes[source_id] = replace(
            source, outgoing_relations=source.outgoing_relations + (rel_id,)
        )
    target = nodes[target_id]
    if rel_id not in target.incoming_relations:
        nodes[target_id] = replace(
            target, incoming_relations=target.incoming_relations + (rel_id,)
        )

    return SocialGraph(nodes=nodes, relationships=relationships)


def decay_relationships(graph: SocialGraph, current_turn: int) -> SocialGraph:
    """상호작용 없는 기간에 비례한 지수 감쇠.

    trust' = trust × (1 - 0.02)^Δ, intimacy' = intimacy × (1 - 0.01)^Δ
    Δ는 마지막 상호작용(또는 마지막 감쇠) 이후 아직 반영되지 않은 턴 수.
    """
    relationships: Dict[str, Relationship] = {}

    for rel_id, rel in graph.relationships.items():
        since = rel.last_interaction_turn
        if rel.last_decay_turn is not None:
            since = max(since, rel.last_decay_turn)
        turns = current_turn - since

        if turns <= 0:
            relationships[rel_id] = rel
            continue

        relationships[rel_id] = replace(
            rel,
            trust=decay_trust(rel.trust, turns),
            intimacy=decay_intimacy(rel.intimacy, turns),
            last_decay_turn=current_turn,
        )

    return replace(graph, relationships=relationships)
