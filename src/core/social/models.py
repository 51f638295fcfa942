"""소셜 그래프 도메인 모델

DB 무관 순수 데이터 클래스.
노드/관계는 ID로만 서로를 참조한다 (포인터 순환 없음).
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


def create_relationship_id(source_id: str, target_id: str) -> str:
    """관계 ID (결정론적): "source->target" """
    return f"{source_id}->{target_id}"


@dataclass(frozen=True)
class Relationship:
    """방향성 관계 간선

    trust: -1 ~ +1 (적대 ~ 신뢰)
    intimacy: 0 ~ 1 (낯섦 ~ 친밀)
    """

    source_id: str
    target_id: str
    trust: float = 0.0
    intimacy: float = 0.0
    interactions: int = 0
    last_interaction_turn: int = 0

    # 감쇠가 이미 반영된 마지막 턴 (중복 감쇠 방지)
    last_decay_turn: Optional[int] = None

    def __post_init__(self) -> None:
        if not -1.0 <= self.trust <= 1.0:
            raise ValueError(f"trust out of range [-1, 1]: {self.trust}")
        if not 0.0 <= self.intimacy <= 1.0:
            raise ValueError(f"intimacy out of range [0, 1]: {self.intimacy}")
        if self.interactions < 0:
            raise ValueError(f"interactions must be non-negative: {self.interactions}")

    @property
    def relationship_id(self) -> str:
        return create_relationship_id(self.source_id, self.target_id)


@dataclass(frozen=True)
class CharacterNode:
    """캐릭터 노드: 나가는/들어오는 관계 ID 목록"""

    id: str
    outgoing_relations: Tuple[str, ...] = ()
    incoming_relations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SocialGraph:
    """소셜 그래프 스냅샷.

    nodes: character_id → CharacterNode (삽입 순서 = 순회 순서)
    relationships: relationship_id → Relationship
    """

    nodes: Dict[str, CharacterNode] = field(default_factory=dict)
    relationships: Dict[str, Relationship] = field(default_factory=dict)
