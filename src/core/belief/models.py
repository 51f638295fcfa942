"""믿음 시스템 도메인 모델

캐릭터별 주관적 믿음(명제 → 확신도).
DB 무관 순수 데이터 클래스.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} out of range [0, 1]: {value}")


@dataclass(frozen=True)
class Belief:
    """개별 믿음"""

    proposition: str  # 예: "npc-2 is hostile"
    confidence: float  # 0.0 ~ 1.0
    last_updated_turn: int = 0
    sources: Tuple[str, ...] = ()  # 원인 이벤트 ID

    # 감쇠가 이미 반영된 마지막 턴
    last_decay_turn: Optional[int] = None

    def __post_init__(self) -> None:
        _check_unit("confidence", self.confidence)


@dataclass(frozen=True)
class BeliefState:
    """한 캐릭터의 믿음 집합"""

    character_id: str
    beliefs: Dict[str, Belief] = field(default_factory=dict)


@dataclass(frozen=True)
class ObservationContext:
    """관찰자가 사건을 어떻게 보는가"""

    observer_id: str
    observer_location: str
    attention_level: float = 1.0  # 0.0 ~ 1.0
    intelligence: float = 1.0  # 0.0 ~ 1.0 (해석 정확도)

    def __post_init__(self) -> None:
        _check_unit("attention_level", self.attention_level)
        _check_unit("intelligence", self.intelligence)


@dataclass(frozen=True)
class WorldEvent:
    """관찰 대상 사건 (1회성 입력)"""

    id: str
    type: str
    actor_id: str
    location: str
    turn: int
    visibility: float = 1.0  # 0.0 ~ 1.0
    target_id: Optional[str] = None

    def __post_init__(self) -> None:
        _check_unit("visibility", self.visibility)


@dataclass(frozen=True)
class PropositionImpact:
    """사건이 명제에 주는 영향: P(E|H), P(E|¬H)"""

    proposition: str
    likelihood_if_true: float
    likelihood_if_false: float

    def __post_init__(self) -> None:
        _check_unit("likelihood_if_true", self.likelihood_if_true)
        _check_unit("likelihood_if_false", self.likelihood_if_false)
