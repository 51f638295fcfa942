"""월드 공용 도메인 모델

행동, 의미, 에코, 연대기, 월드 상태.
DB 무관 순수 데이터 클래스. 전부 frozen, 턴마다 새 값을 만든다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class ActionType(str, Enum):
    """행동 유형 4종"""

    MOVE = "MOVE"
    SPEAK = "SPEAK"
    WAIT = "WAIT"
    ATTACK = "ATTACK"


class ActionTag(str, Enum):
    """행동 태그. 경향성(tendency) 가중치의 키"""

    RISKY = "RISKY"
    SAFE = "SAFE"
    SOCIAL = "SOCIAL"
    AGGRESSIVE = "AGGRESSIVE"
    PASSIVE = "PASSIVE"
    NEUTRAL = "NEUTRAL"


class MeaningType(str, Enum):
    """기본 의미 유형. 플러그인은 임의 문자열 유형도 선언 가능."""

    FEAR = "FEAR"
    TRUST = "TRUST"
    RESPECT = "RESPECT"


class EchoTone(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    AMBIGUOUS = "ambiguous"


class ChronicleScope(str, Enum):
    LOCAL = "LOCAL"
    REGIONAL = "REGIONAL"
    GLOBAL = "GLOBAL"


# 행동 유형별 기본 태그
ACTION_TAGS: Dict[ActionType, Tuple[ActionTag, ...]] = {
    ActionType.MOVE: (ActionTag.NEUTRAL,),
    ActionType.WAIT: (ActionTag.SAFE,),
    ActionType.SPEAK: (ActionTag.SOCIAL,),
    ActionType.ATTACK: (ActionTag.RISKY, ActionTag.AGGRESSIVE),
}


def type_name(meaning_type: str) -> str:
    """MeaningType 또는 플러그인 문자열 → 순수 문자열"""
    if isinstance(meaning_type, Enum):
        return str(meaning_type.value)
    return str(meaning_type)


@dataclass(frozen=True)
class Action:
    """행동 제안 (아직 실행 전)"""

    actor_id: str
    type: ActionType
    tags: Tuple[ActionTag, ...] = ()
    target_id: Optional[str] = None


@dataclass(frozen=True)
class ActionLog:
    """실행된 행동 기록. timestamp는 논리 시계(턴)."""

    id: str
    actor_id: str
    type: ActionType
    tags: Tuple[ActionTag, ...]
    timestamp: int
    target_id: Optional[str] = None


@dataclass(frozen=True)
class Audience:
    """의미가 닿는 범위"""

    faction_ids: Tuple[str, ...] = ()
    location_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MeaningEvent:
    """행동 로그에서 해석된 의미 (FEAR/TRUST/RESPECT ...)"""

    id: str
    type: str
    intensity: float
    source_log_ids: Tuple[str, ...] = ()
    audience: Audience = field(default_factory=Audience)


@dataclass(frozen=True)
class EchoScope:
    faction_id: Optional[str] = None
    location_id: Optional[str] = None


@dataclass(frozen=True)
class Echo:
    """의미의 잔향. 압력을 증폭만 하고 새로 만들지는 않는다."""

    id: str
    origin_meaning_id: str
    tone: EchoTone
    distortion: float
    ttl: int
    scope: EchoScope = field(default_factory=EchoScope)

    def __post_init__(self) -> None:
        if not 0.0 <= self.distortion <= 1.0:
            raise ValueError(f"distortion out of range [0, 1]: {self.distortion}")
        if self.ttl < 0:
            raise ValueError(f"ttl must be non-negative: {self.ttl}")


@dataclass(frozen=True)
class ChronicleEntry:
    """연대기 항목 (불변, 추가 전용)"""

    id: str
    year: int
    summary: str
    meaning_type: str
    turn: int
    derived_meaning_ids: Tuple[str, ...] = ()
    scope: ChronicleScope = ChronicleScope.LOCAL


@dataclass(frozen=True)
class WorldState:
    """턴 사이를 흐르는 단일 월드 상태.

    dict 필드는 교체만 하고 제자리 수정하지 않는다.
    """

    seed: int = 0
    year: int = 1
    turn: int = 1
    logs: Tuple[ActionLog, ...] = ()
    meanings: Tuple[MeaningEvent, ...] = ()
    echoes: Tuple[Echo, ...] = ()
    chronicles: Tuple[ChronicleEntry, ...] = ()
    tendency: Dict[str, float] = field(default_factory=dict)
    meaning_pressure: Dict[str, float] = field(default_factory=dict)
    last_chronicle_turn: Dict[str, int] = field(default_factory=dict)


def create_initial_world(seed: int = 0, year: int = 1, turn: int = 1) -> WorldState:
    """빈 초기 월드"""
    return WorldState(seed=seed, year=year, turn=turn)
