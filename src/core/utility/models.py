"""효용 AI 도메인 모델

매슬로우 욕구 위계 + 기대 효용.
DB 무관 순수 데이터 클래스.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from src.core.world.models import ActionType

# 하위 → 상위 순서
NEED_KEYS: Tuple[str, ...] = (
    "survival",
    "safety",
    "social",
    "esteem",
    "self_actualization",
)


@dataclass(frozen=True)
class NeedState:
    """욕구 충족도. 각 값 0.0(완전 결핍) ~ 1.0(완전 충족)"""

    survival: float = 0.7  # 음식, 물, 수면
    safety: float = 0.6  # 신체적 안전, 건강
    social: float = 0.5  # 소속, 관계
    esteem: float = 0.4  # 자존감, 지위
    self_actualization: float = 0.3  # 잠재력 실현

    def __post_init__(self) -> None:
        for key in NEED_KEYS:
            value = getattr(self, key)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"need '{key}' out of range [0, 1]: {value}")

    def to_dict(self) -> Dict[str, float]:
        return {key: getattr(self, key) for key in NEED_KEYS}


@dataclass(frozen=True)
class CharacterState:
    """효용 계산용 캐릭터 스냅샷"""

    id: str
    needs: NeedState = field(default_factory=NeedState)
    traits: Tuple[str, ...] = ()
    intelligence: float = 0.7  # 효용 추정 정확도
    location: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.intelligence <= 1.0:
            raise ValueError(f"intelligence out of range [0, 1]: {self.intelligence}")


@dataclass(frozen=True)
class ActionOutcome:
    """행동의 가능한 결과 하나"""

    need_impacts: Dict[str, float]
    probability: float


@dataclass
class UtilityResult:
    """효용 평가 결과"""

    action: ActionType
    expected_utility: float
    target_id: Optional[str] = None
    reasoning: List[str] = field(default_factory=list)
