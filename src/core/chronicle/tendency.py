"""연대기 → 월드 경향성, 경향성 → 행동 확률/효용 편향"""

from typing import Dict, Iterable, Mapping, Optional, Tuple

from src.core.world.models import ActionTag, ChronicleEntry, MeaningType

TENDENCY_MIN = -0.6
TENDENCY_MAX = 0.6
PROBABILITY_FLOOR = 0.05  # 어떤 행동도 완전히 사라지지 않는다

# 연대기 유형별 태그 조정량
TENDENCY_TABLE: Dict[str, Tuple[Tuple[ActionTag, float], ...]] = {
    MeaningType.FEAR: ((ActionTag.RISKY, -0.10), (ActionTag.SAFE, 0.08)),
    MeaningType.TRUST: ((ActionTag.SOCIAL, 0.08), (ActionTag.PASSIVE, -0.04)),
    MeaningType.RESPECT: ((ActionTag.AGGRESSIVE, 0.05),),
}


def clamp_tendency(value: float) -> float:
    return max(TENDENCY_MIN, min(TENDENCY_MAX, value))


def apply_chronicle_tendency(
    tendency: Mapping[str, float],
    chronicles: Iterable[ChronicleEntry],
) -> Dict[str, float]:
    """연대기마다 태그 가중치를 더하고 매번 ±0.6으로 클램프.

    같은 턴의 여러 연대기는 누적 적용. 입력 매핑은 수정하지 않는다.
    """
    result: Dict[str, float] = dict(tendency)
    for chronicle in chronicles:
        for tag, delta in TENDENCY_TABLE.get(chronicle.meaning_type, ()):
            result[tag] = clamp_tendency(result.get(tag, 0.0) + delta)
    return result


def tendency_modifier(
    tags: Iterable[str], tendency: Optional[Mapping[str, float]]
) -> float:
    """행동 태그들의 경향성 가중치 합"""
    if not tendency:
        return 0.0
    return sum(tendency.get(tag, 0.0) for tag in tags)


def incline_action_probability(
    base: float,
    tags: Iterable[str],
    tendency: Optional[Mapping[str, float]],
) -> float:
    """기본 확률 + 태그 가중치 합. 하한 0.05."""
    return max(PROBABILITY_FLOOR, base + tendency_modifier(tags, tendency))


def incline_utility(
    utility: float,
    tags: Iterable[str],
    tendency: Optional[Mapping[str, float]],
) -> float:
    """효용 편향. 하한 없음."""
    return utility + tendency_modifier(tags, tendency)
