"""의미 압력 누적과 에코 증폭

에코는 새 의미를 만들지 않는다. 이미 있는 압력의 크기만 키운다.
"""

from dataclasses import replace
from typing import Dict, Iterable

from src.core.world.models import EchoTone, MeaningEvent, MeaningType, WorldState

TONE_FACTOR: Dict[EchoTone, float] = {
    EchoTone.POSITIVE: 0.6,
    EchoTone.NEGATIVE: 1.0,
    EchoTone.AMBIGUOUS: 0.3,
}

# 유형별 에코 민감도, 미지정 유형은 DEFAULT_SENSITIVITY
DECAY_SENSITIVITY: Dict[str, float] = {
    MeaningType.FEAR: 0.8,
    MeaningType.TRUST: 0.6,
    MeaningType.RESPECT: 0.5,
}
DEFAULT_SENSITIVITY = 0.7
ECHO_GAIN = 0.1


def accumulate_meaning_pressure(
    world: WorldState, meanings: Iterable[MeaningEvent]
) -> WorldState:
    """의미 강도를 유형별 압력에 더한다 (상한 없음)."""
    pressure = dict(world.meaning_pressure)
    for meaning in meanings:
        pressure[meaning.type] = pressure.get(meaning.type, 0.0) + meaning.intensity
    return replace(world, meaning_pressure=pressure)


def apply_echo_to_pressure(world: WorldState) -> WorldState:
    """살아 있는 에코마다 모든 압력 항목을 증폭.

    p += p × tone_factor × sensitivity(type) × 0.1
    """
    if not world.echoes:
        return world

    pressure = dict(world.meaning_pressure)
    for echo in world.echoes:
        tone = TONE_FACTOR[echo.tone]
        for meaning_type, value in pressure.items():
            sensitivity = DECAY_SENSITIVITY.get(meaning_type, DEFAULT_SENSITIVITY)
            pressure[meaning_type] = value + value * tone * sensitivity * ECHO_GAIN
    return replace(world, meaning_pressure=pressure)
