"""에코 생성과 수명 관리"""

import random
from typing import Iterable, List

from src.core.world.models import (
    Echo,
    EchoScope,
    EchoTone,
    MeaningEvent,
    MeaningType,
)

ECHO_TTL = 3
ECHO_SCOPE = EchoScope(location_id="LOCAL")


def echo_tone_for(meaning: MeaningEvent) -> EchoTone:
    if meaning.type == MeaningType.FEAR:
        return EchoTone.NEGATIVE
    return EchoTone.POSITIVE


def generate_echoes(meanings: Iterable[MeaningEvent], rng: random.Random) -> List[Echo]:
    """의미 이벤트 1개당 에코 1개. 왜곡도는 시드 RNG에서."""
    return [
        Echo(
            id=f"echo:{meaning.id}",
            origin_meaning_id=meaning.id,
            tone=echo_tone_for(meaning),
            distortion=rng.random(),
            ttl=ECHO_TTL,
            scope=ECHO_SCOPE,
        )
        for meaning in meanings
    ]


def update_echo_ttl(echoes: Iterable[Echo]) -> List[Echo]:
    """ttl -1, 0 이하가 되면 제거"""
    return [
        Echo(
            id=echo.id,
            origin_meaning_id=echo.origin_meaning_id,
            tone=echo.tone,
            distortion=echo.distortion,
            ttl=echo.ttl - 1,
            scope=echo.scope,
        )
        for echo in echoes
        if echo.ttl - 1 > 0
    ]
