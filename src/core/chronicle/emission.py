"""압력 → 연대기

압력이 임계값 이상이고 같은 유형의 마지막 연대기로부터 최소 간격이
지났으면 연대기 1개를 남기고 압력을 0.4배로 줄인다 (0으로 만들지 않는다).
"""

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from src.core.logging import get_logger
from src.core.world.models import (
    ChronicleEntry,
    ChronicleScope,
    MeaningEvent,
    WorldState,
    type_name,
)

logger = get_logger(__name__)

CHRONICLE_THRESHOLD = 2.0
MIN_CHRONICLE_GAP = 3  # 같은 유형 연대기 사이 최소 턴
PRESSURE_RETENTION = 0.4


@dataclass(frozen=True)
class ChronicleEmission:
    world: WorldState
    chronicles: Tuple[ChronicleEntry, ...]


def can_emit(world: WorldState, meaning_type: str) -> bool:
    pressure = world.meaning_pressure.get(meaning_type, 0.0)
    if pressure < CHRONICLE_THRESHOLD:
        return False
    last = world.last_chronicle_turn.get(meaning_type)
    return last is None or world.turn - last >= MIN_CHRONICLE_GAP


def chronicle_summary(meaning_type: str) -> str:
    return f"An era shaped by {type_name(meaning_type).lower()}."


def generate_chronicle_from_pressure(
    world: WorldState, meanings: Iterable[MeaningEvent] = ()
) -> ChronicleEmission:
    """유형별로 독립 판정. 임계값 미만 유형은 건드리지 않는다.

    Args:
        world: 누적/증폭이 끝난 월드
        meanings: 이번 턴 의미 이벤트 (연대기의 derived_meaning_ids)
    """
    meanings = list(meanings)
    pressure = dict(world.meaning_pressure)
    last_turn = dict(world.last_chronicle_turn)
    entries: List[ChronicleEntry] = []

    for meaning_type, value in world.meaning_pressure.items():
        if not can_emit(world, meaning_type):
            continue

        name = type_name(meaning_type)
        entries.append(
            ChronicleEntry(
                id=f"chronicle-{world.turn}-{name.lower()}",
                year=world.year,
                summary=chronicle_summary(meaning_type),
                meaning_type=meaning_type,
                turn=world.turn,
                derived_meaning_ids=tuple(
                    m.id for m in meanings if m.type == meaning_type
                ),
                scope=ChronicleScope.LOCAL,
            )
        )
        pressure[meaning_type] = value * PRESSURE_RETENTION
        last_turn[meaning_type] = world.turn
        logger.info(
            f"연대기 기록: {name} (turn={world.turn}, year={world.year}, "
            f"pressure={value:.2f} → {pressure[meaning_type]:.2f})"
        )

    updated = replace(world, meaning_pressure=pressure, last_chronicle_turn=last_turn)
    return ChronicleEmission(world=updated, chronicles=tuple(entries))
