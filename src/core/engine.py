"""
Narrative World Core - Turn Orchestrator
========================================
한 턴 = 원자적 시뮬레이션 단계

파이프라인 (순서 고정):
  행동 실행 → 의미 해석 → 압력 누적 → 에코 증폭 → 연대기 발행
  → 경향성 반영 → 에코 재생성/노화 → 턴/연도 진행 → 기록 추가

simulate_turn은 입력 월드를 수정하지 않고 항상 새 WorldState를 반환한다.
"""

import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from src.core.chronicle.echoes import generate_echoes, update_echo_ttl
from src.core.chronicle.emission import generate_chronicle_from_pressure
from src.core.chronicle.pressure import (
    accumulate_meaning_pressure,
    apply_echo_to_pressure,
)
from src.core.chronicle.tendency import apply_chronicle_tendency
from src.core.logging import get_logger
from src.core.meaning.engine import MeaningEngine, strongest_meanings_by_type
from src.core.rng import derive_rng
from src.core.world.models import (
    Action,
    ActionLog,
    ChronicleEntry,
    MeaningEvent,
    WorldState,
    type_name,
)

logger = get_logger(__name__)

TURNS_PER_YEAR = 10


@dataclass(frozen=True)
class TurnSummary:
    """서사 렌더러 / 관찰자 경계로 나가는 읽기 전용 턴 요약"""

    turn: int
    year: int
    logs: Tuple[ActionLog, ...]
    meanings: Tuple[MeaningEvent, ...]  # 유형별 최대 강도만
    chronicles: Tuple[ChronicleEntry, ...]
    tendency: Dict[str, float]
    pressure: Dict[str, float]


@dataclass(frozen=True)
class TurnResult:
    """simulate_turn 결과. world가 다음 턴의 입력.

    turn, year는 처리한 턴의 값 (시간 진행 전).
    """

    turn: int
    year: int
    world: WorldState
    logs: Tuple[ActionLog, ...]
    meanings: Tuple[MeaningEvent, ...]
    chronicles: Tuple[ChronicleEntry, ...]

    def summary(self) -> TurnSummary:
        """방금 처리한 턴의 요약"""
        return TurnSummary(
            turn=self.turn,
            year=self.year,
            logs=self.logs,
            meanings=tuple(strongest_meanings_by_type(self.meanings)),
            chronicles=self.chronicles,
            tendency={type_name(k): v for k, v in self.world.tendency.items()},
            pressure={type_name(k): v for k, v in self.world.meaning_pressure.items()},
        )


def execute_actions(world: WorldState, actions: Sequence[Action]) -> List[ActionLog]:
    """제안 → 실행 기록. ID는 (턴, 순번)에서 결정론적으로, timestamp는 턴."""
    return [
        ActionLog(
            id=f"log-{world.turn}-{index}",
            actor_id=action.actor_id,
            type=action.type,
            tags=tuple(action.tags),
            timestamp=world.turn,
            target_id=action.target_id,
        )
        for index, action in enumerate(actions)
    ]


def advance_time(world: WorldState) -> WorldState:
    """턴 +1, 새 턴이 10의 배수면 연도 +1"""
    new_turn = world.turn + 1
    year_increment = 1 if new_turn % TURNS_PER_YEAR == 0 else 0
    return replace(world, turn=new_turn, year=world.year + year_increment)


def simulate_turn(
    world: WorldState,
    actions: Sequence[Action],
    meaning_engine: MeaningEngine,
    rng: Optional[random.Random] = None,
) -> TurnResult:
    """한 턴 처리.

    Args:
        world: 현재 월드 (수정하지 않음)
        actions: 이번 턴 행동 제안
        meaning_engine: 의미 플러그인 레지스트리
        rng: 에코 왜곡도용 RNG. None이면 (world.seed, turn)에서 파생.

    Returns:
        TurnResult(turn, year=처리한 턴, world=다음 월드, logs, meanings, chronicles)
    """
    if rng is None:
        rng = derive_rng(world.seed, "echo", world.turn)

    # 1) 행동 실행
    logs = execute_actions(world, actions)

    # 2) 플러그인으로 의미 해석
    meanings = meaning_engine.evaluate(logs)

    # 3) 압력 누적
    next_world = accumulate_meaning_pressure(world, meanings)

    # 4) 기존 에코가 압력 증폭
    next_world = apply_echo_to_pressure(next_world)

    # 5) 압력 → 연대기
    emission = generate_chronicle_from_pressure(next_world, meanings)
    next_world = emission.world
    chronicles = emission.chronicles

    # 6) 연대기 → 경향성
    if chronicles:
        next_world = replace(
            next_world,
            tendency=apply_chronicle_tendency(next_world.tendency, chronicles),
        )

    # 7) 에코 생성 + 노화
    echoes = update_echo_ttl(list(next_world.echoes) + generate_echoes(meanings, rng))

    # 8) 시간 진행 + 기록 추가
    next_world = advance_time(next_world)
    next_world = replace(
        next_world,
        logs=next_world.logs + tuple(logs),
        meanings=next_world.meanings + tuple(meanings),
        chronicles=next_world.chronicles + chronicles,
        echoes=tuple(echoes),
    )

    logger.debug(
        f"턴 처리: turn={world.turn} actions={len(logs)} meanings={len(meanings)} "
        f"chronicles={len(chronicles)} echoes={len(echoes)}"
    )

    return TurnResult(
        turn=world.turn,
        year=world.year,
        world=next_world,
        logs=tuple(logs),
        meanings=tuple(meanings),
        chronicles=chronicles,
    )
