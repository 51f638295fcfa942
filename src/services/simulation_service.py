"""Simulation Service — 턴 루프 조립

Core 함수들을 한 턴 단위로 엮는다:
  행동 선택 → simulate_turn → 결과 적용(욕구) → 관찰/믿음 갱신
  → 관계 갱신 → 관계/믿음 감쇠 → 이벤트 발행

외부 관찰자에게는 EventBus로만 알린다.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from src.config import SIMULATION_MODES
from src.core.actions.generator import generate_actions_for_turn
from src.core.actions.models import GameCharacter, GameState
from src.core.actions.selector import (
    apply_actions_to_graph,
    create_initial_game_state,
    select_actions_for_turn,
)
from src.core.belief.inference import decay_beliefs, update_belief_from_event
from src.core.belief.models import ObservationContext, PropositionImpact, WorldEvent
from src.core.engine import TurnResult, simulate_turn
from src.core.event_bus import EventBus, SimulationEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.meaning.engine import MeaningEngine, create_default_meaning_engine
from src.core.rng import derive_rng
from src.core.social.graph import decay_relationships, get_relationship
from src.core.utility.needs import update_needs
from src.core.utility.outcomes import get_action_outcomes
from src.core.world.models import (
    Action,
    ActionLog,
    ActionType,
    ChronicleEntry,
    create_initial_world,
    type_name,
)

logger = get_logger(__name__)

SOURCE = "simulation"
MODES = SIMULATION_MODES

DEFAULT_NAMES: Dict[str, str] = {
    "npc-1": "첫째 자",
    "npc-2": "둘째 자",
    "npc-3": "셋째 자",
}

# 행동 유형별 관찰 가시성
ACTION_VISIBILITY: Dict[ActionType, float] = {
    ActionType.MOVE: 0.6,
    ActionType.WAIT: 0.3,
    ActionType.SPEAK: 0.8,
    ActionType.ATTACK: 1.0,
}


def proposition_impacts_for(log: ActionLog) -> List[PropositionImpact]:
    """관찰된 행동이 어떤 명제를 얼마나 지지하는가.

    ATTACK → "{actor} is hostile" 강하게 지지, SPEAK → "{actor} is friendly".
    대상 없는 행동과 MOVE/WAIT는 믿음을 움직이지 않는다.
    """
    if not log.target_id:
        return []
    if log.type == ActionType.ATTACK:
        return [
            PropositionImpact(f"{log.actor_id} is hostile", 0.9, 0.2),
            PropositionImpact(f"{log.actor_id} is friendly", 0.1, 0.6),
        ]
    if log.type == ActionType.SPEAK:
        return [
            PropositionImpact(f"{log.actor_id} is friendly", 0.7, 0.3),
            PropositionImpact(f"{log.actor_id} is hostile", 0.3, 0.5),
        ]
    return []


@dataclass(frozen=True)
class SimulationRun:
    """run() 결과"""

    seed: int
    mode: str
    final_state: GameState
    turns: Tuple[TurnResult, ...] = ()
    pressure_history: Tuple[Dict[str, float], ...] = ()  # 턴 종료 시점 압력

    @property
    def chronicles(self) -> Tuple[ChronicleEntry, ...]:
        return self.final_state.world.chronicles


class SimulationService:
    """시드 고정 다중 턴 시뮬레이션

    같은 (seed, mode, actor_ids, turns) → 같은 결과.
    """

    def __init__(
        self,
        meaning_engine: Optional[MeaningEngine] = None,
        event_bus: Optional[EventBus] = None,
        seed: int = 0,
        mode: str = "utility",
    ) -> None:
        if mode not in MODES:
            raise ValueError(f"unknown simulation mode: {mode} (expected one of {MODES})")
        self._meaning_engine = meaning_engine or create_default_meaning_engine()
        self._bus = event_bus or EventBus()
        self._seed = seed
        self._mode = mode

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def event_bus(self) -> EventBus:
        return self._bus

    # ── 초기화 ───────────────────────────────────────────────

    def create_game_state(self, actor_ids: Sequence[str]) -> GameState:
        if not actor_ids:
            raise ValueError("at least one actor is required")
        if len(set(actor_ids)) != len(actor_ids):
            raise ValueError(f"duplicate actor ids: {list(actor_ids)}")
        world = create_initial_world(seed=self._seed)
        return create_initial_game_state(actor_ids, world, DEFAULT_NAMES)

    # ── 턴 처리 ──────────────────────────────────────────────

    def _choose_actions(self, game_state: GameState) -> List[Action]:
        if self._mode == "probabilistic":
            rng = derive_rng(self._seed, "action", game_state.world.turn)
            return generate_actions_for_turn(
                list(game_state.characters),
                game_state.world,
                rng,
                game_state.social_graph,
            )
        return select_actions_for_turn(game_state)

    def _apply_outcomes(
        self, game_state: GameState, logs: Sequence[ActionLog], turn: int
    ) -> Dict[str, GameCharacter]:
        """로그마다 결과 하나를 시드 RNG로 골라 행위자 욕구에 반영.

        결과 확률은 행동 직전 관계 기준.
        """
        characters = dict(game_state.characters)
        rng = derive_rng(self._seed, "outcome", turn)

        for log in logs:
            actor = characters.get(log.actor_id)
            if actor is None:
                continue
            relationship = None
            if log.target_id:
                relationship = get_relationship(
                    game_state.social_graph, log.actor_id, log.target_id
                )
            outcomes = get_action_outcomes(log.type, bool(log.target_id), relationship)

            roll = rng.random() * sum(o.probability for o in outcomes)
            chosen = outcomes[-1]
            for outcome in outcomes:
                roll -= outcome.probability
                if roll <= 0:
                    chosen = outcome
                    break

            characters[actor.id] = replace(
                actor, needs=update_needs(actor.needs, chosen.need_impacts)
            )
        return characters

    def _observe(
        self,
        characters: Dict[str, GameCharacter],
        logs: Sequence[ActionLog],
        turn: int,
    ) -> Dict[str, GameCharacter]:
        """행위자 외 모든 캐릭터가 행동을 관찰할 기회를 얻는다"""
        updated = dict(characters)
        for log in logs:
            impacts = proposition_impacts_for(log)
            if not impacts:
                continue
            actor = characters.get(log.actor_id)
            event = WorldEvent(
                id=log.id,
                type=log.type.value,
                actor_id=log.actor_id,
                location=actor.location if actor else "",
                turn=turn,
                visibility=ACTION_VISIBILITY.get(log.type, 1.0),
                target_id=log.target_id,
            )
            for observer in list(updated.values()):
                if observer.id == log.actor_id:
                    continue
                context = ObservationContext(
                    observer_id=observer.id,
                    observer_location=observer.location,
                    attention_level=observer.attention,
                    intelligence=observer.intelligence,
                )
                beliefs = update_belief_from_event(observer.beliefs, event, context, impacts)
                if beliefs is not observer.beliefs:
                    updated[observer.id] = replace(observer, beliefs=beliefs)
        return updated

    def step(self, game_state: GameState) -> Tuple[GameState, TurnResult]:
        """한 턴 진행. 입력 game_state는 수정하지 않는다."""
        turn = game_state.world.turn
        actions = self._choose_actions(game_state)

        result = simulate_turn(
            game_state.world,
            actions,
            self._meaning_engine,
            derive_rng(self._seed, "echo", turn),
        )

        characters = self._apply_outcomes(game_state, result.logs, turn)
        characters = self._observe(characters, result.logs, turn)
        graph = apply_actions_to_graph(game_state, result.logs, turn).social_graph

        next_turn = result.world.turn
        characters = {
            cid: replace(c, beliefs=decay_beliefs(c.beliefs, next_turn))
            for cid, c in characters.items()
        }
        graph = decay_relationships(graph, next_turn)

        next_state = GameState(
            world=result.world,
            characters=characters,
            social_graph=graph,
        )

        self._publish(result)
        return next_state, result

    def _publish(self, result: TurnResult) -> None:
        summary = result.summary()
        self._bus.emit(
            SimulationEvent(
                event_type=EventTypes.MEANING_EVALUATED,
                data={
                    "turn": summary.turn,
                    "meaning_ids": [m.id for m in result.meanings],
                },
                source=SOURCE,
            )
        )
        if result.chronicles:
            self._bus.emit(
                SimulationEvent(
                    event_type=EventTypes.CHRONICLE_EMITTED,
                    data={
                        "seed": self._seed,
                        "turn": summary.turn,
                        "year": summary.year,
                        "chronicle_ids": [c.id for c in result.chronicles],
                        "meaning_types": [type_name(c.meaning_type) for c in result.chronicles],
                    },
                    source=SOURCE,
                )
            )
        self._bus.emit(
            SimulationEvent(
                event_type=EventTypes.TURN_PROCESSED,
                data={
                    "seed": self._seed,
                    "turn": summary.turn,
                    "year": summary.year,
                    "log_ids": [log.id for log in result.logs],
                    "pressure": summary.pressure,
                    "tendency": summary.tendency,
                },
                source=SOURCE,
            )
        )

    # ── 실행 ─────────────────────────────────────────────────

    def run(self, actor_ids: Sequence[str], turns: int) -> SimulationRun:
        if turns < 1:
            raise ValueError(f"turns must be positive: {turns}")

        game_state = self.create_game_state(actor_ids)
        results: List[TurnResult] = []
        history: List[Dict[str, float]] = []

        for _ in range(turns):
            game_state, result = self.step(game_state)
            results.append(result)
            history.append(result.summary().pressure)

        logger.info(
            f"시뮬레이션 완료: seed={self._seed} mode={self._mode} "
            f"actors={len(actor_ids)} turns={turns} "
            f"chronicles={len(game_state.world.chronicles)}"
        )
        return SimulationRun(
            seed=self._seed,
            mode=self._mode,
            final_state=game_state,
            turns=tuple(results),
            pressure_history=tuple(history),
        )
