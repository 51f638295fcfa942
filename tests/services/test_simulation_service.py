"""SimulationService 테스트 — 다중 턴 시뮬레이션 종단 검증"""

import copy
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import pytest

from src.core.belief.queries import get_belief_confidence
from src.core.chronicle.emission import MIN_CHRONICLE_GAP, PRESSURE_RETENTION
from src.core.chronicle.pressure import accumulate_meaning_pressure, apply_echo_to_pressure
from src.core.event_bus import EventBus
from src.core.event_types import EventTypes
from src.core.utility.models import NeedState
from src.core.world.models import ACTION_TAGS, ActionLog, ActionType, create_initial_world
from src.services.simulation_service import SimulationService, proposition_impacts_for

ACTORS = ["npc-1", "npc-2", "npc-3"]
LONELY = NeedState(1.0, 1.0, 0.0, 1.0, 1.0)


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


def _lonely_state(service: SimulationService):
    """전원 사교 욕구 결핍 + 완전 합리 → 첫 턴 전원 SPEAK"""
    state = service.create_game_state(ACTORS)
    characters = {
        cid: replace(c, needs=LONELY, intelligence=1.0)
        for cid, c in state.characters.items()
    }
    return replace(state, characters=characters)


class TestConstruction:
    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            SimulationService(mode="chaos")

    def test_empty_actor_list_rejected(self):
        with pytest.raises(ValueError):
            SimulationService().create_game_state([])

    def test_duplicate_actors_rejected(self):
        with pytest.raises(ValueError):
            SimulationService().create_game_state(["npc-1", "npc-1"])

    def test_non_positive_turns_rejected(self):
        with pytest.raises(ValueError):
            SimulationService().run(ACTORS, 0)

    def test_default_names(self):
        state = SimulationService(seed=1).create_game_state(ACTORS)
        assert state.characters["npc-1"].name == "첫째 자"
        assert state.characters["npc-3"].name == "셋째 자"
        assert state.world.seed == 1


class TestStep:
    def test_speak_turn_updates_relations_and_beliefs(self, bus):
        service = SimulationService(event_bus=bus, seed=5)
        state = _lonely_state(service)

        next_state, result = service.step(state)

        assert [log.type for log in result.logs] == [ActionType.SPEAK] * 3
        assert all(log.target_id for log in result.logs)
        assert next_state.world.turn == 2

        speaker = result.logs[0]
        rel = next_state.social_graph.relationships[f"{speaker.actor_id}->{speaker.target_id}"]
        assert rel.trust > 0.0

        # 관찰자(행위자 제외)는 "친절하다" 쪽으로 기운다, 다음 턴 감쇠 1턴분 반영
        observer = next(c for c in ACTORS if c != speaker.actor_id)
        beliefs = next_state.characters[observer].beliefs
        assert get_belief_confidence(beliefs, "npc-1 is friendly") == pytest.approx(
            0.5 + 0.2 * 0.99
        )
        assert "npc-1 is friendly" not in next_state.characters["npc-1"].beliefs.beliefs

    def test_outcome_changes_actor_needs(self):
        service = SimulationService(seed=5)
        state = _lonely_state(service)
        next_state, _ = service.step(state)
        for cid in ACTORS:
            assert next_state.characters[cid].needs.social in (
                pytest.approx(0.15),
                0.0,
            )

    def test_step_does_not_mutate_input(self):
        service = SimulationService(seed=5)
        state = _lonely_state(service)
        snapshot = copy.deepcopy(state)
        service.step(state)
        assert state == snapshot

    def test_turn_processed_published(self, bus):
        received = []
        bus.subscribe(EventTypes.TURN_PROCESSED, received.append)
        service = SimulationService(event_bus=bus, seed=5)
        service.step(service.create_game_state(ACTORS))
        service.step(service.create_game_state(ACTORS))
        assert [e.data["turn"] for e in received] == [1, 1]
        assert received[0].data["log_ids"] == ["log-1-0", "log-1-1", "log-1-2"]


class TestProbabilisticRun:
    @pytest.fixture
    def run(self, bus):
        return SimulationService(event_bus=bus, seed=42, mode="probabilistic").run(ACTORS, 20)

    def test_twenty_turns(self, run):
        assert len(run.turns) == 20
        assert len(run.pressure_history) == 20
        world = run.final_state.world
        assert world.turn == 21
        assert world.year == 3
        assert len(world.logs) == 60

    def test_chronicles_emitted(self, run):
        assert len(run.chronicles) >= 1

    def test_same_seed_same_run(self):
        a = SimulationService(seed=42, mode="probabilistic").run(ACTORS, 20)
        b = SimulationService(seed=42, mode="probabilistic").run(ACTORS, 20)
        assert a.final_state == b.final_state
        assert a.pressure_history == b.pressure_history

    def test_different_seed_diverges(self):
        a = SimulationService(seed=1, mode="probabilistic").run(ACTORS, 10)
        b = SimulationService(seed=2, mode="probabilistic").run(ACTORS, 10)
        assert [log.type for log in a.final_state.world.logs] != [
            log.type for log in b.final_state.world.logs
        ]

    def test_emission_retains_forty_percent(self, run):
        previous = create_initial_world(seed=42)
        for result in run.turns:
            if result.chronicles:
                before = apply_echo_to_pressure(
                    accumulate_meaning_pressure(previous, result.meanings)
                )
                for chronicle in result.chronicles:
                    key = chronicle.meaning_type
                    assert result.world.meaning_pressure[key] == pytest.approx(
                        before.meaning_pressure[key] * PRESSURE_RETENTION
                    )
            previous = result.world

    def test_same_type_gap(self, run):
        by_type = {}
        for chronicle in run.chronicles:
            by_type.setdefault(str(chronicle.meaning_type), []).append(chronicle.turn)
        for turns in by_type.values():
            assert all(b - a >= MIN_CHRONICLE_GAP for a, b in zip(turns, turns[1:]))

    def test_every_chronicle_published(self, bus):
        received = []
        bus.subscribe(EventTypes.CHRONICLE_EMITTED, received.append)
        run = SimulationService(event_bus=bus, seed=42, mode="probabilistic").run(ACTORS, 20)
        published = [cid for e in received for cid in e.data["chronicle_ids"]]
        assert published == [c.id for c in run.chronicles]


class TestSharedBus:
    SEEDS = [11, 12, 13, 14]
    TURNS = 30

    def test_concurrent_runs_publish_every_turn(self, bus):
        """한 버스를 공유하는 동시 실행 — 어느 실행의 이벤트도 유실되지 않는다"""
        lock = threading.Lock()
        turns = []
        chronicles = []

        def on_turn(event):
            time.sleep(0.001)
            with lock:
                turns.append((event.data["seed"], event.data["turn"]))

        def on_chronicle(event):
            with lock:
                chronicles.extend(
                    (event.data["seed"], cid) for cid in event.data["chronicle_ids"]
                )

        bus.subscribe(EventTypes.TURN_PROCESSED, on_turn)
        bus.subscribe(EventTypes.CHRONICLE_EMITTED, on_chronicle)

        def run(seed: int):
            service = SimulationService(event_bus=bus, seed=seed, mode="probabilistic")
            return service.run(ACTORS, self.TURNS)

        with ThreadPoolExecutor(max_workers=len(self.SEEDS)) as pool:
            runs = dict(zip(self.SEEDS, pool.map(run, self.SEEDS)))

        assert len(turns) == len(self.SEEDS) * self.TURNS
        for seed, result in runs.items():
            assert sorted(t for s, t in turns if s == seed) == list(range(1, self.TURNS + 1))
            assert [cid for s, cid in chronicles if s == seed] == [
                c.id for c in result.chronicles
            ]

    def test_run_chronicles_is_tuple(self):
        run = SimulationService(seed=42, mode="probabilistic").run(ACTORS, 5)
        assert isinstance(run.chronicles, tuple)


class TestUtilityRun:
    def test_utility_mode_runs(self):
        run = SimulationService(seed=3, mode="utility").run(ACTORS, 10)
        assert run.mode == "utility"
        assert run.final_state.world.turn == 11
        for result in run.turns:
            assert [log.actor_id for log in result.logs] == ACTORS


class TestPropositionImpacts:
    def _log(self, action_type, target_id="npc-2"):
        return ActionLog(
            id="log-1-0",
            actor_id="npc-1",
            type=action_type,
            tags=ACTION_TAGS[action_type],
            timestamp=1,
            target_id=target_id,
        )

    def test_attack_supports_hostility(self):
        impacts = {i.proposition: i for i in proposition_impacts_for(self._log(ActionType.ATTACK))}
        hostile = impacts["npc-1 is hostile"]
        friendly = impacts["npc-1 is friendly"]
        assert hostile.likelihood_if_true > hostile.likelihood_if_false
        assert friendly.likelihood_if_true < friendly.likelihood_if_false

    def test_speak_supports_friendliness(self):
        impacts = {i.proposition: i for i in proposition_impacts_for(self._log(ActionType.SPEAK))}
        friendly = impacts["npc-1 is friendly"]
        assert friendly.likelihood_if_true > friendly.likelihood_if_false

    def test_quiet_or_untargeted_actions_carry_no_evidence(self):
        assert proposition_impacts_for(self._log(ActionType.MOVE, None)) == []
        assert proposition_impacts_for(self._log(ActionType.WAIT)) == []
        assert proposition_impacts_for(self._log(ActionType.ATTACK, None)) == []
