"""의미 엔진 / 플러그인 테스트"""

from typing import List, Sequence

import pytest

from src.core.engine import simulate_turn
from src.core.meaning.engine import (
    MeaningEngine,
    create_default_meaning_engine,
    strongest_meanings_by_type,
)
from src.core.meaning.plugins import (
    FearPlugin,
    MeaningPlugin,
    RespectPlugin,
    TrustPlugin,
)
from src.core.world.models import (
    ACTION_TAGS,
    Action,
    ActionLog,
    ActionType,
    MeaningEvent,
    MeaningType,
    create_initial_world,
)


def _make_log(action_type: ActionType, index: int = 0, turn: int = 1) -> ActionLog:
    return ActionLog(
        id=f"log-{turn}-{index}",
        actor_id=f"npc-{index + 1}",
        type=action_type,
        tags=ACTION_TAGS[action_type],
        timestamp=turn,
    )


class OmenPlugin(MeaningPlugin):
    """WAIT이 두 번 이상이면 불길한 징조"""

    @property
    def meaning_type(self) -> str:
        return "OMEN"

    def evaluate(self, logs: Sequence[ActionLog]) -> List[MeaningEvent]:
        waits = [log for log in logs if log.type == ActionType.WAIT]
        if len(waits) < 2:
            return []
        return [
            MeaningEvent(
                id=f"omen-{waits[0].timestamp}",
                type=self.meaning_type,
                intensity=0.5,
                source_log_ids=tuple(log.id for log in waits),
            )
        ]


class TestPlugins:
    def test_attack_yields_fear_and_respect(self):
        logs = [_make_log(ActionType.ATTACK)]
        fear = FearPlugin().evaluate(logs)
        respect = RespectPlugin().evaluate(logs)

        assert len(fear) == 1
        assert fear[0].type == MeaningType.FEAR
        assert fear[0].intensity == pytest.approx(0.4)
        assert fear[0].id == "log-1-0:fear"
        assert fear[0].source_log_ids == ("log-1-0",)
        assert fear[0].audience.location_ids == ("LOCAL",)

        assert respect[0].intensity == pytest.approx(0.2)
        assert respect[0].audience.faction_ids == ("WARRIORS",)

    def test_speak_yields_trust(self):
        trust = TrustPlugin().evaluate([_make_log(ActionType.SPEAK)])
        assert len(trust) == 1
        assert trust[0].intensity == pytest.approx(0.3)
        assert trust[0].audience.faction_ids == ("CIVILIANS",)

    @pytest.mark.parametrize("action_type", [ActionType.MOVE, ActionType.WAIT])
    def test_quiet_actions_mean_nothing(self, action_type):
        engine = create_default_meaning_engine()
        assert engine.evaluate([_make_log(action_type)]) == []

    def test_plugin_interface_is_abstract(self):
        with pytest.raises(TypeError):
            MeaningPlugin()

    def test_evaluate_does_not_mutate_logs(self):
        logs = [_make_log(ActionType.ATTACK)]
        snapshot = list(logs)
        FearPlugin().evaluate(logs)
        assert logs == snapshot


class TestMeaningEngine:
    def test_default_engine_registers_three_plugins(self):
        engine = create_default_meaning_engine()
        types = [plugin.meaning_type for plugin in engine.plugins]
        assert types == [MeaningType.FEAR, MeaningType.TRUST, MeaningType.RESPECT]

    def test_results_concatenated_in_registration_order(self):
        engine = create_default_meaning_engine()
        logs = [_make_log(ActionType.ATTACK, 0), _make_log(ActionType.SPEAK, 1)]
        meanings = engine.evaluate(logs)
        assert [m.id for m in meanings] == ["log-1-0:fear", "log-1-1:trust", "log-1-0:respect"]

    def test_custom_plugin_without_engine_change(self):
        engine = create_default_meaning_engine()
        engine.register(OmenPlugin())
        logs = [_make_log(ActionType.WAIT, 0), _make_log(ActionType.WAIT, 1)]
        meanings = engine.evaluate(logs)
        assert len(meanings) == 1
        assert meanings[0].type == "OMEN"
        assert meanings[0].source_log_ids == ("log-1-0", "log-1-1")

    def test_empty_engine(self):
        assert MeaningEngine().evaluate([_make_log(ActionType.ATTACK)]) == []

    def test_plugins_view_is_read_only(self):
        engine = MeaningEngine()
        assert isinstance(engine.plugins, tuple)

    def test_same_plugin_registered_twice_yields_unique_ids(self):
        engine = MeaningEngine()
        engine.register(FearPlugin())
        engine.register(FearPlugin())
        meanings = engine.evaluate([_make_log(ActionType.ATTACK)])
        assert [m.id for m in meanings] == ["log-1-0:fear", "log-1-0:fear#1"]
        assert meanings[1].source_log_ids == ("log-1-0",)

    def test_duplicate_plugins_keep_echo_ids_unique(self):
        engine = create_default_meaning_engine()
        engine.register(FearPlugin())
        actions = [
            Action(
                actor_id="npc-1",
                type=ActionType.ATTACK,
                tags=ACTION_TAGS[ActionType.ATTACK],
                target_id="npc-2",
            )
        ]
        result = simulate_turn(create_initial_world(seed=7), actions, engine)
        meaning_ids = [m.id for m in result.meanings]
        echo_ids = [e.id for e in result.world.echoes]
        assert len(set(meaning_ids)) == len(meaning_ids) == 3
        assert len(set(echo_ids)) == len(echo_ids)


class TestStrongestMeanings:
    def test_one_per_type_highest_intensity(self):
        meanings = [
            MeaningEvent(id="a", type="FEAR", intensity=0.4),
            MeaningEvent(id="b", type="FEAR", intensity=0.9),
            MeaningEvent(id="c", type="TRUST", intensity=0.3),
            MeaningEvent(id="d", type="TRUST", intensity=0.3),
        ]
        strongest = strongest_meanings_by_type(meanings)
        assert [m.id for m in strongest] == ["b", "c"]

    def test_empty(self):
        assert strongest_meanings_by_type([]) == []
