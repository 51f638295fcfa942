"""의미 압력 → 연대기 → 경향성 피드백 루프 테스트"""

import random

import pytest

from src.core.chronicle.echoes import ECHO_TTL, generate_echoes, update_echo_ttl
from src.core.chronicle.emission import (
    CHRONICLE_THRESHOLD,
    can_emit,
    generate_chronicle_from_pressure,
)
from src.core.chronicle.pressure import (
    accumulate_meaning_pressure,
    apply_echo_to_pressure,
)
from src.core.chronicle.tendency import (
    PROBABILITY_FLOOR,
    TENDENCY_MAX,
    TENDENCY_MIN,
    apply_chronicle_tendency,
    incline_action_probability,
    incline_utility,
)
from src.core.world.models import (
    ActionTag,
    ChronicleEntry,
    Echo,
    EchoTone,
    MeaningEvent,
    MeaningType,
    WorldState,
)


def _make_chronicle(meaning_type: str, turn: int = 1) -> ChronicleEntry:
    return ChronicleEntry(
        id=f"chronicle-{turn}-{str(meaning_type).lower()}",
        year=1,
        summary="",
        meaning_type=meaning_type,
        turn=turn,
    )


def _make_echo(tone: EchoTone, ttl: int = 3) -> Echo:
    return Echo(id=f"echo-{tone.value}", origin_meaning_id="m", tone=tone, distortion=0.0, ttl=ttl)


# ── Pressure ──


class TestAccumulatePressure:
    def test_intensities_add_by_type(self):
        meanings = [
            MeaningEvent(id="a", type=MeaningType.FEAR, intensity=0.4),
            MeaningEvent(id="b", type=MeaningType.FEAR, intensity=0.4),
            MeaningEvent(id="c", type=MeaningType.TRUST, intensity=0.3),
        ]
        world = WorldState(meaning_pressure={MeaningType.FEAR: 1.0})
        result = accumulate_meaning_pressure(world, meanings)
        assert result.meaning_pressure[MeaningType.FEAR] == pytest.approx(1.8)
        assert result.meaning_pressure[MeaningType.TRUST] == pytest.approx(0.3)
        assert world.meaning_pressure == {MeaningType.FEAR: 1.0}

    def test_no_upper_bound(self):
        meanings = [MeaningEvent(id=str(i), type="FEAR", intensity=1.0) for i in range(10)]
        result = accumulate_meaning_pressure(WorldState(), meanings)
        assert result.meaning_pressure["FEAR"] == pytest.approx(10.0)


class TestEchoAmplification:
    def test_negative_echo_on_fear(self):
        world = WorldState(
            meaning_pressure={MeaningType.FEAR: 1.0},
            echoes=(_make_echo(EchoTone.NEGATIVE),),
        )
        result = apply_echo_to_pressure(world)
        assert result.meaning_pressure[MeaningType.FEAR] == pytest.approx(1.08)

    def test_unknown_type_uses_default_sensitivity(self):
        world = WorldState(
            meaning_pressure={"OMEN": 1.0},
            echoes=(_make_echo(EchoTone.POSITIVE),),
        )
        result = apply_echo_to_pressure(world)
        assert result.meaning_pressure["OMEN"] == pytest.approx(1.0 + 0.6 * 0.7 * 0.1)

    def test_each_echo_compounds(self):
        world = WorldState(
            meaning_pressure={MeaningType.RESPECT: 1.0},
            echoes=(_make_echo(EchoTone.AMBIGUOUS), _make_echo(EchoTone.AMBIGUOUS)),
        )
        result = apply_echo_to_pressure(world)
        assert result.meaning_pressure[MeaningType.RESPECT] == pytest.approx(1.015**2)

    def test_echo_never_creates_pressure(self):
        world = WorldState(
            meaning_pressure={MeaningType.TRUST: 0.0},
            echoes=(_make_echo(EchoTone.NEGATIVE),),
        )
        assert apply_echo_to_pressure(world).meaning_pressure[MeaningType.TRUST] == 0.0

    def test_no_echoes_returns_world(self):
        world = WorldState(meaning_pressure={MeaningType.FEAR: 1.0})
        assert apply_echo_to_pressure(world) is world


# ── Emission ──


class TestChronicleEmission:
    def test_emits_after_cooldown(self):
        world = WorldState(
            turn=5,
            meaning_pressure={MeaningType.FEAR: 2.0},
            last_chronicle_turn={MeaningType.FEAR: 1},
        )
        emission = generate_chronicle_from_pressure(world)
        assert len(emission.chronicles) == 1

        entry = emission.chronicles[0]
        assert entry.id == "chronicle-5-fear"
        assert entry.summary == "An era shaped by fear."
        assert entry.turn == 5
        assert entry.year == 1
        assert emission.world.meaning_pressure[MeaningType.FEAR] == pytest.approx(0.8)
        assert emission.world.last_chronicle_turn[MeaningType.FEAR] == 5

    def test_no_emission_inside_cooldown(self):
        world = WorldState(
            turn=6,
            meaning_pressure={MeaningType.FEAR: 2.0},
            last_chronicle_turn={MeaningType.FEAR: 5},
        )
        emission = generate_chronicle_from_pressure(world)
        assert emission.chronicles == ()
        assert emission.world.meaning_pressure[MeaningType.FEAR] == 2.0

    def test_below_threshold_untouched(self):
        world = WorldState(turn=10, meaning_pressure={MeaningType.FEAR: 1.99})
        emission = generate_chronicle_from_pressure(world)
        assert emission.chronicles == ()
        assert emission.world.meaning_pressure == world.meaning_pressure

    def test_threshold_is_inclusive(self):
        world = WorldState(meaning_pressure={MeaningType.TRUST: CHRONICLE_THRESHOLD})
        assert can_emit(world, MeaningType.TRUST)

    def test_types_are_independent(self):
        world = WorldState(
            turn=4,
            meaning_pressure={MeaningType.FEAR: 2.0, MeaningType.TRUST: 3.0, MeaningType.RESPECT: 0.5},
            last_chronicle_turn={MeaningType.FEAR: 3},
        )
        emission = generate_chronicle_from_pressure(world)
        assert [c.meaning_type for c in emission.chronicles] == [MeaningType.TRUST]
        assert emission.world.meaning_pressure[MeaningType.TRUST] == pytest.approx(1.2)
        assert emission.world.meaning_pressure[MeaningType.FEAR] == 2.0

    def test_derived_meaning_ids(self):
        world = WorldState(meaning_pressure={MeaningType.FEAR: 2.5})
        meanings = [
            MeaningEvent(id="log-1-0:fear", type=MeaningType.FEAR, intensity=0.4),
            MeaningEvent(id="log-1-0:respect", type=MeaningType.RESPECT, intensity=0.2),
        ]
        emission = generate_chronicle_from_pressure(world, meanings)
        assert emission.chronicles[0].derived_meaning_ids == ("log-1-0:fear",)


# ── Tendency ──


class TestTendency:
    def test_fear_chronicle_adjusts_tags(self):
        tendency = apply_chronicle_tendency({}, [_make_chronicle(MeaningType.FEAR)])
        assert tendency[ActionTag.RISKY] == pytest.approx(-0.10)
        assert tendency[ActionTag.SAFE] == pytest.approx(0.08)

    def test_trust_and_respect(self):
        tendency = apply_chronicle_tendency(
            {}, [_make_chronicle(MeaningType.TRUST), _make_chronicle(MeaningType.RESPECT)]
        )
        assert tendency[ActionTag.SOCIAL] == pytest.approx(0.08)
        assert tendency[ActionTag.PASSIVE] == pytest.approx(-0.04)
        assert tendency[ActionTag.AGGRESSIVE] == pytest.approx(0.05)

    def test_clamped_to_bounds(self):
        chronicles = [_make_chronicle(MeaningType.FEAR, turn) for turn in range(10)]
        tendency = apply_chronicle_tendency({}, chronicles)
        assert tendency[ActionTag.RISKY] == TENDENCY_MIN
        assert tendency[ActionTag.SAFE] == TENDENCY_MAX

    def test_unknown_type_ignored(self):
        assert apply_chronicle_tendency({}, [_make_chronicle("OMEN")]) == {}

    def test_input_not_mutated(self):
        original = {ActionTag.RISKY: 0.1}
        apply_chronicle_tendency(original, [_make_chronicle(MeaningType.FEAR)])
        assert original == {ActionTag.RISKY: 0.1}

    def test_probability_floor(self):
        tendency = {ActionTag.RISKY: -0.6, ActionTag.AGGRESSIVE: -0.6}
        probability = incline_action_probability(
            0.2, (ActionTag.RISKY, ActionTag.AGGRESSIVE), tendency
        )
        assert probability == PROBABILITY_FLOOR

    def test_probability_without_tendency(self):
        assert incline_action_probability(0.25, (ActionTag.SAFE,), {}) == 0.25

    def test_utility_has_no_floor(self):
        assert incline_utility(0.1, (ActionTag.RISKY,), {ActionTag.RISKY: -0.6}) == pytest.approx(-0.5)


# ── Echoes ──


class TestEchoes:
    def _meanings(self):
        return [
            MeaningEvent(id="log-1-0:fear", type=MeaningType.FEAR, intensity=0.4),
            MeaningEvent(id="log-1-1:trust", type=MeaningType.TRUST, intensity=0.3),
        ]

    def test_one_echo_per_meaning(self):
        echoes = generate_echoes(self._meanings(), random.Random(1))
        assert [e.tone for e in echoes] == [EchoTone.NEGATIVE, EchoTone.POSITIVE]
        assert [e.origin_meaning_id for e in echoes] == ["log-1-0:fear", "log-1-1:trust"]
        assert all(e.ttl == ECHO_TTL for e in echoes)
        assert all(0.0 <= e.distortion < 1.0 for e in echoes)

    def test_seeded_distortion(self):
        first = generate_echoes(self._meanings(), random.Random(7))
        second = generate_echoes(self._meanings(), random.Random(7))
        assert first == second

    def test_ttl_ages_and_expires(self):
        echoes = [_make_echo(EchoTone.NEGATIVE, ttl=3), _make_echo(EchoTone.POSITIVE, ttl=1)]
        aged = update_echo_ttl(echoes)
        assert len(aged) == 1
        assert aged[0].ttl == 2

    def test_invalid_echo_rejected(self):
        with pytest.raises(ValueError):
            Echo(id="e", origin_meaning_id="m", tone=EchoTone.NEGATIVE, distortion=1.5, ttl=1)
        with pytest.raises(ValueError):
            Echo(id="e", origin_meaning_id="m", tone=EchoTone.NEGATIVE, distortion=0.5, ttl=-1)
