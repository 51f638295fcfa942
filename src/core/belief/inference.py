"""관찰 필터링, 베이지안 갱신, 망각

P(H|E) = P(E|H) × P(H) / (P(E|H) × P(H) + P(E|¬H) × (1 - P(H)))
"""

from dataclasses import replace
from typing import Dict, Iterable

from src.core.belief.models import (
    Belief,
    BeliefState,
    ObservationContext,
    PropositionImpact,
    WorldEvent,
)

OBSERVATION_THRESHOLD = 0.5
SAME_LOCATION_FACTOR = 1.0
OTHER_LOCATION_FACTOR = 0.3

DEFAULT_PRIOR = 0.5
BELIEF_DECAY_RATE = 0.01  # 턴당
BELIEF_EQUILIBRIUM = 0.5  # 불확실성으로 수렴


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


# ── 생성 ─────────────────────────────────────────────────────


def create_belief_state(character_id: str) -> BeliefState:
    return BeliefState(character_id=character_id)


def set_initial_belief(
    state: BeliefState, proposition: str, confidence: float, turn: int
) -> BeliefState:
    """초기 믿음 설정. 범위 밖 confidence는 ValueError."""
    beliefs = dict(state.beliefs)
    beliefs[proposition] = Belief(
        proposition=proposition,
        confidence=confidence,
        last_updated_turn=turn,
        sources=("initial",),
    )
    return replace(state, beliefs=beliefs)


# ── 관찰 ─────────────────────────────────────────────────────


def calculate_observability(event: WorldEvent, context: ObservationContext) -> float:
    """visibility × location_factor × attention"""
    if event.location == context.observer_location:
        location_factor = SAME_LOCATION_FACTOR
    else:
        location_factor = OTHER_LOCATION_FACTOR
    return _clamp_unit(event.visibility * location_factor * context.attention_level)


def is_event_observed(
    event: WorldEvent,
    context: ObservationContext,
    threshold: float = OBSERVATION_THRESHOLD,
) -> bool:
    """임계값 기반 결정론적 판정 (샘플링 없음)"""
    return calculate_observability(event, context) >= threshold


# ── 베이지안 갱신 ────────────────────────────────────────────


def bayesian_update(
    prior: float, likelihood_true: float, likelihood_false: float
) -> float:
    """사후 확률. 증거 P(E)가 0이면 사전 확률 그대로."""
    evidence = likelihood_true * prior + likelihood_false * (1 - prior)
    if evidence == 0:
        return prior
    return _clamp_unit((likelihood_true * prior) / evidence)


def adjust_for_intelligence(likelihood: float, intelligence: float) -> float:
    """지능이 낮을수록 우도가 0.5로 평탄화된다."""
    return 0.5 + (likelihood - 0.5) * intelligence


def update_belief_from_event(
    state: BeliefState,
    event: WorldEvent,
    context: ObservationContext,
    impacts: Iterable[PropositionImpact],
) -> BeliefState:
    """관찰된 사건으로 믿음 갱신. 관찰 못 했으면 state 그대로."""
    if not is_event_observed(event, context):
        return state

    beliefs: Dict[str, Belief] = dict(state.beliefs)

    for impact in impacts:
        existing = beliefs.get(impact.proposition)
        prior = existing.confidence if existing else DEFAULT_PRIOR

        posterior = bayesian_update(
            prior,
            adjust_for_intelligence(impact.likelihood_if_true, context.intelligence),
            adjust_for_intelligence(impact.likelihood_if_false, context.intelligence),
        )

        sources = existing.sources if existing else ()
        beliefs[impact.proposition] = Belief(
            proposition=impact.proposition,
            confidence=posterior,
            last_updated_turn=event.turn,
            sources=sources + (event.id,),
        )

    return replace(state, beliefs=beliefs)


# ── 망각 ─────────────────────────────────────────────────────


def decay_beliefs(state: BeliefState, current_turn: int) -> BeliefState:
    """갱신 없는 믿음은 0.5로 지수 수렴.

    c' = 0.5 + (c - 0.5) × (1 - 0.01)^Δ
    """
    beliefs: Dict[str, Belief] = {}

    for proposition, belief in state.beliefs.items():
        since = belief.last_updated_turn
        if belief.last_decay_turn is not None:
            since = max(since, belief.last_decay_turn)
        turns = current_turn - since

        if turns <= 0:
            beliefs[proposition] = belief
            continue

        factor = (1 - BELIEF_DECAY_RATE) ** turns
        confidence = BELIEF_EQUILIBRIUM + (belief.confidence - BELIEF_EQUILIBRIUM) * factor
        beliefs[proposition] = replace(
            belief,
            confidence=_clamp_unit(confidence),
            last_decay_turn=current_turn,
        )

    return replace(state, beliefs=beliefs)
