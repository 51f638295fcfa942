"""믿음 시스템 Core 패키지 — 공개 API"""

from src.core.belief.models import (
    Belief,
    BeliefState,
    ObservationContext,
    PropositionImpact,
    WorldEvent,
)
from src.core.belief.inference import (
    OBSERVATION_THRESHOLD,
    adjust_for_intelligence,
    bayesian_update,
    calculate_observability,
    create_belief_state,
    decay_beliefs,
    is_event_observed,
    set_initial_belief,
    update_belief_from_event,
)
from src.core.belief.queries import (
    calculate_belief_similarity,
    get_belief_confidence,
    get_strongest_negative_belief,
    get_strongest_positive_belief,
)

__all__ = [
    "Belief",
    "BeliefState",
    "ObservationContext",
    "PropositionImpact",
    "WorldEvent",
    "OBSERVATION_THRESHOLD",
    "adjust_for_intelligence",
    "bayesian_update",
    "calculate_observability",
    "create_belief_state",
    "decay_beliefs",
    "is_event_observed",
    "set_initial_belief",
    "update_belief_from_event",
    "calculate_belief_similarity",
    "get_belief_confidence",
    "get_strongest_negative_belief",
    "get_strongest_positive_belief",
]
