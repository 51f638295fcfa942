"""의미 압력 → 연대기 → 경향성 피드백 루프 — 공개 API"""

from src.core.chronicle.pressure import (
    DECAY_SENSITIVITY,
    DEFAULT_SENSITIVITY,
    TONE_FACTOR,
    accumulate_meaning_pressure,
    apply_echo_to_pressure,
)
from src.core.chronicle.emission import (
    CHRONICLE_THRESHOLD,
    MIN_CHRONICLE_GAP,
    PRESSURE_RETENTION,
    ChronicleEmission,
    can_emit,
    generate_chronicle_from_pressure,
)
from src.core.chronicle.tendency import (
    PROBABILITY_FLOOR,
    TENDENCY_MAX,
    TENDENCY_MIN,
    TENDENCY_TABLE,
    apply_chronicle_tendency,
    incline_action_probability,
    incline_utility,
)
from src.core.chronicle.echoes import (
    ECHO_TTL,
    generate_echoes,
    update_echo_ttl,
)

__all__ = [
    # pressure
    "DECAY_SENSITIVITY",
    "DEFAULT_SENSITIVITY",
    "TONE_FACTOR",
    "accumulate_meaning_pressure",
    "apply_echo_to_pressure",
    # emission
    "CHRONICLE_THRESHOLD",
    "MIN_CHRONICLE_GAP",
    "PRESSURE_RETENTION",
    "ChronicleEmission",
    "can_emit",
    "generate_chronicle_from_pressure",
    # tendency
    "PROBABILITY_FLOOR",
    "TENDENCY_MAX",
    "TENDENCY_MIN",
    "TENDENCY_TABLE",
    "apply_chronicle_tendency",
    "incline_action_probability",
    "incline_utility",
    # echoes
    "ECHO_TTL",
    "generate_echoes",
    "update_echo_ttl",
]
