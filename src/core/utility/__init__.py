"""효용 AI Core 패키지 — 공개 API

- 도메인 모델: NeedState, CharacterState, ActionOutcome, UtilityResult
- 욕구: calculate_need_weights, update_needs, create_default_need_state
- 결과 테이블: get_action_outcomes
- 의사결정: calculate_expected_utility, select_optimal_action
- 대상 선택: select_speak_target, select_attack_target, select_target_for_action
"""

from src.core.utility.models import (
    NEED_KEYS,
    ActionOutcome,
    CharacterState,
    NeedState,
    UtilityResult,
)
from src.core.utility.needs import (
    MASLOW_BASE_PRIORITY,
    MASLOW_THRESHOLD,
    calculate_gates,
    calculate_need_weights,
    create_default_need_state,
    sigmoid,
    update_needs,
)
from src.core.utility.outcomes import get_action_outcomes
from src.core.utility.decision import (
    EVALUATION_ORDER,
    calculate_expected_utility,
    select_optimal_action,
    utility_noise,
)
from src.core.utility.targeting import (
    select_attack_target,
    select_speak_target,
    select_target_for_action,
)

__all__ = [
    # models
    "NEED_KEYS",
    "ActionOutcome",
    "CharacterState",
    "NeedState",
    "UtilityResult",
    # needs
    "MASLOW_BASE_PRIORITY",
    "MASLOW_THRESHOLD",
    "calculate_gates",
    "calculate_need_weights",
    "create_default_need_state",
    "sigmoid",
    "update_needs",
    # outcomes
    "get_action_outcomes",
    # decision
    "EVALUATION_ORDER",
    "calculate_expected_utility",
    "select_optimal_action",
    "utility_noise",
    # targeting
    "select_attack_target",
    "select_speak_target",
    "select_target_for_action",
]
