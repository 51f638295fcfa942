"""행동 유형별 결과 테이블

대상이 필요한 행동(SPEAK, ATTACK)에 대상이 없으면 아무 효과 없는 결과 하나.
"""

from typing import List, Optional

from src.core.social.models import Relationship
from src.core.utility.models import ActionOutcome
from src.core.world.models import ActionType

_NO_OP = [ActionOutcome(need_impacts={}, probability=1.0)]


def get_action_outcomes(
    action_type: ActionType,
    has_target: bool,
    relationship: Optional[Relationship] = None,
) -> List[ActionOutcome]:
    if action_type == ActionType.MOVE:
        return [
            ActionOutcome(need_impacts={"safety": 0.05}, probability=0.9),
            ActionOutcome(need_impacts={"safety": -0.1}, probability=0.1),  # 이동 중 위험
        ]

    if action_type == ActionType.WAIT:
        return [
            ActionOutcome(need_impacts={"safety": 0.1, "survival": 0.02}, probability=1.0),
        ]

    if action_type == ActionType.SPEAK:
        if not has_target:
            return list(_NO_OP)
        trust = relationship.trust if relationship else 0.0
        # 신뢰하는 상대일수록 긍정 결과 쪽으로 기운다
        return [
            ActionOutcome(
                need_impacts={"social": 0.15 * (1 + trust), "esteem": 0.05},
                probability=0.7 + 0.2 * trust,
            ),
            ActionOutcome(
                need_impacts={"social": -0.05},
                probability=0.3 - 0.2 * trust,
            ),
        ]

    if action_type == ActionType.ATTACK:
        if not has_target:
            return list(_NO_OP)
        # 과반 확률로 자기 안전을 해친다
        return [
            ActionOutcome(need_impacts={"safety": -0.2, "esteem": 0.1}, probability=0.6),
            ActionOutcome(need_impacts={"safety": -0.4, "esteem": -0.1}, probability=0.4),
        ]

    return list(_NO_OP)
