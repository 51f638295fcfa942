"""믿음 조회와 유사도"""

import math
from typing import Optional

from src.core.belief.inference import DEFAULT_PRIOR
from src.core.belief.models import Belief, BeliefState


def get_belief_confidence(state: BeliefState, proposition: str) -> float:
    belief = state.beliefs.get(proposition)
    return belief.confidence if belief else DEFAULT_PRIOR


def get_strongest_positive_belief(state: BeliefState) -> Optional[Belief]:
    """confidence가 가장 높은 믿음 (0.5 초과만)"""
    strongest: Optional[Belief] = None
    best = DEFAULT_PRIOR
    for belief in state.beliefs.values():
        if belief.confidence > best:
            best = belief.confidence
            strongest = belief
    return strongest


def get_strongest_negative_belief(state: BeliefState) -> Optional[Belief]:
    """confidence가 가장 낮은 믿음 (0.5 미만만)"""
    strongest: Optional[Belief] = None
    best = DEFAULT_PRIOR
    for belief in state.beliefs.values():
        if belief.confidence < best:
            best = belief.confidence
            strongest = belief
    return strongest


def calculate_belief_similarity(state_a: BeliefState, state_b: BeliefState) -> float:
    """두 캐릭터 믿음의 코사인 유사도 (이념적 일치도).

    한쪽에만 있는 명제는 다른 쪽 0.5로 취급. 둘 다 비어 있으면 1.0.
    """
    propositions = list(state_a.beliefs)
    propositions += [p for p in state_b.beliefs if p not in state_a.beliefs]
    if not propositions:
        return 1.0

    dot = norm_a = norm_b = 0.0
    for proposition in propositions:
        conf_a = get_belief_confidence(state_a, proposition)
        conf_b = get_belief_confidence(state_b, proposition)
        dot += conf_a * conf_b
        norm_a += conf_a * conf_a
        norm_b += conf_b * conf_b

    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))
