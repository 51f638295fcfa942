"""매슬로우 욕구 가중치

w_i = (1 - s_i) × priority_i × gate_i
gate_i = Π_{j<i} sigmoid(s_j - threshold)
하위 욕구가 결핍되면 상위 욕구의 동기가 부드럽게 억제된다.
"""

import math
from typing import Dict, Mapping

from src.core.utility.models import NEED_KEYS, NeedState

MASLOW_BASE_PRIORITY: Dict[str, float] = {
    "survival": 5.0,
    "safety": 4.0,
    "social": 3.0,
    "esteem": 2.0,
    "self_actualization": 1.0,
}

MASLOW_THRESHOLD = 0.3  # 하위 욕구 임계값
SIGMOID_STEEPNESS = 10.0


def sigmoid(x: float) -> float:
    return 1.0 / (1.0 + math.exp(-SIGMOID_STEEPNESS * x))


def calculate_gates(needs: NeedState) -> Dict[str, float]:
    """각 욕구의 계층 게이트 (survival은 항상 1.0)"""
    gates: Dict[str, float] = {}
    gate = 1.0
    for key in NEED_KEYS:
        gates[key] = gate
        gate *= sigmoid(getattr(needs, key) - MASLOW_THRESHOLD)
    return gates


def calculate_need_weights(needs: NeedState) -> Dict[str, float]:
    gates = calculate_gates(needs)
    return {
        key: (1.0 - getattr(needs, key)) * MASLOW_BASE_PRIORITY[key] * gates[key]
        for key in NEED_KEYS
    }


def update_needs(current: NeedState, deltas: Mapping[str, float]) -> NeedState:
    """욕구 변동 적용 후 0~1 클램프. 알 수 없는 키는 무시."""
    values = {
        key: max(0.0, min(1.0, getattr(current, key) + deltas.get(key, 0.0)))
        for key in NEED_KEYS
    }
    return NeedState(**values)


def create_default_need_state() -> NeedState:
    return NeedState(
        survival=0.7,
        safety=0.6,
        social=0.5,
        esteem=0.4,
        self_actualization=0.3,
    )
