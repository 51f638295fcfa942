"""관계 수치 계산

전부 순수 함수, 외부 의존 없음.
"""

TRUST_DECAY_RATE = 0.02  # 턴당 신뢰 감쇠율
INTIMACY_DECAY_RATE = 0.01  # 턴당 친밀도 감쇠율


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_trust(value: float) -> float:
    """-1 ~ +1 클램프."""
    return clamp(value, -1.0, 1.0)


def clamp_intimacy(value: float) -> float:
    """0 ~ 1 클램프."""
    return clamp(value, 0.0, 1.0)


def exponential_decay(value: float, rate: float, turns: int) -> float:
    """value × (1 - rate)^turns. 부호는 바뀌지 않고 크기만 줄어든다."""
    if turns <= 0:
        return value
    return value * (1.0 - rate) ** turns


def decay_trust(trust: float, turns: int) -> float:
    return clamp_trust(exponential_decay(trust, TRUST_DECAY_RATE, turns))


def decay_intimacy(intimacy: float, turns: int) -> float:
    return clamp_intimacy(exponential_decay(intimacy, INTIMACY_DECAY_RATE, turns))


def authority_weight(trust: float) -> float:
    """PageRank 간선 가중치: 0.5 + 0.5 × ((trust + 1) / 2) → [0.5, 1]

    적대 간선은 최대 신뢰 간선의 절반만 전달한다.
    """
    return 0.5 + 0.5 * ((trust + 1.0) / 2.0)
