"""결정론적 난수 — 시드 기반

모든 난수 사용 지점은 여기서 만든 random.Random을 받는다.
전역 random 모듈 상태를 읽지 않으므로 같은 시드 = 같은 시뮬레이션.
"""

import hashlib
import json
import random
from typing import Any


def derive_seed(seed: int, namespace: str, *context: Any) -> int:
    """(seed, namespace, context)에서 32비트 하위 시드 생성.

    Args:
        seed: 시뮬레이션 루트 시드
        namespace: 호출 지점 식별자 (예: "echo", "action")
        context: 추가 구분값 (턴 번호, 액터 ID 등)

    Returns:
        0 ~ 2^32-1 정수
    """
    payload = {"seed": seed, "namespace": namespace, "context": list(context)}
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    digest = hashlib.sha256(serialized.encode("utf-8")).hexdigest()
    return int(digest, 16) % (2**32)


def derive_rng(seed: int, namespace: str, *context: Any) -> random.Random:
    """호출 지점 전용 RNG 생성"""
    return random.Random(derive_seed(seed, namespace, *context))


def hash_to_float(text: str) -> float:
    """문자열 → [0, 1) 결정론적 해시.

    32비트 부호 있는 정수 롤링 해시 (h * 31 + c).
    """
    h = 0
    for ch in text:
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    if h >= 2**31:
        h -= 2**32
    return (abs(h) % 10000) / 10000
