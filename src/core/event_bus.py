"""EventBus - 시뮬레이션 관찰자 통지 인프라

턴 처리 결과를 외부 관찰자(서사 렌더러, 로깅, API 응답 수집기)에게 알린다.
코어 파이프라인은 구독자를 모르고, 구독자의 실패는 턴 처리를 막지 않는다.

규칙:
- 이벤트 data에는 ID와 스칼라 값만 담는다
- 핸들러 안에서 재발행하면 전파 깊이 최대 MAX_DEPTH 단계
- 여러 시뮬레이션이 한 버스를 공유해도 서로의 이벤트를 막지 않는다
  (전파 깊이는 스레드별로 센다)
"""

import threading
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from src.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5


@dataclass
class SimulationEvent:
    """이벤트 데이터 컨테이너

    Args:
        event_type: 이벤트 유형 (예: "turn_processed", "chronicle_emitted")
        data: 턴 번호, 연대기 ID 같은 가벼운 값
        source: 발행한 서비스 이름
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    depth: int = field(default=0, repr=False)


EventHandler = Callable[[SimulationEvent], None]


class EventBus:
    """동기식 이벤트 버스

    사용 패턴:
        bus = EventBus()
        bus.subscribe(EventTypes.CHRONICLE_EMITTED, renderer.on_chronicle)
        bus.emit(SimulationEvent(EventTypes.CHRONICLE_EMITTED, {"turn": 5}, "simulation"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._lock = threading.Lock()
        self._local = threading.local()

    @property
    def _current_depth(self) -> int:
        return getattr(self._local, "depth", 0)

    @_current_depth.setter
    def _current_depth(self, value: int) -> None:
        self._local.depth = value

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug(f"EventBus 구독: {event_type} → {handler.__qualname__}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            handlers = self._handlers.get(event_type)
            registered = bool(handlers) and handler in handlers
            if registered:
                handlers.remove(handler)
        if not registered:
            logger.warning(f"핸들러 미등록: {event_type} → {handler.__qualname__}")
            return
        logger.debug(f"EventBus 구독 해제: {event_type} → {handler.__qualname__}")

    def emit(self, event: SimulationEvent) -> bool:
        """등록된 핸들러를 동기 호출. 전파했으면 True.

        핸들러 안의 재발행이 MAX_DEPTH를 넘으면 전파하지 않는다.
        핸들러 예외는 기록만 하고 다음 핸들러로 넘어간다.
        """
        depth = self._current_depth
        if depth >= MAX_DEPTH:
            logger.warning(
                f"EventBus 전파 깊이 초과 ({MAX_DEPTH}): "
                f"{event.source}:{event.event_type} 무시됨"
            )
            return False

        event.depth = depth

        with self._lock:
            handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug(f"EventBus: {event.event_type} 구독자 없음")
            return False

        self._current_depth = depth + 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        f"EventBus 핸들러 에러: {handler.__qualname__} "
                        f"(event={event.event_type})"
                    )
        finally:
            self._current_depth = depth
        return True

    def clear(self) -> None:
        with self._lock:
            self._handlers.clear()

    @property
    def handler_count(self) -> int:
        with self._lock:
            return sum(len(h) for h in self._handlers.values())
