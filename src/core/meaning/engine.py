"""의미 엔진 — 플러그인 레지스트리

등록 전용 (우선순위 없음). 매 턴 모든 플러그인을 등록 순서대로 호출하고
결과를 이어 붙인다. 압력 누적은 교환 법칙이 성립하므로 순서는 의미가 없다.

한 턴 안에서 의미 ID가 겹치면 (같은 유형 플러그인 중복 등록 등)
뒤에 나온 쪽에 "#{등록 순번}"을 붙여 유일하게 만든다.
"""

from dataclasses import replace
from typing import Dict, List, Sequence, Set, Tuple

from src.core.logging import get_logger
from src.core.meaning.plugins import FearPlugin, MeaningPlugin, RespectPlugin, TrustPlugin
from src.core.world.models import ActionLog, MeaningEvent, type_name

logger = get_logger(__name__)


class MeaningEngine:
    def __init__(self) -> None:
        self._plugins: List[MeaningPlugin] = []

    @property
    def plugins(self) -> Tuple[MeaningPlugin, ...]:
        """등록된 플러그인 (읽기 전용)"""
        return tuple(self._plugins)

    def register(self, plugin: MeaningPlugin) -> None:
        self._plugins.append(plugin)
        logger.info(
            f"의미 플러그인 등록: {type(plugin).__name__} "
            f"({type_name(plugin.meaning_type)})"
        )

    def evaluate(self, logs: Sequence[ActionLog]) -> List[MeaningEvent]:
        meanings: List[MeaningEvent] = []
        seen: Set[str] = set()
        for index, plugin in enumerate(self._plugins):
            for meaning in plugin.evaluate(logs):
                unique_id = meaning.id
                attempt = 1
                while unique_id in seen:
                    unique_id = f"{meaning.id}#{index}"
                    if attempt > 1:
                        unique_id += f".{attempt}"
                    attempt += 1
                if unique_id != meaning.id:
                    meaning = replace(meaning, id=unique_id)
                seen.add(unique_id)
                meanings.append(meaning)
        return meanings


def create_default_meaning_engine() -> MeaningEngine:
    """FEAR / TRUST / RESPECT 기본 플러그인 3종 등록"""
    engine = MeaningEngine()
    engine.register(FearPlugin())
    engine.register(TrustPlugin())
    engine.register(RespectPlugin())
    return engine


def strongest_meanings_by_type(meanings: Sequence[MeaningEvent]) -> List[MeaningEvent]:
    """유형별 최대 강도 이벤트 1개씩 (동점이면 먼저 나온 것). 서사 렌더러용."""
    strongest: Dict[str, MeaningEvent] = {}
    for meaning in meanings:
        current = strongest.get(meaning.type)
        if current is None or meaning.intensity > current.intensity:
            strongest[meaning.type] = meaning
    return list(strongest.values())
