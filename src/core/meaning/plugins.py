"""의미 플러그인 — 행동 로그 → 의미 이벤트

새 의미 유형은 엔진 수정 없이 MeaningPlugin 구현을 등록해서 추가한다.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from src.core.world.models import (
    ActionLog,
    ActionTag,
    Audience,
    MeaningEvent,
    MeaningType,
    type_name,
)


class MeaningPlugin(ABC):
    """모든 의미 플러그인의 기반 인터페이스

    규칙:
    - evaluate는 순수 함수 (로그를 수정하지 않고, 외부 상태를 읽지 않는다)
    - 생성 이벤트의 type은 meaning_type과 같아야 한다
    """

    @property
    @abstractmethod
    def meaning_type(self) -> str:
        """생성하는 의미 유형 (예: MeaningType.FEAR)"""
        ...

    @abstractmethod
    def evaluate(self, logs: Sequence[ActionLog]) -> List[MeaningEvent]:
        """이번 턴 행동 로그에서 의미 이벤트 0개 이상 생성"""
        ...


class TagMeaningPlugin(MeaningPlugin):
    """특정 태그가 붙은 로그마다 고정 강도 의미 이벤트 1개"""

    tag: ActionTag
    intensity: float
    audience: Audience = Audience()

    def evaluate(self, logs: Sequence[ActionLog]) -> List[MeaningEvent]:
        suffix = type_name(self.meaning_type).lower()
        return [
            MeaningEvent(
                id=f"{log.id}:{suffix}",
                type=self.meaning_type,
                intensity=self.intensity,
                source_log_ids=(log.id,),
                audience=self.audience,
            )
            for log in logs
            if self.tag in log.tags
        ]


class FearPlugin(TagMeaningPlugin):
    """RISKY → FEAR 0.4"""

    tag = ActionTag.RISKY
    intensity = 0.4
    audience = Audience(location_ids=("LOCAL",))

    @property
    def meaning_type(self) -> str:
        return MeaningType.FEAR


class TrustPlugin(TagMeaningPlugin):
    """SOCIAL → TRUST 0.3"""

    tag = ActionTag.SOCIAL
    intensity = 0.3
    audience = Audience(faction_ids=("CIVILIANS",))

    @property
    def meaning_type(self) -> str:
        return MeaningType.TRUST


class RespectPlugin(TagMeaningPlugin):
    """AGGRESSIVE → RESPECT 0.2"""

    tag = ActionTag.AGGRESSIVE
    intensity = 0.2
    audience = Audience(faction_ids=("WARRIORS",))

    @property
    def meaning_type(self) -> str:
        return MeaningType.RESPECT
