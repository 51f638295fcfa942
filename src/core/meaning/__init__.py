"""의미 해석 Core 패키지 — 공개 API"""

from src.core.meaning.plugins import (
    FearPlugin,
    MeaningPlugin,
    RespectPlugin,
    TagMeaningPlugin,
    TrustPlugin,
)
from src.core.meaning.engine import (
    MeaningEngine,
    create_default_meaning_engine,
    strongest_meanings_by_type,
)

__all__ = [
    "FearPlugin",
    "MeaningPlugin",
    "RespectPlugin",
    "TagMeaningPlugin",
    "TrustPlugin",
    "MeaningEngine",
    "create_default_meaning_engine",
    "strongest_meanings_by_type",
]
