"""API request/response schemas."""

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class SimulationRunRequest(BaseModel):
    """시뮬레이션 실행 요청. 생략한 값은 설정 기본값."""

    seed: Optional[int] = Field(None, description="루트 시드")
    turns: Optional[Annotated[int, Field(ge=1, le=500)]] = Field(
        None, description="진행할 턴 수"
    )
    actor_ids: Optional[Annotated[list[str], Field(min_length=1, max_length=20)]] = Field(
        None, description="참여 캐릭터 ID"
    )
    mode: Optional[Literal["utility", "probabilistic"]] = Field(
        None, description="행동 선택 방식"
    )


# === Response Schemas ===


class ActionInfo(BaseModel):
    """실행된 행동"""

    log_id: str
    actor_id: str
    action: str
    tags: list[str] = []
    target_id: Optional[str] = None


class MeaningInfo(BaseModel):
    """유형별 최강 의미"""

    meaning_id: str
    type: str
    intensity: float


class ChronicleInfo(BaseModel):
    """연대기 항목"""

    chronicle_id: str
    year: int
    turn: int
    meaning_type: str
    summary: str
    derived_meaning_ids: list[str] = []


class TurnInfo(BaseModel):
    """턴 요약"""

    turn: int
    year: int
    actions: list[ActionInfo] = []
    meanings: list[MeaningInfo] = []
    chronicles: list[ChronicleInfo] = []
    pressure: dict[str, float] = {}
    tendency: dict[str, float] = {}


class SimulationRunResponse(BaseModel):
    """시뮬레이션 실행 결과"""

    seed: int
    mode: str
    actor_ids: list[str]
    turns: list[TurnInfo]
    chronicles: list[ChronicleInfo]
    final_year: int
    final_turn: int


class ErrorResponse(BaseModel):
    """에러 응답"""

    detail: str
