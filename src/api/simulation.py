"""Simulation API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import (
    ActionInfo,
    ChronicleInfo,
    ErrorResponse,
    MeaningInfo,
    SimulationRunRequest,
    SimulationRunResponse,
    TurnInfo,
)
from src.config import Settings, settings
from src.core.event_bus import EventBus
from src.core.logging import get_logger
from src.core.meaning.engine import MeaningEngine
from src.core.world.models import ChronicleEntry, type_name
from src.services.simulation_service import SimulationService

logger = get_logger(__name__)

router = APIRouter(prefix="/simulation", tags=["simulation"])


def get_settings() -> Settings:
    """설정 반환 (의존성 주입)"""
    return settings


def get_meaning_engine(request: Request) -> MeaningEngine:
    """MeaningEngine 인스턴스 반환 (의존성 주입)"""
    engine: MeaningEngine = request.app.state.meaning_engine
    return engine


def get_event_bus(request: Request) -> EventBus:
    """EventBus 인스턴스 반환 (의존성 주입)"""
    bus: EventBus = request.app.state.event_bus
    return bus


def _build_chronicle_info(entry: ChronicleEntry) -> ChronicleInfo:
    return ChronicleInfo(
        chronicle_id=entry.id,
        year=entry.year,
        turn=entry.turn,
        meaning_type=type_name(entry.meaning_type),
        summary=entry.summary,
        derived_meaning_ids=list(entry.derived_meaning_ids),
    )


@router.post(
    "/run",
    response_model=SimulationRunResponse,
    responses={400: {"model": ErrorResponse}},
)
def run_simulation(
    request: SimulationRunRequest,
    config: Settings = Depends(get_settings),
    meaning_engine: MeaningEngine = Depends(get_meaning_engine),
    event_bus: EventBus = Depends(get_event_bus),
) -> SimulationRunResponse:
    """시드 고정 시뮬레이션을 끝까지 돌리고 턴별 요약 반환"""
    seed = request.seed if request.seed is not None else config.SIMULATION_SEED
    turns = request.turns if request.turns is not None else config.SIMULATION_TURNS
    actor_ids = request.actor_ids or config.actor_ids
    mode = request.mode or config.SIMULATION_MODE

    try:
        service = SimulationService(
            meaning_engine=meaning_engine,
            event_bus=event_bus,
            seed=seed,
            mode=mode,
        )
        run = service.run(actor_ids, turns)
    except ValueError as e:
        logger.warning("Invalid simulation request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    turn_infos = []
    for result in run.turns:
        summary = result.summary()
        turn_infos.append(
            TurnInfo(
                turn=summary.turn,
                year=summary.year,
                actions=[
                    ActionInfo(
                        log_id=log.id,
                        actor_id=log.actor_id,
                        action=log.type.value,
                        tags=[type_name(tag) for tag in log.tags],
                        target_id=log.target_id,
                    )
                    for log in summary.logs
                ],
                meanings=[
                    MeaningInfo(
                        meaning_id=m.id,
                        type=type_name(m.type),
                        intensity=m.intensity,
                    )
                    for m in summary.meanings
                ],
                chronicles=[_build_chronicle_info(c) for c in summary.chronicles],
                pressure=summary.pressure,
                tendency=summary.tendency,
            )
        )

    world = run.final_state.world
    return SimulationRunResponse(
        seed=seed,
        mode=mode,
        actor_ids=list(actor_ids),
        turns=turn_infos,
        chronicles=[_build_chronicle_info(c) for c in world.chronicles],
        final_year=world.year,
        final_turn=world.turn,
    )
