"""Geography API Routes.

States, districts and schools for map navigation.
"""
from fastapi import APIRouter, Depends, Query

from braindiff.domain import State
from braindiff.infrastructure.repositories.unit_of_work import UnitOfWork
from braindiff.presentation.api.dependencies import get_uow
from braindiff.presentation.api.schemas import (
    DistrictResponse,
    SchoolResponse,
    StateResponse,
)
from braindiff.shared.config import settings

router = APIRouter()


@router.get("/states")
async def list_states(uow: UnitOfWork = Depends(get_uow)) -> list[StateResponse]:
    """List all states."""
    states = await uow.states.list_all()
    return [StateResponse.model_validate(s) for s in states]


@router.get("/states/{state}")
async def get_state(state: State, uow: UnitOfWork = Depends(get_uow)) -> StateResponse:
    """Get one state by postal code."""
    info = await uow.states.get_by_code(state)
    return StateResponse.model_validate(info)


@router.get("/states/{state}/districts")
async def list_districts(
    state: State,
    limit: int = Query(default=settings.default_page_size, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    uow: UnitOfWork = Depends(get_uow),
) -> list[DistrictResponse]:
    """List districts of a state."""
    districts = await uow.districts.find_by_state(state, limit=limit, offset=offset)
    return [DistrictResponse.model_validate(d) for d in districts]


@router.get("/districts/{district_id}")
async def get_district(
    district_id: str,
    uow: UnitOfWork = Depends(get_uow),
) -> DistrictResponse:
    """Get one district by NCES ID."""
    district = await uow.districts.get_by_id(district_id)
    return DistrictResponse.model_validate(district)


@router.get("/districts/{district_id}/schools")
async def list_schools(
    district_id: str,
    limit: int = Query(default=settings.default_page_size, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    uow: UnitOfWork = Depends(get_uow),
) -> list[SchoolResponse]:
    """List schools of a district."""
    schools = await uow.schools.find_by_district(district_id, limit=limit, offset=offset)
    return [SchoolResponse.model_validate(s) for s in schools]


@router.get("/schools/{school_id}")
async def get_school(school_id: str, uow: UnitOfWork = Depends(get_uow)) -> SchoolResponse:
    """Get one school by NCES ID."""
    school = await uow.schools.get_by_id(school_id)
    return SchoolResponse.model_validate(school)
