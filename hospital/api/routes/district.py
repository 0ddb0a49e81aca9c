import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Response, status

from hospital.api.alerts import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)
from hospital.api.deps import DistrictStoreDep
from hospital.core.config import settings
from hospital.models import (
    District,
    DistrictCreate,
    DistrictPublic,
    DistrictUpdate,
)

logger = logging.getLogger(__name__)

ENTITY_NAME = "district"

router = APIRouter(tags=["District"])


# Create a District
@router.post(
    "/districts",
    response_model=DistrictPublic,
    status_code=status.HTTP_201_CREATED,
)
def create_district(
    *,
    district_create: DistrictCreate,
    response: Response,
    store: DistrictStoreDep,
) -> Any:
    """
    Create a new district.

    Responds 201 with the stored district and its Location, or 400 when the
    payload already carries an id.
    """
    logger.debug("REST request to save District : %s", district_create)
    if district_create.id is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A new district cannot already have an ID",
            headers=create_failure_alert(ENTITY_NAME, "idexists"),
        )
    result = store.save(District.model_validate(district_create))
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"{settings.API_V1_STR}/districts/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


# Update a District, creating it when no id is given
@router.put("/districts", response_model=DistrictPublic)
def update_district(
    *,
    district_update: DistrictUpdate,
    response: Response,
    store: DistrictStoreDep,
) -> Any:
    logger.debug("REST request to update District : %s", district_update)
    if district_update.id is None:
        return create_district(
            district_create=DistrictCreate.model_validate(district_update.model_dump()),
            response=response,
            store=store,
        )
    result = store.save(District.model_validate(district_update))
    response.headers.update(
        create_entity_update_alert(ENTITY_NAME, str(district_update.id))
    )
    return result


# Get all Districts
@router.get("/districts", response_model=list[DistrictPublic])
def get_all_districts(store: DistrictStoreDep) -> Any:
    logger.debug("REST request to get all Districts")
    return store.find_all()


# Get District by ID
@router.get("/districts/{district_id}", response_model=DistrictPublic)
def get_district(district_id: int, store: DistrictStoreDep) -> Any:
    logger.debug("REST request to get District : %s", district_id)
    district = store.find_by_id(district_id)
    if not district:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return district


# Delete District by ID
@router.delete("/districts/{district_id}")
def delete_district(district_id: int, store: DistrictStoreDep) -> Response:
    logger.debug("REST request to delete District : %s", district_id)
    store.delete_by_id(district_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=create_entity_deletion_alert(ENTITY_NAME, str(district_id)),
    )
