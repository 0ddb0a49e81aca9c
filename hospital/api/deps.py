from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from hospital.core.db import engine
from hospital.crud import DistrictStore, SQLDistrictStore


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]


def get_district_store(session: SessionDep) -> DistrictStore:
    return SQLDistrictStore(session)


DistrictStoreDep = Annotated[DistrictStore, Depends(get_district_store)]
