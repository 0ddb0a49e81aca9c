from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


# -----Models for District-----
class DistrictBase(SQLModel):
    name: str = Field(nullable=False, index=True)
    is_active: bool = Field(default=True)


class District(DistrictBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    created_date: datetime | None = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    modified_date: datetime | None = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column_kwargs={"onupdate": lambda: datetime.now(timezone.utc)},
    )


class DistrictPublic(DistrictBase):
    id: int
    created_date: datetime
    modified_date: datetime


class DistrictCreate(DistrictBase):
    # must be None, a present id is rejected by the create endpoint
    id: int | None = None


class DistrictUpdate(DistrictBase):
    id: int | None = None


# -----Models for District-----
