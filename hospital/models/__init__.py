from .district import (
    District,
    DistrictBase,
    DistrictCreate,
    DistrictPublic,
    DistrictUpdate,
)

__all__ = [
    "District",
    "DistrictBase",
    "DistrictCreate",
    "DistrictPublic",
    "DistrictUpdate",
]
