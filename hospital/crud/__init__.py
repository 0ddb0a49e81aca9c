from .district import DistrictStore, SQLDistrictStore

__all__ = [
    "DistrictStore",
    "SQLDistrictStore",
]
