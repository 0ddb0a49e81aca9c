from collections.abc import Sequence
from typing import Protocol

from sqlmodel import Session, col, select

from hospital.models import District


class DistrictStore(Protocol):
    """Persistence operations the district endpoints rely on."""

    def save(self, district: District) -> District: ...

    def find_all(self) -> Sequence[District]: ...

    def find_by_id(self, district_id: int) -> District | None: ...

    def delete_by_id(self, district_id: int) -> None: ...


class SQLDistrictStore:
    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, district: District) -> District:
        """
        Insert the district, or overwrite the stored row carrying the same id.

        An id with no stored row is inserted as given.
        """
        if district.id is not None:
            district_db = self.session.get(District, district.id)
            if district_db:
                district_data = district.model_dump(exclude={"id", "created_date"})
                district_db.sqlmodel_update(district_data)
                district = district_db
        self.session.add(district)
        self.session.commit()
        self.session.refresh(district)
        return district

    def find_all(self) -> Sequence[District]:
        return self.session.exec(select(District).order_by(col(District.id))).all()

    def find_by_id(self, district_id: int) -> District | None:
        return self.session.get(District, district_id)

    def delete_by_id(self, district_id: int) -> None:
        district = self.session.get(District, district_id)
        if district:
            self.session.delete(district)
            self.session.commit()
