from typing import List

from models.ucsb_date import UCSBDate
from repositories.base import CrudRepository


class UCSBDateRepository(CrudRepository[UCSBDate]):
    model = UCSBDate

    def find_all_by_quarter_yyyyq(self, quarter_yyyyq: str) -> List[UCSBDate]:
        return self.db.query(UCSBDate).filter(UCSBDate.quarter_yyyyq == quarter_yyyyq).all()
