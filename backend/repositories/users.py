from typing import Optional

from models.users import User
from repositories.base import CrudRepository


class UserRepository(CrudRepository[User]):
    model = User

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()
