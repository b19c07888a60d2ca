# backend/repositories/base.py
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


# Lookup, save and delete for one model class; uniqueness is left to the database
class CrudRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[ModelT]:
        return self.db.query(self.model).all()

    def find_by_id(self, id: Any) -> Optional[ModelT]:
        return self.db.get(self.model, id)

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.commit()
