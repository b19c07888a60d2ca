from pydantic import BaseModel, ConfigDict


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Plain {"message": ...} body returned by delete endpoints
class GenericMessage(BaseModel):
    message: str


# Body returned for EntityNotFoundError and unhandled exceptions
class ErrorResponse(BaseModel):
    type: str
    message: str
