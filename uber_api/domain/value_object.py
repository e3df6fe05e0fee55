# (c) Nelen & Schuurmans

from typing import Type
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from .exceptions import BadRequest
from .types import Json

__all__ = ["ValueObject"]


T = TypeVar("T", bound="ValueObject")


class ValueObject(BaseModel):
    # The API adds fields without bumping its version; unknown ones are dropped.
    model_config = ConfigDict(frozen=True, extra="ignore")

    def run_validation(self: T) -> T:
        try:
            return self.__class__(**self.model_dump())
        except ValidationError as e:
            raise BadRequest(e)

    @classmethod
    def create(cls: Type[T], **values) -> T:
        try:
            return cls(**values)
        except ValidationError as e:
            raise BadRequest(e)

    def update(self: T, **values) -> T:
        try:
            return self.__class__(**{**self.model_dump(), **values})
        except ValidationError as e:
            raise BadRequest(e)

    def to_json(self) -> Json:
        """Wire representation: JSON-compatible and without unset (None) fields"""
        return self.model_dump(mode="json", exclude_none=True)

    def __hash__(self):
        return hash(self.__class__) + hash(tuple(map(repr, self.__dict__.values())))
