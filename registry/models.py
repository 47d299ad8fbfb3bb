"""Movie and director records"""
from typing import Optional

from pydantic import BaseModel, StrictStr, ValidationError, field_validator


class MovieDecodeError(ValueError):
    """Request body could not be decoded into a Movie"""


class Director(BaseModel):
    first_name: StrictStr = ''
    last_name: StrictStr = ''

    @field_validator('first_name', 'last_name', mode='before')
    @classmethod
    def null_as_empty(cls, value):
        return '' if value is None else value


class Movie(BaseModel):
    id: StrictStr = ''
    isbn: StrictStr = ''
    title: StrictStr = ''
    director: Optional[Director] = None

    @field_validator('id', 'isbn', 'title', mode='before')
    @classmethod
    def null_as_empty(cls, value):
        return '' if value is None else value

    @classmethod
    def from_json(cls, data):
        """
        Decode a JSON request body

        Unknown keys are ignored, missing or null strings become "".

        Raises:
            MovieDecodeError: body is not a JSON object of the right shape
        """
        if not data:
            raise MovieDecodeError('empty request body')

        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise MovieDecodeError(str(e)) from e

    def with_id(self, movie_id):
        return self.model_copy(update={'id': movie_id}, deep=True)

    def to_dict(self):
        return self.model_dump()
