from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PersonCreate(BaseModel):
    """Candidate person as submitted by the caller.

    Every field is optional at the schema level so that structural rules
    (emptiness, length, date format) are decided by the validator in one
    place and rejected uniformly. Portuguese field names from the original
    contest payload are accepted as aliases.
    """

    model_config = ConfigDict(populate_by_name=True)

    nickname: Optional[str] = Field(default=None, validation_alias=AliasChoices("nickname", "apelido"))
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "nome"))
    birth_date: Optional[str] = Field(default=None, validation_alias=AliasChoices("birth_date", "nascimento"))
    stack: Optional[list[Any]] = None


class PersonCreatedResponse(BaseModel):
    id: str


class PersonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    nickname: str
    name: str
    birth_date: str
    stack: Optional[list[str]] = None
