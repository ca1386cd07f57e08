from pydantic import BaseModel, Field


class EntryBase(BaseModel):
    date: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    mood: str = Field(..., min_length=1)


class EntryCreate(EntryBase):
    pass


class EntryOut(EntryBase):
    id: int
