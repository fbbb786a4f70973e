from pydantic import BaseModel, Field


class FunctionQuery(BaseModel):
    tag: str | None = Field(default=None, min_length=1, max_length=256)
