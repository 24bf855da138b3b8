from pydantic import BaseModel, Field


class PaginationParams(BaseModel):
    limit: int = Field(default=10, ge=1)
    offset: int = Field(default=0, ge=0)
