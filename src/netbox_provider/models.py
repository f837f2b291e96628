"""Request and response bodies for the NetBox aggregate endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class WritableAggregate(BaseModel):
    """Body sent on create and on full-replacement update."""

    prefix: str
    rir: int
    description: str = ""
    tags: list[int] = Field(default_factory=list)


class NestedRIR(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str | None = None
    slug: str | None = None
    url: str | None = None
    display: str | None = None


class Aggregate(BaseModel):
    """Aggregate as returned by NetBox. Fields this provider does not track are dropped."""

    model_config = ConfigDict(extra="ignore")

    id: int
    prefix: str
    rir: NestedRIR
    description: str = ""
