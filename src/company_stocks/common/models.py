from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CompanyBase(BaseModel):
    # JSON uses camelCase keys (e.g. stockPrices), Python uses snake_case.
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    name: str | None = None
    stock_prices: list[float] = Field(default_factory=list)


class CompanyRequest(CompanyBase):
    """A company as submitted by a client, before it has been persisted."""

    id: int | None = None


class CompanyResponse(CompanyBase):
    """A persisted company, which always has a server-assigned ID."""

    id: int
