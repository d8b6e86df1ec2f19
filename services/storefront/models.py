from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)


class ProductListPayload(BaseModel):
    success: bool = False
    data: list[Product] = Field(default_factory=list)
    message: str | None = None
