from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)


class ProductListResponse(BaseModel):
    success: bool = True
    data: list[Product]


class HealthResponse(BaseModel):
    status: str = "OK"


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
