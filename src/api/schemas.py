"""Request/response Pydantic models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Accepts and emits camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateAdRequest(_CamelModel):
    url: str | None = None
    gender: str | None = None
    age_group: str | None = None


class ManualAdRequest(_CamelModel):
    brand_name: str | None = None
    product_name: str | None = None
    product_description: str | None = None
    target_audience: str | None = None
    unique_selling_points: str | None = None


class ImageProxyRequest(BaseModel):
    url: str | None = None


class ProductData(_CamelModel):
    brand_name: str
    product_name: str
    product_description: str
    images: list[str] = []


class CreateAdResponse(ProductData):
    ad_copy: str


class ManualAdResponse(_CamelModel):
    brand_name: str
    product_name: str
    product_description: str
    target_audience: str
    unique_selling_points: str
    ad_copy: str


class ImageProxyResponse(BaseModel):
    images: list[str] = []
