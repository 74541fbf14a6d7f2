from pydantic import BaseModel, Field


# --- Search results ---

class Product(BaseModel):
    title: str = ""
    rating: str = ""
    reviews: str = ""
    image_url: str = Field("", alias="imageUrl")

    model_config = {"populate_by_name": True}

    @property
    def is_complete(self) -> bool:
        return all((self.title, self.rating, self.reviews, self.image_url))


# --- Health ---

class ServiceStatus(BaseModel):
    name: str
    status: str  # "ok" / "degraded" / "unavailable"
    detail: str = ""


class HealthResponse(BaseModel):
    status: str
    services: list[ServiceStatus] = []
