from pydantic import BaseModel


class DatabaseHealthResponse(BaseModel):
    url: str
    connected: bool
    error: str | None = None

    model_config = {"from_attributes": True}
