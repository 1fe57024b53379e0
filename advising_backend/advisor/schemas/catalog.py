from pydantic import BaseModel


class CatalogLoadRequest(BaseModel):
    path: str


class SkippedRecordOut(BaseModel):
    line_number: int
    reason: str

    model_config = {"from_attributes": True}


class CatalogLoadResponse(BaseModel):
    status: str
    message: str
    loaded: int = 0
    skipped: list[SkippedRecordOut] = []
