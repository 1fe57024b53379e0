from pydantic import BaseModel


class CourseOut(BaseModel):
    code: str
    title: str

    model_config = {
        "from_attributes": True,
    }


class PrereqOut(BaseModel):
    code: str
    title: str | None = None
    in_catalog: bool = True


class CourseDetailResponse(CourseOut):
    prereqs: list[PrereqOut] = []


class CourseListResponse(BaseModel):
    count: int
    courses: list[CourseOut] = []
