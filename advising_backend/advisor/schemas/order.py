from pydantic import BaseModel

from advisor.schemas.course import CourseOut


class OrderResponse(BaseModel):
    complete: bool
    message: str
    courses: list[CourseOut] = []
    # populated only when prerequisites loop
    blocked: list[str] = []
    cycles: list[list[str]] = []
