"""Course request/response schemas - REST API contract and index document shape."""

from datetime import datetime

from pydantic import BaseModel, Field


class SuggestField(BaseModel):
    """Completion suggester input, one list per document."""

    input: list[str]


def derive_suggest(title: str | None) -> SuggestField | None:
    """Autocomplete input for a title; None when the title is blank."""
    if title is None or not title.strip():
        return None
    return SuggestField(input=[title])


class Course(BaseModel):
    id: str
    title: str | None = None
    description: str | None = None
    category: str | None = None
    type: str | None = None
    grade_range: str | None = Field(default=None, alias="gradeRange")
    min_age: int | None = Field(default=None, alias="minAge")
    max_age: int | None = Field(default=None, alias="maxAge")
    price: float | None = None
    next_session_date: datetime | None = Field(default=None, alias="nextSessionDate")

    model_config = {"populate_by_name": True}


class CourseDocument(Course):
    """What gets written to the index. Suggest is always derived, never taken from input."""

    suggest: SuggestField | None = None

    @classmethod
    def from_course(cls, course: Course) -> "CourseDocument":
        data = course.model_dump()
        data["suggest"] = derive_suggest(course.title)
        return cls(**data)

    def to_source(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CourseSearchParams(BaseModel):
    """Loosely-typed search filters; every filter is optional."""

    q: str | None = None
    min_age: int | None = None
    max_age: int | None = None
    category: str | None = None
    type: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    start_date: datetime | None = None
    sort: str = "upcoming"
    page: int = 0
    size: int = 10


class CoursePage(BaseModel):
    total: int = 0
    courses: list[Course] = []
