"""
Request schemas for the portfolio API.

Each model validates one JSON body. Field aliases are camelCase to match the
front end (``fullName``, ``jobTitle``...); python code uses snake_case.
"""
import json
from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.errors import ValidationError, field_errors

NonEmptyStr = Annotated[str, Field(min_length=1)]


def split_list(value):
    """Accept a list, a JSON array string or a comma separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            try:
                value = json.loads(text)
            except ValueError:
                value = text.strip("[]").split(",")
        else:
            value = text.split(",")
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return value


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ApiSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)


class ProfileSchema(ApiSchema):
    full_name: NonEmptyStr
    title: NonEmptyStr
    bio: NonEmptyStr
    email: EmailStr
    phone: NonEmptyStr
    location: NonEmptyStr
    avatar_url: NonEmptyStr
    header_image: NonEmptyStr


class SkillSchema(ApiSchema):
    name: NonEmptyStr
    category: NonEmptyStr
    level: int = Field(ge=0, le=100)


class ProjectSchema(ApiSchema):
    title: NonEmptyStr
    description: NonEmptyStr
    category: NonEmptyStr
    tags: List[str] = Field(default_factory=list)
    image: NonEmptyStr
    demo_url: Optional[str] = None
    github_url: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, value):
        return split_list(value)

    @field_validator("demo_url", "github_url", mode="before")
    @classmethod
    def empty_url(cls, value):
        return blank_to_none(value)


class ExperienceSchema(ApiSchema):
    company: NonEmptyStr
    job_title: NonEmptyStr
    description: NonEmptyStr
    start_date: datetime
    end_date: Optional[datetime] = None
    technologies: List[str] = Field(default_factory=list)

    @field_validator("technologies", mode="before")
    @classmethod
    def parse_technologies(cls, value):
        return split_list(value)

    @field_validator("end_date", mode="before")
    @classmethod
    def empty_end_date(cls, value):
        return blank_to_none(value)

    @field_validator("start_date", "end_date", mode="after")
    @classmethod
    def as_naive_utc(cls, value):
        # columns hold naive UTC; browsers send "...Z"
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class SocialSchema(ApiSchema):
    name: NonEmptyStr
    url: NonEmptyStr
    icon: NonEmptyStr


class ResumeSchema(ApiSchema):
    filename: NonEmptyStr
    url: NonEmptyStr
    uploaded_at: Optional[datetime] = None


class ContactSchema(ApiSchema):
    name: NonEmptyStr
    email: EmailStr
    subject: NonEmptyStr
    message: NonEmptyStr


class FeedbackSchema(ApiSchema):
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None

    @field_validator("comment", mode="before")
    @classmethod
    def empty_comment(cls, value):
        return blank_to_none(value)


class BlogPostSchema(ApiSchema):
    title: NonEmptyStr
    slug: Optional[str] = None
    content: NonEmptyStr
    summary: NonEmptyStr
    featured_image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    reading_time: Optional[int] = Field(default=None, ge=1)
    is_ai_generated: bool = False

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, value):
        return split_list(value)

    @field_validator("slug", "featured_image", mode="before")
    @classmethod
    def empty_optional(cls, value):
        return blank_to_none(value)


class BlogCommentSchema(ApiSchema):
    name: NonEmptyStr
    email: EmailStr
    comment: NonEmptyStr


class LoginSchema(ApiSchema):
    username: NonEmptyStr
    password: NonEmptyStr


# --- AI ---

class GenerateBlogSchema(ApiSchema):
    title: Optional[str] = None
    topic: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    length: Literal["short", "medium", "long"] = "medium"

    @field_validator("keywords", mode="before")
    @classmethod
    def parse_keywords(cls, value):
        return split_list(value)


class BlogSuggestionsSchema(ApiSchema):
    user_profile: NonEmptyStr
    existing_topics: List[str] = Field(default_factory=list)


class AnalyzeBlogSchema(ApiSchema):
    content: NonEmptyStr


class ChatMessageSchema(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatSchema(ApiSchema):
    messages: List[ChatMessageSchema]


class RecommendationSchema(ApiSchema):
    user_interests: List[str] = Field(min_length=1)
    current_content: NonEmptyStr
    content_type: Optional[str] = None
    content_id: Optional[str] = None
    count: int = Field(default=3, ge=1, le=10)

    @field_validator("content_id", mode="before")
    @classmethod
    def stringify_id(cls, value):
        return None if value is None else str(value)


class RewardSchema(ApiSchema):
    action: NonEmptyStr


def validate(schema, data, label="request"):
    """Validate ``data`` against ``schema`` or raise a 400 with field errors."""
    try:
        return schema.model_validate(data if data is not None else {})
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid {label} data", errors=field_errors(exc))
