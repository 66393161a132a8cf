from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from notes_backend.api.errors import BadRequestError


# PUBLIC_INTERFACE
def clean_title(title: Optional[str]) -> str:
    """Returns the trimmed title, or raises BadRequestError if it is blank."""
    title = (title or "").strip()
    if not title:
        raise BadRequestError("title is required")
    return title


class Credentials(BaseModel):
    username: str = Field(..., min_length=1, max_length=255, pattern=r"\S")
    password: str = Field(..., min_length=1, max_length=256)

    @field_validator("password")
    @classmethod
    def no_nul_bytes(cls, v: str) -> str:
        # bcrypt cannot hash NUL
        if "\x00" in v:
            raise ValueError("password must not contain NUL characters")
        return v


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class NoteIn(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = ""

    @field_validator("content")
    @classmethod
    def null_content_is_empty(cls, v: Optional[str]) -> str:
        return v or ""


class NoteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    content: Optional[str] = ""


class TodoIn(BaseModel):
    title: Optional[str] = None
    done: bool = False


class TodoOut(BaseModel):
    id: int
    title: str
    done: bool


class Message(BaseModel):
    message: str
