# backend/models.py
from typing import List, Literal, Optional

from pydantic import BaseModel


class DirectoryEntry(BaseModel):
    name: str
    type: Literal["file", "directory"]
    size: Optional[int] = None      # regular files only
    modified: str


class DirectoryListing(BaseModel):
    type: Literal["directory"] = "directory"
    path: str
    contents: List[DirectoryEntry] = []


class FileContent(BaseModel):
    type: Literal["file"] = "file"
    path: str
    size: int
    modified: str
    content: str


class ErrorBody(BaseModel):
    error: str
