from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


EntryType = Literal["task", "event", "idea", "insight", "reflection", "journal"]
ItemType = Literal["task", "idea", "thought", "journal"]
Priority = Literal["low", "medium", "high", "urgent"]
Status = Literal["pending", "in_progress", "completed"]
ActionType = Literal["prep_task", "reminder", "follow_up", "research"]


def _clean_tags(tags: List[str]) -> List[str]:
    out: List[str] = []
    for tag in tags:
        tag = tag.lstrip("#").strip()
        if tag and tag not in out:
            out.append(tag)
    return out


class AutoAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: ActionType = "prep_task"
    content: str
    due_date: Optional[datetime] = None
    completed: bool = False


class Entry(BaseModel):
    """Structured record built from one classified candidate string.

    Instances are frozen; the store derives updated copies with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    content: str
    type: EntryType
    confidence: float = Field(..., ge=0.0, le=1.0)
    tags: List[str] = Field(default_factory=list)
    priority: Priority = "low"
    status: Status = "pending"

    due_date: Optional[datetime] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    location: Optional[str] = None
    auto_actions: List[AutoAction] = Field(default_factory=list)
    related_ids: List[str] = Field(default_factory=list)
    notes: str = ""

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tags")
    @classmethod
    def tags_without_hash(cls, v: List[str]) -> List[str]:
        return _clean_tags(v)

    @model_validator(mode="after")
    def end_after_start(self) -> "Entry":
        if self.start_date and self.end_date and self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

    @property
    def is_placeholder(self) -> bool:
        return not self.content.strip()


class ParsedItem(BaseModel):
    """Lightweight brain-dump record. ``id`` is a ``temp-`` placeholder until stored."""

    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    type: ItemType = "thought"
    tags: List[str] = Field(default_factory=list)
    confidence: float = Field(0.0, ge=0.0, le=1.0)

    @field_validator("tags")
    @classmethod
    def tags_without_hash(cls, v: List[str]) -> List[str]:
        return _clean_tags(v)

    @property
    def is_placeholder(self) -> bool:
        return not self.content.strip()


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Union[EntryType, ItemType]
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasoning: str = ""
    tags: List[str] = Field(default_factory=list)
    priority: Priority = "low"


class DateMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime
    confidence: float = Field(..., ge=0.0, le=1.0)
    type: Literal["exact", "relative"]
    matched_text: str


class LocationMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str
    confidence: float = 0.8
    type: Literal["exact"] = "exact"


class ParsedInput(BaseModel):
    entries: List[Entry] = Field(default_factory=list)
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    suggestions: List[str] = Field(default_factory=list)
