from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from config.settings import get_settings

from .social_links import SocialLinks


class TeamMember(BaseModel):
    """One directory entry. Immutable once loaded."""

    id: int
    name: str
    title: str = Field(alias="jobTitle")
    photo_ref: Optional[str] = Field(default=None, alias="photo")
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    links: SocialLinks = Field(default_factory=SocialLinks, alias="socialLinks")
    skills: Tuple[str, ...] = ()

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _strict_int_id(cls, value: Any) -> Any:
        # bool is an int subclass and "7" would coerce silently
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("id must be an integer")
        return value

    @field_validator("name", "title")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must be non-empty text")
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _skills_default(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value

    @model_validator(mode="before")
    @classmethod
    def _map_link_channels(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        raw = data.get("socialLinks", data.get("links"))
        if isinstance(raw, SocialLinks):
            return data
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError("socialLinks must be an object")
        channels = get_settings().link_channels
        known = set(channels.values())
        links: Dict[str, Optional[str]] = {}
        for key, url in raw.items():
            channel = channels.get(key, key if key in known else None)
            if channel:
                links[channel] = url or None
        data = dict(data)
        data.pop("links", None)
        data["socialLinks"] = links
        return data

    def link(self, channel: str) -> Optional[str]:
        return self.links.get(channel)
