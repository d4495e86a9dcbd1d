from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SocialLinks(BaseModel):
    """Per-channel profile URLs. Every channel is optional."""

    professional_network: Optional[str] = Field(default=None, alias="professional-network")
    microblog: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def get(self, channel: str) -> Optional[str]:
        field_name = channel.replace("-", "_")
        if field_name not in type(self).model_fields:
            return None
        return getattr(self, field_name)
