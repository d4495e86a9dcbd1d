from __future__ import annotations

from typing import Any, Dict, List, Optional

from config.settings import get_settings
from models.team_member import TeamMember
from models.view_result import ViewResult


def _href(scheme: str, value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return f"{scheme}:{value}"


def map_member_for_display(member: TeamMember, placeholder: Optional[str] = None) -> Dict[str, Any]:
    """Map a record to the flat shape a card renderer consumes."""
    if placeholder is None:
        placeholder = get_settings().placeholder_photo
    channels = get_settings().link_channels.values()
    return {
        'id': member.id,
        'name': member.name,
        'title': member.title,
        'photo': member.photo_ref or placeholder,
        'photo_alt': f"{member.name} profile photo",
        'bio': member.bio or None,
        'email': member.email or None,
        'email_href': _href('mailto', member.email),
        'phone': member.phone or None,
        'phone_href': _href('tel', member.phone),
        # only channels that carry a URL are rendered
        'links': {c: member.link(c) for c in channels if member.link(c)},
        'skills': list(member.skills),
    }


def map_view(result: ViewResult, placeholder: Optional[str] = None) -> Dict[str, Any]:
    """Serializable view: display records plus pagination metadata."""
    members: List[Dict[str, Any]] = [map_member_for_display(m, placeholder) for m in result.visible]
    return {
        'query': result.query,
        'page': result.page,
        'page_size': result.page_size,
        'total_pages': result.total_pages,
        'total_matches': result.total_matches,
        'total_records': result.total_records,
        'has_previous': result.has_previous,
        'has_next': result.has_next,
        'page_numbers': result.page_numbers if result.show_pagination else [],
        'members': members,
    }
