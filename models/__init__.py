from .social_links import SocialLinks
from .team_member import TeamMember
from .query_state import QueryState
from .view_result import ViewResult

__all__ = [
    "SocialLinks",
    "TeamMember",
    "QueryState",
    "ViewResult",
]
