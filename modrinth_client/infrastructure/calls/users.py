"""API calls for the user and team endpoints."""

from typing import List, Sequence

from ...application.validation import check_id_slug, check_id_slugs

from ..api_models import Notification, Project, TeamMember, User
from ..urls import join_all, json_param, with_query


class UserCalls:
    """User endpoints, mixed into the client alongside BaseClient."""

    async def get_user(self, user_id: str) -> User:
        """Get the user of `user_id`, which may be an id or a username."""
        check_id_slug(user_id)
        return await self.get(join_all(self.base_url, ["user", user_id]), User)

    async def get_current_user(self) -> User:
        """
        Get the user the configured token belongs to.

        REQUIRES AUTHENTICATION.
        """
        return await self.get(join_all(self.base_url, ["user"]), User)

    async def get_multiple_users(self, user_ids: Sequence[str]) -> List[User]:
        ids = check_id_slugs(user_ids)
        url = with_query(
            join_all(self.base_url, ["users"]),
            [("ids", json_param(ids))],
        )
        return await self.get(url, List[User])

    async def list_user_projects(self, user_id: str) -> List[Project]:
        """List the projects `user_id` is a member of."""
        check_id_slug(user_id)
        return await self.get(
            join_all(self.base_url, ["user", user_id, "projects"]),
            List[Project],
        )

    async def list_followed_projects(self, user_id: str) -> List[Project]:
        """
        List the projects `user_id` follows.

        REQUIRES AUTHENTICATION.
        """
        check_id_slug(user_id)
        return await self.get(
            join_all(self.base_url, ["user", user_id, "follows"]),
            List[Project],
        )

    async def list_notifications(self, user_id: str) -> List[Notification]:
        """
        List the notifications of `user_id`.

        REQUIRES AUTHENTICATION.
        """
        check_id_slug(user_id)
        return await self.get(
            join_all(self.base_url, ["user", user_id, "notifications"]),
            List[Notification],
        )

    async def list_team_members(self, project_id: str) -> List[TeamMember]:
        """List the members of the team owning `project_id`."""
        check_id_slug(project_id)
        return await self.get(
            join_all(self.base_url, ["project", project_id, "members"]),
            List[TeamMember],
        )
