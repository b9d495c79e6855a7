"""API calls for the tag endpoints, which list the values the API accepts."""

from typing import List

from ..api_models import Category, DonationPlatform, GameVersion, LicenseTag, Loader
from ..urls import join_all


class TagCalls:
    """Tag endpoints, mixed into the client alongside BaseClient."""

    async def list_categories(self) -> List[Category]:
        return await self.get(
            join_all(self.base_url, ["tag", "category"]), List[Category]
        )

    async def list_loaders(self) -> List[Loader]:
        return await self.get(
            join_all(self.base_url, ["tag", "loader"]), List[Loader]
        )

    async def list_game_versions(self) -> List[GameVersion]:
        return await self.get(
            join_all(self.base_url, ["tag", "game_version"]), List[GameVersion]
        )

    async def list_licenses(self) -> List[LicenseTag]:
        """List the SPDX licenses a project can be published under."""
        return await self.get(
            join_all(self.base_url, ["tag", "license"]), List[LicenseTag]
        )

    async def list_donation_platforms(self) -> List[DonationPlatform]:
        return await self.get(
            join_all(self.base_url, ["tag", "donation_platform"]),
            List[DonationPlatform],
        )

    async def list_report_types(self) -> List[str]:
        return await self.get(
            join_all(self.base_url, ["tag", "report_type"]), List[str]
        )

    async def list_project_types(self) -> List[str]:
        return await self.get(
            join_all(self.base_url, ["tag", "project_type"]), List[str]
        )
