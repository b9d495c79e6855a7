"""API calls for the version and version file endpoints."""

from typing import Dict, List, Optional, Sequence

from ...application.domain import HashAlgorithm
from ...application.validation import (
    check_file_hash,
    check_file_hashes,
    check_id_slug,
    check_id_slugs,
    string_list,
)

from ..api_models import Version
from ..urls import bool_param, join_all, json_param, with_query


class VersionCalls:
    """Version endpoints, mixed into the client alongside BaseClient."""

    async def list_versions(
        self,
        project_id: str,
        loaders: Optional[Sequence[str]] = None,
        game_versions: Optional[Sequence[str]] = None,
        featured: Optional[bool] = None,
    ) -> List[Version]:
        """
        List the versions of the project of `project_id`.

        Args:
            project_id: The id or slug of the project.
            loaders: Only include versions for these loaders, e.g. ['fabric'].
            game_versions: Only include versions for these game versions.
            featured: Only include featured (or non-featured) versions.
        """
        check_id_slug(project_id)
        params = []
        if loaders is not None:
            params.append(
                ("loaders", json_param(string_list(loaders, "loaders")))
            )
        if game_versions is not None:
            params.append(
                (
                    "game_versions",
                    json_param(string_list(game_versions, "game_versions")),
                )
            )
        if featured is not None:
            params.append(("featured", bool_param(featured)))
        url = with_query(
            join_all(self.base_url, ["project", project_id, "version"]),
            params,
        )
        return await self.get(url, List[Version])

    async def get_version(self, version_id: str) -> Version:
        """Get the version of `version_id`."""
        check_id_slug(version_id)
        return await self.get(
            join_all(self.base_url, ["version", version_id]), Version
        )

    async def get_multiple_versions(
        self, version_ids: Sequence[str]
    ) -> List[Version]:
        """Get multiple versions with ids `version_ids`."""
        ids = check_id_slugs(version_ids)
        url = with_query(
            join_all(self.base_url, ["versions"]),
            [("ids", json_param(ids))],
        )
        return await self.get(url, List[Version])

    async def get_version_from_hash(
        self,
        file_hash: str,
        algorithm: HashAlgorithm = HashAlgorithm.SHA1,
    ) -> Version:
        """Get the version containing the file with hash `file_hash`."""
        algorithm = HashAlgorithm(algorithm)
        check_file_hash(algorithm, file_hash)
        url = with_query(
            join_all(self.base_url, ["version_file", file_hash]),
            [("algorithm", algorithm.value)],
        )
        return await self.get(url, Version)

    async def get_versions_from_hashes(
        self,
        file_hashes: Sequence[str],
        algorithm: HashAlgorithm = HashAlgorithm.SHA1,
    ) -> Dict[str, Version]:
        """
        Get the versions containing the files with hashes `file_hashes`.

        Returns:
            A mapping of file hash to version. Hashes the API does not know
            are absent from the mapping.
        """
        algorithm = HashAlgorithm(algorithm)
        hashes = check_file_hashes(algorithm, file_hashes)
        return await self.post_json(
            join_all(self.base_url, ["version_files"]),
            {"hashes": hashes, "algorithm": algorithm.value},
            Dict[str, Version],
        )

    async def latest_version_from_hash(
        self,
        file_hash: str,
        loaders: Sequence[str],
        game_versions: Sequence[str],
        algorithm: HashAlgorithm = HashAlgorithm.SHA1,
    ) -> Version:
        """
        Get the latest version of the project owning the file with hash
        `file_hash` that is compatible with `loaders` and `game_versions`.
        """
        algorithm = HashAlgorithm(algorithm)
        check_file_hash(algorithm, file_hash)
        url = with_query(
            join_all(self.base_url, ["version_file", file_hash, "update"]),
            [("algorithm", algorithm.value)],
        )
        return await self.post_json(
            url,
            {
                "loaders": string_list(loaders, "loaders"),
                "game_versions": string_list(game_versions, "game_versions"),
            },
            Version,
        )
