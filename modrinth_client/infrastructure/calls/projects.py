"""API calls for the project endpoints."""

from typing import List, Optional, Sequence

from ...application.domain import FileExt
from ...application.validation import (
    check_id_slug,
    check_id_slugs,
    string_list,
)

from ..api_models import (
    Project,
    ProjectDependencies,
    ProjectIdResponse,
    SearchResponse,
)
from ..urls import bool_param, join_all, json_param, with_query


class ProjectCalls:
    """Project endpoints, mixed into the client alongside BaseClient."""

    async def get_project(self, project_id: str) -> Project:
        """
        Get the project of `project_id`, which may be an id or a slug.

        Example:
            sodium = await modrinth.get_project("AANobbMI")
            ok_zoomer = await modrinth.get_project("ok-zoomer")
        """
        check_id_slug(project_id)
        return await self.get(
            join_all(self.base_url, ["project", project_id]), Project
        )

    async def get_multiple_projects(
        self, project_ids: Sequence[str]
    ) -> List[Project]:
        """Get multiple projects with ids `project_ids`."""
        ids = check_id_slugs(project_ids)
        url = with_query(
            join_all(self.base_url, ["projects"]),
            [("ids", json_param(ids))],
        )
        return await self.get(url, List[Project])

    async def get_random_projects(self, count: int) -> List[Project]:
        """Get `count` random projects."""
        url = with_query(
            join_all(self.base_url, ["projects_random"]),
            [("count", str(count))],
        )
        return await self.get(url, List[Project])

    async def does_exist(self, project_id: str) -> str:
        """
        Check whether `project_id` refers to an existing project.

        Returns:
            The canonical id of the project, e.g. 'AANobbMI' for 'sodium'.

        Raises:
            HTTPStatusError: With status 404 if the project does not exist.
        """
        check_id_slug(project_id)
        response = await self.get(
            join_all(self.base_url, ["project", project_id, "check"]),
            ProjectIdResponse,
        )
        return response.id

    async def add_gallery_image(
        self,
        project_id: str,
        image: bytes,
        ext: FileExt,
        featured: bool,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ):
        """
        Add a gallery image to the project of `project_id`.

        The image data may be at most 5 MiB; the limit is enforced by the
        API, not locally.

        REQUIRES AUTHENTICATION.

        Args:
            project_id: The id or slug of the project.
            image: The raw image data.
            ext: The image format, used for the content type.
            featured: Whether the image should be featured.
            title: An optional title for the image.
            description: An optional description for the image.
        """
        check_id_slug(project_id)
        ext = FileExt(ext)
        query = [("ext", ext.value), ("featured", bool_param(featured))]
        if title is not None:
            query.append(("title", title))
        if description is not None:
            query.append(("description", description))
        url = with_query(
            join_all(self.base_url, ["project", project_id, "gallery"]), query
        )
        await self.post(url, image, ext.content_type)

    async def delete_gallery_image(self, project_id: str, image_url: str):
        """
        Remove the gallery image at `image_url` from the project.

        REQUIRES AUTHENTICATION.
        """
        check_id_slug(project_id)
        url = with_query(
            join_all(self.base_url, ["project", project_id, "gallery"]),
            [("url", image_url)],
        )
        await self.delete(url)

    async def get_project_dependencies(
        self, project_id: str
    ) -> ProjectDependencies:
        """Get the projects and versions that `project_id` depends on."""
        check_id_slug(project_id)
        return await self.get(
            join_all(self.base_url, ["project", project_id, "dependencies"]),
            ProjectDependencies,
        )

    async def follow(self, project_id: str):
        """
        Follow the project of `project_id`.

        REQUIRES AUTHENTICATION.
        """
        check_id_slug(project_id)
        await self.post_json(
            join_all(self.base_url, ["project", project_id, "follow"]), ""
        )

    async def unfollow(self, project_id: str):
        """
        Unfollow the project of `project_id`.

        REQUIRES AUTHENTICATION.
        """
        check_id_slug(project_id)
        await self.delete(
            join_all(self.base_url, ["project", project_id, "follow"])
        )

    async def search(
        self,
        query: Optional[str] = None,
        facets: Optional[Sequence[Sequence[str]]] = None,
        index: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> SearchResponse:
        """
        Search projects, returning a single page of results.

        Args:
            query: The text to search for.
            facets: Filters in the API's AND-of-ORs form, e.g.
                    [["categories:fabric"], ["versions:1.20.1"]].
            index: The sort order: relevance, downloads, follows,
                   newest or updated.
            offset: The number of results to skip.
            limit: The number of results to return.
        """
        params = []
        if query is not None:
            params.append(("query", query))
        if facets is not None:
            groups = [
                string_list(group, "facet group")
                for group in string_list(facets, "facets")
            ]
            params.append(("facets", json_param(groups)))
        if index is not None:
            params.append(("index", index))
        if offset is not None:
            params.append(("offset", str(offset)))
        if limit is not None:
            params.append(("limit", str(limit)))
        url = with_query(join_all(self.base_url, ["search"]), params)
        return await self.get(url, SearchResponse)
