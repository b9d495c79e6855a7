"""
Pydantic models for validating the structure of responses from the Modrinth API.

These models serve as a strict contract for the expected JSON data, ensuring
that any deviation from this structure is caught at the infrastructure layer
before being handed to the caller. All models are frozen: a response is an
immutable snapshot owned by the caller once a request returns.

Fields the API may omit or return as null (older projects, fields only
visible to the owner, fields that require authentication) are Optional.
Unknown fields are ignored so new API additions do not break parsing.
"""

import enum
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Response(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


# --- Enumerations ---

class SideSupport(str, enum.Enum):
    """Whether a project is needed on the client or server side."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


class VersionType(str, enum.Enum):
    RELEASE = "release"
    BETA = "beta"
    ALPHA = "alpha"


class DependencyType(str, enum.Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    INCOMPATIBLE = "incompatible"
    EMBEDDED = "embedded"


# --- Versions ---

class Hashes(_Response):
    sha1: str
    sha512: Optional[str] = None


class VersionFile(_Response):
    """A single downloadable file of a version."""

    hashes: Hashes
    url: str
    filename: str
    primary: bool = False
    size: int = 0
    file_type: Optional[str] = None


class Dependency(_Response):
    """
    A dependency of a version on another project or version.

    Other projects are referenced by id only; at least one of `version_id`,
    `project_id` or `file_name` is set.
    """

    version_id: Optional[str] = None
    project_id: Optional[str] = None
    file_name: Optional[str] = None
    dependency_type: DependencyType


class Version(_Response):
    """A published version of a project."""

    id: str
    project_id: str
    author_id: Optional[str] = None
    name: str
    version_number: str
    changelog: Optional[str] = None
    changelog_url: Optional[str] = None
    dependencies: List[Dependency] = Field(default_factory=list)
    game_versions: List[str] = Field(default_factory=list)
    version_type: VersionType = VersionType.RELEASE
    loaders: List[str] = Field(default_factory=list)
    featured: bool = False
    status: Optional[str] = None
    requested_status: Optional[str] = None
    date_published: Optional[datetime] = None
    downloads: int = 0
    files: List[VersionFile] = Field(default_factory=list)

    @property
    def primary_file(self) -> Optional[VersionFile]:
        """The file marked primary, falling back to the first file."""
        for file in self.files:
            if file.primary:
                return file
        return self.files[0] if self.files else None


# --- Projects ---

class License(_Response):
    id: str
    name: str
    url: Optional[str] = None


class DonationLink(_Response):
    id: str
    platform: str
    url: str


class GalleryItem(_Response):
    """An image attached to a project's gallery."""

    url: str
    raw_url: Optional[str] = None
    featured: bool = False
    title: Optional[str] = None
    description: Optional[str] = None
    created: Optional[datetime] = None
    ordering: int = 0


class Project(_Response):
    """A project (mod, modpack, resource pack, ...) listed on Modrinth."""

    id: str
    slug: str
    title: str
    description: str = ""
    body: Optional[str] = None
    body_url: Optional[str] = None
    project_type: str = "mod"
    categories: List[str] = Field(default_factory=list)
    additional_categories: List[str] = Field(default_factory=list)
    client_side: SideSupport = SideSupport.UNKNOWN
    server_side: SideSupport = SideSupport.UNKNOWN
    status: Optional[str] = None
    requested_status: Optional[str] = None
    monetization_status: Optional[str] = None
    moderator_message: Optional[Any] = None
    issues_url: Optional[str] = None
    source_url: Optional[str] = None
    wiki_url: Optional[str] = None
    discord_url: Optional[str] = None
    donation_urls: Optional[List[DonationLink]] = None
    team: Optional[str] = None
    thread_id: Optional[str] = None
    downloads: int = 0
    followers: int = 0
    icon_url: Optional[str] = None
    color: Optional[int] = None
    published: Optional[datetime] = None
    updated: Optional[datetime] = None
    approved: Optional[datetime] = None
    queued: Optional[datetime] = None
    license: Optional[License] = None
    versions: List[str] = Field(default_factory=list)
    game_versions: List[str] = Field(default_factory=list)
    loaders: List[str] = Field(default_factory=list)
    gallery: List[GalleryItem] = Field(default_factory=list)


class ProjectDependencies(_Response):
    """All projects and versions the versions of a project depend on."""

    projects: List[Project] = Field(default_factory=list)
    versions: List[Version] = Field(default_factory=list)


class ProjectIdResponse(_Response):
    """The minimal body returned when checking that a project exists."""

    id: str


class SearchHit(_Response):
    """A condensed project as returned by the search endpoint."""

    project_id: str
    slug: Optional[str] = None
    title: str
    description: str = ""
    author: Optional[str] = None
    project_type: str = "mod"
    categories: List[str] = Field(default_factory=list)
    display_categories: List[str] = Field(default_factory=list)
    versions: List[str] = Field(default_factory=list)
    downloads: int = 0
    follows: int = 0
    icon_url: Optional[str] = None
    color: Optional[int] = None
    client_side: SideSupport = SideSupport.UNKNOWN
    server_side: SideSupport = SideSupport.UNKNOWN
    latest_version: Optional[str] = None
    license: Optional[str] = None
    gallery: List[str] = Field(default_factory=list)
    featured_gallery: Optional[str] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None


class SearchResponse(_Response):
    hits: List[SearchHit] = Field(default_factory=list)
    offset: int = 0
    limit: int = 10
    total_hits: int = 0


# --- Users ---

class User(_Response):
    id: str
    username: str
    name: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created: Optional[datetime] = None
    role: str = "developer"
    badges: int = 0
    auth_providers: Optional[List[str]] = None
    email_verified: Optional[bool] = None
    has_password: Optional[bool] = None
    has_totp: Optional[bool] = None
    payout_data: Optional[Any] = None
    github_id: Optional[int] = None


class TeamMember(_Response):
    team_id: str
    user: User
    role: str
    permissions: Optional[int] = None
    accepted: bool = True
    payouts_split: Optional[float] = None
    ordering: Optional[int] = None


class NotificationAction(_Response):
    title: str
    # A (method, route) pair, e.g. ["POST", "team/{id}/join"]
    action_route: List[str] = Field(default_factory=list)


class Notification(_Response):
    id: str
    user_id: str
    type: Optional[str] = None
    title: str
    text: str = ""
    link: str = ""
    read: bool = False
    created: Optional[datetime] = None
    actions: List[NotificationAction] = Field(default_factory=list)


# --- Tags ---

class Category(_Response):
    name: str
    project_type: str
    header: str = ""
    icon: str = ""


class Loader(_Response):
    name: str
    supported_project_types: List[str] = Field(default_factory=list)
    icon: str = ""


class GameVersion(_Response):
    version: str
    version_type: str
    date: Optional[datetime] = None
    major: bool = False


class LicenseTag(_Response):
    short: str
    name: str


class DonationPlatform(_Response):
    short: str
    name: str
