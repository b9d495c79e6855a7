"""
Entry point for the Modrinth command line client.
"""

import argparse
import asyncio
import json
import logging
import sys

from pydantic import BaseModel

from .application.domain import HashAlgorithm
from .application.exceptions import ModrinthError
from .infrastructure.api_client import ModrinthClient
from .infrastructure.containers import Container

logger = logging.getLogger(__name__)

_TAG_KINDS = {
    "category": "list_categories",
    "loader": "list_loaders",
    "game_version": "list_game_versions",
    "license": "list_licenses",
    "donation_platform": "list_donation_platforms",
    "report_type": "list_report_types",
    "project_type": "list_project_types",
}


def setup_logging(level: str):
    """Applies basic logging configuration."""
    logging.basicConfig(level=level, stream=sys.stderr)


def to_jsonable(result):
    """Converts API results (models, lists, dicts of models) to plain data."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, dict):
        return {key: to_jsonable(value) for key, value in result.items()}
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


async def dispatch(modrinth: ModrinthClient, args: argparse.Namespace):
    """Runs the API call selected on the command line."""

    if args.command == "project":
        return await modrinth.get_project(args.project_id)
    if args.command == "projects":
        return await modrinth.get_multiple_projects(args.project_ids)
    if args.command == "random":
        return await modrinth.get_random_projects(args.count)
    if args.command == "check":
        return {"id": await modrinth.does_exist(args.project_id)}
    if args.command == "dependencies":
        return await modrinth.get_project_dependencies(args.project_id)
    if args.command == "search":
        return await modrinth.search(
            query=args.query, index=args.index, limit=args.limit
        )
    if args.command == "versions":
        return await modrinth.list_versions(
            args.project_id,
            loaders=args.loaders,
            game_versions=args.game_versions,
        )
    if args.command == "version":
        return await modrinth.get_version(args.version_id)
    if args.command == "version-from-hash":
        return await modrinth.get_version_from_hash(
            args.file_hash, algorithm=HashAlgorithm(args.algorithm)
        )
    if args.command == "user":
        return await modrinth.get_user(args.user_id)
    if args.command == "tags":
        return await getattr(modrinth, _TAG_KINDS[args.kind])()
    raise ValueError(f"Unknown command: {args.command}")


async def run_application(args: argparse.Namespace) -> int:
    """Wires and runs the client using the DI container."""

    container = Container()
    setup_logging(level=container.config().logging.level)

    try:
        modrinth = container.modrinth()
    except ModrinthError as e:
        logger.error(f"Invalid client configuration: {e}")
        return 1

    try:
        result = await dispatch(modrinth, args)
    except ModrinthError as e:
        logger.error(f"An API error occurred: {e}")
        return 1
    finally:
        await modrinth.client.aclose()

    json.dump(to_jsonable(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Builds the command line parser with one sub-command per API call."""
    parser = argparse.ArgumentParser(
        prog="modrinth_client", description="Modrinth API Client"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    project = commands.add_parser("project", help="Get a project by id or slug.")
    project.add_argument("project_id")

    projects = commands.add_parser("projects", help="Get several projects.")
    projects.add_argument("project_ids", nargs="+")

    random_projects = commands.add_parser("random", help="Get random projects.")
    random_projects.add_argument("--count", type=int, default=5)

    check = commands.add_parser(
        "check", help="Resolve a slug or id to the canonical project id."
    )
    check.add_argument("project_id")

    dependencies = commands.add_parser(
        "dependencies", help="Get the dependencies of a project."
    )
    dependencies.add_argument("project_id")

    search = commands.add_parser("search", help="Search projects.")
    search.add_argument("query")
    search.add_argument(
        "--index",
        choices=["relevance", "downloads", "follows", "newest", "updated"],
    )
    search.add_argument("--limit", type=int)

    versions = commands.add_parser("versions", help="List a project's versions.")
    versions.add_argument("project_id")
    versions.add_argument("--loaders", nargs="+", help="e.g. fabric quilt")
    versions.add_argument("--game-versions", nargs="+", help="e.g. 1.20.1")

    version = commands.add_parser("version", help="Get a version by id.")
    version.add_argument("version_id")

    from_hash = commands.add_parser(
        "version-from-hash", help="Get the version owning a file's hash."
    )
    from_hash.add_argument("file_hash")
    from_hash.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in HashAlgorithm],
        default=HashAlgorithm.SHA1.value,
    )

    user = commands.add_parser("user", help="Get a user by id or username.")
    user.add_argument("user_id")

    tags = commands.add_parser("tags", help="List the values of a tag.")
    tags.add_argument("kind", choices=sorted(_TAG_KINDS))

    return parser


if __name__ == "__main__":
    cli_args = build_parser().parse_args()
    sys.exit(asyncio.run(run_application(cli_args)))
