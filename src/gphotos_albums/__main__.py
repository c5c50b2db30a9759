"""Command line front end: python -m gphotos_albums {list,find,create}."""

from __future__ import annotations

import argparse
import logging
import sys

import requests

from .client import GalleryClient
from .core.config import ClientConfig, configure_logging
from .core.paths import app_version
from .photos.errors import AlbumNotFoundError, AuthenticationError, ConfigError, GalleryError
from .photos.models import Album


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gphotos-albums", description="Find or create Google Photos albums.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {app_version()}")
    parser.add_argument("--debug", action="store_true", help="log API requests and responses")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="list every album")
    find = commands.add_parser("find", help="look up an album by title")
    find.add_argument("title")
    create = commands.add_parser("create", help="create an album unless one with the title exists")
    create.add_argument("title")
    return parser


def _format_album(album: Album) -> str:
    return f"{album.id or ''}\t{album.title}"


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    log = logging.getLogger("gphotos_albums")

    try:
        config = ClientConfig.from_env()
        if args.debug:
            config.debug = True
            config.log_level = "DEBUG"
        configure_logging(config.log_level)
        client = GalleryClient.from_config(config)
    except (ConfigError, AuthenticationError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    with client:
        try:
            if args.command == "list":
                for album in client.iter_albums():
                    print(_format_album(album))
            elif args.command == "find":
                print(_format_album(client.find_album(args.title)))
            else:
                print(_format_album(client.create_album(args.title)))
        except AlbumNotFoundError:
            print("album not found", file=sys.stderr)
            return 1
        except AuthenticationError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        except (GalleryError, requests.RequestException) as e:
            log.debug("Command failed", exc_info=True)
            print(f"error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
