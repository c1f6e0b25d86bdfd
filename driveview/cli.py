"""Command-line front door for driveview.

Parses CLI options, resolves the store path, and fetches it.
Then dispatches the result to a preview outcome and prints it.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .fetch import StoreClient
from .listing import process_listing
from .path import ROOT_PATH, parent_path, resolve_path
from .permalink import api_url, copy_entry_link
from .preview import RenderContext, dispatch, render_outcome
from .store_model import FetchError, File, Folder

logger = logging.getLogger(__name__)


def _positive_float(value: str) -> float:
    """argparse type for positive number values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List a remote file store folder or preview one of its files."
    )
    parser.add_argument("segments", nargs="*", help="Path segments inside the store. Defaults to the root.")
    parser.add_argument("--origin", default=None, help="Store origin, e.g. https://drive.example.com.")
    parser.add_argument("--save-origin", action="store_true", help="Remember --origin in the config file.")
    parser.add_argument("--style", default=None, help="Pygments style name for text previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--timeout", type=_positive_float, default=None, help="Request timeout in seconds.")
    parser.add_argument("--copy", metavar="NAME", help="Print the permalink for child NAME and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr.")
    return parser


def _print_copy_link(client: StoreClient, path: str, name: str) -> int:
    state = client.fetch_resource(path)
    if isinstance(state, FetchError):
        raise SystemExit(state.message)
    if not isinstance(state, Folder):
        raise SystemExit(f"Not a folder: {path}")
    row = process_listing(state.children).row_for(name)
    if row is None:
        raise SystemExit(f"No entry named {name!r} in {path}")
    link = copy_entry_link(client.origin, path, row.entry)
    sys.stdout.write(link.url + "\n")
    sys.stderr.write(link.message + "\n")
    return 0


def run(args: argparse.Namespace) -> int:
    """Fetch, dispatch, and print one store path; return the exit status."""
    origin = args.origin or config.load_origin()
    if not origin:
        raise SystemExit("No store origin configured; pass --origin URL.")
    if args.save_origin and args.origin:
        config.save_origin(args.origin)

    path = resolve_path(args.segments)
    timeout = args.timeout if args.timeout is not None else config.load_timeout()
    no_color = args.no_color or not sys.stdout.isatty()

    with StoreClient(origin, timeout=timeout) as client:
        if args.copy is not None:
            return _print_copy_link(client, path, args.copy)

        state = client.fetch_resource(path)
        outcome = dispatch(state, path)
        context = RenderContext(
            fetch_text=client.fetch_text,
            style=args.style or config.load_style(),
            no_color=no_color,
        )
        sys.stdout.write(render_outcome(outcome, context) + "\n")
        if isinstance(state, Folder) and path != ROOT_PATH:
            sys.stdout.write(f"\nUp: {parent_path(path)}\n")
        if isinstance(state, File):
            sys.stdout.write(f"\nRaw: {api_url(client.origin, path, raw=True)}\n")
        if isinstance(state, FetchError):
            logger.debug("Fetch error kind: %s", state.kind.value)
            return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the listing or preview for a store path."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    status = run(args)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
