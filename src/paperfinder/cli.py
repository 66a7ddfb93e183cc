"""Command-line interface for paperfinder."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Optional, Sequence

from paperfinder.config import Settings
from paperfinder.errors import ConfigError, InvalidQueryError, MissingCredentialError
from paperfinder.finder import PaperFinder
from paperfinder.models import RemoteFile
from paperfinder.util.time import format_timestamp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="paperfinder",
        description="Find exam papers and listening audio in the Drive archive.",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("search", help="Search papers for one structured selection.")
    sp.add_argument("--year", required=True, help="Session year, e.g. 2023.")
    sp.add_argument("--month", required=True, help="May or November.")
    sp.add_argument("--group", required=True, help='Group folder name, e.g. "Group 4 - Sciences".')
    sp.add_argument("--subject", required=True, help='Subject, e.g. "Biology" or "French B".')
    sp.add_argument("--level", help="HL or SL (not used for the audio group).")
    sp.add_argument("--paper", help='1, 2, 3 or "Paper 2" (not used for audio or Music).')

    op = sub.add_parser("options", help="List groups of a session, or subjects of a group.")
    op.add_argument("--year", required=True)
    op.add_argument("--month", required=True)
    op.add_argument("--group", help="When given, list subjects instead of groups.")

    yp = sub.add_parser("years", help="List year folders (newest first).")
    yp.add_argument("--months", action="store_true", help="Also list the months of each year.")

    fp = sub.add_parser("fetch", help="Download one file by id.")
    fp.add_argument("file_id")
    fp.add_argument("--output", required=True, help="Destination path.")

    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        _configure_logging(settings.log_level)
        with _build_finder(settings) as finder:
            return _run(finder, args)
    except (ConfigError, MissingCredentialError, InvalidQueryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.details:
            print(json.dumps(exc.details, default=str), file=sys.stderr)
        return 2


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_finder(settings: Settings) -> PaperFinder:
    return PaperFinder(settings)


def _run(finder: PaperFinder, args: argparse.Namespace) -> int:
    if args.cmd == "search":
        files = finder.search_papers(
            args.year, args.month, args.group, args.subject, args.level, args.paper
        )
        _print_json([_file_to_dict(f) for f in files])
        return 0

    if args.cmd == "options":
        _print_json(finder.available_options(args.year, args.month, args.group))
        return 0

    if args.cmd == "years":
        years = finder.available_years()
        if args.months:
            _print_json({str(y): finder.available_months(y) for y in years})
        else:
            _print_json(years)
        return 0

    if args.cmd == "fetch":
        content = finder.get_content(args.file_id)
        if content is None:
            print(f"Error: could not fetch {args.file_id}", file=sys.stderr)
            return 1

        parent_dir = os.path.dirname(args.output)
        if parent_dir:
            os.makedirs(parent_dir, exist_ok=True)
        with open(args.output, "wb") as f:
            f.write(content.data)
        logger.info("Wrote %d bytes (%s) to %s", len(content.data), content.content_type, args.output)
        return 0

    return 2


def _file_to_dict(f: RemoteFile) -> dict[str, Any]:
    return {
        "id": f.file_id,
        "name": f.name,
        "type": f.kind.value,
        "size": f.size,
        "createdTime": format_timestamp(f.created_time),
        "modifiedTime": format_timestamp(f.modified_time),
        "webViewLink": f.view_link,
    }


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    sys.exit(main())
