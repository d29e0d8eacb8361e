"""Command-line tool that turns a term/definition text file into a linked HTML glossary."""
from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Sequence

from .manifest import to_records, write_manifest
from .pages import build_site, write_site
from .records import InputFormatError, read_glossary
from .tokens import DEFAULT_SEPARATORS

LOGGER = logging.getLogger(__name__)
ENV_SEPARATORS = os.environ.get("GLOSSARY_SEPARATORS")
DEFAULT_ENCODING = os.environ.get("GLOSSARY_ENCODING", "utf-8")
SUCCESS_MESSAGE = "HTML file successfully generated!"


@dataclass
class SiteConfig:
    input_path: Path
    output_dir: Path
    separators: FrozenSet[str] = field(default_factory=lambda: DEFAULT_SEPARATORS)
    link_separators: bool = True
    encoding: str = "utf-8"
    manifest_path: Optional[Path] = None


def run_pipeline(config: SiteConfig) -> List[Path]:
    glossary = read_glossary(config.input_path, encoding=config.encoding)
    documents = build_site(
        glossary, config.separators, link_separators=config.link_separators
    )
    written = write_site(documents, config.output_dir, encoding=config.encoding)
    if config.manifest_path is not None:
        records = to_records(
            glossary, config.separators, link_separators=config.link_separators
        )
        written.append(write_manifest(records, config.manifest_path))
    return written


def prompt_path(message: str) -> Path:
    answer = input(message).strip()
    if not answer:
        raise SystemExit("No path given.")
    return Path(answer)


def parse_args(argv: Optional[Sequence[str]] = None) -> SiteConfig:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Glossary text file (asked for interactively when omitted)",
    )
    parser.add_argument(
        "output_dir",
        type=Path,
        nargs="?",
        default=None,
        help="Folder for index.html and the term pages (asked for when omitted)",
    )
    parser.add_argument(
        "--separators",
        type=str,
        default=ENV_SEPARATORS,
        help="Characters that delimit words in definitions (default: space . , ; :)",
    )
    parser.add_argument(
        "--no-separator-links",
        action="store_true",
        help="Never link separator runs, even when one equals a term",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=DEFAULT_ENCODING,
        help="Encoding of the input file and the written pages",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="Also write a CSV listing every term, its page and the terms it links to",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level), format="%(levelname)s %(message)s"
    )
    if args.input is None:
        args.input = prompt_path("Please enter the name of an input file: ")
    if args.output_dir is None:
        args.output_dir = prompt_path(
            "Please enter the name of an output folder where all output files will be saved: "
        )
    separators = (
        frozenset(args.separators) if args.separators is not None else DEFAULT_SEPARATORS
    )
    return SiteConfig(
        input_path=args.input,
        output_dir=args.output_dir,
        separators=separators,
        link_separators=not args.no_separator_links,
        encoding=args.encoding,
        manifest_path=args.manifest,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = parse_args(argv)
    try:
        run_pipeline(config)
    except InputFormatError as exc:
        raise SystemExit(f"Malformed glossary: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Could not generate glossary: {exc}") from exc
    print(SUCCESS_MESSAGE)


if __name__ == "__main__":
    main()
