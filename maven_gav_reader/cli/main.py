from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from maven_gav_reader.errors import GavReaderError
from maven_gav_reader.formatting import emit
from maven_gav_reader.pom import read_module_descriptor, read_reactor
from maven_gav_reader.settings import get_settings
from maven_gav_reader.types import ModuleDescriptor

from .inputs import descriptor_from_args, uses_explicit_coordinates


DESCRIPTION = """
Print the GAV of a Maven module, the GAV of its parent, and the absolute
path of its pom.xml as one JSON line on standard output.
"""

EXAMPLES = """Examples:
  # Read the pom.xml in the current directory
  gav-reader --pom .

  # Every module of a multi-module build, one line each
  gav-reader --pom ./pom.xml --recursive

  # Coordinates already known to the caller
  gav-reader --group-id com.acme --artifact-id widget --version 1.0.0 \\
      --pom-path /repo/widget/pom.xml
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gav-reader",
        description=DESCRIPTION,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--pom", type=str, help="pom.xml file or directory containing one"
    )
    parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        help="Also read every module listed under <modules>",
    )

    explicit = parser.add_argument_group("explicit coordinates")
    explicit.add_argument("--group-id", type=str, help="Module groupId")
    explicit.add_argument("--artifact-id", type=str, help="Module artifactId")
    explicit.add_argument("--version", type=str, help="Module version")
    explicit.add_argument("--parent-group-id", type=str, help="Parent groupId")
    explicit.add_argument(
        "--parent-artifact-id", type=str, help="Parent artifactId"
    )
    explicit.add_argument("--parent-version", type=str, help="Parent version")
    explicit.add_argument(
        "--pom-path", type=str, help="Path reported as pomPath"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print diagnostics to standard error",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only report errors on standard error",
    )
    return parser


def configure_logging(args: argparse.Namespace, default_level: str) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, default_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def gather_descriptors(args: argparse.Namespace) -> list[ModuleDescriptor]:
    settings = get_settings()
    if args.pom is not None:
        if args.recursive:
            return read_reactor(args.pom, settings=settings)
        return [read_module_descriptor(args.pom, settings=settings)]
    return [descriptor_from_args(args)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.pom is not None and uses_explicit_coordinates(args):
        parser.error("--pom cannot be combined with explicit coordinates")
    if args.recursive and args.pom is None:
        parser.error("--recursive requires --pom")
    if args.pom is None and not uses_explicit_coordinates(args):
        parser.error("either --pom or explicit coordinates are required")

    configure_logging(args, get_settings().log_level)
    try:
        descriptors = gather_descriptors(args)
        emit(descriptors, sys.stdout)
    except GavReaderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
