#!/usr/bin/env python3
"""
comparetrees CLI — report or delete source files that already exist in a destination tree.
Deletion is permanent and is only performed when the /delete switch is given.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

logging.basicConfig(
    level=logging.WARNING,
    format=LOG_FORMAT
)

logger = logging.getLogger(__name__)

from comparetrees.core.comparator import DiffCommandComparator, FilecmpComparator, default_comparator
from comparetrees.core.errors import InvalidRootError
from comparetrees.core.interfaces import ContentComparator
from comparetrees.core.models import CompareParams, ComparisonResult, Disposition, RunSummary
from comparetrees.commands import CompareTreesCommand
from comparetrees.utils.convert_utils import ConvertUtils
from comparetrees.aliases import (
    DELETE_SWITCH, MATCH_MODE_ALIASES, MATCH_MODE_CHOICES, MATCH_MODE_HELP_TEXT,
    COMPARATOR_CHOICES, COMPARATOR_HELP_TEXT, EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.delete: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8', errors='backslashreplace')
            sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="comparetrees",
            description="Compare two directory trees and optionally delete files in the source "
                        "tree that exist anywhere in the destination tree",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Positional arguments
        parser.add_argument(
            "source",
            help="Source directory: files found elsewhere are reported or deleted"
        )
        parser.add_argument(
            "dest",
            help="Destination directory: searched for matches, never modified"
        )
        parser.add_argument(
            "delete_switch",
            nargs="?",
            default=None,
            metavar=DELETE_SWITCH,
            help="Delete matched source files and directories left empty"
        )

        # Matching options
        parser.add_argument(
            "--match-by",
            choices=MATCH_MODE_CHOICES,
            default="size",
            type=str,
            help=MATCH_MODE_HELP_TEXT
        )
        parser.add_argument(
            "--comparator",
            choices=COMPARATOR_CHOICES,
            default="auto",
            type=str,
            help=COMPARATOR_HELP_TEXT
        )
        parser.add_argument(
            "--no-filter",
            action="store_true",
            help="Do not exclude the source directory from the destination index\n"
                 "(only meaningful when source lies inside dest)"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only print the final summary"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and informational log messages"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.delete_switch is not None and args.delete_switch.lower() != DELETE_SWITCH:
            self.error_exit(f"final parameter must be blank or {DELETE_SWITCH}.")
        if not os.path.isdir(args.source):
            self.error_exit(f"source directory {args.source} does not exist.")
        if not os.path.isdir(args.dest):
            self.error_exit(f"destination directory {args.dest} does not exist.")

    def create_params(self, args: argparse.Namespace) -> CompareParams:
        """Create CompareParams from CLI arguments."""
        try:
            return CompareParams.from_cli_args(
                args.source,
                args.dest,
                delete_switch=args.delete_switch,
                match_mode=MATCH_MODE_ALIASES[args.match_by],
                filter_source=not args.no_filter,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    @staticmethod
    def create_comparator(name: str) -> ContentComparator:
        if name == "diff":
            return DiffCommandComparator()
        if name == "filecmp":
            return FilecmpComparator()
        return default_comparator()

    @staticmethod
    def configure_logging(verbose: bool, quiet: bool) -> None:
        level = logging.WARNING
        if verbose:
            level = logging.INFO
        elif quiet:
            level = logging.ERROR
        logging.getLogger().setLevel(level)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total is not None:
            sys.stderr.write(f"\r  [{stage}] {current} files done\n")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    @staticmethod
    def format_result(result: ComparisonResult) -> List[str]:
        """Console lines for one result."""
        if result.disposition is Disposition.DELETED:
            lines = [f"Deleted {result.source_path}  =  {result.matched_path}"]
            if result.removed_dir:
                lines.append(f"Deleted empty directory {result.removed_dir}")
            return lines
        if result.disposition is Disposition.WOULD_DELETE:
            return [
                f"Would be deleted {result.source_path} ({result.size}) =  "
                f"{result.matched_path} ({result.matched_size})"
            ]
        if result.disposition is Disposition.NO_MATCH:
            return [f"No match: {result.source_path}"]
        return [f"Error processing file {result.source_path}: {result.error}"]

    def output_result(self, result: ComparisonResult) -> None:
        if self.quiet:
            return
        try:
            for line in self.format_result(result):
                print(line)
        except (UnicodeError, OSError) as e:
            logger.warning(f"Could not display result for {result.source_path!r}: {e}")

    def format_summary(self, summary: RunSummary) -> str:
        verb = "deleted" if self.delete else "would be deleted"
        return (
            f"{summary.matched_count} of {summary.total_files} files {verb}. "
            f"Total size: {ConvertUtils.bytes_to_human(summary.total_bytes_matched)}."
        )

    def run_comparison(self, params: CompareParams, comparator: ContentComparator) -> RunSummary:
        """Execute the comparison workflow."""
        command = CompareTreesCommand(comparator=comparator)
        if not self.quiet:
            print(f"Comparing {params.source_dir} with {params.dest_dir}. Delete files: {params.delete}.")

        try:
            return command.execute(
                params,
                on_result=self.output_result,
                progress_callback=self.progress_callback if self.verbose else None,
            )
        except InvalidRootError as e:
            self.error_exit(str(e))

    @staticmethod
    def warning(message: str) -> None:
        """Print a warning message to stderr."""
        print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> RunSummary:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging(self.verbose, self.quiet)

        self.validate_args(args)
        params = self.create_params(args)
        self.delete = params.delete

        if params.delete and not self.quiet:
            self.warning("Matched files will be permanently deleted.")

        summary = self.run_comparison(params, self.create_comparator(args.comparator))
        print(self.format_summary(summary))

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")
        return summary


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
