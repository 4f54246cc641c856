#!/usr/bin/env python3
"""
filesorter CLI — prints a directory listing in file-browser order.
Uses the same listing command and sorting engine as any embedding application.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Dict, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from filesorter.config import ManagerSettings
from filesorter.core.models import File, ListingParams, SortBy, SortParams
from filesorter.commands import ListingCommand
from filesorter.utils.convert_utils import ConvertUtils
from filesorter.aliases import SORT_BY_ALIASES, SORT_BY_CHOICES, SORT_BY_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments. Unset sort flags stay None so settings can fill them."""
        parser = argparse.ArgumentParser(
            description="filesorter — directory listings in file-browser order",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Directory to list"
        )

        # Sort options
        parser.add_argument(
            "--sort", "-s",
            choices=SORT_BY_CHOICES,
            default=None,
            type=str,
            metavar='MODE',
            help=SORT_BY_HELP_TEXT
        )
        parser.add_argument(
            "--reverse", "-r",
            action="store_const", const=True, default=None,
            help="Reverse the selected criterion (directories stay first)"
        )
        parser.add_argument(
            "--no-reverse",
            action="store_const", const=False, dest="reverse",
            help="Do not reverse, even if the settings file says so"
        )
        parser.add_argument(
            "--insensitive",
            action="store_const", const=False, default=None, dest="sensitive",
            help="Compare text ignoring case"
        )
        parser.add_argument(
            "--sensitive",
            action="store_const", const=True, dest="sensitive",
            help="Compare text case-sensitively"
        )
        parser.add_argument(
            "--dir-first",
            action="store_const", const=True, default=None, dest="dir_first",
            help="Put directories before files"
        )
        parser.add_argument(
            "--no-dir-first",
            action="store_const", const=False, dest="dir_first",
            help="Mix directories with files"
        )

        # Listing options
        parser.add_argument(
            "--dir-sizes", "-d",
            action="store_true",
            help="Compute recursive directory sizes (used by --sort size and shown in output)"
        )
        parser.add_argument(
            "--show-hidden", "-a",
            action="store_true",
            help="Include hidden entries"
        )
        parser.add_argument(
            "--config", "-c",
            default=None,
            type=str,
            metavar='FILE',
            help="TOML settings file with a [manager] table of sort defaults"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Print entry names only"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        root_path = Path(args.input).expanduser().resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        if args.config:
            config_path = Path(args.config).expanduser()
            if not config_path.is_file():
                self.warning(f"Settings file not found, using defaults: {args.config}")

    def create_params(self, args: argparse.Namespace) -> ListingParams:
        """Resolve settings and CLI overrides into ListingParams."""
        try:
            settings = ManagerSettings.load(args.config)
            sort_by: Optional[SortBy] = SORT_BY_ALIASES.get(args.sort) if args.sort else None
            sort = SortParams.from_settings(
                settings,
                by=sort_by,
                sensitive=args.sensitive,
                reverse=args.reverse,
                dir_first=args.dir_first,
            )
            return ListingParams(
                root_dir=str(Path(args.input).expanduser().resolve()),
                sort=sort,
                show_hidden=args.show_hidden,
                dir_sizes=args.dir_sizes,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} entries processed...")
        sys.stderr.flush()

    @staticmethod
    def stopped_flag() -> bool:
        """Check if operation should stop (placeholder for signal handling)."""
        return False

    def run_listing(self, params: ListingParams) -> tuple[List[File], Dict[str, int]]:
        """Execute listing workflow."""
        command = ListingCommand()
        try:
            files, sizes = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
                stopped_flag=self.stopped_flag
            )
        except RuntimeError as e:
            self.error_exit(f"Listing failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
        return files, sizes

    @staticmethod
    def format_entry(file: File, sizes: Dict[str, int]) -> str:
        """One listing line: name with type marker, size, modification time."""
        name = file.name
        if file.is_dir:
            name += "/"
        if file.is_link:
            name = f"{name}@ -> {file.link_to}"

        if file.is_dir and file.path not in sizes:
            size_str = "-"
        else:
            size_str = ConvertUtils.bytes_to_human(sizes.get(file.path, file.length))
        mtime = ConvertUtils.timestamp_to_human(file.meta.modified)
        return f"{size_str:>9}  {mtime:<16}  {name}"

    def output_results(self, files: List[File], sizes: Dict[str, int], params: ListingParams) -> None:
        """Print the listing in the order produced by the sorter."""
        if self.quiet:
            for file in files:
                print(file.name)
            return

        sort = params.sort
        flags = []
        if sort.reverse:
            flags.append("reversed")
        if not sort.sensitive:
            flags.append("case-insensitive")
        if sort.dir_first:
            flags.append("directories first")
        suffix = f" ({', '.join(flags)})" if flags else ""
        print(f"{params.root_dir}: {len(files)} entries, sorted by {sort.by.display_name}{suffix}")

        if not files:
            print("Directory is empty.")
            return
        for file in files:
            print(self.format_entry(file, sizes))

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        params = self.create_params(args)
        files, sizes = self.run_listing(params)
        self.output_results(files, sizes, params)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


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
