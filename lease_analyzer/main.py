"""Command-line entry point: load local files, process them, print JSON.

Usage:
    lease-analyzer lease1.pdf lease2.txt
    lease-analyzer scans/*.png --detailed
"""

import argparse
import json
import sys
from pathlib import Path

from lease_analyzer.config.exceptions import ConfigurationError
from lease_analyzer.config.settings import Settings
from lease_analyzer.logging.logger import Log
from lease_analyzer.processor.exceptions import AggregateValidationError
from lease_analyzer.processor.file_loader import FileLoader
from lease_analyzer.processor.processor import build_services


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lease-analyzer",
        description="Extract and analyze oil & gas lease contracts.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Contract files to process")
    parser.add_argument(
        "--detailed",
        action="store_true",
        help="Include a batch summary (success counts, quality and risk)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> services -> load files -> process -> print."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        services = build_services(settings)
        loader = FileLoader()
        files = [loader.load(path) for path in args.files]
        if args.detailed:
            payload: object = services.processor.process_detailed(files).to_dict()
        else:
            payload = [contract.to_dict() for contract in services.processor.process(files)]
    except (ConfigurationError, AggregateValidationError, FileNotFoundError) as exc:
        Log.error(str(exc))
        print(f"Processing failed: {exc}. Please check logs.", file=sys.stderr)
        return 1
    except Exception as exc:
        Log.error(f"Unexpected error during processing: {exc}")
        print("Processing failed unexpectedly. Please check logs.", file=sys.stderr)
        return 1

    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
