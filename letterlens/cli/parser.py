"""Command-line interface for the LetterLens project."""

import argparse
from multiprocessing import cpu_count

from letterlens.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Profile letter usage in a list of English words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Top 5000 most common English words, JSON result on stdout
  %(prog)s --top-n 5000

  # Custom word list with reports and a YAML result file
  %(prog)s --include words.json --format yaml -o result.yml --reports ./reports -v

  # Also write the analyzed list as a plain-text dump
  %(prog)s --top-n 5000 --dump-words top-5000-words.txt -o result.json

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "top_n": 5000,
  "output": "result.json",
  "format": "json",
  "reports": "./reports",
  "pattern_limit": 20,
  "example_limit": 5,
  "verbose": true,
  "jobs": 4
}
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Word sources
    parser.add_argument("--top-n", type=int, help="Pull top N most common English words")
    parser.add_argument(
        "--include", type=str, help="Word list file (.json array or one entry per line)"
    )
    parser.add_argument(
        "--all-words",
        action="store_true",
        help="Analyze the full english-words dictionary (web2 + gcide)",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Result file (default: stdout)")
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "yaml"],
        default="json",
        help="Result format",
    )
    parser.add_argument(
        "--dump-words", type=str, help="Write the loaded word list as a plain-text file"
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to generate detailed reports (creates timestamped subdirectories)",
    )

    # Parameters
    parser.add_argument(
        "--pattern-limit",
        type=int,
        default=Constants.PATTERN_LIMIT,
        help="Number of top vowel/consonant patterns to keep",
    )
    parser.add_argument(
        "--example-limit",
        type=int,
        default=Constants.EXAMPLE_LIMIT,
        help="Maximum example words per doubled consonant",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers (default: {cpu_count()})",
    )

    return parser
