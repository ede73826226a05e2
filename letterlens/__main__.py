"""Main entry point for the letterlens package."""

from loguru import logger

from letterlens.cli import create_parser
from letterlens.core import load_config
from letterlens.processing import run_pipeline
from letterlens.utils import setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("LetterLens - Letter Usage Profiler")
        logger.info("=" * 60)
        logger.info("")

    if not config.has_word_source():
        parser.error("Must specify --top-n, --include or --all-words")

    if config.verbose:
        logger.info("Configuration:")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        if config.include:
            logger.info(f"  Include file: {config.include}")
        if config.all_words:
            logger.info("  Full english-words dictionary")
        logger.info(f"  Output: {config.output or 'stdout'} ({config.format})")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("✓ Analysis completed successfully")
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Analysis interrupted by user")
        raise
    except Exception:
        logger.error("✗ Analysis failed")
        raise


if __name__ == "__main__":
    main()
