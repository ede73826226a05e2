"""Stage 3: Result output."""

import json
import sys
from typing import TextIO

from loguru import logger
import yaml

from letterlens.core import AnalysisResult, Config
from letterlens.data import write_word_list_dump
from letterlens.processing.stages.data_models import WordListData
from letterlens.utils import write_file_safely


def write_result_to_stream(result: AnalysisResult, stream: TextIO, output_format: str) -> None:
    """Serialize the result with dashboard field names.

    Raises:
        yaml.YAMLError: If YAML serialization fails
    """
    data = result.to_dict()
    if output_format == "yaml":
        try:
            yaml.safe_dump(
                data,
                stream,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
                width=float("inf"),
            )
        except yaml.YAMLError as e:
            logger.error(f"✗ YAML serialization error writing result: {e}")
            raise
    else:
        json.dump(data, stream, indent=2)
        stream.write("\n")


def write_output(
    result: AnalysisResult, word_data: WordListData, config: Config, verbose: bool = False
) -> None:
    """Write the result to the configured file (stdout if none) and the word dump."""
    if config.output:
        write_file_safely(
            config.output,
            lambda f: write_result_to_stream(result, f, config.format),
            "writing analysis result",
        )
        if verbose:
            logger.info(f"  Wrote {config.format.upper()} result to {config.output}")
    else:
        write_result_to_stream(result, sys.stdout, config.format)

    if config.dump_words:
        count = write_word_list_dump(word_data.entries, config.dump_words)
        if verbose:
            logger.info(f"  Wrote {count} entries to {config.dump_words}")
