"""Unit tests for pipeline stages - focusing on behavior, not implementation."""

import io
import json
from unittest.mock import MagicMock, patch

import yaml

from letterlens.core import Config, analyze_words
from letterlens.processing.stages import (
    WordListData,
    load_words,
    run_analysis,
    write_output,
    write_result_to_stream,
)
from letterlens.processing.stages.analysis import build_aggregations


class TestWordLoading:
    """Tests for word loading stage behavior."""

    def test_loads_entries_from_include_file(self, tmp_path):
        """Entries from the include file are collected."""
        include_file = tmp_path / "include.txt"
        include_file.write_text("hello\nworld\n")

        result = load_words(Config(include=str(include_file)))

        assert result.entries == ["hello", "world"]

    @patch("letterlens.processing.stages.word_loading.load_source_words")
    def test_wordfreq_words_come_before_include_file(self, mock_source: MagicMock, tmp_path):
        """Sources are concatenated in a fixed order."""
        mock_source.return_value = ["the", "of"]
        include_file = tmp_path / "include.txt"
        include_file.write_text("zebra\n")

        result = load_words(Config(top_n=2, include=str(include_file)))

        assert result.entries == ["the", "of", "zebra"]

    def test_counts_skipped_entries(self, tmp_path):
        """Non-string JSON items are counted as skipped."""
        include_file = tmp_path / "include.json"
        include_file.write_text('["cat", 1, null, "dog"]')

        result = load_words(Config(include=str(include_file)))

        assert result.skipped_entries == 2

    @patch("letterlens.processing.stages.word_loading.load_dictionary_words")
    def test_records_dictionary_source(self, mock_dictionary: MagicMock):
        """The english-words source is recorded when enabled."""
        mock_dictionary.return_value = ["apple"]

        result = load_words(Config(all_words=True))

        assert result.sources == ["english-words dictionary"]


class TestAnalysisStage:
    """Tests for the analysis stage."""

    def test_matches_direct_analysis(self):
        """The stage gives the same result as analyze_words."""
        entries = ["bookkeeper", "Mississippi", "education", 3]
        data = run_analysis(WordListData(entries=entries), Config(jobs=1))

        assert data.result == analyze_words(entries)

    def test_counts_processed_words(self):
        """Normalized word count is reported."""
        data = run_analysis(WordListData(entries=["thank you", None]), Config(jobs=1))

        assert data.words_processed == 2

    def test_times_every_aggregation(self):
        """Each aggregation gets a timing entry."""
        data = run_analysis(WordListData(entries=["cat"]), Config(jobs=1))

        assert set(data.stage_times) == {"positions", "patterns", "doubles", "vowels"}

    def test_empty_word_list_is_valid(self):
        """An empty list still yields a result."""
        data = run_analysis(WordListData(entries=[]), Config(jobs=4))

        assert data.result.total_words == 0

    def test_applies_example_limit(self):
        """Configured example limit reaches the doubled consonant stage."""
        aggregations = build_aggregations(Config(example_limit=1))

        doubles = aggregations["doubles"](["ball", "bell", "bill"])

        assert doubles["ll"].examples == ["ball"]


class TestOutputStage:
    """Tests for result serialization."""

    def test_json_uses_dashboard_field_names(self):
        """JSON output carries camelCase keys."""
        stream = io.StringIO()
        write_result_to_stream(analyze_words(["cat"]), stream, "json")

        assert json.loads(stream.getvalue())["totalWords"] == 1

    def test_yaml_output_round_trips(self):
        """YAML output parses back to the serialized result."""
        result = analyze_words(["bookkeeper"])
        stream = io.StringIO()
        write_result_to_stream(result, stream, "yaml")

        assert yaml.safe_load(stream.getvalue()) == result.to_dict()

    def test_writes_result_file(self, tmp_path):
        """The result is written to the configured output path."""
        output_file = tmp_path / "out" / "result.json"
        config = Config(output=str(output_file))

        write_output(analyze_words(["cat"]), WordListData(entries=["cat"]), config)

        assert json.loads(output_file.read_text())["overall"][0]["count"] == 1

    def test_writes_word_dump(self, tmp_path):
        """The word dump is written when configured."""
        dump_file = tmp_path / "words.txt"
        config = Config(output=str(tmp_path / "result.json"), dump_words=str(dump_file))

        write_output(analyze_words(["cat"]), WordListData(entries=["cat", 5]), config)

        assert dump_file.read_text() == "cat\n"

    def test_prints_to_stdout_without_output(self, capsys):
        """Without an output path the result goes to stdout."""
        write_output(analyze_words(["cat"]), WordListData(entries=["cat"]), Config())

        assert json.loads(capsys.readouterr().out)["totalWords"] == 1
