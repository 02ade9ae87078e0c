"""Pytest configuration and fixtures for CLI tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click CLI test runner bound to the esanalysis command group."""

    class AnalysisCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            from esanalysis.cli.main import cli

            return super().invoke(cli, args, **kwargs)

    return AnalysisCliRunner()


@pytest.fixture
def analysis_config(write_config):
    """Config file with one analyzer of each type."""
    return write_config(
        {
            "analysis": {
                "analyzer": {
                    "stop_words": {"type": "stop", "stopwords": ["the", "a"]},
                    "titles": {"type": "standard", "max_token_length": 10},
                    "commas": {"type": "pattern", "pattern": r"\s*,\s*"},
                    "stems": {"type": "snowball"},
                    "html_text": {
                        "type": "custom",
                        "tokenizer": "standard",
                        "filter": ["lowercase"],
                        "char_filter": ["html_strip"],
                    },
                }
            }
        }
    )
