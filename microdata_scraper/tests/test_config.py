"""Tests for environment-driven settings."""
import pytest

from microdata_scraper import config
from microdata_scraper.config import ParserOptions


@pytest.mark.parametrize('raw, expected', [('1', True), ('true', True), (' Yes ', True), ('0', False), ('off', False)])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv('MICRODATA_TEST_FLAG', raw)
    assert config._env_flag('MICRODATA_TEST_FLAG', '0') is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv('MICRODATA_TEST_FLAG', raising=False)
    assert config._env_flag('MICRODATA_TEST_FLAG', '1') is True


def test_options_default_to_module_settings():
    opts = ParserOptions()
    assert opts.parser == config.PARSER
    assert opts.max_depth == config.MAX_DEPTH
    assert opts.id_requires_type == config.ID_REQUIRES_TYPE


def test_options_reject_non_positive_depth():
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)
