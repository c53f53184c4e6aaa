import io

import pytest

from wordcrawl.exceptions import InvalidConfigurationError
from wordcrawl.services.config_file_store import ConfigFileStore


def test_load_yaml_dict_dict_is_returned(tmp_path):
    (tmp_path / "ok.yml").write_text("start_pages:\n  - http://example.com\nmax_depth: 2\n", encoding="utf-8")
    store = ConfigFileStore(configs_dir=str(tmp_path))
    data = store.load_yaml_dict("ok.yml")
    assert data == {"start_pages": ["http://example.com"], "max_depth": 2}


def test_load_json_document(tmp_path):
    (tmp_path / "ok.json").write_text('{"start_pages": ["http://example.com"], "popular_word_count": 3}', encoding="utf-8")
    store = ConfigFileStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict("ok.json")["popular_word_count"] == 3


def test_absolute_path_ignores_configs_dir(tmp_path):
    path = tmp_path / "abs.yml"
    path.write_text("max_depth: 1\n", encoding="utf-8")
    store = ConfigFileStore(configs_dir="/nonexistent")
    assert store.load_yaml_dict(str(path)) == {"max_depth": 1}


def test_load_yaml_dict_missing_file_raises(tmp_path):
    store = ConfigFileStore(configs_dir=str(tmp_path))
    with pytest.raises(InvalidConfigurationError):
        store.load_yaml_dict("missing.yml")


def test_load_yaml_dict_non_dict_raises(tmp_path):
    (tmp_path / "list.yml").write_text("- a\n- b\n", encoding="utf-8")
    store = ConfigFileStore(configs_dir=str(tmp_path))
    with pytest.raises(InvalidConfigurationError):
        store.load_yaml_dict("list.yml")


def test_load_yaml_dict_invalid_yaml_raises(tmp_path):
    (tmp_path / "bad.yml").write_text("start_pages: [unclosed\n", encoding="utf-8")
    store = ConfigFileStore(configs_dir=str(tmp_path))
    with pytest.raises(InvalidConfigurationError):
        store.load_yaml_dict("bad.yml")


def test_read_leaves_stream_open():
    stream = io.StringIO("max_depth: 4\n")
    store = ConfigFileStore()
    assert store.read(stream) == {"max_depth": 4}
    assert not stream.closed


def test_empty_document_is_empty_dict():
    assert ConfigFileStore().read(io.StringIO("")) == {}
