"""Tests for application settings."""

from __future__ import annotations

import pytest

from typeahead.config.settings import FullTextSettings, SearchSettings, Settings


class TestDefaults:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.search.default_limit == 5
        assert settings.search.concurrent is True
        assert settings.fulltext.enabled is False
        assert settings.cache.enabled is False
        assert settings.storage.data_file is None

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            SearchSettings(category_timeout=0)


class TestEnvironment:
    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPEAHEAD_FULLTEXT__ENABLED", "true")
        monkeypatch.setenv("TYPEAHEAD_FULLTEXT__BACKEND", "solr")
        monkeypatch.setenv("TYPEAHEAD_SEARCH__CATEGORY_TIMEOUT", "0.5")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.fulltext.enabled is True
        assert settings.fulltext.backend == "solr"
        assert settings.search.category_timeout == 0.5

    def test_hosts_from_json_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPEAHEAD_FULLTEXT__HOSTS", '["http://a:7700", "http://b:7700"]')
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.fulltext.hosts == ["http://a:7700", "http://b:7700"]


class TestFullTextSettings:
    def test_single_host_string(self) -> None:
        assert FullTextSettings(hosts="http://search:7700").hosts == ["http://search:7700"]

    def test_empty_host_string(self) -> None:
        assert FullTextSettings(hosts="").hosts == []

    def test_meilisearch_kwargs(self) -> None:
        kwargs = FullTextSettings(
            backend="meilisearch", hosts=["http://search:7700"], api_key="k", index_prefix="ta_"
        ).engine_kwargs()
        assert kwargs == {"index_prefix": "ta_", "timeout": 5.0, "base_url": "http://search:7700", "api_key": "k"}

    def test_solr_kwargs(self) -> None:
        kwargs = FullTextSettings(backend="solr", username="u", password="p", extra={"core": "x"}).engine_kwargs()
        assert kwargs["username"] == "u"
        assert kwargs["password"] == "p"
        assert kwargs["core"] == "x"
        assert "base_url" not in kwargs
        assert "api_key" not in kwargs


class TestYaml:
    def test_from_yaml(self, tmp_path) -> None:
        path = tmp_path / "typeahead.yaml"
        path.write_text(
            "search:\n"
            "  default_limit: 3\n"
            "  concurrent: false\n"
            "fulltext:\n"
            "  enabled: true\n"
            "  backend: solr\n"
            "  hosts:\n"
            "    - http://solr:8983/solr\n"
        )
        settings = Settings.from_yaml(path)
        assert settings.search.default_limit == 3
        assert settings.search.concurrent is False
        assert settings.fulltext.backend == "solr"
        assert settings.fulltext.hosts == ["http://solr:8983/solr"]

    def test_empty_yaml_gives_defaults(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Settings.from_yaml(path).search.default_limit == 5

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "nope.yaml")
