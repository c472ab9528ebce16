"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior, and config inheritance
for the sub-parsers created for block quotes and list items.
"""

from threading import Thread

import pytest

from tejido import (
    BlockQuote,
    Markup,
    Paragraph,
    ParseConfig,
    Parser,
    Table,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Every feature is enabled by default."""
        config = ParseConfig()
        assert config.tables_enabled is True
        assert config.task_lists_enabled is True
        assert config.frontmatter_enabled is True
        assert config.definitions_enabled is True

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.tables_enabled = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"tables_enabled": False, "smart_quotes": True})
        assert config == ParseConfig(tables_enabled=False)

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_parse_config()

    def test_set_and_get(self) -> None:
        set_parse_config(ParseConfig(tables_enabled=False))
        assert get_parse_config().tables_enabled is False

    def test_reset_restores_default(self) -> None:
        set_parse_config(ParseConfig(tables_enabled=False))
        reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_module_parse_uses_context(self) -> None:
        """parse() honours the configuration of the current context."""
        set_parse_config(ParseConfig(tables_enabled=False))
        doc = parse("| a | b |\n|---|---|")
        assert isinstance(doc.children[0], Paragraph)


class TestParseConfigContext:
    """Test parse_config_context context manager."""

    def test_context_sets_and_restores(self) -> None:
        with parse_config_context(ParseConfig(tables_enabled=False)):
            assert get_parse_config().tables_enabled is False
        assert get_parse_config().tables_enabled is True

    def test_nested_contexts(self) -> None:
        with parse_config_context(ParseConfig(tables_enabled=False)):
            with parse_config_context(ParseConfig(frontmatter_enabled=False)):
                assert get_parse_config().tables_enabled is True
                assert get_parse_config().frontmatter_enabled is False
            assert get_parse_config().tables_enabled is False
        assert get_parse_config() == ParseConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            with parse_config_context(ParseConfig(tables_enabled=False)):
                raise ValueError("boom")
        assert get_parse_config().tables_enabled is True


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, bool] = {}

        def worker(thread_id: int, config: ParseConfig) -> None:
            set_parse_config(config)
            results[thread_id] = Parser("# Test")._tables_enabled

        configs = [ParseConfig(tables_enabled=bool(i % 2)) for i in range(4)]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: False, 1: True, 2: False, 3: True}

    def test_concurrent_markup_instances(self) -> None:
        results: dict[int, type] = {}
        source = "| a | b |\n|---|---|\n| 1 | 2 |"

        def worker(thread_id: int, with_tables: bool) -> None:
            doc = Markup(tables=with_tables).parse(source)
            results[thread_id] = type(doc.children[0])

        threads = [
            Thread(target=worker, args=(0, True)),
            Thread(target=worker, args=(1, False)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: Table, 1: Paragraph}


class TestParserConfigInheritance:
    """Sub-parsers inherit config via ContextVar."""

    def test_quote_content_uses_same_config(self) -> None:
        """A table inside a block quote follows the outer setting."""
        source = "> | a | b |\n> |---|---|"

        quote = Markup(tables=False).parse(source).children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

        quote = Markup(tables=True).parse(source).children[0]
        assert isinstance(quote.children[0], Table)

    def test_markup_does_not_leak_config(self) -> None:
        Markup(tables=False).parse("text")
        assert get_parse_config() == ParseConfig()
