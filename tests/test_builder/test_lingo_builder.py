"""Tests for the chainable LingoBuilder."""

import json
from pathlib import Path

import pytest

from lingo import LingoBuilder, Settings, lingo


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temporary application."""
    (tmp_path / "lang").mkdir()
    return Settings(base_path=tmp_path)


class TestConstruction:
    """Test builder constructors."""

    def test_make(self):
        """make wraps a dictionary."""
        builder = LingoBuilder.make({"Hello": "Halo"})
        assert builder.get() == {"Hello": "Halo"}
        assert builder.locale is None

    def test_lingo_helper(self):
        """The helper returns a builder."""
        builder = lingo({"Hello": "Halo"})
        assert isinstance(builder, LingoBuilder)
        assert builder.count() == 1

    def test_lingo_helper_empty(self):
        """Without arguments the builder is empty."""
        assert lingo().is_empty()

    def test_for_locale_loads_file(self, settings: Settings):
        """A locale loads its JSON file from the lang directory."""
        (settings.lang_dir / "id.json").write_text('{"Hello": "Halo"}', encoding="utf-8")

        builder = LingoBuilder.for_locale("id", settings=settings)

        assert builder.locale == "id"
        assert builder.get() == {"Hello": "Halo"}

    def test_for_locale_missing_file(self, settings: Settings):
        """A locale without a file starts empty."""
        builder = LingoBuilder.for_locale("fr", settings=settings)
        assert builder.is_empty()
        assert builder.locale == "fr"

    def test_set_locale_with_invalid_file_empties(self, settings: Settings):
        """An unreadable locale file replaces earlier translations with nothing."""
        (settings.lang_dir / "bad.json").write_text("{oops", encoding="utf-8")

        builder = lingo({"Hello": "Halo"}, settings=settings).set_locale("bad")

        assert builder.is_empty()

    def test_set_locale_without_file_keeps_translations(self, settings: Settings):
        """A locale with no file keeps the current translations."""
        builder = lingo({"Hello": "Halo"}, settings=settings).set_locale("fr")
        assert builder.get() == {"Hello": "Halo"}

    def test_from_file_relative_to_lang_dir(self, settings: Settings):
        """Relative paths are looked up in the lang directory."""
        (settings.lang_dir / "id.json").write_text('{"A": "B"}', encoding="utf-8")
        assert LingoBuilder.from_file("id.json", settings=settings).get() == {"A": "B"}

    def test_from_file_absolute(self, tmp_path: Path, settings: Settings):
        """Absolute paths are used as they are."""
        file_path = tmp_path / "custom.json"
        file_path.write_text('{"A": "B"}', encoding="utf-8")
        assert LingoBuilder.from_file(file_path, settings=settings).get() == {"A": "B"}

    def test_from_invalid_file(self, settings: Settings):
        """An unloadable file gives an empty builder."""
        (settings.lang_dir / "bad.json").write_text("{oops", encoding="utf-8")
        assert LingoBuilder.from_file("bad.json", settings=settings).is_empty()


class TestOperations:
    """Test chainable operations."""

    def test_sort_keys(self):
        """Keys sort ascending and descending."""
        assert list(lingo({"b": "", "a": ""}).sort_keys().get()) == ["a", "b"]
        assert list(lingo({"a": "", "b": ""}).sort_keys(ascending=False).get()) == ["b", "a"]

    def test_clean(self):
        """clean drops empty values and sorts."""
        result = lingo({"z": "Z", "e": "", "a": "A"}).clean().get()
        assert list(result) == ["a", "z"]

    def test_add_missing_and_remove_unused(self):
        """Keys are added as placeholders and unused ones removed."""
        result = lingo({"Hello": "Halo", "Old": "Lama"}).add_missing(["Hello", "New"]).remove_unused(["Hello", "New"]).get()
        assert result == {"Hello": "Halo", "New": "New"}

    def test_remove_empty(self):
        """Empty values are dropped."""
        assert lingo({"a": "", "b": "B"}).remove_empty().get() == {"b": "B"}

    def test_filters(self):
        """Translated and untranslated filters."""
        data = {"Hello": "Halo", "World": "World"}
        assert lingo(data).only_untranslated().get() == {"World": "World"}
        assert lingo(data).only_translated().get() == {"Hello": "Halo"}

    def test_merge(self):
        """Merged values win."""
        assert lingo({"a": "1"}).merge({"a": "2", "b": "3"}).get() == {"a": "2", "b": "3"}

    def test_transform(self):
        """transform replaces the translations."""
        result = lingo({"a": "x"}).transform(lambda items: {k: v.upper() for k, v in items.items()}).get()
        assert result == {"a": "X"}

    def test_tap_does_not_modify(self):
        """tap only observes."""
        seen = []
        builder = lingo({"a": "1"}).tap(lambda items: seen.append(dict(items)) or items.clear())
        assert seen == [{"a": "1"}]
        assert builder.get() == {"a": "1"}

    def test_stats_and_counts(self):
        """Statistics and size helpers."""
        builder = lingo({"Hello": "Halo", "World": "World"})
        summary = builder.stats()

        assert summary.total == 2
        assert summary.percentage == 50.0
        assert builder.count() == len(builder) == 2
        assert builder.is_not_empty()

    def test_to_dict_is_copy(self):
        """to_dict returns a copy."""
        builder = lingo({"a": "1"})
        builder.to_dict()["b"] = "2"
        assert builder.get() == {"a": "1"}

    def test_to_json(self):
        """JSON export parses back."""
        assert json.loads(lingo({"Hello": "Halo"}).to_json()) == {"Hello": "Halo"}

    def test_chain(self):
        """Operations chain."""
        result = lingo({"z": "z", "a": "translated", "empty": ""}).add_missing(["new"]).remove_empty().sort_keys().get()
        assert list(result) == ["a", "new", "z"]


class TestScanning:
    """Test scanning helpers."""

    @pytest.fixture
    def views(self, settings: Settings) -> Path:
        views = settings.root / "resources" / "views"
        views.mkdir(parents=True)
        (views / "home.blade.php").write_text("@lang('Home') __('Welcome')", encoding="utf-8")
        return views

    def test_sync_with_default_path(self, settings: Settings, views: Path):
        """sync_with scans the default views path."""
        result = lingo({"Home": "Beranda", "Old": "Lama"}, settings=settings).sync_with().get()
        assert result == {"Home": "Beranda", "Welcome": "Welcome"}

    def test_scan_and_add(self, settings: Settings, views: Path):
        """scan_and_add keeps unused keys."""
        result = lingo({"Old": "Lama"}, settings=settings).scan_and_add("resources/views").get()
        assert set(result) == {"Old", "Home", "Welcome"}

    def test_scan_and_remove(self, settings: Settings, views: Path):
        """scan_and_remove adds nothing."""
        result = lingo({"Home": "Beranda", "Old": "Lama"}, settings=settings).scan_and_remove().get()
        assert result == {"Home": "Beranda"}


class TestSaving:
    """Test saving to files."""

    def test_save_to_path(self, tmp_path: Path):
        """Saving to an explicit path writes JSON."""
        file_path = tmp_path / "translations.json"

        assert lingo({"World": "Dunia", "Hello": "Halo"}).save(file_path)
        assert json.loads(file_path.read_text(encoding="utf-8")) == {"Hello": "Halo", "World": "Dunia"}

    def test_save_to_locale_file(self, settings: Settings):
        """With a locale, save defaults to the locale file."""
        builder = LingoBuilder.for_locale("id", settings=settings).merge({"Hello": "Halo"})

        assert builder.save()
        assert json.loads((settings.lang_dir / "id.json").read_text(encoding="utf-8")) == {"Hello": "Halo"}

    def test_save_without_path_or_locale(self):
        """Saving with nowhere to write raises."""
        with pytest.raises(ValueError, match="No file path provided"):
            lingo({"Hello": "Halo"}).save()

    def test_remove_duplicates_rereads_locale_file(self, settings: Settings):
        """Duplicates in the locale file resolve to the last value."""
        (settings.lang_dir / "id.json").write_text('{"a": "1", "b": "2", "a": "3"}', encoding="utf-8")

        builder = LingoBuilder.for_locale("id", settings=settings).merge({"c": "4"}).remove_duplicates()

        assert builder.get() == {"a": "3", "b": "2"}

    def test_remove_duplicates_without_locale(self):
        """Without a locale nothing changes."""
        assert lingo({"a": "1"}).remove_duplicates().get() == {"a": "1"}
