"""
Unit tests for the locale classifier
"""

from pathlib import Path

import pytest

from services.locale_classifier import LocaleClassifier, file_stem, normalize_locale_key


@pytest.fixture
def classifier() -> LocaleClassifier:
    return LocaleClassifier()


class TestNormalizeLocaleKey:
    """Test cases for locale key normalization"""

    @pytest.mark.parametrize("raw, expected", [
        ("en", "EN"),
        ("pt-br", "pt_BR"),
        ("pt_br", "pt_BR"),
        ("zh-hant-tw", "zh_hant_TW"),
        ("-en-", "EN"),
        ("", ""),
        ("__", ""),
    ])
    def test_normalize(self, raw, expected):
        """Test separators and casing"""
        assert normalize_locale_key(raw) == expected


class TestLocaleClassifier:
    """Test cases for LocaleClassifier"""

    def test_file_stem(self):
        """Test stems of regular and dot files"""
        assert file_stem(Path("i18n/en.json")) == "en"
        assert file_stem(Path("i18n/app.en.yaml")) == "app.en"
        assert file_stem(Path("i18n/.json")) == ".json"

    def test_base_files_become_locales(self, classifier):
        """Test several base files in one directory"""
        paths = [Path("i18n/en.json"), Path("i18n/fr.json")]
        assert classifier.classify(paths) == {
            "EN": [Path("i18n/en.json")],
            "FR": [Path("i18n/fr.json")],
        }

    def test_single_base_file_is_abstract(self, classifier):
        """Test a lone base file in a directory"""
        paths = [Path("i18n/strings.json"), Path("i18n/strings_en.json")]
        assert classifier.classify(paths) == {
            "": [Path("i18n/strings.json")],
            "EN": [Path("i18n/strings_en.json")],
        }

    def test_dot_file_is_abstract(self, classifier):
        """Test a file named after its extension"""
        paths = [Path("i18n/.json"), Path("i18n/en.json"), Path("i18n/fr.json")]
        assert classifier.classify(paths)[""] == [Path("i18n/.json")]

    def test_suffix_after_last_separator(self, classifier):
        """Test locale suffixes of split files"""
        paths = [
            Path("i18n/app_en.json"),
            Path("i18n/app_pt-br.json"),
            Path("i18n/main_menu_en.json"),
        ]
        assert classifier.classify(paths) == {
            "EN": [Path("i18n/app_en.json"), Path("i18n/main_menu_en.json")],
            "pt_BR": [Path("i18n/app_pt-br.json")],
        }

    def test_base_files_counted_per_directory(self, classifier):
        """Test that base file counts do not leak between directories"""
        paths = [
            Path("i18n/en.json"),
            Path("i18n/fr.json"),
            Path("i18n/menu/schema.json"),
        ]
        counts = classifier.count_base_files(paths)
        assert counts == {Path("i18n"): 2, Path("i18n/menu"): 1}
        assert classifier.classify(paths)[""] == [Path("i18n/menu/schema.json")]

    def test_classification_is_order_independent(self, classifier):
        """Test that enumeration order does not change the grouping"""
        paths = [
            Path("i18n/en.json"),
            Path("i18n/fr.json"),
            Path("i18n/errors/errors_en.json"),
            Path("i18n/errors/errors_fr.json"),
            Path("i18n/.yaml"),
        ]
        forward = classifier.classify(paths)
        backward = classifier.classify(list(reversed(paths)))

        assert forward.keys() == backward.keys()
        for locale in forward:
            assert sorted(forward[locale]) == sorted(backward[locale])
