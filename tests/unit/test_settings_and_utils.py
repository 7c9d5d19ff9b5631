"""
Unit tests for settings, file management and string utilities
"""

import pytest

from config import DEFAULT_IMPORTS, get_settings, load_settings, reload_settings
from config.settings import GeneratorSettings
from utils.code_buffer import CodeBuffer
from utils.exceptions import CatalogStructureError, ConfigurationError
from utils.file_utils import FileManager, file_extension
from utils.string_utils import normalize, quote, split_words, to_camel_case


class TestGeneratorSettings:
    """Test cases for GeneratorSettings"""

    def test_defaults(self):
        """Test default values"""
        settings = GeneratorSettings(import_path="i18n", export_path="lib/i18n.g.dart")
        assert settings.encoding == "utf-8"
        assert settings.base_name == "I18N"
        assert settings.convert is True
        assert settings.base_class_name == "L10N"
        assert settings.enum_class_name == "I18NLocale"
        assert settings.imports == DEFAULT_IMPORTS
        assert settings.log_level == "INFO"

    def test_missing_paths(self):
        """Test that both paths are required"""
        with pytest.raises(ConfigurationError, match="import path"):
            GeneratorSettings(import_path="", export_path="out.dart")
        with pytest.raises(ConfigurationError, match="export path"):
            GeneratorSettings(import_path="i18n", export_path=" ")

    def test_invalid_values(self):
        """Test rejected option values"""
        with pytest.raises(ConfigurationError):
            GeneratorSettings(import_path="i18n", export_path="out.dart", encoding="no-such-codec")
        with pytest.raises(ConfigurationError):
            GeneratorSettings(import_path="i18n", export_path="out.dart", convert="maybe")
        with pytest.raises(ConfigurationError):
            GeneratorSettings(import_path="i18n", export_path="out.dart", log_level="LOUD")

    def test_imports(self):
        """Test import list parsing"""
        settings = GeneratorSettings(
            import_path="i18n", export_path="out.dart", imports="package:a/a.dart, package:b/b.dart"
        )
        assert settings.imports == ["package:a/a.dart", "package:b/b.dart"]

        settings = GeneratorSettings(import_path="i18n", export_path="out.dart", imports=["null"])
        assert settings.imports == DEFAULT_IMPORTS

    def test_names_are_sanitized(self):
        """Test configured names turned into identifiers"""
        settings = GeneratorSettings(import_path="i18n", export_path="out.dart", base_name="My Strings")
        assert settings.base_name == "My_Strings"

    def test_from_env(self, monkeypatch):
        """Test settings from environment variables"""
        monkeypatch.setenv("I18N_IMPORT_PATH", "translations")
        monkeypatch.setenv("I18N_EXPORT_PATH", "lib/strings.g.dart")
        monkeypatch.setenv("I18N_CONVERT", "false")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = GeneratorSettings.from_env()
        assert settings.import_path == "translations"
        assert settings.export_path == "lib/strings.g.dart"
        assert settings.convert is False
        assert settings.log_level == "DEBUG"

    def test_options_override_env(self, monkeypatch):
        """Test explicit options taking precedence"""
        monkeypatch.setenv("I18N_IMPORT_PATH", "translations")
        monkeypatch.setenv("I18N_EXPORT_PATH", "lib/strings.g.dart")

        settings = GeneratorSettings.from_options({"import_path": "other", "export_path": None})
        assert settings.import_path == "other"
        assert settings.export_path == "lib/strings.g.dart"

    def test_load_settings_is_cached(self, monkeypatch):
        """Test the global settings instance"""
        monkeypatch.setenv("I18N_IMPORT_PATH", "translations")
        monkeypatch.setenv("I18N_EXPORT_PATH", "out.dart")

        settings = load_settings()
        assert get_settings() is settings
        assert load_settings({"import_path": "ignored"}) is settings

        reloaded = reload_settings({"import_path": "other"})
        assert reloaded is not settings
        assert reloaded.import_path == "other"

    def test_load_settings_without_paths(self):
        """Test a configuration error surfacing from load_settings"""
        with pytest.raises(ConfigurationError):
            load_settings()


class TestStringUtils:
    """Test cases for identifier helpers"""

    @pytest.mark.parametrize("raw, expected", [
        ("hello_world", "helloWorld"),
        ("Hello World", "helloWorld"),
        ("HTTPServer", "httpServer"),
        ("main-menu", "mainMenu"),
        ("2fa", "$2Fa"),
        ("default", "$default"),
    ])
    def test_to_camel_case(self, raw, expected):
        """Test key conversion"""
        assert to_camel_case(raw) == expected

    def test_split_words(self):
        """Test word boundaries"""
        assert split_words("parseHTTPResponse_code") == ["parse", "HTTP", "Response", "code"]

    def test_normalize(self):
        """Test minimal sanitization"""
        assert normalize("main menu!") == "main_menu_"
        assert normalize("Keep_Case$") == "Keep_Case$"

    def test_quote(self):
        """Test quote selection"""
        assert quote("plain") == "'plain'"
        assert quote("it's") == '"it\'s"'
        assert quote("it's \"x\"") == "'it\\'s \"x\"'"


class TestCodeBuffer:
    """Test cases for CodeBuffer"""

    def test_indentation(self):
        """Test indentation by bracket depth"""
        buffer = CodeBuffer()
        buffer.writeln("class A {").writeln("void f() {").writeln("g();").writeln("}").writeln("}")
        assert buffer.getvalue() == "class A {\n  void f() {\n    g();\n  }\n}\n"

    def test_raw_and_doc(self):
        """Test verbatim text and doc comments"""
        buffer = CodeBuffer()
        buffer.write_doc("First\n\nThird").write_raw("  raw")
        assert buffer.getvalue() == "/// First\n///\n/// Third\n  raw\n"

    def test_imports(self):
        """Test import ordering"""
        buffer = CodeBuffer().write_imports(["package:b/b.dart", "dart:core", "package:a/a.dart"])
        assert buffer.getvalue() == (
            "import 'dart:core';\n\n"
            "import 'package:a/a.dart';\n"
            "import 'package:b/b.dart';\n"
        )


class TestFileManager:
    """Test cases for FileManager"""

    def test_file_extension(self, tmp_path):
        """Test extensions of regular and dot files"""
        assert file_extension(tmp_path / "en.json") == ".json"
        assert file_extension(tmp_path / ".yaml") == ".yaml"
        assert file_extension(tmp_path / "README") == ""

    def test_discover(self, write_translation, i18n_dir):
        """Test sorted discovery of supported files"""
        write_translation("fr.json", {"a": "b"})
        write_translation("en.yaml", {"a": "b"})
        write_translation("menu/en.yml", {"a": "b"})
        (i18n_dir / "notes.txt").write_text("ignored")

        files = FileManager().discover(i18n_dir)
        assert [path.relative_to(i18n_dir).as_posix() for path in files] == [
            "en.yaml", "fr.json", "menu/en.yml",
        ]

    def test_discover_missing_directory(self, tmp_path):
        """Test a missing import directory"""
        assert FileManager().discover(tmp_path / "missing") == []

    def test_decode(self, write_translation, i18n_dir):
        """Test decoding JSON, YAML and empty files"""
        json_path = write_translation("en.json", {"greeting": "Hello"})
        yaml_path = write_translation("fr.yaml", {"menu": {"open": "Ouvrir"}})
        empty_path = i18n_dir / "de.json"
        empty_path.write_text("")

        manager = FileManager()
        assert manager.decode(json_path) == {"greeting": "Hello"}
        assert manager.decode(yaml_path) == {"menu": {"open": "Ouvrir"}}
        assert manager.decode(empty_path) == {}

    def test_decode_errors(self, i18n_dir):
        """Test invalid and non-mapping content"""
        broken = i18n_dir / "en.json"
        broken.write_text("{not json")
        listing = i18n_dir / "fr.yaml"
        listing.write_text("- a\n- b\n")

        manager = FileManager()
        with pytest.raises(CatalogStructureError):
            manager.decode(broken)
        with pytest.raises(CatalogStructureError):
            manager.decode(listing)

    def test_decode_invalid_encoding(self, i18n_dir):
        """Test bytes that are not valid in the configured encoding"""
        path = i18n_dir / "en.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')

        with pytest.raises(CatalogStructureError, match="Failed to decode"):
            FileManager().decode(path)

    @pytest.mark.asyncio
    async def test_read_invalid_encoding(self, i18n_dir):
        """Test an undecodable file read asynchronously"""
        path = i18n_dir / "en.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')

        with pytest.raises(CatalogStructureError, match="Failed to decode"):
            await FileManager().read_all([path])

    @pytest.mark.asyncio
    async def test_read_all_and_write_text(self, write_translation, tmp_path):
        """Test asynchronous reading and writing"""
        en = write_translation("en.json", {"a": "1"})
        fr = write_translation("fr.json", {"a": "2"})

        manager = FileManager()
        contents = await manager.read_all([en, fr])
        assert list(contents) == [en, fr]
        assert contents[fr] == {"a": "2"}

        target = await manager.write_text(tmp_path / "out" / "i18n.g.dart", "// generated\n")
        assert target.read_text() == "// generated\n"
