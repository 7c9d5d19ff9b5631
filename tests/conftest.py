"""
Pytest configuration and fixtures
"""

import json
import pytest
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import yaml

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import config.load_config as load_config
from config.settings import ENV_VARIABLES, GeneratorSettings
from services.generator_service import I18NGeneratorService


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> Generator[None, None, None]:
    """Keep generator settings from the environment out of the tests."""
    for variable in ENV_VARIABLES.values():
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setattr(load_config, "_settings", None)
    yield


@pytest.fixture
def i18n_dir(tmp_path: Path) -> Path:
    """Create an empty translation directory."""
    directory = tmp_path / "i18n"
    directory.mkdir()
    return directory


@pytest.fixture
def write_translation(i18n_dir: Path) -> Callable[[str, Any], Path]:
    """Write a translation file below the translation directory."""
    def _write(relative_path: str, content: Any) -> Path:
        path = i18n_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix in (".yaml", ".yml"):
            path.write_text(yaml.safe_dump(content, allow_unicode=True), encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_settings(i18n_dir: Path, tmp_path: Path) -> GeneratorSettings:
    """Create test settings."""
    return GeneratorSettings(
        import_path=str(i18n_dir),
        export_path=str(tmp_path / "lib" / "i18n.g.dart"),
    )


@pytest.fixture
def generator_service(test_settings: GeneratorSettings) -> I18NGeneratorService:
    """Create generator service for testing."""
    return I18NGeneratorService(test_settings)


@pytest.fixture
def greetings() -> Dict[str, Dict[str, Any]]:
    """Two locales sharing one key."""
    return {
        "en": {"greeting": "Hello"},
        "fr": {"greeting": "Bonjour"},
    }
