"""
I18N generation pipeline
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from config.settings import GeneratorSettings
from models.catalog import Catalog
from utils.file_utils import FileManager
from .catalog_builder import CatalogBuilder
from .catalog_validator import CatalogValidator
from .dart_emitter import DartEmitter

logger = logging.getLogger(__name__)


class I18NGeneratorService:
    """
    Generates the typed Dart translations for one import directory

    Every run rebuilds the catalog from the files on disk; nothing is kept
    between runs. Reading the files and writing the output are the only
    asynchronous steps.
    """

    def __init__(self, settings: GeneratorSettings, file_manager: Optional[FileManager] = None):
        self.settings = settings
        self.file_manager = file_manager or FileManager()
        self.validator = CatalogValidator()
        self.emitter = DartEmitter.from_settings(settings)

    def build_catalog(self, contents: Dict[Path, Any]) -> Catalog:
        """Classify, merge and validate decoded file contents"""
        catalog = CatalogBuilder(self.settings.import_path).build(contents)
        return self.validator.validate(catalog)

    def generate(self, catalog: Catalog) -> str:
        """Emit the Dart source for a validated catalog"""
        return self.emitter.emit(catalog)

    async def load(self) -> Dict[Path, Any]:
        """Discover and decode every translation file"""
        paths = self.file_manager.discover(self.settings.import_path)
        logger.info(f"Found {len(paths)} translation files in {self.settings.import_path}")
        return await self.file_manager.read_all(paths, self.settings.encoding)

    async def build(self) -> Catalog:
        contents = await self.load()
        return self.build_catalog(contents)

    async def run(self) -> Path:
        """Run the whole pipeline and write the output file"""
        catalog = await self.build()
        source = self.generate(catalog)
        output = await self.file_manager.write_text(
            self.settings.export_path, source, self.settings.export_encoding
        )
        logger.info(f"Generated {output} for locales: {', '.join(catalog.concrete_locales)}")
        return output
