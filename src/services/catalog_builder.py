"""
Builds the per-locale translation trees from decoded files
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from models.catalog import ABSTRACT_LOCALE, Catalog
from models.translation import Group
from utils.exceptions import CatalogStructureError, EmptyCatalogError
from .locale_classifier import SEPARATOR, LocaleClassifier, file_stem

logger = logging.getLogger(__name__)


class CatalogBuilder:
    """
    Merges decoded translation files into one tree per locale

    Directory segments below the import root become nesting keys. When a
    locale has several files in the same directory, every file is nested
    under its own stem with the locale suffix removed.
    """

    def __init__(self, import_path: Union[str, Path], classifier: Optional[LocaleClassifier] = None):
        self.import_path = Path(import_path)
        self.classifier = classifier or LocaleClassifier()

    def directory_keys(self, path: Path) -> Tuple[str, ...]:
        """Nesting keys of the directories between the import root and the file"""
        try:
            relative = path.relative_to(self.import_path)
        except ValueError:
            raise CatalogStructureError(f"{path} is not below the import path {self.import_path}")
        return relative.parts[:-1]

    @staticmethod
    def file_key(path: Path) -> str:
        """Nesting key for a file split from a larger locale: its stem without the locale suffix"""
        stem = file_stem(path)
        if SEPARATOR in stem:
            stem = SEPARATOR.join(part.strip() for part in stem.split(SEPARATOR)[:-1])
        return stem

    def merge_locale(self, paths: List[Path], contents: Mapping[Path, Any]) -> Group:
        """Merge every file of one locale into a single tree"""
        if len(paths) == 1:
            path = paths[0]
            content = Group.from_mapping(contents[path])
            keys = self.directory_keys(path)
            return Group().nest(keys, content) if keys else content

        directories: Dict[Tuple[str, ...], List[Path]] = {}
        for path in paths:
            directories.setdefault(self.directory_keys(path), []).append(path)

        tree = Group()
        for keys, inputs in directories.items():
            if len(inputs) > 1:
                for path in inputs:
                    tree.nest([*keys, self.file_key(path)], Group.from_mapping(contents[path]))
            else:
                tree.nest(keys, Group.from_mapping(contents[inputs[0]]))
        return tree

    def build(self, contents: Mapping[Path, Any]) -> Catalog:
        """
        Build the catalog from decoded file contents

        The abstract locale keeps the supplied tree when it is not empty;
        otherwise it is synthesized from the key shape of the first concrete
        locale and the catalog is marked as having no supplied abstract.
        """
        locales = self.classifier.classify(contents.keys())

        catalog = Catalog()
        for locale, paths in locales.items():
            catalog[locale] = self.merge_locale(paths, contents)
            logger.debug(f"Merged {len(paths)} files into locale {locale or '<abstract>'}")

        if not catalog or catalog.is_empty:
            raise EmptyCatalogError()

        if catalog.has_abstract:
            catalog.abstract_supplied = True
        elif catalog.concrete_locales:
            first = catalog.concrete_locales[0]
            catalog[ABSTRACT_LOCALE] = catalog[first].shape()
            logger.debug(f"Synthesized the abstract locale from {first}")

        logger.info(f"Built catalog with locales: {', '.join(catalog.concrete_locales) or '<none>'}")
        return catalog
