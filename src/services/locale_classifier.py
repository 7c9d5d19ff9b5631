"""
Locale classification of discovered translation files
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from models.catalog import ABSTRACT_LOCALE
from utils.file_utils import file_extension

logger = logging.getLogger(__name__)

SEPARATOR = '_'


def file_stem(path: Path) -> str:
    """File name without its last extension; a bare dot file keeps its whole name"""
    extension = file_extension(path)
    if extension == path.name:
        return path.name
    return path.name[:-len(extension)] if extension else path.name


def normalize_locale_key(key: str) -> str:
    """
    Normalize a raw locale suffix

    `en` -> `EN`, `pt-br` -> `pt_BR`, `zh_hant_tw` -> `zh_hant_TW`
    """
    parts = [part for part in key.replace('-', SEPARATOR).split(SEPARATOR) if part]
    if not parts:
        return ABSTRACT_LOCALE
    parts[-1] = parts[-1].upper()
    return SEPARATOR.join(parts)


class LocaleClassifier:
    """Derives the locale key of every file from its name and its directory"""

    @staticmethod
    def count_base_files(paths: Iterable[Path]) -> Dict[Path, int]:
        """Count, per directory, the files whose stem has no separator"""
        counts: Dict[Path, int] = {}
        for path in paths:
            counts.setdefault(path.parent, 0)
            if SEPARATOR not in file_stem(path):
                counts[path.parent] += 1
        return counts

    def locale_key(self, path: Path, base_counts: Dict[Path, int]) -> str:
        """Locale key of a single file given the base file counts of its directory"""
        stem = file_stem(path)
        if stem == file_extension(path):
            raw_key = ''
        elif SEPARATOR in stem:
            raw_key = stem.split(SEPARATOR)[-1].strip()
        elif base_counts.get(path.parent, 0) <= 1:
            raw_key = ''
        else:
            raw_key = stem
        return normalize_locale_key(raw_key)

    def classify(self, paths: Iterable[Path]) -> Dict[str, List[Path]]:
        """Group paths by locale key, in the order the paths are given"""
        paths = [Path(path) for path in paths]
        base_counts = self.count_base_files(paths)

        locales: Dict[str, List[Path]] = {}
        for path in paths:
            key = self.locale_key(path, base_counts)
            locales.setdefault(key, []).append(path)
            logger.debug(f"Classified {path} as locale {key or '<abstract>'}")

        logger.info(f"Classified {len(paths)} files into {len(locales)} locales")
        return locales
