"""
File management utilities
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import aiofiles
import yaml

from .exceptions import CatalogStructureError

logger = logging.getLogger(__name__)

JSON_EXTENSIONS = ('.json',)
YAML_EXTENSIONS = ('.yaml', '.yml')


def file_extension(path: Path) -> str:
    """Return the extension of the path, treating a bare dot file name as the extension"""
    suffix = path.suffix
    if not suffix and path.name.startswith('.'):
        return path.name
    return suffix


class FileManager:
    """Discovers, decodes and writes files for the generator"""

    def __init__(self, extensions: Iterable[str] = JSON_EXTENSIONS + YAML_EXTENSIONS):
        self.extensions = tuple(extensions)

    def discover(self, import_path: Union[str, Path]) -> List[Path]:
        """Return every translation file below import_path, sorted by path"""
        root = Path(import_path)
        if not root.is_dir():
            logger.warning(f"Import directory not found: {root}")
            return []

        files = [
            path for path in root.rglob('*')
            if path.is_file() and file_extension(path).lower() in self.extensions
        ]
        files.sort()
        logger.debug(f"Discovered {len(files)} translation files in {root}")
        return files

    def decode(self, path: Path, encoding: str = 'utf-8') -> Dict[str, Any]:
        """Decode one JSON or YAML file into a mapping"""
        try:
            text = path.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise CatalogStructureError(f"Failed to decode {path}: {e}") from e
        return self.parse(path, text)

    @staticmethod
    def parse(path: Path, text: str) -> Dict[str, Any]:
        """Parse the text of path as JSON or YAML, depending on its extension"""
        try:
            if file_extension(path).lower() in YAML_EXTENSIONS:
                content = yaml.safe_load(text)
            else:
                content = json.loads(text) if text.strip() else None
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise CatalogStructureError(f"Failed to decode {path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise CatalogStructureError(f"Translation file is not a mapping: {path}")
        return content

    async def read(self, path: Path, encoding: str = 'utf-8') -> Dict[str, Any]:
        try:
            async with aiofiles.open(path, 'r', encoding=encoding) as f:
                text = await f.read()
        except UnicodeDecodeError as e:
            raise CatalogStructureError(f"Failed to decode {path}: {e}") from e
        logger.debug(f"Read {path}")
        return self.parse(path, text)

    async def read_all(self, paths: Iterable[Path], encoding: str = 'utf-8') -> Dict[Path, Dict[str, Any]]:
        """Decode every path concurrently, keeping the given order"""
        paths = list(paths)
        contents = await asyncio.gather(*(self.read(path, encoding) for path in paths))
        return dict(zip(paths, contents))

    async def write_text(self, path: Union[str, Path], text: str, encoding: str = 'utf-8') -> Path:
        """Write text to path, creating parent directories"""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(target, 'w', encoding=encoding) as f:
            await f.write(text)

        logger.info(f"Wrote {len(text)} characters to {target}")
        return target
