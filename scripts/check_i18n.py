#!/usr/bin/env python3
"""
Translation key consistency checker.

This script builds the translation catalog of a directory the same way the
generator does (locale classification and per-locale merging) and reports
every key missing between locales, using the abstract locale as the source
of truth when one is provided.

Exit code:
- 0: OK (all keys are in sync)
- 1: Mismatch detected (missing or extra keys)
- 2: Configuration/IO error
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Set

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from models.translation import Group  # noqa: E402
from services.catalog_builder import CatalogBuilder  # noqa: E402
from services.catalog_validator import CatalogValidator  # noqa: E402
from utils.exceptions import GeneratorError, KeyConsistencyError  # noqa: E402
from utils.file_utils import FileManager  # noqa: E402


def flatten_keys(group: Group, prefix: str = "") -> Set[str]:
    keys: Set[str] = set()
    for key, node in group.items():
        path = f"{prefix}.{key.name}" if prefix else key.name
        if isinstance(node, Group):
            keys |= flatten_keys(node, path)
        else:
            keys.add(path)
    return keys


def main() -> int:
    parser = argparse.ArgumentParser(description="Check translation key consistency")
    parser.add_argument("import_path", type=Path, help="Directory with the translation files")
    parser.add_argument("--encoding", default="utf-8")
    args = parser.parse_args()

    if not args.import_path.is_dir():
        print(f"❌ Translation directory not found: {args.import_path}")
        return 2

    manager = FileManager()
    paths = manager.discover(args.import_path)
    if not paths:
        print(f"❌ No translation files found in: {args.import_path}")
        return 2

    try:
        contents = {path: manager.decode(path, args.encoding) for path in paths}
        catalog = CatalogBuilder(args.import_path).build(contents)
    except (GeneratorError, OSError) as exc:
        print(f"❌ Failed to build the catalog: {exc}")
        return 2

    base_name = "abstract" if catalog.abstract_supplied else catalog.concrete_locales[0]
    base_keys = flatten_keys(catalog.abstract)
    print(f"🔎 Base locale: {base_name} ({len(base_keys)} keys)")

    ok = True
    for locale in catalog.concrete_locales:
        keys = flatten_keys(catalog[locale])
        extra = sorted(keys - base_keys)
        missing = [] if catalog.abstract_supplied else sorted(base_keys - keys)

        if not missing and not extra:
            print(f"✅ {locale}: OK ({len(keys)} keys)")
            continue

        ok = False
        if missing:
            print(f"❌ {locale}: missing {len(missing)} keys compared to {base_name}:")
            for k in missing:
                print(f"   - {k}")
        if extra:
            print(f"⚠️  {locale}: has {len(extra)} extra keys not present in {base_name}:")
            for k in extra:
                print(f"   + {k}")

    try:
        CatalogValidator().validate(catalog)
    except KeyConsistencyError as exc:
        ok = False
        print(f"❌ {exc}")

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
