"""
Main application entry point
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add current directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config import load_settings
from services.generator_service import I18NGeneratorService
from utils.exceptions import GeneratorError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='i18n-generator',
        description='Generate typed Dart accessors for every translation found in '
                    'the `.json` and `.yaml` files of a directory.',
    )
    parser.add_argument('-i', '--import-path', help='Directory with the translation files.')
    parser.add_argument('-o', '--export-path', help='Path of the generated Dart file.')
    parser.add_argument('--encoding', help='Encoding of the translation files. Defaults to `utf-8`.')
    parser.add_argument('--export-encoding', help='Encoding of the generated file. Defaults to `utf-8`.')
    parser.add_argument('-n', '--base-name', help='Base name of the generated classes. Defaults to `I18N`.')
    parser.add_argument(
        '-c', '--convert', action=argparse.BooleanOptionalAction, default=None,
        help='Convert the translation keys to camel case. Disabling this leaves the keys '
             'untouched, so they have to be valid Dart names. Defaults to `true`.',
    )
    parser.add_argument('-b', '--base-class-name', help='Name of the runtime base class. Defaults to `L10N`.')
    parser.add_argument('-u', '--enum-class-name', help='Name of the locale enum. Defaults to `I18NLocale`.')
    parser.add_argument(
        '-f', '--imports', action='append',
        help='Import used in the generated file, may be repeated. '
             'Defaults to `package:l10n/l10n.dart`.',
    )
    parser.add_argument('--log-level', help='Logging level. Defaults to `INFO`.')
    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(vars(args))
        logging.getLogger().setLevel(settings.log_level)
        await I18NGeneratorService(settings).run()
    except GeneratorError as e:
        logger.error(f"Generation failed: {e}")
        return 1
    return 0


def run() -> None:
    """Console script entry point"""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
