"""
Key consistency validation across locales
"""

import logging
from typing import Optional

from models.catalog import ABSTRACT_LOCALE, Catalog
from models.translation import Group
from utils.exceptions import ABSTRACT_LABEL, KeyConsistencyError

logger = logging.getLogger(__name__)


def check_keys(candidate: Group, baseline: Group, locale: Optional[str] = None,
               baseline_name: Optional[str] = None, parent: Optional[str] = None) -> None:
    """
    Check that every key of candidate is present in baseline

    Keys are compared by their bare name, so signatures may differ between
    locales. Groups present on both sides are checked recursively.

    Raises:
        KeyConsistencyError: on the first key missing from baseline
    """
    if parent is None:
        parent = locale
    baseline_nodes = {key.name: node for key, node in baseline.items()}
    for key, node in candidate.items():
        path = f'{parent}.{key.name}' if parent else key.name
        if key.name not in baseline_nodes:
            raise KeyConsistencyError(path, locale, baseline_name)

        other = baseline_nodes[key.name]
        if isinstance(node, Group) and isinstance(other, Group):
            check_keys(
                node, other, locale=locale,
                baseline_name=f'{baseline_name or ABSTRACT_LABEL}.{key.name}', parent=path,
            )


class CatalogValidator:
    """Validates that all locales of a catalog share their keys"""

    def validate(self, catalog: Catalog) -> Catalog:
        """
        Validate the catalog in place

        With a supplied abstract locale every concrete locale must be a
        subset of it. Without one, every locale is checked against every
        other locale, so all of them must share the same keys.
        """
        locales = catalog.concrete_locales
        if catalog.abstract_supplied:
            abstract = catalog[ABSTRACT_LOCALE]
            for locale in locales:
                check_keys(catalog[locale], abstract, locale=locale)
            logger.info(f"Validated {len(locales)} locales against the abstract locale")
        else:
            for locale in locales:
                for other in locales:
                    if locale != other:
                        check_keys(catalog[locale], catalog[other], locale=locale, baseline_name=other)
            logger.info(f"Validated {len(locales)} locales pairwise")
        return catalog
