"""
Type inference and identifier naming for the emitted Dart code
"""

from typing import Optional, Sequence, Set

from models.catalog import Catalog
from models.translation import Group, Leaf, LeafKind, Node, TranslationKey
from utils.string_utils import capitalize, decapitalize, normalize, to_camel_case

UNIVERSAL_TYPE = 'Object'
NULLABLE_MARKER = '?'


def intrinsic_type(node: Optional[Node]) -> Optional[str]:
    """The type a leaf value implies on its own"""
    if isinstance(node, Leaf):
        return node.intrinsic_type
    return None


class TypeResolver:
    """
    Resolves the Dart type of every leaf accessor

    A declared return type always wins. Otherwise the abstract type is the
    single type every concrete locale agrees on, or the universal type when
    they disagree. It becomes nullable when any locale declares a nullable
    type or leaves the key undefined.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def locale_type(self, group: Optional[Group], key: TranslationKey) -> Optional[str]:
        """
        Type contributed by one locale for key

        Returns None when the locale defines the key without a type, and
        NULLABLE_MARKER when the locale lacks the key or leaves it undefined.
        """
        found = group.find(key.name) if group is not None else None
        if found is None:
            return NULLABLE_MARKER
        locale_key, node = found
        if locale_key.return_type:
            return locale_key.return_type
        if isinstance(node, Leaf) and node.kind is LeafKind.ABSENT:
            return NULLABLE_MARKER
        return intrinsic_type(node)

    def abstract_type(self, keys: Sequence[str], key: TranslationKey) -> str:
        """Type of the abstract accessor for key in the group at keys"""
        if key.return_type:
            return key.return_type

        types: Set[str] = set()
        for locale in self.catalog.concrete_locales:
            resolved = self.locale_type(self.catalog[locale].find_nested(keys), key)
            if resolved is not None:
                types.add(resolved)

        # A supplied abstract value contributes its type, never the nullable marker
        if self.catalog.abstract_supplied:
            resolved = self.locale_type(self.catalog.abstract.find_nested(keys), key)
            if resolved is not None and resolved != NULLABLE_MARKER:
                types.add(resolved)

        nullable = any(value.endswith(NULLABLE_MARKER) for value in types)
        bases = {value.rstrip(NULLABLE_MARKER) for value in types} - {''}
        base = bases.pop() if len(bases) == 1 else UNIVERSAL_TYPE
        return base + NULLABLE_MARKER if nullable else base

    def concrete_type(self, keys: Sequence[str], key: TranslationKey, node: Node) -> str:
        """Type of a concrete accessor; falls back to the abstract type"""
        resolved = key.return_type or intrinsic_type(node)
        if resolved:
            return resolved
        abstract = self.catalog.abstract.find_nested(keys)
        found = abstract.find(key.name) if abstract is not None else None
        return self.abstract_type(keys, found[0] if found else key)


class IdentifierResolver:
    """Derives type, member, enum and instance names"""

    def __init__(self, base_name: str = 'I18N', convert: bool = True):
        self.base_name = base_name
        self.convert = convert

    def member_name(self, name: str) -> str:
        """Accessor name for a raw key name"""
        return to_camel_case(name) if self.convert else normalize(name)

    @staticmethod
    def enum_name(locale: str) -> str:
        return locale.replace('_', '')

    def const_name(self, locale: str) -> str:
        """Name of the singleton instance of a locale"""
        const_name = capitalize(self.enum_name(locale) + self.base_name)
        decapitalized = decapitalize(const_name)
        return f'${decapitalized}' if decapitalized == const_name else decapitalized

    def class_name(self, locale: str, keys: Sequence[str] = ()) -> str:
        """
        Name of the type of a locale nested with keys

        The abstract locale ('') yields the bare base name, e.g. `I18N`,
        `I18NGreetings`; `pt_BR` yields `PtBRI18N`, `PtBRI18NGreetings`.
        """
        parts = locale.split('_')
        segments = [capitalize(normalize(parts[0]))]
        if len(parts) > 1:
            segments.extend(parts[1:-1])
            segments.append(parts[-1].upper())
        segments.append(self.base_name)
        segments.extend(capitalize(self.member_name(key)) for key in keys)
        return ''.join(segments)

    def abstract_type(self, keys: Sequence[str]) -> str:
        """The abstract type at keys with its full chain of parent type arguments"""
        name = self.class_name('', keys)
        if not keys:
            return name
        return f'{name}<{self.abstract_type(keys[:-1])}>'
