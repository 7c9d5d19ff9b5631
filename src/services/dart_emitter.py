"""
Dart code emission for a validated catalog
"""

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from models.catalog import ABSTRACT_LOCALE, Catalog
from models.translation import Group, Leaf, LeafKind, Node, TranslationKey
from utils.code_buffer import CodeBuffer
from utils.string_utils import quote
from .resolvers import IdentifierResolver, TypeResolver

logger = logging.getLogger(__name__)

IGNORED_LINTS = ('file_names', 'unnecessary_string_interpolations', 'unused_field')
RUNTIME_IMPORTS = ('package:intl/intl.dart', 'package:meta/meta.dart')
PACKAGE_URL = 'https://pub.dev/packages/generators#i18n-generator'


def dart_literal(value: Union[bool, int, float]) -> str:
    """Render a scalar as a Dart literal"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'double.nan'
        if math.isinf(value):
            return 'double.infinity' if value > 0 else 'double.negativeInfinity'
    return repr(value)


class DartEmitter:
    """
    Emits the Dart source for a catalog

    The output holds a header, the locale enumeration and, for the abstract
    locale and every concrete locale, one class per nesting level. Abstract
    classes declare the contract, concrete classes extend them.
    """

    def __init__(self, base_name: str = 'I18N', convert: bool = True, base_class_name: str = 'L10N',
                 enum_class_name: str = 'I18NLocale', imports: Optional[Iterable[str]] = None):
        self.identifiers = IdentifierResolver(base_name, convert)
        self.base_name = base_name
        self.base_class_name = base_class_name
        self.enum_class_name = enum_class_name
        self.imports = list(imports) if imports is not None else ['package:l10n/l10n.dart']

    @classmethod
    def from_settings(cls, settings) -> 'DartEmitter':
        return cls(
            base_name=settings.base_name,
            convert=settings.convert,
            base_class_name=settings.base_class_name,
            enum_class_name=settings.enum_class_name,
            imports=settings.imports,
        )

    def emit(self, catalog: Catalog) -> str:
        """Generate the complete Dart source for catalog"""
        types = TypeResolver(catalog)
        buffer = CodeBuffer()
        self.emit_header(buffer)
        self.emit_enum(buffer, catalog)
        for locale in sorted(catalog):
            buffer.writeln()
            self.emit_model(buffer, types, locale, (), catalog[locale], catalog.abstract)
        logger.debug(f"Emitted {len(catalog.concrete_locales)} locales")
        return buffer.getvalue()

    def emit_header(self, buffer: CodeBuffer) -> None:
        (buffer
            .write_doc(', '.join(sorted(IGNORED_LINTS)), prefix='// ignore_for_file: ')
            .writeln()
            .write_doc(f'This file is used for `{self.base_name}` package generation.')
            .write_doc('')
            .write_doc('Modify this file at your own risk!')
            .write_doc('')
            .write_doc(f'See: {PACKAGE_URL}')
            .writeln()
            .write_imports([*self.imports, *RUNTIME_IMPORTS]))

    def emit_enum(self, buffer: CodeBuffer, catalog: Catalog) -> None:
        enum = self.enum_class_name
        locales = catalog.concrete_locales

        buffer.write_doc(f'The generated [{self.base_name}] enumeration.')
        buffer.writeln(f'enum {enum} {{')
        for index, locale in enumerate(locales):
            name = self.identifiers.enum_name(locale)
            buffer.write_doc(f'The implementation of the [{name}] locale.')
            buffer.writeln(name + (',' if index < len(locales) - 1 else ';'))

        (buffer
            .writeln()
            .write_doc('Return the current active locale.')
            .writeln(f'static {enum} get current {{')
            .writeln('final String currentLocale = Intl.getCurrentLocale().toLowerCase();')
            .writeln('return values.firstWhere(')
            .writeln(f'(final {enum} locale) => locale.name.toLowerCase() == currentLocale,')
            .writeln('orElse: () => values.first,')
            .writeln(');')
            .writeln('}')
            .writeln()
            .write_doc('Return the localization for this locale.')
            .writeln(f'{self.base_name} call() {{')
            .writeln('switch (this) {'))
        for locale in locales:
            buffer.writeln(f'case {enum}.{self.identifiers.enum_name(locale)}:')
            buffer.writeln(f'return {self.identifiers.const_name(locale)};')

        (buffer
            .writeln('}')
            .writeln('}')
            .writeln()
            .write_doc('Return the name of this locale.')
            .writeln('String get name {')
            .writeln('switch (this) {'))
        for locale in locales:
            buffer.writeln(f'case {enum}.{self.identifiers.enum_name(locale)}:')
            buffer.writeln(f'return {quote(locale)};')
        buffer.writeln('}').writeln('}').writeln('}')

    @staticmethod
    def group_label(keys: Sequence[str]) -> str:
        return 'root' if not keys else '`' + '`/`'.join(keys) + '`'

    @staticmethod
    def entries(node: Group, abstract: Group) -> List[Tuple[TranslationKey, Node, bool]]:
        """
        Entries of node followed by the groups only the abstract locale has

        The flag tells whether the entry comes from the abstract locale.
        """
        names = set(node.names())
        entries = [(key, child, False) for key, child in node.items()]
        if abstract is not node:
            entries.extend(
                (key, child, True) for key, child in abstract.groups() if key.name not in names
            )
        return entries

    def emit_model(self, buffer: CodeBuffer, types: TypeResolver, locale: str,
                   keys: Tuple[str, ...], node: Group, abstract: Group) -> None:
        """Emit the class of locale nested with keys, then its nested groups"""
        ids = self.identifiers
        class_name = ids.class_name(locale, keys)
        is_abstract = locale == ABSTRACT_LOCALE

        if not is_abstract and not keys:
            (buffer
                .write_doc(f'The instance of [{class_name}] locale.')
                .writeln(f'const {class_name} {ids.const_name(locale)} = {class_name}._();')
                .writeln())

        label = self.group_label(keys)
        if is_abstract:
            buffer.write_doc(f'The architecture of the {label} group.')
            declaration = f'abstract class {class_name}'
            if keys:
                declaration += f'<T extends {ids.abstract_type(keys[:-1])}>'
            declaration += f' extends {self.base_class_name}<{self.enum_class_name}>'
        else:
            buffer.write_doc(f'The [{self.enum_class_name}.{ids.enum_name(locale)}] {label} group.')
            buffer.writeln('@sealed')
            declaration = f'class {class_name} extends {ids.class_name(ABSTRACT_LOCALE, keys)}'
            if keys:
                declaration += f'<{ids.class_name(locale, keys[:-1])}>'
        buffer.writeln('@immutable')
        buffer.writeln(declaration + ' {')

        # Constructor
        if is_abstract:
            parameters = 'super._, this.$' if keys else 'super._'
            buffer.writeln(f'const {class_name}._({parameters});')
        else:
            parent = f'final {ids.class_name(locale, keys[:-1])} _' if keys else ''
            arguments = f'{self.enum_class_name}.{ids.enum_name(locale)}' + (', _' if keys else '')
            buffer.writeln(f'const {class_name}._({parent}) : super._({arguments});')

        entries = self.entries(node, abstract)
        self.emit_fields(buffer, types, locale, keys, entries)
        self.emit_equality(buffer, class_name + ('<T>' if is_abstract and keys else ''), node)
        buffer.writeln('}')

        for key, child, from_abstract in entries:
            if not isinstance(child, Group) or not ids.member_name(key.raw):
                continue
            nested = (*keys, key.raw)
            abstract_child = child if is_abstract else types.catalog.abstract.get_nested(nested)
            buffer.writeln()
            self.emit_model(
                buffer, types, locale, nested,
                Group() if from_abstract else child, abstract_child,
            )

    def emit_fields(self, buffer: CodeBuffer, types: TypeResolver, locale: str,
                    keys: Tuple[str, ...], entries: List[Tuple[TranslationKey, Node, bool]]) -> None:
        ids = self.identifiers
        is_abstract = locale == ABSTRACT_LOCALE

        if is_abstract and keys:
            buffer.writeln()
            buffer.write_doc('The parent of this group.')
            buffer.writeln('final T $;')

        for key, child, from_abstract in entries:
            is_group = isinstance(child, Group)
            member = ids.member_name(key.raw if is_group else key.name)
            if not member:
                logger.warning(f"Skipping an empty key in {self.group_label(keys)} of {locale or '<abstract>'}")
                continue

            if is_abstract:
                kind = 'group' if is_group else 'key'
                buffer.writeln()
                buffer.write_doc(f'The `{key.raw if is_group else key.name}` {kind} in the '
                                 f'{self.group_label(keys)} group.')
            elif isinstance(child, Leaf) and child.kind is LeafKind.ABSENT:
                continue
            else:
                buffer.writeln()
                buffer.writeln('@override')

            if is_group:
                nested = (*keys, key.raw)
                if is_abstract:
                    buffer.writeln(f'{ids.abstract_type(nested)} get {member};')
                else:
                    type_name = ids.class_name(locale, nested)
                    buffer.writeln(f'{type_name} get {member} => {type_name}._(this);')
                continue

            if is_abstract:
                type_name = types.abstract_type(keys, key)
            else:
                type_name = types.concrete_type(keys, key, child)
            signature = f'{member}({key.parameters})' if key.is_function else f'get {member}'
            self.emit_leaf(buffer, f'{type_name} {signature}', child)

    @staticmethod
    def emit_leaf(buffer: CodeBuffer, declaration: str, leaf: Leaf) -> None:
        if leaf.kind is LeafKind.ABSENT:
            buffer.writeln(f'{declaration};')
        elif leaf.kind is LeafKind.CODE:
            # Code blocks are pre-rendered method bodies
            buffer.writeln(f'{declaration} {{')
            buffer.write_raw(leaf.value)
            buffer.writeln('}')
        elif leaf.kind is LeafKind.LITERAL:
            buffer.writeln(f'{declaration} => {dart_literal(leaf.value)};')
        else:
            buffer.writeln(f'{declaration} => {quote(leaf.value)};')

    def emit_equality(self, buffer: CodeBuffer, type_name: str, node: Group) -> None:
        """Equality and hash code over the nested groups of node"""
        members = [
            self.identifiers.member_name(key.raw)
            for key, _ in node.groups() if key.raw
        ]
        conditions = [f'identical(this, other) || other is {type_name}']
        conditions.extend(f'other.{member} == {member}' for member in members)
        hashes = ['runtimeType', *members]

        (buffer
            .writeln()
            .writeln('@override')
            .writeln(f'bool operator ==(final Object? other) => {" && ".join(conditions)};')
            .writeln()
            .writeln('@override')
            .writeln(f'int get hashCode => {" ^ ".join(f"{name}.hashCode" for name in hashes)};'))
