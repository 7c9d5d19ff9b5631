"""
Translation tree data models
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from utils.exceptions import CatalogStructureError, NestedPathError


@dataclass(frozen=True)
class TranslationKey:
    """
    A raw translation key parsed into its accessor signature

    `String greet(String name)` is parsed into the name `greet`, the return
    type `String` and the parameters `String name`. A key without `(` has no
    parameter list and becomes a plain property.
    """
    raw: str
    name: str
    return_type: Optional[str] = None
    parameters: Optional[str] = None

    @classmethod
    def parse(cls, raw: str) -> 'TranslationKey':
        declaration, paren, rest = raw.partition('(')
        declaration = declaration.strip()

        parameters = None
        if paren:
            parameters = rest.strip()
            if parameters.endswith(')'):
                parameters = parameters[:-1].strip()

        return_type = None
        name = declaration
        if '>' in declaration:
            head, _, tail = declaration.rpartition('>')
            # `Map<String, int> counts` closes a generic type, `String>count` does not
            if tail[:1].isspace():
                head += '>'
            return_type = head.strip() or None
            name = tail.strip()
        elif ' ' in declaration:
            return_type, _, tail = declaration.partition(' ')
            name = tail.strip()

        return cls(raw=raw, name=name, return_type=return_type, parameters=parameters)

    @property
    def is_function(self) -> bool:
        return self.parameters is not None


class LeafKind(Enum):
    """The closed set of values a leaf can hold"""
    TEXT = 'text'
    CODE = 'code'
    LITERAL = 'literal'
    ABSENT = 'absent'


_LITERAL_TYPES = {bool: 'bool', int: 'int', float: 'double'}


@dataclass(frozen=True)
class Leaf:
    """A terminal translation value"""
    kind: LeafKind
    value: Union[str, int, float, bool, None] = None

    @classmethod
    def from_value(cls, value: Any) -> 'Leaf':
        if value is None:
            return cls(LeafKind.ABSENT)
        if isinstance(value, str):
            return cls(LeafKind.CODE if '\n' in value else LeafKind.TEXT, value)
        if type(value) in _LITERAL_TYPES:
            return cls(LeafKind.LITERAL, value)
        raise CatalogStructureError(f"Unsupported translation value: {value!r}")

    @property
    def intrinsic_type(self) -> Optional[str]:
        """The type implied by the value itself; code blocks and absent values have none"""
        if self.kind is LeafKind.TEXT:
            return 'String'
        if self.kind is LeafKind.LITERAL:
            return _LITERAL_TYPES[type(self.value)]
        return None

    def to_value(self) -> Any:
        return self.value


Node = Union['Group', Leaf]


class Group:
    """An ordered mapping from raw keys to nested nodes, in first-seen order"""

    def __init__(self, entries: Optional[Mapping[str, Node]] = None):
        self._entries: Dict[str, Node] = {}
        self._keys: Dict[str, TranslationKey] = {}
        for raw, node in (entries or {}).items():
            self[raw] = node

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> 'Group':
        """Build a tree from a decoded nested mapping"""
        group = cls()
        for raw, value in mapping.items():
            group[str(raw)] = cls.from_value(value)
        return group

    @classmethod
    def from_value(cls, value: Any) -> Node:
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        return Leaf.from_value(value)

    def __setitem__(self, raw: str, node: Node) -> None:
        self._entries[raw] = node
        self._keys[raw] = TranslationKey.parse(raw)

    def __getitem__(self, raw: str) -> Node:
        return self._entries[raw]

    def __contains__(self, raw: object) -> bool:
        return raw in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Group({self.to_dict()!r})"

    def items(self) -> Iterator[Tuple[TranslationKey, Node]]:
        for raw, node in self._entries.items():
            yield self._keys[raw], node

    def groups(self) -> Iterator[Tuple[TranslationKey, 'Group']]:
        for key, node in self.items():
            if isinstance(node, Group):
                yield key, node

    def names(self) -> List[str]:
        return [key.name for key in self._keys.values()]

    def find(self, name: str) -> Optional[Tuple[TranslationKey, Node]]:
        """Find an entry by its bare name, ignoring any signature"""
        for key, node in self.items():
            if key.name == name:
                return key, node
        return None

    def child(self, raw: str) -> Optional[Node]:
        """Look a child up by raw key, falling back to its bare name"""
        if raw in self._entries:
            return self._entries[raw]
        found = self.find(TranslationKey.parse(raw).name)
        return found[1] if found else None

    def find_nested(self, keys: Sequence[str]) -> Optional['Group']:
        node: Node = self
        for raw in keys:
            node = node.child(raw) if isinstance(node, Group) else None
            if node is None:
                return None
        return node if isinstance(node, Group) else None

    def get_nested(self, keys: Sequence[str]) -> 'Group':
        """Return the group at keys, raising NestedPathError when there is none"""
        node: Node = self
        for index, raw in enumerate(keys):
            child = node.child(raw) if isinstance(node, Group) else None
            if child is None:
                raise NestedPathError(keys, keys[:index])
            node = child
        if not isinstance(node, Group):
            raise NestedPathError(keys, keys[:-1])
        return node

    def merge(self, other: 'Group') -> 'Group':
        """Shallow merge: entries of other replace entries of this group"""
        for raw, node in other._entries.items():
            self[raw] = node
        return self

    def nest(self, keys: Sequence[str], node: Node) -> 'Group':
        """
        Place node at the key path, creating intermediate groups

        When a group already sits at the path and node is a group as well,
        both are shallow merged with node winning on collisions.
        """
        if not keys:
            if not isinstance(node, Group):
                raise CatalogStructureError("Only a group can be merged into the root")
            return self.merge(node)

        parent = self
        for raw in keys[:-1]:
            current = parent._entries.get(raw)
            if not isinstance(current, Group):
                current = Group()
                parent[raw] = current
            parent = current

        existing = parent._entries.get(keys[-1])
        if isinstance(existing, Group) and isinstance(node, Group):
            existing.merge(node)
        else:
            parent[keys[-1]] = node
        return self

    def shape(self) -> 'Group':
        """Copy of the key structure with every leaf value stripped"""
        shaped = Group()
        for raw, node in self._entries.items():
            shaped[raw] = node.shape() if isinstance(node, Group) else Leaf(LeafKind.ABSENT)
        return shaped

    def to_dict(self) -> Dict[str, Any]:
        return {
            raw: node.to_dict() if isinstance(node, Group) else node.to_value()
            for raw, node in self._entries.items()
        }
