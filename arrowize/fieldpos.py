"""Field position tree used while inferring an Arrow schema.

Every node stands for one field in the schema being built. Nodes know their
parent, their depth and the key path from the document root, and they carry
the resolved Arrow field once inference has reached them.
"""

from typing import Any, Iterator, List, Mapping, Optional

import pyarrow as pa


class FieldPos:
    """A position in the inferred schema tree."""

    def __init__(self, name: str = '', parent: Optional['FieldPos'] = None, index: int = -1, depth: int = 0):
        self.name = name
        self.parent = parent
        self.index = index
        self.depth = depth
        self.path: List[str] = []
        self.field: Optional[pa.Field] = None
        self.error: Optional[Exception] = None
        self.children: List['FieldPos'] = []

    def __repr__(self) -> str:
        return f"FieldPos(path={self.name_path()!r}, type={self.type})"

    @property
    def type(self) -> Optional[pa.DataType]:
        """The resolved Arrow type, or None while the node is unresolved."""
        return self.field.type if self.field is not None else None

    @property
    def metadata(self):
        """Metadata of the resolved field."""
        return self.field.metadata if self.field is not None else None

    def new_child(self, name: str) -> 'FieldPos':
        """Appends a new child position and returns it.

        Names are not checked for uniqueness; repeated element names under
        nested lists are told apart by their place in the tree.
        """
        child = FieldPos(name, parent=self, index=len(self.children), depth=self.depth + 1)
        child.path = child.name_path()
        self.children.append(child)
        return child

    def child(self, index: int) -> 'FieldPos':
        """Returns the child at the given position."""
        if 0 <= index < len(self.children):
            return self.children[index]
        raise IndexError(f"{self.name_path()} child index {index} not found")

    def name_path(self) -> List[str]:
        """Returns the keys making up the path to this field."""
        if self.path:
            return self.path
        path: List[str] = []
        cur: Optional[FieldPos] = self
        while cur is not None and cur.parent is not None:
            path.append(cur.name)
            cur = cur.parent
        path.reverse()
        return path

    def get_value(self, value: Mapping[str, Any], default: Any = None) -> Any:
        """Retrieves the value at this field's key path from a decoded document.

        Returns ``default`` if an intermediate value is not a mapping or a key
        is missing.
        """
        current: Any = value
        for key in self.name_path():
            if not isinstance(current, Mapping) or key not in current:
                return default
            current = current[key]
        return current

    def resolve(self, data_type: pa.DataType, error: Optional[Exception] = None) -> pa.DataType:
        """Records the node's resolved type as a nullable field."""
        self.field = pa.field(self.name, data_type, nullable=True)
        if error is not None:
            self.error = error
        return data_type

    def walk(self) -> Iterator['FieldPos']:
        """Yields this node and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
