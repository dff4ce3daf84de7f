"""Infers an Arrow schema from a decoded document.

The document is a mapping of string keys to decoded values: nested mappings,
lists, scalars or None. The inferrer mirrors the document in a FieldPos tree,
resolves a type for every node and returns the schema formed by the
top-level fields.

Positions that carry no type information (None, empty lists, scalar kinds
without an Arrow counterpart) are typed as binary so the schema stays
complete, and an UndefinedFieldTypeError is recorded for each of them. The
errors of a run are returned together as one SchemaInferenceError; whether
they are fatal is up to the caller.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import pyarrow as pa

from arrowize.arrowtypes import is_mapping, is_sequence, scalar_type_of
from arrowize.fieldpos import FieldPos

logger = logging.getLogger(__name__)

ELEMENT_SUFFIX = '.elem'


class UndefinedFieldTypeError(ValueError):
    """Raised for a field whose type can't be determined from its value.

    Attributes:
        path: Keys leading from the document root to the field
    """

    def __init__(self, path: Sequence[str]):
        self.path = list(path)
        super().__init__(f"could not determine type of unpopulated field : {self.path}")


class SchemaInferenceError(ValueError):
    """All undefined field type errors found in one inference run.

    Attributes:
        errors: The individual errors, in depth-first order
    """

    def __init__(self, errors: List[UndefinedFieldTypeError]):
        self.errors = list(errors)
        super().__init__('\n'.join(str(error) for error in self.errors))

    @property
    def paths(self) -> List[List[str]]:
        """Paths of all fields whose type couldn't be determined."""
        return [error.path for error in self.errors]


class MapToArrowInferrer:
    """Infers Arrow schemas from decoded documents."""

    def __init__(self, sort_keys: bool = False, element_suffix: str = ELEMENT_SUFFIX,
                 fallback_type: Optional[pa.DataType] = None):
        """Initialize the inferrer.

        Args:
            sort_keys: Emit the keys of each mapping in lexicographic order
                instead of the mapping's own iteration order
            element_suffix: Appended to a list field's name to name the node
                holding its element type
            fallback_type: Type for fields that can't be inferred (binary)
        """
        self.sort_keys = sort_keys
        self.element_suffix = element_suffix
        self.fallback_type = fallback_type if fallback_type is not None else pa.binary()

    def infer(self, document: Mapping[str, Any]) -> Tuple[pa.Schema, Optional[SchemaInferenceError]]:
        """Infers the schema of a document.

        Returns:
            The schema and the aggregated error, or None if every field was
            resolved. The schema is returned in either case.
        """
        root = self.build_tree(document)
        schema = pa.schema([child.field for child in root.children])
        errors = self.collect_errors(root)
        if errors:
            logger.debug("%d field(s) without a determinable type", len(errors))
            return schema, SchemaInferenceError(errors)
        return schema, None

    def build_tree(self, document: Mapping[str, Any]) -> FieldPos:
        """Builds the resolved FieldPos tree for a document."""
        if not is_mapping(document):
            raise TypeError(f"Expected a mapping at the document root, got {type(document).__name__}")
        root = FieldPos()
        self.process_mapping(root, document)
        return root

    def process_mapping(self, node: FieldPos, mapping: Mapping[str, Any]) -> pa.DataType:
        """Adds a child to node for every key of the mapping and resolves node as a struct."""
        keys = sorted(mapping) if self.sort_keys else mapping
        for key in keys:
            value = mapping[key]
            child = node.new_child(key)
            if is_mapping(value):
                self.process_mapping(child, value)
            elif is_sequence(value):
                if len(value) == 0:
                    self.resolve_undefined(child)
                else:
                    child.resolve(pa.list_(self.resolve_element_type(child, value)))
            else:
                self.resolve_scalar(child, value)
            logger.debug("Resolved %s as %s", child.path, child.type)
        return node.resolve(self.struct_of(node))

    def resolve_element_type(self, node: FieldPos, sequence: Sequence[Any]) -> pa.DataType:
        """Resolves the element type of a non-empty sequence from its first element.

        The element type is recorded on a single child of node named after
        node with the element suffix appended.
        """
        element = sequence[0]
        child = node.new_child(node.name + self.element_suffix)
        if is_mapping(element):
            return self.process_mapping(child, element)
        if is_sequence(element):
            if len(element) == 0:
                return self.resolve_undefined(child)
            return child.resolve(pa.list_(self.resolve_element_type(child, element)))
        return self.resolve_scalar(child, element)

    def resolve_scalar(self, node: FieldPos, value: Any) -> pa.DataType:
        """Resolves node from a scalar value."""
        if value is None:
            return self.resolve_undefined(node)
        data_type = scalar_type_of(value)
        if data_type is None:
            logger.debug("No Arrow type for %s value at %s", type(value).__name__, node.path)
            return self.resolve_undefined(node)
        return node.resolve(data_type)

    def resolve_undefined(self, node: FieldPos) -> pa.DataType:
        """Falls back to the fallback type and records the error on node."""
        return node.resolve(self.fallback_type, UndefinedFieldTypeError(node.name_path()))

    def struct_of(self, node: FieldPos) -> pa.DataType:
        """Builds a struct type from the resolved fields of node's children."""
        return pa.struct([child.field for child in node.children])

    def collect_errors(self, node: FieldPos) -> List[UndefinedFieldTypeError]:
        """Collects the errors of node and its descendants, depth first."""
        errors: List[UndefinedFieldTypeError] = []
        if node.error is not None:
            errors.append(node.error)
        for child in node.children:
            errors.extend(self.collect_errors(child))
        return errors


def map_to_arrow(document: Mapping[str, Any], sort_keys: bool = False, element_suffix: str = ELEMENT_SUFFIX,
                 fallback_type: Optional[pa.DataType] = None) -> Tuple[pa.Schema, Optional[SchemaInferenceError]]:
    """Infers an Arrow schema from a decoded document.

    Args:
        document: Mapping of string keys to decoded values
        sort_keys: Emit keys in lexicographic order at every level
        element_suffix: Suffix naming list element positions
        fallback_type: Type for fields that can't be inferred (binary)

    Returns:
        The schema and the aggregated error, or None if there was none
    """
    inferrer = MapToArrowInferrer(sort_keys=sort_keys, element_suffix=element_suffix, fallback_type=fallback_type)
    return inferrer.infer(document)


def infer_arrow_schema(document: Mapping[str, Any], strict: bool = False, **kwargs) -> pa.Schema:
    """Infers an Arrow schema from a decoded document.

    Undefined field types are typed as binary. With ``strict`` the aggregated
    SchemaInferenceError is raised instead of returning the schema.
    """
    schema, error = map_to_arrow(document, **kwargs)
    if error is not None and strict:
        raise error
    return schema
