"""Tests for the scalar type resolution table."""

import enum
import os
import sys
import unittest

import numpy as np
import pyarrow as pa

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from arrowize.arrowtypes import is_mapping, is_sequence, scalar_type_of


class Color(enum.IntEnum):
    RED = 1


class TestScalarTypeOf(unittest.TestCase):
    """Test cases for scalar_type_of."""

    def test_python_scalars(self):
        self.assertEqual(scalar_type_of(True), pa.bool_())
        self.assertEqual(scalar_type_of(5), pa.int64())
        self.assertEqual(scalar_type_of(2.5), pa.float64())
        self.assertEqual(scalar_type_of("text"), pa.string())
        self.assertEqual(scalar_type_of(b"raw"), pa.binary())
        self.assertEqual(scalar_type_of(bytearray(b"raw")), pa.binary())
        self.assertEqual(scalar_type_of(memoryview(b"raw")), pa.binary())

    def test_bool_is_not_an_integer(self):
        self.assertEqual(scalar_type_of(False), pa.bool_())
        self.assertEqual(scalar_type_of(np.bool_(True)), pa.bool_())

    def test_signed_integers(self):
        self.assertEqual(scalar_type_of(np.int8(5)), pa.int8())
        self.assertEqual(scalar_type_of(np.int16(5)), pa.int16())
        self.assertEqual(scalar_type_of(np.int32(5)), pa.int32())
        self.assertEqual(scalar_type_of(np.int64(5)), pa.int64())

    def test_unsigned_integers(self):
        self.assertEqual(scalar_type_of(np.uint8(5)), pa.uint8())
        self.assertEqual(scalar_type_of(np.uint16(5)), pa.uint16())
        self.assertEqual(scalar_type_of(np.uint32(5)), pa.uint32())
        self.assertEqual(scalar_type_of(np.uint64(5)), pa.uint64())

    def test_platform_aliases(self):
        self.assertEqual(scalar_type_of(np.longlong(5)), pa.int64())
        self.assertEqual(scalar_type_of(np.ulonglong(5)), pa.uint64())

    def test_floats(self):
        self.assertEqual(scalar_type_of(np.float32(1.5)), pa.float32())
        self.assertEqual(scalar_type_of(np.float64(1.5)), pa.float64())

    def test_numpy_strings(self):
        self.assertEqual(scalar_type_of(np.str_("x")), pa.string())
        self.assertEqual(scalar_type_of(np.bytes_(b"x")), pa.binary())

    def test_subclasses(self):
        self.assertEqual(scalar_type_of(Color.RED), pa.int64())

    def test_unsupported(self):
        self.assertIsNone(scalar_type_of(complex(1, 2)))
        self.assertIsNone(scalar_type_of(np.complex64(1)))
        self.assertIsNone(scalar_type_of(np.float16(1)))
        self.assertIsNone(scalar_type_of(object()))
        self.assertIsNone(scalar_type_of(None))


class TestShapes(unittest.TestCase):
    """Test cases for value shape classification."""

    def test_is_mapping(self):
        self.assertTrue(is_mapping({}))
        self.assertFalse(is_mapping([]))
        self.assertFalse(is_mapping("a"))

    def test_is_sequence(self):
        self.assertTrue(is_sequence([]))
        self.assertTrue(is_sequence((1,)))
        self.assertFalse(is_sequence("abc"))
        self.assertFalse(is_sequence(b"abc"))
        self.assertFalse(is_sequence({}))


if __name__ == '__main__':
    unittest.main()
