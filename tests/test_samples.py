import unittest
import gpreg.num as gnp
from gpreg.core import SampleStore
from gpreg.core.errors import DimensionMismatchError


class TestSampleStore(unittest.TestCase):
    def test_scalars_and_vectors(self):
        s = SampleStore()
        self.assertEqual(len(s), 0)
        self.assertIsNone(s.input_dim)
        s.add(1.0, 2.0)
        s.add([3.0], [4.0])
        self.assertEqual(len(s), 2)
        self.assertEqual((s.input_dim, s.output_dim), (1, 1))
        self.assertTrue(gnp.array_equal(s.inputs, [[1.0], [3.0]]))
        self.assertTrue(gnp.array_equal(s.labels, [[2.0], [4.0]]))

    def test_insertion_order(self):
        s = SampleStore()
        for x, y in [([0.0, 1.0], [5.0, 6.0]), ([2.0, 3.0], [7.0, 8.0])]:
            s.add(x, y)
        x1, y1 = s[1]
        self.assertTrue(gnp.array_equal(x1, [2.0, 3.0]))
        self.assertTrue(gnp.array_equal(y1, [7.0, 8.0]))
        self.assertEqual(s.inputs.shape, (2, 2))

    def test_dimension_mismatch_leaves_store_unchanged(self):
        s = SampleStore()
        s.add([0.0, 1.0], 1.0)
        version = s.version
        with self.assertRaises(DimensionMismatchError):
            s.add([0.0, 1.0, 2.0], 1.0)
        with self.assertRaises(DimensionMismatchError):
            s.add([0.0, 1.0], [1.0, 2.0])
        self.assertEqual(len(s), 1)
        self.assertEqual(s.version, version)

    def test_dimension_mismatch_is_a_value_error(self):
        s = SampleStore()
        s.add(0.0, 1.0)
        with self.assertRaises(ValueError):
            s.add([0.0, 1.0], 1.0)

    def test_invalid_shapes(self):
        s = SampleStore()
        with self.assertRaises(DimensionMismatchError):
            s.add([[0.0, 1.0], [1.0, 2.0]], 1.0)
        with self.assertRaises(DimensionMismatchError):
            s.add([], 1.0)

    def test_extend_all_or_nothing(self):
        s = SampleStore()
        s.extend([0.0, 1.0, 2.0], [1.0, 2.0, 3.0])
        self.assertEqual(len(s), 3)
        with self.assertRaises(DimensionMismatchError):
            s.extend([[0.0], [1.0]], [[1.0], [2.0], [3.0]])
        with self.assertRaises(DimensionMismatchError):
            s.extend([[0.0, 1.0], [1.0, 2.0]], [1.0, 2.0])
        self.assertEqual(len(s), 3)

    def test_version_and_cached_matrices(self):
        s = SampleStore()
        s.add(0.0, 1.0)
        X = s.inputs
        self.assertIs(s.inputs, X)
        v = s.version
        s.add(1.0, 2.0)
        self.assertEqual(s.version, v + 1)
        self.assertEqual(s.inputs.shape, (2, 1))

    def test_matrices_are_read_only(self):
        s = SampleStore()
        s.add(0.0, 1.0)
        with self.assertRaises(ValueError):
            s.inputs[0, 0] = 5.0
        with self.assertRaises(ValueError):
            s.labels[0, 0] = 5.0

    def test_stored_copies(self):
        s = SampleStore()
        x = gnp.array([0.0, 1.0])
        s.add(x, 1.0)
        x[0] = 9.0
        self.assertEqual(s.inputs[0, 0], 0.0)


if __name__ == "__main__":
    unittest.main()
