import os
import unittest
import warnings
from unittest import mock

import numpy as np

import cachematrix
from cachematrix import CacheMatrixShapeWarning, Settings, ShapeError, make_cache_matrix


class TestSettings(unittest.TestCase):
    def test_default_is_raise(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(Settings().shape_policy, "raise")

    def test_environment_variable_is_read(self):
        with mock.patch.dict(os.environ, {"CACHEMATRIX_SHAPE_POLICY": " WARN "}):
            self.assertEqual(Settings().shape_policy, "warn")

    def test_invalid_environment_value_raises(self):
        with mock.patch.dict(os.environ, {"CACHEMATRIX_SHAPE_POLICY": "ignore"}):
            with self.assertRaises(ValueError):
                Settings().shape_policy

    def test_set_returns_previous_and_validates(self):
        s = Settings(env_var="CACHEMATRIX_TEST_UNSET_POLICY")
        self.assertEqual(s.set_shape_policy("warn"), "raise")
        self.assertEqual(s.shape_policy, "warn")
        with self.assertRaises(ValueError):
            s.set_shape_policy("explode")
        self.assertEqual(s.shape_policy, "warn")

    def test_reset_rereads_environment(self):
        s = Settings(env_var="CACHEMATRIX_TEST_POLICY")
        with mock.patch.dict(os.environ, {"CACHEMATRIX_TEST_POLICY": "warn"}):
            s.set_shape_policy("raise")
            s.reset()
            self.assertEqual(s.shape_policy, "warn")

    def test_temporary_policy_restores(self):
        before = cachematrix.get_settings().shape_policy
        with cachematrix.temporary_shape_policy("warn"):
            self.assertEqual(cachematrix.get_settings().shape_policy, "warn")
        self.assertEqual(cachematrix.get_settings().shape_policy, before)


class TestMakeCacheMatrix(unittest.TestCase):
    def test_square_builds_instance(self):
        cm = make_cache_matrix(np.eye(3))
        self.assertIsInstance(cm, cachematrix.CacheMatrix)

    def test_non_square_raises_under_raise_policy(self):
        with cachematrix.temporary_shape_policy("raise"):
            with self.assertRaises(ShapeError):
                make_cache_matrix(np.ones((2, 3)))

    def test_non_square_returns_none_under_warn_policy(self):
        with cachematrix.temporary_shape_policy("warn"):
            with warnings.catch_warnings(record=True) as w:
                warnings.simplefilter("always")
                cm = make_cache_matrix(np.ones((2, 3)))
        self.assertIsNone(cm)
        hits = [item for item in w if issubclass(item.category, CacheMatrixShapeWarning)]
        self.assertEqual(len(hits), 1)
        self.assertIn("None returned", str(hits[0].message))

    def test_non_matrix_returns_none_under_warn_policy(self):
        with cachematrix.temporary_shape_policy("warn"):
            with warnings.catch_warnings(record=True) as w:
                warnings.simplefilter("always")
                from_string = make_cache_matrix("abc")
                from_scalar = make_cache_matrix(5)
        self.assertIsNone(from_string)
        self.assertIsNone(from_scalar)
        hits = [item for item in w if issubclass(item.category, CacheMatrixShapeWarning)]
        self.assertEqual(len(hits), 2)

    def test_non_matrix_raises_type_error_under_raise_policy(self):
        with cachematrix.temporary_shape_policy("raise"):
            with self.assertRaises(TypeError):
                make_cache_matrix("abc")

    def test_no_argument_builds_empty_instance(self):
        cm = make_cache_matrix()
        self.assertEqual(cm.shape, (0, 0))

    def test_warning_category_is_filterable(self):
        self.assertTrue(issubclass(CacheMatrixShapeWarning, cachematrix.CacheMatrixWarning))
        self.assertTrue(issubclass(CacheMatrixShapeWarning, UserWarning))
        with cachematrix.temporary_shape_policy("warn"):
            with warnings.catch_warnings():
                warnings.simplefilter("error", CacheMatrixShapeWarning)
                with self.assertRaises(CacheMatrixShapeWarning):
                    make_cache_matrix([[1.0, 2.0]])


if __name__ == "__main__":
    unittest.main()
