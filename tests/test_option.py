import copy
import pickle
import unittest

from optchain import Option, Some, NONE, UnwrapError, from_nullable, attempt


class TestOptionCore(unittest.TestCase):
    def test_variants(self):
        self.assertTrue(isinstance(Some(1), Option))
        self.assertTrue(Some(1).is_some())
        self.assertFalse(Some(1).is_none())
        self.assertTrue(NONE.is_none())
        self.assertFalse(NONE.is_some())
        self.assertTrue(Some(None).is_some())

    def test_equality(self):
        self.assertEqual(Some(2), Some(2))
        self.assertNotEqual(Some(2), Some(3))
        self.assertEqual(NONE, NONE)
        self.assertNotEqual(Some(2), NONE)
        self.assertNotEqual(NONE, Some(2))
        self.assertEqual(len({Some(1), Some(1), NONE, NONE}), 2)

    def test_none_is_singleton_across_copy_and_pickle(self):
        self.assertIs(copy.copy(NONE), NONE)
        self.assertIs(copy.deepcopy(NONE), NONE)
        self.assertIs(pickle.loads(pickle.dumps(NONE)), NONE)
        self.assertEqual(pickle.loads(pickle.dumps(Some([1, 2]))), Some([1, 2]))

    def test_pattern_matching(self):
        def describe(o):
            match o:
                case Some(v):
                    return f"some:{v}"
                case _:
                    return "none"
        self.assertEqual(describe(Some(3)), "some:3")
        self.assertEqual(describe(NONE), "none")

    def test_force_unwrap(self):
        s = Some(12)
        for _ in range(3):
            self.assertEqual(s.force_unwrap(), 12)
        with self.assertRaises(UnwrapError) as cm:
            NONE.force_unwrap("age must be set")
        self.assertIn("age must be set", str(cm.exception))

    def test_force_unwrap_is_not_an_ordinary_exception(self):
        with self.assertRaises(UnwrapError):
            try:
                NONE.force_unwrap()
            except Exception:
                self.fail("UnwrapError must not be caught as Exception")

    def test_unwrap_or(self):
        name = from_nullable(None)
        self.assertEqual(name.unwrap_or("Slow Freddy"), "Slow Freddy")
        self.assertEqual(Some("Fast Freddy").unwrap_or("Slow Freddy"), "Fast Freddy")
        self.assertEqual(NONE.get_or_else(40), 40)

    def test_unwrap_or_else_is_lazy(self):
        calls = []
        def supplier():
            calls.append(1)
            return 7
        self.assertEqual(Some(5).unwrap_or_else(supplier), 5)
        self.assertEqual(calls, [])
        self.assertEqual(NONE.unwrap_or_else(supplier), 7)
        self.assertEqual(calls, [1])

    def test_map_flat_map(self):
        self.assertEqual(Some(2).map(lambda x: x + 1), Some(3))
        self.assertEqual(Some(2).flat_map(lambda x: Some(x * 3)), Some(6))
        self.assertEqual(Some(2).flat_map(lambda x: NONE), NONE)
        with self.assertRaises(TypeError):
            Some(2).flat_map(lambda x: x * 3)

    def test_absent_never_invokes_transforms(self):
        calls = []
        def f(x):
            calls.append(x)
            return Some(x)
        self.assertIs(NONE.map(f), NONE)
        self.assertIs(NONE.flat_map(f), NONE)
        self.assertIs(NONE.filter(f), NONE)
        self.assertEqual(calls, [])

    def test_transform_errors_propagate(self):
        def boom(_):
            raise ValueError("bad")
        with self.assertRaises(ValueError):
            Some(1).map(boom)
        with self.assertRaises(ValueError):
            Some(1).flat_map(boom)
        with self.assertRaises(ValueError):
            Some(1).filter(boom)

    def test_filter(self):
        even = lambda x: x % 2 == 0
        self.assertEqual(Some(4).filter(even), Some(4))
        self.assertIs(Some(5).filter(even), NONE)
        self.assertIs(NONE.filter(even), NONE)

    def test_or_else_and_to_nullable(self):
        self.assertEqual(NONE.or_else(lambda: Some(1)), Some(1))
        self.assertEqual(Some(2).or_else(lambda: Some(1)), Some(2))
        self.assertIsNone(NONE.to_nullable())
        self.assertEqual(Some("x").to_nullable(), "x")


class TestConversions(unittest.TestCase):
    def test_from_nullable(self):
        self.assertEqual(from_nullable(0), Some(0))
        self.assertIs(from_nullable(None), NONE)

    def test_attempt(self):
        self.assertEqual(attempt(lambda: int("45"), ValueError), Some(45))
        self.assertIs(attempt(lambda: int("abc"), ValueError), NONE)
        self.assertIs(attempt(lambda: {}["k"]), NONE)
        with self.assertRaises(KeyError):
            attempt(lambda: {}["k"], ValueError)
