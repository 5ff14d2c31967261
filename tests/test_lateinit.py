import unittest

from optchain import LateInit, Some, NONE, UnwrapError


class TestLateInit(unittest.TestCase):
    def test_read_before_set_fails(self):
        view = LateInit("detail_view")
        self.assertFalse(view.is_initialized())
        self.assertIs(view.as_option(), NONE)
        with self.assertRaises(UnwrapError) as cm:
            view.get()
        self.assertIn("detail_view accessed before initialization", str(cm.exception))

    def test_set_get_reset(self):
        v = LateInit[int]("count")
        v.set(3)
        self.assertTrue(v.is_initialized())
        self.assertEqual(v.get(), 3)
        v.value = 4
        self.assertEqual(v.value, 4)
        self.assertEqual(v.as_option(), Some(4))
        v.reset()
        with self.assertRaises(UnwrapError):
            _ = v.value

    def test_initial_value_and_repr(self):
        v = LateInit("owner", None)
        self.assertTrue(v.is_initialized())
        self.assertIsNone(v.get())
        self.assertEqual(repr(v), "LateInit(owner=None)")
        self.assertEqual(repr(LateInit("dog")), "LateInit(dog=<unset>)")
