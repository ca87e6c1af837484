import unittest
from wellness.domain.FormState import FormState


class TestFormState(unittest.TestCase):

    def setUp(self):
        self.changes = []
        self.form = FormState(
            {"age": "", "weight": "", "goal": "lose weight"},
            on_change=lambda field, value: self.changes.append((field, value)),
        )

    def test_defaults(self):
        self.assertEqual(self.form.snapshot(), {"age": "", "weight": "", "goal": "lose weight"})
        self.assertEqual(self.form.fields(), ("age", "weight", "goal"))

    def test_set_keeps_other_fields(self):
        self.form.set("weight", "70")
        self.assertEqual(self.form.get("weight"), "70")
        self.assertEqual(self.form.get("age"), "")
        self.assertEqual(self.form.get("goal"), "lose weight")

    def test_set_does_not_touch_earlier_snapshots(self):
        before = self.form.snapshot()
        self.form.set("age", "30")
        self.assertEqual(before["age"], "")
        self.assertEqual(self.form.get("age"), "30")

    def test_on_change_called_once_per_set(self):
        self.form.set("goal", "bulk")
        self.form.set("age", "41")
        self.assertEqual(self.changes, [("goal", "bulk"), ("age", "41")])

    def test_reset_restores_default(self):
        self.form.set("goal", "bulk")
        self.form.reset("goal")
        self.assertEqual(self.form.get("goal"), "lose weight")

    def test_unknown_field(self):
        with self.assertRaises(KeyError):
            self.form.set("shoe_size", "44")
        self.assertNotIn("shoe_size", self.form)
        self.assertEqual(self.changes, [])


if __name__ == '__main__':
    unittest.main()
