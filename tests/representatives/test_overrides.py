import os
import tempfile
import unittest

from myconstituency.config import Environments, _create_config
from myconstituency.representatives.overrides import load_overrides


class LoadOverridesTest(unittest.TestCase):

    def test_packaged_overrides(self):
        overrides = load_overrides(_create_config(Environments.TEST).overrides_file)

        self.assertEqual(["David Eby"], [o.representative.name for o in overrides.for_province("British Columbia")])
        self.assertEqual(["Scott Moe"], [o.representative.name for o in overrides.for_province("sk")])
        self.assertEqual([], overrides.for_province("AB"))

        santa = overrides.for_postal("h0h 0h0")
        self.assertEqual(1, len(santa))
        self.assertEqual("municipal", santa[0].bucket)
        self.assertEqual("Santa Claus", santa[0].representative.name)
        self.assertEqual("North Pole", santa[0].representative.district_name)

    def test_unknown_bucket_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "overrides.yaml")
            with open(path, "w", encoding="utf-8") as fp:
                fp.write("provinces:\n  \"AB\":\n    - bucket: regional\n      representative:\n        name: X\n")

            with self.assertRaises(ValueError):
                load_overrides(path)

    def test_empty_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "overrides.yaml")
            open(path, "w").close()

            overrides = load_overrides(path)

        self.assertEqual({}, overrides.by_province)
        self.assertEqual({}, overrides.by_postal)
