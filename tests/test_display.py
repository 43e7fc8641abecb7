"""
Tests for rich rendering of ring values.
"""

import io
import unittest

from rich.console import Console
from rich.pretty import pretty_repr

from ring360 import Ring360
from ring360.display import print_rings, ring_table


class TestRingTable(unittest.TestCase):
    """Test the rich table helpers."""

    def test_table_shape(self):
        """Test one row per value and five columns."""
        table = ring_table([Ring360(-82.467352), 432.202828, Ring360.from_gis(-75.0)])
        self.assertEqual(table.row_count, 3)
        self.assertEqual(len(table.columns), 5)

    def test_print_rings(self):
        """Test printed output shows raw, degrees and GIS readings."""
        console = Console(file=io.StringIO(), width=120, color_system=None)
        print_rings([Ring360(-90.0), Ring360.from_gis(-75.0)], title="Bearings", console=console)
        output = console.file.getvalue()
        self.assertIn("Bearings", output)
        self.assertIn("-90", output)
        self.assertIn("270", output)
        self.assertIn("285", output)
        self.assertIn("-75", output)

    def test_pretty_repr(self):
        """Test rich's pretty printer shows degrees and rotations."""
        text = pretty_repr(Ring360(-90.0))
        self.assertIn("degrees=270.0", text)
        self.assertIn("rotations=-1", text)


if __name__ == "__main__":
    unittest.main()
