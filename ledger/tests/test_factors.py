import json
import os
import tempfile

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

from ledger.services.factors import get_emission_factor, list_categories, load_factor_table
from utils.exceptions import NoEmissionFactor


class FactorTableTest(SimpleTestCase):

    def test_lookup_is_case_insensitive(self):
        factor = get_emission_factor("united states", "AIR TRANSPORTATION")
        self.assertEqual(factor.country, "United States")
        self.assertEqual(factor.category, "Air transportation")
        self.assertGreater(factor.factor, 0)

    def test_missing_pair(self):
        with self.assertRaises(NoEmissionFactor):
            get_emission_factor("Atlantis", "Air transportation")
        with self.assertRaises(NoEmissionFactor):
            get_emission_factor("United States", "Time travel")

    def test_table_is_read_only(self):
        table = load_factor_table()
        with self.assertRaises(TypeError):
            table[("x", "y")] = None

    def test_table_is_loaded_once(self):
        self.assertIs(load_factor_table(), load_factor_table())

    def test_list_categories(self):
        categories = list_categories("United States")
        self.assertIn("Air transportation", categories)
        self.assertEqual(categories, sorted(categories))
        self.assertEqual(list_categories("Atlantis"), [])
        self.assertGreaterEqual(len(list_categories()), len(categories))


class CustomFactorFileTest(SimpleTestCase):

    def _write(self, rows):
        handle, path = tempfile.mkstemp(suffix='.json')
        with os.fdopen(handle, 'w', encoding='utf-8') as f:
            json.dump(rows, f)
        self.addCleanup(os.remove, path)
        return path

    def test_first_duplicate_wins(self):
        path = self._write([
            {"country": "Testland", "category": "Widgets", "factor": 0.5},
            {"country": "TESTLAND", "category": "widgets", "factor": 9.0},
        ])
        table = load_factor_table(path)
        self.assertEqual(len(table), 1)
        self.assertEqual(get_emission_factor("Testland", "Widgets", table=table).factor, 0.5)

    def test_invalid_file(self):
        path = self._write([])
        with open(path, 'w', encoding='utf-8') as f:
            f.write("not json")
        with self.assertRaises(ImproperlyConfigured):
            load_factor_table(path)
