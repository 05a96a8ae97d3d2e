"""
Test per modulo input_parser.py

Testa la conversione tollerante degli input grezzi.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from modules.input_parser import parse_decimal, parse_household_size, parse_flag


class TestParseDecimal:
    """Test conversione numeri decimali."""

    def test_virgola_decimale(self):
        """La virgola vale come separatore decimale."""
        assert parse_decimal("1,5") == pytest.approx(1.5)

    def test_punto_decimale(self):
        """Il punto vale come separatore decimale."""
        assert parse_decimal("1.5") == pytest.approx(1.5)

    def test_stringa_vuota(self):
        """Stringa vuota vale 0."""
        assert parse_decimal("") == 0.0

    def test_stringa_non_numerica(self):
        """Testo non numerico vale 0."""
        assert parse_decimal("abc") == 0.0

    def test_none(self):
        """None vale 0."""
        assert parse_decimal(None) == 0.0

    def test_prefisso_numerico(self):
        """Viene letto il prefisso numerico iniziale."""
        assert parse_decimal("12,5 m2") == pytest.approx(12.5)
        assert parse_decimal("1.5abc") == pytest.approx(1.5)

    def test_spazi_iniziali(self):
        """Spazi iniziali ignorati."""
        assert parse_decimal("  42") == pytest.approx(42.0)

    def test_numeri_passano(self):
        """int e float restano invariati."""
        assert parse_decimal(3) == 3.0
        assert parse_decimal(2.25) == pytest.approx(2.25)

    def test_non_finiti(self):
        """NaN e infinito valgono 0."""
        assert parse_decimal(float("nan")) == 0.0
        assert parse_decimal(float("inf")) == 0.0
        assert parse_decimal("inf") == 0.0

    def test_negativo(self):
        """Il segno meno viene mantenuto."""
        assert parse_decimal("-2,5") == pytest.approx(-2.5)

    def test_booleano(self):
        """Un booleano non è un numero."""
        assert parse_decimal(True) == 0.0


class TestParseHouseholdSize:
    """Test conversione numero di persone."""

    def test_intero_valido(self):
        assert parse_household_size("3") == 3

    def test_prefisso_intero(self):
        """"2.7" -> 2, come lettura del prefisso intero."""
        assert parse_household_size("2.7") == 2

    def test_non_valido_vale_uno(self):
        """Valore non interpretabile -> 1 persona."""
        assert parse_household_size("abc") == 1
        assert parse_household_size("") == 1
        assert parse_household_size(None) == 1

    def test_zero_o_negativo_vale_uno(self):
        """Valori minori di 1 -> 1 persona."""
        assert parse_household_size("0") == 1
        assert parse_household_size(-4) == 1

    def test_intero_numerico(self):
        assert parse_household_size(5) == 5


class TestParseFlag:
    """Test flag sì/no del modulo."""

    def test_yes(self):
        assert parse_flag("yes") is True

    def test_no(self):
        assert parse_flag("no") is False

    def test_altri_valori(self):
        """Solo "yes" esatto vale come sì."""
        assert parse_flag("YES") is False
        assert parse_flag("") is False
        assert parse_flag(None) is False

    def test_booleano_vero(self):
        assert parse_flag(True) is True
