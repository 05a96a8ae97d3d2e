"""
Test per modulo validators.py

Testa gli avvisi sugli input utente.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from components.validators import (
    validate_household_size,
    validate_line_entry,
    validate_aliquota_iva,
    raccogli_avvisi
)
from modules.calculator_czyste_powietrze import LineEntry


class TestValidazionePersone:
    """Test validazione numero di persone."""

    def test_valore_valido(self):
        valido, msg = validate_household_size("3")
        assert valido is True
        assert msg is None

    def test_valore_non_numerico(self):
        """Valore non numerico: si assume 1 persona."""
        valido, msg = validate_household_size("abc")
        assert valido is False
        assert "przyjęto 1 osobę" in msg

    def test_zero(self):
        valido, msg = validate_household_size("0")
        assert valido is False
        assert "przyjęto 1 osobę" in msg

    def test_non_intero(self):
        valido, msg = validate_household_size("2,5")
        assert valido is False
        assert "liczbę całkowitą" in msg

    def test_nucleo_molto_grande_warning(self):
        """Valore plausibile ma con avviso."""
        valido, msg = validate_household_size("40")
        assert valido is True
        assert msg is not None


class TestValidazioneRiga:
    """Test validazione riga di spesa."""

    def test_riga_vuota(self):
        """Riga non compilata: nessun avviso."""
        valido, msg = validate_line_entry({"quantity": "", "price": ""}, "Audyt")
        assert valido is True
        assert msg is None

    def test_riga_completa(self):
        valido, msg = validate_line_entry({"quantity": "1", "price": "1000"}, "Audyt")
        assert valido is True
        assert msg is None

    def test_prezzo_mancante(self):
        valido, msg = validate_line_entry({"quantity": "1", "price": ""}, "Audyt")
        assert valido is False
        assert "Audyt" in msg
        assert "pominięta" in msg

    def test_quantita_non_numerica(self):
        valido, msg = validate_line_entry({"quantity": "abc", "price": "100"}, "Audyt")
        assert valido is False
        assert "pominięta" in msg

    def test_valori_negativi(self):
        valido, msg = validate_line_entry({"quantity": "-2", "price": "100"}, "Audyt")
        assert valido is False
        assert "ujemne" in msg


class TestValidazioneIva:
    """Test validazione aliquota IVA."""

    def test_vuota(self):
        valido, msg = validate_aliquota_iva("")
        assert valido is True
        assert msg is None

    @pytest.mark.parametrize("valore", ["8", "23", "0.08", "0"])
    def test_valori_validi(self, valore):
        valido, msg = validate_aliquota_iva(valore)
        assert valido is True

    def test_negativa(self):
        valido, msg = validate_aliquota_iva("-8")
        assert valido is False
        assert "ujemny" in msg

    def test_sopra_100(self):
        valido, msg = validate_aliquota_iva("123")
        assert valido is False
        assert "100%" in msg


class TestRaccoltaAvvisi:
    """Test raccolta avvisi del modulo."""

    def test_nessun_avviso(self):
        entries = {"docs": {"audit": {"quantity": "1", "price": "1000", "vat": "8"}}}
        assert raccogli_avvisi(entries) == []

    def test_avvisi_per_righe_incomplete(self):
        entries = {
            "docs": {"audit": {"quantity": "1", "price": "", "vat": "8"}},
            "thermo": {"walls": {"quantity": "10", "price": "200", "vat": "-1"}},
        }
        avvisi = raccogli_avvisi(entries)
        assert len(avvisi) == 2
        assert any("Audyt energetyczny" in a for a in avvisi)
        assert any("Ocieplenie ścian" in a for a in avvisi)

    def test_categorie_sconosciute_ignorate(self):
        assert raccogli_avvisi({"altro": {"x": {"quantity": "1"}}}) == []

    def test_voci_line_entry(self):
        """Le voci possono arrivare come LineEntry, come per il calcolo."""
        entries = {
            "docs": {"audit": LineEntry("1", "", "")},
            "heat": {"district": LineEntry("1", "20000", "-8")},
            "thermo": {"walls": LineEntry("10", "200", "23")},
        }
        avvisi = raccogli_avvisi(entries)
        assert len(avvisi) == 2
        assert any("Audyt energetyczny" in a and "pominięta" in a for a in avvisi)
        assert any("ujemny" in a for a in avvisi)

    def test_riga_line_entry(self):
        valido, msg = validate_line_entry(LineEntry("-1", "100", ""), "Audyt")
        assert valido is False
        assert "ujemne" in msg
