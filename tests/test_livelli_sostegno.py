"""
Test per modulo livelli_sostegno.py

Verifica la determinazione del livello di finanziamento e l'ordine delle regole.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from modules.livelli_sostegno import (
    FATTORI_FINANZIAMENTO,
    MASSIMALI_PROGRAMMA,
    REGOLE_LIVELLO,
    Household,
    descrivi_livello,
    normalizza_household,
    resolve_tier,
)


def _household(income, energy="very_high", size=1, comprehensive="yes", replace_heat="no"):
    return Household(
        energy_category=energy,
        income=income,
        household_size=size,
        replace_heat=replace_heat,
        comprehensive_retrofit=comprehensive,
    )


class TestLivelloHighest:
    """Test livello più alto (100%)."""

    def test_nucleo_singolo(self):
        """1 persona, 1700 zł, EU 150, termomodernizzazione -> highest."""
        assert resolve_tier(_household("1700", energy="150")) == "highest"

    def test_nucleo_singolo_soglia(self):
        """1800 zł è ancora ammesso per 1 persona."""
        assert resolve_tier(_household("1800")) == "highest"

    def test_nucleo_multiplo_soglia(self):
        """3 persone, 1300 zł -> highest."""
        assert resolve_tier(_household("1300", size=3)) == "highest"

    def test_nucleo_multiplo_sopra_soglia(self):
        """3 persone, 1301 zł -> increased."""
        assert resolve_tier(_household("1301", size=3)) == "increased"

    def test_energia_non_sufficiente(self):
        """EU 140 non supera la soglia -> increased."""
        assert resolve_tier(_household("1700", energy="140")) == "increased"

    def test_senza_termomodernizzazione(self):
        """Senza termomodernizzazione completa -> increased."""
        assert resolve_tier(_household("1700", energy="150", comprehensive="no")) == "increased"

    def test_fasce_predefinite(self):
        """Le chiavi di fascia usano i valori rappresentativi."""
        assert resolve_tier(_household("low", energy="very_high", size=4)) == "highest"
        assert resolve_tier(_household("low", energy="high", size=4)) == "increased"


class TestLivelloIncreased:
    """Test livello increased (70%)."""

    def test_singolo_soglia(self):
        assert resolve_tier(_household("3150", comprehensive="no")) == "increased"

    def test_multiplo_soglia(self):
        assert resolve_tier(_household("2250", size=2, comprehensive="no")) == "increased"

    def test_multiplo_sopra_soglia(self):
        """2251 zł con 2 persone -> basic."""
        assert resolve_tier(_household("2251", size=2, comprehensive="no")) == "basic"

    def test_ignora_classe_energetica(self):
        """Il livello increased non dipende dall'EU."""
        assert resolve_tier(_household("mid", energy="low", size=2, comprehensive="no")) == "increased"


class TestLivelloBasic:
    """Test livello basic (40%) e non ammissibilità."""

    def test_soglia_annua_esatta(self):
        """3750 × 12 × 3 = 135 000 -> basic."""
        assert resolve_tier(_household("3750", size=3)) == "basic"

    def test_sopra_soglia_annua(self):
        """3751 × 12 × 3 > 135 000 -> none."""
        assert resolve_tier(_household("3751", size=3)) == "none"

    def test_fascia_above_singolo(self):
        """4000 × 12 × 1 = 48 000 -> basic."""
        assert resolve_tier(_household("above")) == "basic"

    def test_nucleo_numeroso_non_ammissibile(self):
        """4000 × 12 × 3 = 144 000 -> none."""
        assert resolve_tier(_household("above", size=3)) == "none"

    def test_reddito_non_interpretabile(self):
        """Reddito sconosciuto vale 0 -> increased."""
        assert resolve_tier(_household("foo", comprehensive="no")) == "increased"


class TestNormalizzazione:
    """Test normalizzazione dei dati grezzi."""

    def test_persone_non_valide(self):
        """Numero di persone non valido -> 1."""
        dati = normalizza_household(_household("1000", size="abc"))
        assert dati.persone == 1

    def test_reddito_virgola(self):
        dati = normalizza_household(_household("1299,50"))
        assert dati.reddito == pytest.approx(1299.5)

    def test_energia_fascia(self):
        dati = normalizza_household(_household("low", energy="high"))
        assert dati.energia == 130


class TestCostanti:
    """Test tabelle dei livelli."""

    def test_fattori(self):
        assert FATTORI_FINANZIAMENTO == {"none": 0.0, "basic": 0.4, "increased": 0.7, "highest": 1.0}

    def test_massimali(self):
        assert MASSIMALI_PROGRAMMA["highest"] == 135000
        assert MASSIMALI_PROGRAMMA["increased"] == 99000
        assert MASSIMALI_PROGRAMMA["basic"] == 66000
        assert MASSIMALI_PROGRAMMA["none"] == 0

    def test_ordine_regole(self):
        """Le regole vengono valutate dal livello più alto al più basso."""
        assert [livello for livello, _ in REGOLE_LIVELLO] == ["highest", "increased", "basic"]

    def test_etichette(self):
        assert descrivi_livello("highest").startswith("Najwyższy")
        assert descrivi_livello("sconosciuto") == descrivi_livello("none")
