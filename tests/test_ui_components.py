"""
Test per modulo ui_components.py

Testa le funzioni che preparano tabelle e grafici (senza rendering).
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from components.ui_components import format_currency, tabella_categoria, crea_grafico_ripartizione
from modules.calculator_czyste_powietrze import compute_calculation
from modules.livelli_sostegno import Household


def _risultato():
    household = Household(
        energy_category="very_high",
        income="low",
        household_size="2",
        replace_heat="yes",
        comprehensive_retrofit="yes",
    )
    entries = {
        "docs": {"audit": {"quantity": "1", "price": "1000"}},
        "heat": {"pellet_boiler": {"quantity": "1", "price": "18000"}},
    }
    return compute_calculation(household, entries)


class TestComponenti:
    """Test componenti UI."""

    def test_format_currency(self):
        assert format_currency(99000) == "99 000,00 zł"

    def test_tabella_categoria(self):
        df = tabella_categoria(_risultato().docs)
        assert len(df) == 1
        assert list(df.columns)[0] == "Pozycja"
        assert df.iloc[0]["Dofinansowanie"] == "1 000,00 zł"

    def test_grafico_solo_categorie_con_righe(self):
        """Il grafico mostra solo le categorie calcolate."""
        fig = crea_grafico_ripartizione(_risultato())
        assert len(fig.data) == 2
        assert list(fig.data[0].x) == ["Dokumentacja", "Wymiana źródła ciepła"]
