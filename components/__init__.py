"""
Componenti UI riutilizzabili per il kalkulator Czyste Powietrze.

Questo modulo contiene componenti Streamlit riutilizzabili per ridurre
duplicazione di codice e migliorare manutenibilità.
"""

from .ui_components import (
    format_currency,
    tabella_categoria,
    render_tabella_categoria,
    render_riepilogo,
    crea_grafico_ripartizione,
    render_grafico_ripartizione,
    render_avvisi
)

from .validators import (
    validate_household_size,
    validate_line_entry,
    validate_aliquota_iva,
    raccogli_avvisi
)

__all__ = [
    # UI Components
    'format_currency',
    'tabella_categoria',
    'render_tabella_categoria',
    'render_riepilogo',
    'crea_grafico_ripartizione',
    'render_grafico_ripartizione',
    'render_avvisi',

    # Validators
    'validate_household_size',
    'validate_line_entry',
    'validate_aliquota_iva',
    'raccogli_avvisi'
]
