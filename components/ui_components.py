"""
Componenti UI riutilizzabili per Streamlit.

Contiene funzioni per il rendering uniforme dei risultati del calcolo
"Czyste Powietrze": tabelle per categoria, riepilogo, grafico e avvisi.
"""

from typing import List

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from modules.calculator_czyste_powietrze import CalculationResult, CategoryResult
from modules.catalogo_interventi import TITOLI_CATEGORIE
from modules.report_generator import VOCI_RIEPILOGO, formatta_importo


def format_currency(valore: float, simbolo: str = "zł") -> str:
    """
    Formatta valore come valuta.

    Args:
        valore: Valore numerico
        simbolo: Simbolo valuta

    Returns:
        Stringa formattata (es. "12 345,67 zł")
    """
    return formatta_importo(valore, simbolo)


def tabella_categoria(categoria: CategoryResult) -> pd.DataFrame:
    """Righe di una categoria come DataFrame con intestazioni polacche."""
    return pd.DataFrame([
        {
            "Pozycja": row.name,
            "Ilość": f"{row.quantity:.2f}",
            "Koszt netto": format_currency(row.cost_net),
            "VAT": format_currency(row.vat_amount),
            "Koszt brutto": format_currency(row.gross),
            "Dofinansowanie": format_currency(row.grant),
            "Dopłata beneficjenta": format_currency(row.beneficiary),
        }
        for row in categoria.rows
    ])


def render_tabella_categoria(titolo: str, categoria: CategoryResult) -> None:
    """
    Renderizza la tabella di una categoria; nulla se non ci sono righe.

    Args:
        titolo: Titolo della categoria
        categoria: Risultato della categoria
    """
    if not categoria or not categoria.rows:
        return

    st.subheader(titolo)
    st.dataframe(tabella_categoria(categoria), hide_index=True, use_container_width=True)


def render_riepilogo(risultato: CalculationResult) -> None:
    """Renderizza il riepilogo dei totali con metriche e tabella."""
    totals = risultato.totals

    st.subheader("Podsumowanie")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(label="Kwota brutto inwestycji", value=format_currency(totals.gross))
    with col2:
        st.metric(label="Dofinansowanie", value=format_currency(totals.grant))
    with col3:
        st.metric(label="Dopłata beneficjenta", value=format_currency(totals.beneficiary))

    df_riepilogo = pd.DataFrame([
        {"Pozycja": etichetta, "Kwota": format_currency(getattr(totals, campo))}
        for campo, etichetta in VOCI_RIEPILOGO
    ])
    st.dataframe(df_riepilogo, hide_index=True, use_container_width=True)

    if risultato.cap_applied:
        st.warning(
            f"Suma dofinansowania ({format_currency(risultato.grant_before_cap)}) przekracza limit "
            f"programu – przyjęto {format_currency(risultato.grant_ceiling)}.",
            icon="⚠️"
        )


def crea_grafico_ripartizione(risultato: CalculationResult) -> go.Figure:
    """Grafico a barre impilate: dofinansowanie e dopłata per categoria."""
    titoli = []
    contributi = []
    quote = []
    for key, categoria in risultato.categorie().items():
        if not categoria.rows:
            continue
        titoli.append(TITOLI_CATEGORIE[key])
        contributi.append(categoria.grant)
        quote.append(categoria.beneficiary)

    fig = go.Figure()
    fig.add_trace(go.Bar(
        name="Dofinansowanie", x=titoli, y=contributi,
        marker_color="#2E7D32", text=[format_currency(v) for v in contributi], textposition="auto"
    ))
    fig.add_trace(go.Bar(
        name="Dopłata beneficjenta", x=titoli, y=quote,
        marker_color="#1565C0", text=[format_currency(v) for v in quote], textposition="auto"
    ))
    fig.update_layout(
        barmode="stack",
        title="Podział kosztów brutto według kategorii",
        yaxis_title="zł",
        height=400,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig


def render_grafico_ripartizione(risultato: CalculationResult) -> None:
    """Renderizza il grafico della ripartizione, se ci sono righe calcolate."""
    if not any(c.rows for c in risultato.categorie().values()):
        return
    st.plotly_chart(crea_grafico_ripartizione(risultato), use_container_width=True)


def render_avvisi(avvisi: List[str]) -> None:
    """Mostra gli avvisi di validazione (non bloccanti)."""
    for messaggio in avvisi:
        st.warning(messaggio, icon="⚠️")
