"""
Kalkulator Czyste Powietrze - Applicazione Streamlit
Interfaccia web per la stima del contributo del programma "Czyste Powietrze"

Funzionalità:
- Determinazione del livello di finanziamento del nucleo familiare
- Inserimento delle voci di spesa per categoria
- Riepilogo per categoria e totale con massimale del programma
- Esportazione del riepilogo (PDF/HTML/Markdown)

Autore: EnergyIncentiveManager
Versione: 1.0.0
"""

from datetime import datetime

import pandas as pd
import streamlit as st

from components.ui_components import (
    render_avvisi,
    render_grafico_ripartizione,
    render_riepilogo,
    render_tabella_categoria,
    format_currency,
)
from components.validators import raccogli_avvisi, validate_household_size
from modules.calculator_czyste_powietrze import categorie_attive, compute_calculation
from modules.catalogo_interventi import ALIQUOTE_IVA, CATEGORIE, TITOLI_CATEGORIE, ItemDefinition
from modules.livelli_sostegno import (
    FATTORI_FINANZIAMENTO,
    MASSIMALI_PROGRAMMA,
    MESSAGGIO_NON_AMMISSIBILE,
    OPZIONI_ENERGIA,
    OPZIONI_REDDITO,
    Household,
    descrivi_livello,
)
from modules.report_generator import (
    formatta_beneficiario,
    genera_report_html,
    genera_report_markdown,
    genera_report_pdf,
)

# ============================================================================
# CONFIGURAZIONE PAGINA
# ============================================================================

st.set_page_config(
    page_title="Kalkulator Czyste Powietrze",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: bold;
        color: #2E7D32;
        text-align: center;
        margin-bottom: 1rem;
    }
    .sub-header {
        font-size: 1.1rem;
        color: #666;
        text-align: center;
        margin-bottom: 2rem;
    }
    .stMetric {
        background-color: #f8f9fa;
        padding: 1rem;
        border-radius: 8px;
        border: 1px solid #dee2e6;
    }
</style>
""", unsafe_allow_html=True)

OPZIONI_SI_NO = {"no": "Nie", "yes": "Tak"}

NOTE_CATEGORIE = {
    "docs": None,
    "heat": "Podaj liczbę urządzeń i cenę netto. VAT dla urządzeń grzewczych przyjęto 8 %.",
    "thermo": "Podaj powierzchnię lub liczbę elementów i koszt jednostkowy netto. VAT domyślnie 8 %.",
    "vent": "Podaj liczbę urządzeń i koszt jednostkowy netto. VAT domyślnie 8 %.",
}


def init_session_state():
    """Inizializza lo state della sessione."""
    if "ultimo_risultato" not in st.session_state:
        st.session_state.ultimo_risultato = None
    if "ultimo_beneficiario" not in st.session_state:
        st.session_state.ultimo_beneficiario = ("", "")
    if "ultimi_avvisi" not in st.session_state:
        st.session_state.ultimi_avvisi = []


# ============================================================================
# INPUT VOCI DI SPESA
# ============================================================================

def input_voci_categoria(key: str, items: tuple[ItemDefinition, ...]) -> dict:
    """
    Mostra la tabella di inserimento di una categoria.

    Returns:
        Dati inseriti per id voce (stringhe grezze)
    """
    st.subheader(TITOLI_CATEGORIE[key])
    if NOTE_CATEGORIE[key]:
        st.caption(NOTE_CATEGORIE[key])

    intestazione = st.columns([4, 1.5, 1.5, 1])
    for col, testo in zip(intestazione, ["Pozycja", "Ilość", "Cena jedn. netto (zł)", "VAT"]):
        col.markdown(f"**{testo}**")

    entries = {}
    for item in items:
        col_nome, col_qta, col_prezzo, col_iva = st.columns([4, 1.5, 1.5, 1])
        col_nome.write(f"{item.name} [{item.unit}]")
        quantita = col_qta.text_input(
            "Ilość", key=f"{key}_{item.id}_quantity", label_visibility="collapsed"
        )
        prezzo = col_prezzo.text_input(
            "Cena", key=f"{key}_{item.id}_price", label_visibility="collapsed"
        )
        iva = col_iva.selectbox(
            "VAT",
            options=ALIQUOTE_IVA,
            index=ALIQUOTE_IVA.index(item.vat) if item.vat in ALIQUOTE_IVA else 0,
            format_func=lambda v: f"{v} %",
            key=f"{key}_{item.id}_vat",
            label_visibility="collapsed"
        )
        entries[item.id] = {"quantity": quantita, "price": prezzo, "vat": str(iva)}

    return entries


def render_info_programma():
    """Tabella dei livelli di finanziamento e dei massimali."""
    st.subheader("Poziomy dofinansowania")
    df_livelli = pd.DataFrame([
        {
            "Poziom": descrivi_livello(livello),
            "Intensywność": f"{FATTORI_FINANZIAMENTO[livello] * 100:.0f} %",
            "Limit dotacji": format_currency(MASSIMALI_PROGRAMMA[livello]),
        }
        for livello in ("highest", "increased", "basic")
    ])
    st.dataframe(df_livelli, hide_index=True, use_container_width=True)
    st.markdown(
        "- **Najwyższy**: dochód do 1 800 zł/os. (1 osoba) lub 1 300 zł/os., "
        "EU powyżej 140 kWh/(m²·rok) i kompleksowa termomodernizacja\n"
        "- **Podwyższony**: dochód do 3 150 zł/os. (1 osoba) lub 2 250 zł/os.\n"
        "- **Podstawowy**: roczny dochód gospodarstwa do 135 000 zł"
    )


# ============================================================================
# RISULTATI
# ============================================================================

def render_risultati():
    """Mostra l'ultimo risultato calcolato nella sessione."""
    risultato = st.session_state.ultimo_risultato
    if risultato is None:
        return

    st.divider()
    render_avvisi(st.session_state.ultimi_avvisi)

    if not risultato.eligible:
        st.error(MESSAGGIO_NON_AMMISSIBILE, icon="🚫")
        return

    nome, indirizzo = st.session_state.ultimo_beneficiario
    st.markdown(f"**Beneficjent:** {formatta_beneficiario(nome, indirizzo)}")
    st.success(f"### Poziom dofinansowania: {descrivi_livello(risultato.tier)}")

    for key, categoria in risultato.categorie().items():
        render_tabella_categoria(TITOLI_CATEGORIE[key], categoria)

    render_riepilogo(risultato)
    render_grafico_ripartizione(risultato)

    with st.expander("Szczegóły obliczeń"):
        st.json(risultato.to_dict(), expanded=False)

    st.subheader("Eksport")
    nome_file = f"kalkulator_czyste_powietrze_{datetime.now().strftime('%Y%m%d')}"
    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            label="📥 Eksportuj do PDF",
            data=genera_report_pdf(risultato, nome, indirizzo),
            file_name=f"{nome_file}.pdf",
            mime="application/pdf",
            key="download_pdf"
        )
    with col2:
        st.download_button(
            label="📥 Zapisz jako HTML",
            data=genera_report_html(risultato, nome, indirizzo),
            file_name=f"{nome_file}.html",
            mime="text/html",
            key="download_html"
        )
    with col3:
        st.download_button(
            label="📥 Zapisz jako Markdown",
            data=genera_report_markdown(risultato, nome, indirizzo),
            file_name=f"{nome_file}.md",
            mime="text/markdown",
            key="download_md"
        )


# ============================================================================
# INTERFACCIA PRINCIPALE
# ============================================================================

def main():
    init_session_state()

    st.markdown('<p class="main-header">🏠 Kalkulator programu „Czyste Powietrze 2025”</p>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Szacunek dofinansowania na podstawie dochodów, liczby osób, '
        'energochłonności budynku i zakresu prac</p>',
        unsafe_allow_html=True
    )

    # ===========================================================================
    # SIDEBAR - Dane beneficjenta
    # ===========================================================================
    with st.sidebar:
        st.header("👤 Dane beneficjenta")

        nome = st.text_input("Imię i nazwisko", key="sidebar_nome")
        indirizzo = st.text_input("Adres inwestycji", key="sidebar_indirizzo")

        energia = st.selectbox(
            "Efektywność energetyczna budynku (EU)",
            options=[o.value for o in OPZIONI_ENERGIA],
            format_func=lambda v: next(o.label for o in OPZIONI_ENERGIA if o.value == v),
            key="sidebar_energia"
        )
        reddito = st.selectbox(
            "Miesięczny dochód na osobę",
            options=[o.value for o in OPZIONI_REDDITO],
            format_func=lambda v: next(o.label for o in OPZIONI_REDDITO if o.value == v),
            key="sidebar_reddito"
        )
        persone = st.text_input("Liczba osób w gospodarstwie domowym", value="1", key="sidebar_persone")
        _, msg_persone = validate_household_size(persone)
        if msg_persone:
            st.caption(msg_persone)

        sostituzione = st.selectbox(
            "Czy wymieniasz źródło ciepła?",
            options=list(OPZIONI_SI_NO),
            format_func=OPZIONI_SI_NO.get,
            key="sidebar_sostituzione"
        )
        termomodernizzazione = st.selectbox(
            "Czy planujesz kompleksową termomodernizację?",
            options=list(OPZIONI_SI_NO),
            format_func=OPZIONI_SI_NO.get,
            key="sidebar_termo"
        )

    tab_calcolo, tab_info = st.tabs(["🧮 Kalkulator", "ℹ️ O programie"])

    household = Household(
        energy_category=energia,
        income=reddito,
        household_size=persone,
        replace_heat=sostituzione,
        comprehensive_retrofit=termomodernizzazione,
    )

    with tab_calcolo:
        attive = categorie_attive(household)

        entries = {}
        for key, items in CATEGORIE.items():
            if attive[key]:
                entries[key] = input_voci_categoria(key, items)

        if st.button("Oblicz", type="primary", use_container_width=True):
            st.session_state.ultimo_risultato = compute_calculation(household, entries)
            st.session_state.ultimo_beneficiario = (nome, indirizzo)
            st.session_state.ultimi_avvisi = raccogli_avvisi(entries)

        render_risultati()

    with tab_info:
        render_info_programma()

    # Footer
    st.divider()
    st.markdown("""
    <div style="text-align: center; color: #666; font-size: 0.8rem;">
        Kalkulator Czyste Powietrze v1.0 | Wyliczenie ma charakter szacunkowy
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
