"""
Modulo per la generazione dei report del calcolo "Czyste Powietrze".

Genera il riepilogo del contributo in HTML, Markdown e PDF a partire dal
CalculationResult e dai dati del beneficiario. Nessun calcolo viene
eseguito qui: i report sono solo una rappresentazione del risultato.

Autore: EnergyIncentiveManager
Versione: 1.0.0
"""

import html
import io
import logging
from datetime import datetime
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from modules.calculator_czyste_powietrze import CalculationResult, CategoryResult
from modules.catalogo_interventi import TITOLI_CATEGORIE
from modules.livelli_sostegno import MESSAGGIO_NON_AMMISSIBILE, descrivi_livello

# Configurazione logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


TITOLO_REPORT = "Kalkulator programu „Czyste Powietrze 2025”"

INTESTAZIONI_RIGHE = [
    "Pozycja", "Ilość", "Koszt netto", "VAT", "Koszt brutto", "Dofinansowanie", "Dopłata beneficjenta"
]

VOCI_RIEPILOGO = [
    ("net", "Kwota netto inwestycji"),
    ("vat", "VAT"),
    ("gross", "Kwota brutto inwestycji"),
    ("grant", "Dofinansowanie"),
    ("beneficiary", "Kwota dopłaty beneficjenta"),
]

# Font TrueType con i caratteri polacchi; Helvetica non ha ą, ę, ł, ...
FONT_TTF_CANDIDATI = [
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/dejavu/DejaVuSans.ttf"),
    Path("C:/Windows/Fonts/arial.ttf"),
    Path("/Library/Fonts/Arial.ttf"),
]


# ============================================================================
# FORMATTAZIONE
# ============================================================================

def formatta_importo(valore: float, simbolo: str = "zł") -> str:
    """Importo in formato polacco: 12 345,67 zł."""
    return f"{valore:,.2f} {simbolo}".replace(",", " ").replace(".", ",")


def formatta_beneficiario(nome: str, indirizzo: str) -> str:
    """Nome e indirizzo separati da virgola, o quello dei due presente."""
    nome = (nome or "").strip()
    indirizzo = (indirizzo or "").strip()
    if nome and indirizzo:
        return f"{nome}, {indirizzo}"
    return nome or indirizzo


def categorie_con_righe(risultato: CalculationResult) -> list[tuple[str, CategoryResult]]:
    """Categorie da mostrare nel report: solo quelle con almeno una riga."""
    return [
        (TITOLI_CATEGORIE[key], categoria)
        for key, categoria in risultato.categorie().items()
        if categoria.rows
    ]


def _valori_riga(row) -> list[str]:
    return [
        row.name,
        f"{row.quantity:.2f}",
        formatta_importo(row.cost_net),
        formatta_importo(row.vat_amount),
        formatta_importo(row.gross),
        formatta_importo(row.grant),
        formatta_importo(row.beneficiary),
    ]


# ============================================================================
# REPORT HTML
# ============================================================================

def genera_report_html(
    risultato: CalculationResult,
    nome_beneficiario: str = "",
    indirizzo: str = ""
) -> str:
    """
    Genera il report HTML del calcolo.

    Args:
        risultato: Risultato di compute_calculation
        nome_beneficiario: Nome e cognome del beneficiario
        indirizzo: Indirizzo dell'investimento

    Returns:
        Stringa HTML del report
    """
    data_report = datetime.now().strftime("%d.%m.%Y %H:%M")
    beneficiario = html.escape(formatta_beneficiario(nome_beneficiario, indirizzo))

    html_out = f"""<!DOCTYPE html>
<html lang="pl">
<head>
    <meta charset="UTF-8">
    <title>{TITOLO_REPORT}</title>
    <style>
        body {{
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            line-height: 1.5;
            color: #333;
            max-width: 210mm;
            margin: 0 auto;
            padding: 15mm;
        }}
        h1 {{
            color: #2E7D32;
            font-size: 22px;
            border-bottom: 3px solid #2E7D32;
            padding-bottom: 10px;
        }}
        h2 {{ color: #2E7D32; font-size: 18px; }}
        h3 {{ font-size: 15px; margin-top: 20px; }}
        table {{ width: 100%; border-collapse: collapse; margin: 10px 0; font-size: 12px; }}
        th, td {{ border: 1px solid #ddd; padding: 6px 8px; }}
        th {{ background: #e8f5e9; text-align: left; }}
        td.num {{ text-align: right; }}
        .warning {{ background: #fff3cd; border: 1px solid #ffeeba; padding: 10px; color: #856404; }}
        .footer {{ margin-top: 30px; font-size: 11px; color: #888; }}
    </style>
</head>
<body>
    <h1>{TITOLO_REPORT}</h1>
    <p><strong>Beneficjent:</strong> {beneficiario}</p>
    <p><strong>Data:</strong> {data_report}</p>
"""

    if not risultato.eligible:
        html_out += f"""    <p class="warning">{MESSAGGIO_NON_AMMISSIBILE}</p>
</body>
</html>
"""
        return html_out

    html_out += f"    <h2>Poziom dofinansowania: {descrivi_livello(risultato.tier)}</h2>\n"

    for titolo, categoria in categorie_con_righe(risultato):
        html_out += f"    <h3>{titolo}</h3>\n    <table>\n        <tr>"
        html_out += "".join(f"<th>{h}</th>" for h in INTESTAZIONI_RIGHE)
        html_out += "</tr>\n"
        for row in categoria.rows:
            valori = _valori_riga(row)
            html_out += f"        <tr><td>{html.escape(valori[0])}</td>"
            html_out += "".join(f'<td class="num">{v}</td>' for v in valori[1:])
            html_out += "</tr>\n"
        html_out += "    </table>\n"

    html_out += "    <h3>Podsumowanie</h3>\n    <table>\n"
    for campo, etichetta in VOCI_RIEPILOGO:
        valore = getattr(risultato.totals, campo)
        html_out += f'        <tr><th>{etichetta}</th><td class="num">{formatta_importo(valore)}</td></tr>\n'
    html_out += "    </table>\n"

    if risultato.cap_applied:
        html_out += (
            f'    <p class="warning">Dofinansowanie ograniczono do limitu programu '
            f'{formatta_importo(risultato.grant_ceiling)}.</p>\n'
        )

    html_out += """    <p class="footer">Wyliczenie ma charakter szacunkowy.</p>
</body>
</html>
"""
    return html_out


# ============================================================================
# REPORT MARKDOWN
# ============================================================================

def genera_report_markdown(
    risultato: CalculationResult,
    nome_beneficiario: str = "",
    indirizzo: str = ""
) -> str:
    """Genera il report in formato Markdown."""
    md = f"""# {TITOLO_REPORT}

**Beneficjent:** {formatta_beneficiario(nome_beneficiario, indirizzo)}

**Data:** {datetime.now().strftime("%d.%m.%Y %H:%M")}

"""

    if not risultato.eligible:
        return md + f"> {MESSAGGIO_NON_AMMISSIBILE}\n"

    md += f"## Poziom dofinansowania: {descrivi_livello(risultato.tier)}\n\n"

    for titolo, categoria in categorie_con_righe(risultato):
        md += f"### {titolo}\n\n"
        md += "| " + " | ".join(INTESTAZIONI_RIGHE) + " |\n"
        md += "|" + "---|" * len(INTESTAZIONI_RIGHE) + "\n"
        for row in categoria.rows:
            md += "| " + " | ".join(_valori_riga(row)) + " |\n"
        md += "\n"

    md += "### Podsumowanie\n\n| Pozycja | Kwota |\n|---|---|\n"
    for campo, etichetta in VOCI_RIEPILOGO:
        md += f"| {etichetta} | {formatta_importo(getattr(risultato.totals, campo))} |\n"

    if risultato.cap_applied:
        md += f"\n*Dofinansowanie ograniczono do limitu programu {formatta_importo(risultato.grant_ceiling)}.*\n"

    return md


# ============================================================================
# REPORT PDF
# ============================================================================

def _registra_font() -> str:
    """Registra un font TTF con caratteri polacchi, se presente sul sistema."""
    for percorso in FONT_TTF_CANDIDATI:
        if percorso.exists():
            if "RaportFont" not in pdfmetrics.getRegisteredFontNames():
                pdfmetrics.registerFont(TTFont("RaportFont", str(percorso)))
            return "RaportFont"
    logger.warning("Nessun font TTF con caratteri polacchi trovato: uso Helvetica")
    return "Helvetica"


def genera_report_pdf(
    risultato: CalculationResult,
    nome_beneficiario: str = "",
    indirizzo: str = ""
) -> bytes:
    """
    Genera il report PDF del calcolo.

    Returns:
        Contenuto del file PDF
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=1.5*cm,
        leftMargin=1.5*cm,
        topMargin=1.5*cm,
        bottomMargin=1.5*cm,
        title=TITOLO_REPORT
    )

    font = _registra_font()
    styles = getSampleStyleSheet()

    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=16,
        textColor=colors.HexColor('#2E7D32'),
        spaceAfter=12,
        alignment=TA_CENTER,
        fontName=font
    )

    subtitle_style = ParagraphStyle(
        'CustomSubtitle',
        parent=styles['Heading2'],
        fontSize=12,
        spaceAfter=6,
        fontName=font
    )

    body_style = ParagraphStyle(
        'CustomBody',
        parent=styles['Normal'],
        fontSize=10,
        leading=13,
        spaceAfter=4,
        fontName=font
    )

    cell_style = ParagraphStyle(
        'Cell',
        parent=styles['Normal'],
        fontSize=7,
        leading=9,
        fontName=font
    )

    story = []
    story.append(Paragraph(html.escape(TITOLO_REPORT), title_style))
    story.append(Paragraph(
        f"Beneficjent: {html.escape(formatta_beneficiario(nome_beneficiario, indirizzo))}", body_style
    ))

    if not risultato.eligible:
        story.append(Paragraph(MESSAGGIO_NON_AMMISSIBILE, body_style))
        doc.build(story)
        return buffer.getvalue()

    story.append(Paragraph(f"Poziom dofinansowania: {descrivi_livello(risultato.tier)}", subtitle_style))
    story.append(Spacer(1, 0.3*cm))

    stile_tabella = TableStyle([
        ('FONTNAME', (0, 0), (-1, -1), font),
        ('FONTSIZE', (0, 0), (-1, -1), 7),
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#e8f5e9')),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
        ('ALIGN', (1, 1), (-1, -1), 'RIGHT'),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
    ])

    for titolo, categoria in categorie_con_righe(risultato):
        story.append(Paragraph(titolo, subtitle_style))
        dati = [[Paragraph(h, cell_style) for h in INTESTAZIONI_RIGHE]]
        for row in categoria.rows:
            valori = _valori_riga(row)
            dati.append([Paragraph(html.escape(valori[0]), cell_style)] + valori[1:])
        tabella = Table(dati, colWidths=[5*cm] + [2*cm] * 6, repeatRows=1)
        tabella.setStyle(stile_tabella)
        story.append(tabella)
        story.append(Spacer(1, 0.4*cm))

    story.append(Paragraph("Podsumowanie", subtitle_style))
    riepilogo = [
        [etichetta, formatta_importo(getattr(risultato.totals, campo))]
        for campo, etichetta in VOCI_RIEPILOGO
    ]
    tabella_riepilogo = Table(riepilogo, colWidths=[7*cm, 4*cm])
    tabella_riepilogo.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (-1, -1), font),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
        ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
    ]))
    story.append(tabella_riepilogo)

    if risultato.cap_applied:
        story.append(Spacer(1, 0.3*cm))
        story.append(Paragraph(
            f"Dofinansowanie ograniczono do limitu programu {formatta_importo(risultato.grant_ceiling)}.",
            body_style
        ))

    doc.build(story)
    return buffer.getvalue()
