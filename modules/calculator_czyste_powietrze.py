"""
Modulo di calcolo del contributo "Czyste Powietrze" per voce e complessivo.

Per ogni voce di spesa:
    costo_netto = quantità × prezzo unitario netto
    contributo  = min(costo_netto, quantità × max100 × fattore_livello)
    IVA         = costo_netto × aliquota
    lordo       = costo_netto + IVA
    quota_beneficiario = lordo − contributo

Il contributo complessivo è limitato dal massimale del livello
(66 000 / 99 000 / 135 000 zł). Il limite si applica solo al totale e non
viene ripartito sulle categorie o sulle singole voci.

Autore: EnergyIncentiveManager
Versione: 1.0.0
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Mapping, Optional

from modules.catalogo_interventi import CATEGORIE, ItemDefinition
from modules.input_parser import parse_decimal, parse_flag
from modules.livelli_sostegno import (
    FATTORI_FINANZIAMENTO,
    MASSIMALI_PROGRAMMA,
    Household,
    SubsidyTier,
    resolve_tier,
)

# Configurazione logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# TYPE DEFINITIONS
# ============================================================================

@dataclass(frozen=True)
class LineEntry:
    """Dati inseriti dall'utente per una voce (stringhe grezze)."""
    quantity: Any = ""
    price: Any = ""
    vat: Any = ""

    @classmethod
    def from_raw(cls, raw: Any) -> "LineEntry":
        """Costruisce la voce da un dizionario del modulo."""
        if isinstance(raw, LineEntry):
            return raw
        if not raw:
            return cls()
        vat = raw.get("vat", raw.get("vat_override", raw.get("vatOverride", "")))
        return cls(quantity=raw.get("quantity", ""), price=raw.get("price", ""), vat=vat)


@dataclass(frozen=True)
class RowResult:
    name: str
    quantity: float
    cost_net: float
    vat_amount: float
    gross: float
    grant: float
    beneficiary: float


@dataclass(frozen=True)
class CategoryResult:
    rows: tuple[RowResult, ...] = ()
    net: float = 0.0
    vat: float = 0.0
    gross: float = 0.0
    grant: float = 0.0
    beneficiary: float = 0.0


@dataclass(frozen=True)
class Totals:
    net: float = 0.0
    vat: float = 0.0
    gross: float = 0.0
    grant: float = 0.0
    beneficiary: float = 0.0


@dataclass(frozen=True)
class CalculationResult:
    """
    Risultato complessivo del calcolo.

    Con livello "none" categorie e totali sono None: nessun calcolo per
    categoria viene eseguito.
    """
    tier: SubsidyTier
    docs: Optional[CategoryResult] = None
    heat: Optional[CategoryResult] = None
    thermo: Optional[CategoryResult] = None
    vent: Optional[CategoryResult] = None
    totals: Optional[Totals] = None
    grant_before_cap: float = 0.0
    grant_ceiling: float = 0.0

    @property
    def eligible(self) -> bool:
        return self.tier != "none"

    @property
    def cap_applied(self) -> bool:
        return self.eligible and self.grant_before_cap > self.grant_ceiling

    def categorie(self) -> dict[str, CategoryResult]:
        """Categorie calcolate, nell'ordine del catalogo."""
        if not self.eligible:
            return {}
        return {key: getattr(self, key) for key in CATEGORIE}

    def to_dict(self) -> dict:
        risultato = asdict(self)
        risultato["eligible"] = self.eligible
        risultato["cap_applied"] = self.cap_applied
        return risultato


EMPTY_CATEGORY = CategoryResult()


# ============================================================================
# FUNZIONI DI SUPPORTO
# ============================================================================

def _normalizza_aliquota(valore: float) -> float:
    """Valori <= 1 sono già frazioni (0.08), gli altri percentuali (8 -> 0.08)."""
    return valore if valore <= 1 else valore / 100


def resolve_vat_rate(entry: LineEntry, item: ItemDefinition) -> float:
    """
    Aliquota IVA della voce come frazione.

    Usa l'IVA inserita dall'utente se diversa da zero, altrimenti quella
    predefinita della voce di catalogo.
    """
    iva_inserita = parse_decimal(entry.vat)
    if iva_inserita:
        return _normalizza_aliquota(iva_inserita)
    return _normalizza_aliquota(parse_decimal(item.vat))


# ============================================================================
# CALCOLO PER CATEGORIA
# ============================================================================

def compute_category(
    items: tuple[ItemDefinition, ...] | list[ItemDefinition],
    entries: Mapping[str, LineEntry | Mapping[str, Any]],
    tier: SubsidyTier
) -> CategoryResult:
    """
    Calcola righe e totali di una categoria di spesa.

    Le voci con quantità o prezzo nulli (o non interpretabili) vengono
    escluse senza errori.

    Args:
        items: Voci di catalogo della categoria
        entries: Dati inseriti per id voce
        tier: Livello di finanziamento

    Returns:
        CategoryResult con righe e somme della categoria
    """
    if tier == "none":
        return EMPTY_CATEGORY

    fattore = FATTORI_FINANZIAMENTO.get(tier, 0.0)

    rows = []
    net = 0.0
    vat_sum = 0.0
    grant_sum = 0.0

    for item in items:
        entry = LineEntry.from_raw(entries.get(item.id))
        quantita = parse_decimal(entry.quantity)
        prezzo = parse_decimal(entry.price)

        if not quantita or not prezzo:
            logger.debug(f"  Voce '{item.id}' ignorata: quantità o prezzo mancanti")
            continue

        aliquota = resolve_vat_rate(entry, item)
        costo_netto = quantita * prezzo
        contributo_unitario = item.max100 * fattore
        contributo_massimo = quantita * contributo_unitario
        contributo = min(costo_netto, contributo_massimo)
        importo_iva = costo_netto * aliquota
        lordo = costo_netto + importo_iva

        rows.append(RowResult(
            name=item.name,
            quantity=quantita,
            cost_net=costo_netto,
            vat_amount=importo_iva,
            gross=lordo,
            grant=contributo,
            beneficiary=lordo - contributo,
        ))
        logger.info(
            f"  {item.name}: {quantita:g} {item.unit} × {prezzo:,.2f} = {costo_netto:,.2f} zł netto, "
            f"contributo {contributo:,.2f} zł (max {contributo_massimo:,.2f})"
        )

        net += costo_netto
        vat_sum += importo_iva
        grant_sum += contributo

    gross = net + vat_sum
    return CategoryResult(
        rows=tuple(rows),
        net=net,
        vat=vat_sum,
        gross=gross,
        grant=grant_sum,
        beneficiary=gross - grant_sum,
    )


# ============================================================================
# CALCOLO COMPLESSIVO
# ============================================================================

def categorie_attive(household: Household) -> dict[str, bool]:
    """
    Categorie da calcolare per la domanda.

    La documentazione è sempre attiva; la sostituzione della fonte di calore
    dipende da replace_heat; isolamento e ventilazione dalla
    termomodernizzazione completa.
    """
    termomodernizzazione = parse_flag(household.comprehensive_retrofit)
    return {
        "docs": True,
        "heat": parse_flag(household.replace_heat),
        "thermo": termomodernizzazione,
        "vent": termomodernizzazione,
    }


def compute_calculation(
    household: Household,
    entries: Mapping[str, Mapping[str, LineEntry | Mapping[str, Any]]]
) -> CalculationResult:
    """
    Calcola il contributo complessivo per una domanda.

    Pipeline:
    1. Determinazione livello di finanziamento
    2. Calcolo delle categorie attive
    3. Somma dei totali
    4. Applicazione massimale del programma

    Args:
        household: Dati del nucleo familiare
        entries: Per ogni categoria ("docs", "heat", "thermo", "vent") i dati
            inseriti per id voce

    Returns:
        CalculationResult; con livello "none" senza categorie né totali
    """
    logger.info("=" * 60)
    logger.info("AVVIO CALCOLO CONTRIBUTO CZYSTE POWIETRZE")
    logger.info("=" * 60)

    # -------------------------------------------------------------------------
    # STEP 1: Livello di finanziamento
    # -------------------------------------------------------------------------
    logger.info("\n[STEP 1] Determinazione livello di finanziamento")
    tier = resolve_tier(household)

    if tier == "none":
        logger.info("CALCOLO INTERROTTO: domanda non ammissibile")
        return CalculationResult(tier="none")

    # -------------------------------------------------------------------------
    # STEP 2: Calcolo per categoria
    # -------------------------------------------------------------------------
    logger.info("\n[STEP 2] Calcolo per categoria")
    attive = categorie_attive(household)
    risultati: dict[str, CategoryResult] = {}
    for key, items in CATEGORIE.items():
        if not attive[key]:
            risultati[key] = EMPTY_CATEGORY
            continue
        logger.info(f" Categoria '{key}'")
        risultati[key] = compute_category(items, entries.get(key) or {}, tier)

    # -------------------------------------------------------------------------
    # STEP 3: Totali
    # -------------------------------------------------------------------------
    logger.info("\n[STEP 3] Somma dei totali")
    # Somma nell'ordine docs, heat, thermo, vent
    docs, heat, thermo, vent = (risultati[key] for key in CATEGORIE)
    total_net = docs.net + heat.net + thermo.net + vent.net
    total_vat = docs.vat + heat.vat + thermo.vat + vent.vat
    total_gross = total_net + total_vat
    grant_somma = docs.grant + heat.grant + thermo.grant + vent.grant
    logger.info(f"  Netto {total_net:,.2f} zł, IVA {total_vat:,.2f} zł, lordo {total_gross:,.2f} zł")

    # -------------------------------------------------------------------------
    # STEP 4: Massimale del programma
    # -------------------------------------------------------------------------
    logger.info("\n[STEP 4] Applicazione massimale")
    massimale = MASSIMALI_PROGRAMMA[tier]
    if grant_somma > massimale:
        logger.warning(f"  ⚠ Contributo {grant_somma:,.2f} zł supera il massimale {massimale:,.2f} zł")
        total_grant = massimale
    else:
        total_grant = grant_somma

    totals = Totals(
        net=total_net,
        vat=total_vat,
        gross=total_gross,
        grant=total_grant,
        beneficiary=total_gross - total_grant,
    )

    logger.info("\n" + "=" * 60)
    logger.info(f"CONTRIBUTO TOTALE: {totals.grant:,.2f} zł")
    logger.info(f"QUOTA BENEFICIARIO: {totals.beneficiary:,.2f} zł")
    logger.info("=" * 60)

    return CalculationResult(
        tier=tier,
        docs=risultati["docs"],
        heat=risultati["heat"],
        thermo=risultati["thermo"],
        vent=risultati["vent"],
        totals=totals,
        grant_before_cap=grant_somma,
        grant_ceiling=massimale,
    )
