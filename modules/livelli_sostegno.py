"""
Modulo per la determinazione del livello di finanziamento "Czyste Powietrze".

Il livello dipende dal reddito mensile pro capite, dal numero di persone nel
nucleo familiare, dal fabbisogno energetico dell'edificio e dalla
termomodernizzazione completa.

Livelli (valutati in ordine, vince la prima regola soddisfatta):
    - highest (100%): reddito <= 1800 zł (nucleo di 1 persona) o <= 1300 zł
      (nucleo di più persone), EU > 140 kWh/(m²·rok) e termomodernizzazione
      completa
    - increased (70%): reddito <= 3150 zł (1 persona) o <= 2250 zł
    - basic (40%): reddito annuo del nucleo <= 135 000 zł
    - none: non ammissibile

Nota: ai livelli increased e basic classe energetica e termomodernizzazione
non vengono verificate.

Autore: EnergyIncentiveManager
Versione: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal

from modules.input_parser import parse_decimal, parse_household_size, parse_flag

# Configurazione logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# TYPE DEFINITIONS
# ============================================================================

SubsidyTier = Literal["none", "basic", "increased", "highest"]


@dataclass(frozen=True)
class Household:
    """Dati del nucleo familiare così come arrivano dal modulo."""
    energy_category: Any = "low"
    income: Any = "low"
    household_size: Any = 1
    replace_heat: Any = "no"
    comprehensive_retrofit: Any = "no"


@dataclass(frozen=True)
class OpzioneCategoria:
    """Fascia selezionabile con il suo valore numerico rappresentativo."""
    value: str
    label: str
    numeric: float


@dataclass(frozen=True)
class DatiNormalizzati:
    """Valori numerici usati dalle regole di ammissibilità."""
    reddito: float
    persone: int
    energia: float
    termomodernizzazione: bool


# ============================================================================
# COSTANTI E DATI
# ============================================================================

# Fabbisogno energetico per fasce; il valore numerico serve solo per la
# soglia di 140 kWh/(m²·rok) del livello più alto
OPZIONI_ENERGIA: tuple[OpzioneCategoria, ...] = (
    OpzioneCategoria("low", "do 70 kWh/(m²·rok)", 70),
    OpzioneCategoria("mid", "70–120 kWh/(m²·rok)", 100),
    OpzioneCategoria("high", "120–140 kWh/(m²·rok)", 130),
    OpzioneCategoria("very_high", "powyżej 140 kWh/(m²·rok)", 150),
)

# Reddito mensile pro capite per fasce
OPZIONI_REDDITO: tuple[OpzioneCategoria, ...] = (
    OpzioneCategoria("low", "do 1 300 zł/os.", 1300),
    OpzioneCategoria("mid", "1 301–2 250 zł/os.", 2000),
    OpzioneCategoria("high", "2 251–3 150 zł/os.", 2700),
    OpzioneCategoria("above", "powyżej 3 150 zł/os.", 4000),
)

FATTORI_FINANZIAMENTO: dict[str, float] = {
    "none": 0.0,
    "basic": 0.4,
    "increased": 0.7,
    "highest": 1.0,
}

# Massimale complessivo del contributo per livello [zł]
MASSIMALI_PROGRAMMA: dict[str, float] = {
    "none": 0.0,
    "basic": 66000.0,
    "increased": 99000.0,
    "highest": 135000.0,
}

# Soglie di reddito mensile pro capite [zł]
SOGLIE_REDDITO = {
    "highest": {"singola": 1800.0, "multipla": 1300.0},
    "increased": {"singola": 3150.0, "multipla": 2250.0},
}

SOGLIA_ENERGIA = 140.0  # kWh/(m²·rok), da superare strettamente
SOGLIA_REDDITO_ANNUO = 135000.0  # zł, reddito annuo del nucleo

ETICHETTE_LIVELLO = {
    "highest": "Najwyższy – do 100 % netto",
    "increased": "Podwyższony – do 70 %",
    "basic": "Podstawowy – do 40 %",
    "none": "Brak dofinansowania",
}

MESSAGGIO_NON_AMMISSIBILE = (
    "Nie spełniasz kryteriów programu – zbyt wysokie dochody lub "
    "niewystarczająca energochłonność budynku. Dotacja nie przysługuje."
)


# ============================================================================
# NORMALIZZAZIONE INPUT
# ============================================================================

def _valore_da_opzioni(valore: Any, opzioni: tuple[OpzioneCategoria, ...]) -> float:
    """Chiave di fascia -> valore rappresentativo; altrimenti parse numerico."""
    if isinstance(valore, str):
        for opzione in opzioni:
            if opzione.value == valore:
                return float(opzione.numeric)
    return parse_decimal(valore)


def risolvi_reddito(valore: Any) -> float:
    return _valore_da_opzioni(valore, OPZIONI_REDDITO)


def risolvi_energia(valore: Any) -> float:
    return _valore_da_opzioni(valore, OPZIONI_ENERGIA)


def normalizza_household(household: Household) -> DatiNormalizzati:
    """Converte i dati grezzi del nucleo nei valori usati dalle regole."""
    return DatiNormalizzati(
        reddito=risolvi_reddito(household.income),
        persone=parse_household_size(household.household_size),
        energia=risolvi_energia(household.energy_category),
        termomodernizzazione=parse_flag(household.comprehensive_retrofit),
    )


# ============================================================================
# REGOLE DI AMMISSIBILITÀ
# ============================================================================

def _soglia_reddito(livello: str, persone: int) -> float:
    return SOGLIE_REDDITO[livello]["singola" if persone == 1 else "multipla"]


def _regola_highest(dati: DatiNormalizzati) -> bool:
    return (
        dati.reddito <= _soglia_reddito("highest", dati.persone)
        and dati.energia > SOGLIA_ENERGIA
        and dati.termomodernizzazione
    )


def _regola_increased(dati: DatiNormalizzati) -> bool:
    return dati.reddito <= _soglia_reddito("increased", dati.persone)


def _regola_basic(dati: DatiNormalizzati) -> bool:
    return dati.reddito * 12 * dati.persone <= SOGLIA_REDDITO_ANNUO


# Ordine di valutazione: la prima regola soddisfatta determina il livello
REGOLE_LIVELLO: tuple[tuple[SubsidyTier, Callable[[DatiNormalizzati], bool]], ...] = (
    ("highest", _regola_highest),
    ("increased", _regola_increased),
    ("basic", _regola_basic),
)


def resolve_tier(household: Household) -> SubsidyTier:
    """
    Determina il livello di finanziamento del nucleo familiare.

    Args:
        household: Dati grezzi del nucleo (fasce o valori numerici)

    Returns:
        "highest", "increased", "basic" oppure "none"
    """
    dati = normalizza_household(household)
    logger.info(
        f"  Reddito: {dati.reddito:,.2f} zł/os., persone: {dati.persone}, "
        f"EU: {dati.energia:.0f} kWh/(m²·rok), termomodernizzazione: {dati.termomodernizzazione}"
    )

    for livello, regola in REGOLE_LIVELLO:
        if regola(dati):
            logger.info(f"  ✓ Livello di finanziamento: {livello} ({FATTORI_FINANZIAMENTO[livello]*100:.0f}%)")
            return livello

    logger.info("  ✗ Nessun livello di finanziamento applicabile")
    return "none"


def descrivi_livello(livello: str) -> str:
    """Etichetta del livello per i report e l'interfaccia."""
    return ETICHETTE_LIVELLO.get(livello, ETICHETTE_LIVELLO["none"])
