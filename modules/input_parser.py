"""
Modulo di conversione degli input grezzi del modulo di calcolo.

Tutti i valori numerici inseriti dall'utente passano da qui. La conversione
non solleva mai eccezioni: un valore mancante o non interpretabile vale 0,
così il calcolo resta possibile anche con un modulo compilato a metà.

Autore: EnergyIncentiveManager
Versione: 1.0.0
"""

import math
import re
from typing import Any

# Prefisso numerico iniziale (es. "12.5 m2" -> 12.5), come un parser float tollerante
_PATTERN_DECIMALE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_PATTERN_INTERO = re.compile(r"^\s*[+-]?\d+")

VALORE_SI = "yes"


def parse_decimal(value: Any) -> float:
    """
    Converte un valore in numero decimale.

    Accetta sia la virgola sia il punto come separatore decimale. Restituisce
    0.0 per None, stringhe vuote o non numeriche.

    Esempi:
        "1,5" -> 1.5
        "1.5" -> 1.5
        "abc" -> 0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        numero = float(value)
        return numero if math.isfinite(numero) else 0.0

    testo = str(value).replace(",", ".", 1)
    match = _PATTERN_DECIMALE.match(testo)
    if not match:
        return 0.0

    numero = float(match.group(0))
    return numero if math.isfinite(numero) else 0.0


def parse_household_size(value: Any) -> int:
    """
    Converte il numero di persone del nucleo familiare.

    Legge il prefisso intero della stringa; se manca o è minore di 1
    restituisce 1.
    """
    if value is None or isinstance(value, bool):
        return 1

    if isinstance(value, int):
        persone = value
    elif isinstance(value, float):
        persone = int(value) if math.isfinite(value) else 0
    else:
        match = _PATTERN_INTERO.match(str(value))
        persone = int(match.group(0)) if match else 0

    return persone if persone >= 1 else 1


def parse_flag(value: Any) -> bool:
    """True solo per la stringa "yes" (o per un vero booleano True)."""
    if value is True:
        return True
    return isinstance(value, str) and value == VALORE_SI
