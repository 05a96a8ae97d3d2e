"""
Modulo per validazione input utente.

I controlli producono solo avvisi: il calcolo viene eseguito comunque e i
valori non interpretabili valgono 0.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from modules.calculator_czyste_powietrze import LineEntry
from modules.catalogo_interventi import CATEGORIE, TITOLI_CATEGORIE
from modules.input_parser import parse_decimal


def _vuoto(valore: Any) -> bool:
    return valore is None or str(valore).strip() == ""


def validate_household_size(
    valore: Any,
    max_value: int = 30,
    campo: str = "Liczba osób"
) -> Tuple[bool, Optional[str]]:
    """
    Valida il numero di persone del nucleo familiare.

    Args:
        valore: Valore inserito
        max_value: Valore massimo plausibile
        campo: Nome campo per messaggio

    Returns:
        (valido, messaggio)
    """
    persone = parse_decimal(valore)

    if persone < 1:
        return False, f"⚠️ {campo}: wartość nieprawidłowa, przyjęto 1 osobę"

    if persone != int(persone):
        return False, f"⚠️ {campo}: podaj liczbę całkowitą"

    if persone > max_value:
        return True, f"⚠️ {campo}: bardzo duże gospodarstwo ({persone:.0f} os.). Sprawdź wartość."

    return True, None


def validate_line_entry(
    entry: Any,
    nome_voce: str
) -> Tuple[bool, Optional[str]]:
    """
    Valida una riga di spesa.

    Una riga con solo quantità o solo prezzo verrà ignorata dal calcolo.

    Args:
        entry: Dati della riga (LineEntry o dizionario con quantity, price, vat)
        nome_voce: Nome della voce per il messaggio

    Returns:
        (valido, messaggio)
    """
    entry = LineEntry.from_raw(entry)
    quantita = entry.quantity
    prezzo = entry.price

    if _vuoto(quantita) and _vuoto(prezzo):
        return True, None

    if not parse_decimal(quantita) or not parse_decimal(prezzo):
        return False, f"⚠️ {nome_voce}: brak ilości lub ceny – pozycja zostanie pominięta"

    if parse_decimal(quantita) < 0 or parse_decimal(prezzo) < 0:
        return False, f"❌ {nome_voce}: ilość i cena nie mogą być ujemne"

    return True, None


def validate_aliquota_iva(
    valore: Any,
    campo: str = "VAT"
) -> Tuple[bool, Optional[str]]:
    """
    Valida l'aliquota IVA (percentuale 0-100 oppure frazione 0-1).

    Returns:
        (valido, messaggio)
    """
    if _vuoto(valore):
        return True, None

    aliquota = parse_decimal(valore)
    if aliquota < 0:
        return False, f"❌ {campo} nie może być ujemny"

    if aliquota > 100:
        return False, f"❌ {campo} nie może przekraczać 100%"

    return True, None


def raccogli_avvisi(entries: Mapping[str, Mapping[str, Any]]) -> List[str]:
    """
    Raccoglie gli avvisi di tutte le righe inserite.

    Args:
        entries: Dati inseriti per categoria e id voce

    Returns:
        Lista dei messaggi di avviso
    """
    avvisi: List[str] = []
    for key, items in CATEGORIE.items():
        dati_categoria: Dict[str, Any] = entries.get(key) or {}
        for item in items:
            if not dati_categoria.get(item.id):
                continue
            entry = LineEntry.from_raw(dati_categoria[item.id])
            nome = f"{TITOLI_CATEGORIE[key]} / {item.name}"
            for _, messaggio in (
                validate_line_entry(entry, nome),
                validate_aliquota_iva(entry.vat, f"VAT ({item.name})"),
            ):
                if messaggio:
                    avvisi.append(messaggio)
    return avvisi
