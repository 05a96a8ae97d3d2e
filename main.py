#!/usr/bin/env python3
"""
Kalkulator Czyste Powietrze - Interfaccia CLI Principale

Software per la stima del contributo del programma "Czyste Powietrze" 2025:
- Determinazione del livello di finanziamento
- Calcolo del contributo per voce, per categoria e complessivo
- Esportazione del riepilogo in PDF/HTML/Markdown

Autore: EnergyIncentiveManager
Versione: 1.0.0
"""

import sys
import os
from pathlib import Path

# Aggiungi la directory corrente al path per gli import
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from modules.calculator_czyste_powietrze import CalculationResult, categorie_attive, compute_calculation
from modules.catalogo_interventi import CATEGORIE, TITOLI_CATEGORIE
from modules.livelli_sostegno import (
    FATTORI_FINANZIAMENTO,
    MASSIMALI_PROGRAMMA,
    MESSAGGIO_NON_AMMISSIBILE,
    OPZIONI_ENERGIA,
    OPZIONI_REDDITO,
    Household,
    descrivi_livello,
    resolve_tier,
)
from modules.report_generator import (
    VOCI_RIEPILOGO,
    formatta_beneficiario,
    formatta_importo,
    genera_report_html,
    genera_report_markdown,
    genera_report_pdf,
)


# ============================================================================
# COSTANTI E CONFIGURAZIONE
# ============================================================================

VERSIONE = "1.0.0"

FORMATI_REPORT = {
    "1": ("pdf", genera_report_pdf),
    "2": ("html", genera_report_html),
    "3": ("md", genera_report_markdown),
}


# ============================================================================
# FUNZIONI DI UTILITÀ CLI
# ============================================================================

def clear_screen():
    """Pulisce lo schermo del terminale."""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header():
    """Stampa l'intestazione del programma."""
    print("\n" + "=" * 70)
    print("  KALKULATOR CZYSTE POWIETRZE v" + VERSIONE)
    print("  Szacunek dofinansowania programu „Czyste Powietrze 2025”")
    print("=" * 70)


def print_menu_principale():
    """Stampa il menu principale."""
    print("\n[MENU]")
    print("-" * 40)
    print("  1. Oblicz dofinansowanie")
    print("  2. Sprawdź poziom dofinansowania")
    print("  3. Informacje o programie")
    print("  0. Wyjście")
    print("-" * 40)


def input_scelta(prompt: str, opzioni_valide: list) -> str:
    """Richiede una scelta tra opzioni valide."""
    while True:
        scelta = input(prompt).strip().lower()
        if scelta in opzioni_valide:
            return scelta
        print(f"  [!] Nieprawidłowy wybór. Opcje: {', '.join(opzioni_valide)}")


def input_opzione(titolo: str, opzioni) -> str:
    """Mostra le fasce numerate e restituisce la chiave scelta."""
    print(f"\n{titolo}:")
    for i, opzione in enumerate(opzioni, 1):
        print(f"  {i}. {opzione.label}")
    scelta = input_scelta(f"Wybór [1-{len(opzioni)}]: ", [str(i) for i in range(1, len(opzioni) + 1)])
    return opzioni[int(scelta) - 1].value


def input_si_no(prompt: str) -> str:
    """Domanda sì/no; restituisce "yes" o "no"."""
    return "yes" if input_scelta(f"{prompt} [t/n]: ", ["t", "n"]) == "t" else "no"


def pausa():
    """Pausa prima di continuare."""
    input("\nNaciśnij ENTER, aby kontynuować...")


# ============================================================================
# RACCOLTA DATI
# ============================================================================

def raccogli_household() -> Household:
    """Raccoglie i dati del nucleo familiare."""
    print("\n[DANE GOSPODARSTWA DOMOWEGO]")
    print("-" * 40)

    energia = input_opzione("Efektywność energetyczna budynku (EU)", OPZIONI_ENERGIA)
    reddito = input_opzione("Miesięczny dochód na osobę", OPZIONI_REDDITO)
    persone = input("\nLiczba osób w gospodarstwie domowym: ").strip()
    sostituzione = input_si_no("Czy wymieniasz źródło ciepła?")
    termomodernizzazione = input_si_no("Czy planujesz kompleksową termomodernizację?")

    return Household(
        energy_category=energia,
        income=reddito,
        household_size=persone,
        replace_heat=sostituzione,
        comprehensive_retrofit=termomodernizzazione,
    )


def raccogli_voci(household: Household) -> dict:
    """
    Raccoglie quantità, prezzo e IVA delle voci delle categorie attive.

    Un invio vuoto salta la voce.
    """
    attive = categorie_attive(household)
    entries = {}

    for key, items in CATEGORIE.items():
        if not attive[key]:
            continue

        print(f"\n[{TITOLI_CATEGORIE[key].upper()}]")
        print("-" * 40)
        print("  (ENTER = pomiń pozycję)")

        entries[key] = {}
        for item in items:
            print(f"\n  {item.name} [{item.unit}]")
            quantita = input("    Ilość: ").strip()
            if not quantita:
                continue
            prezzo = input("    Cena jedn. netto (zł): ").strip()
            iva = input(f"    VAT % [{item.vat:g}]: ").strip()
            entries[key][item.id] = {"quantity": quantita, "price": prezzo, "vat": iva}

    return entries


# ============================================================================
# VISUALIZZAZIONE RISULTATI
# ============================================================================

def stampa_risultato(risultato: CalculationResult, beneficiario: str = ""):
    """Stampa righe, categorie e totali del calcolo."""
    print("\n" + "=" * 70)
    print("WYNIK OBLICZEŃ")
    print("=" * 70)

    if not risultato.eligible:
        print(f"\n  {MESSAGGIO_NON_AMMISSIBILE}")
        print("\n" + "=" * 70)
        return

    if beneficiario:
        print(f"  Beneficjent: {beneficiario}")
    print(f"  Poziom dofinansowania: {descrivi_livello(risultato.tier)}")

    for key, categoria in risultato.categorie().items():
        if not categoria.rows:
            continue
        print(f"\n  {TITOLI_CATEGORIE[key]}")
        print("  " + "-" * 66)
        for row in categoria.rows:
            print(f"    {row.name}")
            print(f"      ilość {row.quantity:.2f} | netto {formatta_importo(row.cost_net)} | "
                  f"VAT {formatta_importo(row.vat_amount)} | brutto {formatta_importo(row.gross)}")
            print(f"      dofinansowanie {formatta_importo(row.grant)} | "
                  f"dopłata {formatta_importo(row.beneficiary)}")

    print("\n  PODSUMOWANIE")
    print("  " + "-" * 66)
    for campo, etichetta in VOCI_RIEPILOGO:
        print(f"    {etichetta:<30} {formatta_importo(getattr(risultato.totals, campo)):>20}")

    if risultato.cap_applied:
        print(f"\n  [!] Dofinansowanie ograniczono do limitu programu "
              f"{formatta_importo(risultato.grant_ceiling)}")

    print("\n" + "=" * 70)


def salva_report(risultato: CalculationResult, nome: str, indirizzo: str):
    """Salva il report nel formato scelto nella directory corrente."""
    print("\nFormat raportu:")
    print("  1. PDF")
    print("  2. HTML")
    print("  3. Markdown")
    scelta = input_scelta("Wybór [1-3]: ", list(FORMATI_REPORT))
    estensione, genera = FORMATI_REPORT[scelta]

    contenuto = genera(risultato, nome, indirizzo)
    percorso = Path.cwd() / f"kalkulator_czyste_powietrze.{estensione}"
    if isinstance(contenuto, bytes):
        percorso.write_bytes(contenuto)
    else:
        percorso.write_text(contenuto, encoding="utf-8")
    print(f"\n  Zapisano: {percorso}")


# ============================================================================
# FUNZIONI DEL MENU
# ============================================================================

def calcolo_dotacja():
    """Esegue il calcolo completo del contributo."""
    clear_screen()
    print_header()
    print("\n[OBLICZENIE DOFINANSOWANIA]")

    nome = input("\nImię i nazwisko: ").strip()
    indirizzo = input("Adres inwestycji: ").strip()
    household = raccogli_household()
    entries = raccogli_voci(household)

    risultato = compute_calculation(household, entries)
    stampa_risultato(risultato, formatta_beneficiario(nome, indirizzo))

    if risultato.eligible and input_si_no("\nZapisać raport?") == "yes":
        salva_report(risultato, nome, indirizzo)

    pausa()


def verifica_livello():
    """Determina solo il livello di finanziamento."""
    clear_screen()
    print_header()
    print("\n[POZIOM DOFINANSOWANIA]")

    livello = resolve_tier(raccogli_household())

    print("\n" + "=" * 50)
    if livello == "none":
        print(f"  {MESSAGGIO_NON_AMMISSIBILE}")
    else:
        print(f"  Poziom: {descrivi_livello(livello)}")
        print(f"  Limit dotacji: {formatta_importo(MASSIMALI_PROGRAMMA[livello])}")
    print("=" * 50)
    pausa()


def info_programma():
    """Stampa le regole del programma."""
    clear_screen()
    print_header()
    print("\n[INFORMACJE O PROGRAMIE]")
    print("=" * 70)

    for livello in ("highest", "increased", "basic"):
        print(f"  {descrivi_livello(livello):<30} "
              f"intensywność {FATTORI_FINANZIAMENTO[livello] * 100:.0f} %, "
              f"limit {formatta_importo(MASSIMALI_PROGRAMMA[livello])}")

    print("""
Najwyższy poziom: dochód do 1 800 zł/os. (gospodarstwo jednoosobowe) lub
1 300 zł/os. (wieloosobowe), EU powyżej 140 kWh/(m²·rok) i kompleksowa
termomodernizacja.

Podwyższony poziom: dochód do 3 150 zł/os. (jednoosobowe) lub 2 250 zł/os.

Podstawowy poziom: roczny dochód gospodarstwa do 135 000 zł.

Dofinansowanie pozycji nie przekracza kosztu netto ani maksymalnej stawki
jednostkowej przeskalowanej do poziomu dofinansowania.
""")
    print("=" * 70)
    pausa()


# ============================================================================
# MAIN
# ============================================================================

def main():
    """Funzione principale del programma."""
    while True:
        clear_screen()
        print_header()
        print_menu_principale()

        scelta = input("\nWybór: ").strip()

        if scelta == "1":
            calcolo_dotacja()
        elif scelta == "2":
            verifica_livello()
        elif scelta == "3":
            info_programma()
        elif scelta == "0":
            print("\nDo widzenia!")
            break
        else:
            print("\n[!] Nieprawidłowy wybór")
            pausa()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nProgram przerwany przez użytkownika.")
        sys.exit(0)
