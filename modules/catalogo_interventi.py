"""
Catalogo delle voci finanziabili dal programma "Czyste Powietrze" 2025.

Ogni voce riporta il contributo massimo per unità al livello di
finanziamento più alto (100%) e l'aliquota IVA predefinita in percentuale.
Per i livelli inferiori (70% e 40%) il massimale unitario viene scalato
linearmente in fase di calcolo.

Riferimento: Program Priorytetowy "Czyste Powietrze", wytyczne 2025
Autore: EnergyIncentiveManager
Versione: 1.0.0
"""

from dataclasses import dataclass


# ============================================================================
# TYPE DEFINITIONS
# ============================================================================

@dataclass(frozen=True)
class ItemDefinition:
    """Voce di spesa finanziabile."""
    id: str
    name: str
    unit: str
    max100: float  # Contributo massimo per unità al livello 100% [zł]
    vat: float  # Aliquota IVA predefinita in percentuale (8 = 8%)


# ============================================================================
# COSTANTI E DATI
# ============================================================================

ALIQUOTE_IVA = (8, 23)

DOCUMENTATION_ITEMS: tuple[ItemDefinition, ...] = (
    ItemDefinition("audit", "Audyt energetyczny", "szt", 1200.0, 8),
    ItemDefinition("certificate", "Świadectwo charakterystyki energetycznej", "szt", 400.0, 8),
)

HEAT_ITEMS: tuple[ItemDefinition, ...] = (
    ItemDefinition("district", "Podłączenie do sieci ciepłowniczej (z węzłem cieplnym)", "szt", 22250.0, 8),
    ItemDefinition("air_water_pump", "Pompa ciepła powietrze/woda", "szt", 31500.0, 8),
    ItemDefinition("air_water_pump_high", "Pompa ciepła powietrze/woda (wyższa klasa efektywności)", "szt", 37500.0, 8),
    ItemDefinition("air_air_pump", "Pompa ciepła powietrze/powietrze", "szt", 11200.0, 8),
    ItemDefinition("ground_pump_high", "Gruntowa pompa ciepła (wysoka klasa efektywności)", "szt", 45000.0, 8),
    ItemDefinition("ground_source", "Dolne źródło gruntowej pompy ciepła", "szt", 21500.0, 8),
    ItemDefinition("wood_gas_boiler", "Kocioł zgazowujący drewno (podwyższony standard)", "szt", 20500.0, 8),
    ItemDefinition("pellet_boiler", "Kocioł na pellet drzewny (podwyższony standard)", "szt", 20500.0, 8),
    ItemDefinition("electric_heating", "Ogrzewanie elektryczne", "szt", 11200.0, 8),
    ItemDefinition("central_heating", "Instalacja centralnego ogrzewania + ciepła woda użytkowa", "szt", 20500.0, 8),
)

# Stolarka okienna e drzwiowa: massimali 480/840/1200 e 1000/1750/2500 zł/m²,
# quindi max100 è il valore più alto e il calcolo applica 0.4/0.7/1.0
THERMO_ITEMS: tuple[ItemDefinition, ...] = (
    ItemDefinition("roof_ceiling", "Ocieplenie stropu/dachu", "m²", 200.0, 8),
    ItemDefinition("floors", "Ocieplenie podłóg", "m²", 150.0, 8),
    ItemDefinition("walls", "Ocieplenie ścian", "m²", 250.0, 8),
    ItemDefinition("windows", "Stolarka okienna", "m²", 1200.0, 8),
    ItemDefinition("doors", "Stolarka drzwiowa", "m²", 2500.0, 8),
    ItemDefinition("garage_doors", "Bramy garażowe", "szt", 2500.0, 8),
)

VENT_ITEMS: tuple[ItemDefinition, ...] = (
    ItemDefinition("central_rekuperation", "Rekuperacja centralna", "kpl", 16700.0, 8),
    ItemDefinition("wall_rekuperator", "Rekuperator ścienny", "szt", 2000.0, 8),
)

# Ordine di presentazione delle categorie
CATEGORIE: dict[str, tuple[ItemDefinition, ...]] = {
    "docs": DOCUMENTATION_ITEMS,
    "heat": HEAT_ITEMS,
    "thermo": THERMO_ITEMS,
    "vent": VENT_ITEMS,
}

TITOLI_CATEGORIE = {
    "docs": "Dokumentacja",
    "heat": "Wymiana źródła ciepła",
    "thermo": "Prace termomodernizacyjne",
    "vent": "Modernizacja systemu wentylacji",
}
