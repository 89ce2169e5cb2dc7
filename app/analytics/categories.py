"""
Expense category presentation: display labels and chart colours.
"""

from typing import Optional

EXPENSE_LABELS = {
    "COLD_WATER": "Eau Froide",
    "HOT_WATER": "Eau Chaude",
    "ELECTRICITY_COMMON": "Élec. Communs",
    "ELECTRICITY_PRIVATE": "Élec. Privée",
    "HEATING_COLLECTIVE": "Chauffage Coll.",
    "TAX_PROPERTY": "Taxe Foncière",
    "ELEVATOR": "Ascenseur",
    "INSURANCE": "Assurance PNO",
    "MAINTENANCE": "Entretien",
    "CARETAKER": "Gardien",
    "OTHER": "Autre",
    "METERS": "Compteurs",
    "GENERAL_CHARGES": "Charges Générales",
    "BUILDING_CHARGES": "Charges Immeuble",
    "PARKING": "Parking",
    "INSURANCE_GLI": "Assurance GLI",
}

EXPENSE_COLORS = {
    "TAX_PROPERTY": "#ef4444",
    "MAINTENANCE": "#f59e0b",
    "INSURANCE_GLI": "#3b82f6",
    "COLD_WATER": "#06b6d4",
    "ELECTRICITY_COMMON": "#eab308",
}


def category_label(category: str) -> str:
    return EXPENSE_LABELS.get(category, category)


def category_color(category: str) -> Optional[str]:
    return EXPENSE_COLORS.get(category)
