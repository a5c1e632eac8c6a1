"""Translation tables for the user-facing texts."""

from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    FI = "fi"
    EN = "en"


DEFAULT_LANGUAGE = Language.FI

EN: dict[str, str] = {
    "appName": "Mr. Reacto",
    "appTagline": "Athletic Reaction Training",
    # Session configuration
    "trainingConfiguration": "Training Configuration",
    "sessionDuration": "Session Duration (seconds):",
    "minimumInterval": "Minimum Interval (seconds):",
    "maximumInterval": "Maximum Interval (seconds):",
    "startTraining": "Start Training",
    # Duration validation
    "durationMin": "Duration must be at least 30 seconds",
    "durationMax": "Duration cannot exceed 60 minutes",
    "durationHelp": "From 30 seconds to 60 minutes (3600 seconds)",
    # Interval validation
    "minIntervalPositive": "Minimum interval must be positive",
    "maxIntervalGreater": "Maximum interval must be greater than minimum interval",
    "notANumber": "Enter a whole number",
    # Training session
    "trainingInProgress": "Training in Progress",
    "timeRemaining": "Time Remaining:",
    "stopTraining": "Stop Training",
    "stopHint": "Press Enter or Ctrl+C to stop",
    "sessionComplete": "Training complete",
    "sessionStopped": "Training stopped",
    # Language
    "language": "Language",
    "finnish": "Finnish",
    "english": "English",
}

FI: dict[str, str] = {
    "appName": "Mr. Reacto",
    "appTagline": "Urheilijan Reaktioharjoittelu",
    "trainingConfiguration": "Harjoituksen Asetukset",
    "sessionDuration": "Harjoituksen Kesto (sekuntia):",
    "minimumInterval": "Minimi Aikaväli (sekuntia):",
    "maximumInterval": "Maksimi Aikaväli (sekuntia):",
    "startTraining": "Aloita Harjoitus",
    "durationMin": "Keston on oltava vähintään 30 sekuntia",
    "durationMax": "Kesto ei voi ylittää 60 minuuttia",
    "durationHelp": "30 sekunnista 60 minuuttiin (3600 sekuntia)",
    "minIntervalPositive": "Minimi aikavälin on oltava positiivinen",
    "maxIntervalGreater": "Maksimi aikavälin on oltava suurempi kuin minimi aikaväli",
    "notANumber": "Anna kokonaisluku",
    "trainingInProgress": "Harjoitus Käynnissä",
    "timeRemaining": "Aikaa Jäljellä:",
    "stopTraining": "Lopeta Harjoitus",
    "stopHint": "Paina Enter tai Ctrl+C lopettaaksesi",
    "sessionComplete": "Harjoitus valmis",
    "sessionStopped": "Harjoitus lopetettu",
    "language": "Kieli",
    "finnish": "Suomi",
    "english": "Englanti",
}

CATALOG: dict[Language, dict[str, str]] = {
    Language.FI: FI,
    Language.EN: EN,
}
