"""
Per-session display preferences and the translation table for intake labels.

Preferences are passed explicitly to whatever renders text; there is no
ambient language or theme.
"""
from typing import Literal

from pydantic import BaseModel

Language = Literal["en", "hi"]
Theme = Literal["light", "dark"]


class Preferences(BaseModel):
    language: Language = "en"
    theme: Theme = "light"


TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "disclaimer": (
            "NyayBuddy provides AI-assisted legal guidance and does not replace "
            "professional legal consultation."
        ),
        "back": "Back",
        "submit": "Submit",
        "loading": "Loading...",
        "describe_legal_issue": "Describe your legal issue",
        "analyzing": "Analyzing...",
        "case_analysis": "Case Analysis",
        "case_type": "Case Type",
        "urgency": "Urgency",
        "estimated_time": "Estimated Timeframe",
        "prerequisites": "Prerequisites",
        "recommendations": "Recommendations",
        "next_steps": "Next Steps",
        "find_lawyers_btn": "Find Lawyers",
        "new_scan": "New Scan",
        "detailed_analysis": "Detailed Analysis",
        "fir_required": "FIR Required",
        "filing_guide": "e-Daakhil Filing Guide",
        "language": "Language",
        "theme": "Theme",
        "dark_mode": "Dark Mode",
        "light_mode": "Light Mode",
    },
    "hi": {
        "disclaimer": (
            "न्यायबडी AI-सहायता प्राप्त कानूनी मार्गदर्शन प्रदान करता है और पेशेवर "
            "कानूनी परामर्श का विकल्प नहीं है।"
        ),
        "back": "वापस",
        "submit": "जमा करें",
        "loading": "लोड हो रहा है...",
        "describe_legal_issue": "अपनी कानूनी समस्या का वर्णन करें",
        "analyzing": "विश्लेषण हो रहा है...",
        "case_analysis": "केस विश्लेषण",
        "case_type": "केस का प्रकार",
        "urgency": "तात्कालिकता",
        "estimated_time": "अनुमानित समयसीमा",
        "prerequisites": "पूर्व-आवश्यकताएं",
        "recommendations": "सिफारिशें",
        "next_steps": "अगले कदम",
        "find_lawyers_btn": "वकील खोजें",
        "new_scan": "नया स्कैन",
        "detailed_analysis": "विस्तृत विश्लेषण",
        "fir_required": "FIR आवश्यक",
        "filing_guide": "ई-दाखिल फाइलिंग गाइड",
        "language": "भाषा",
        "theme": "थीम",
        "dark_mode": "डार्क मोड",
        "light_mode": "लाइट मोड",
    },
}


def translate(key: str, language: str = "en") -> str:
    """Look up ``key`` for ``language``, falling back to the key itself."""
    return TRANSLATIONS.get(language, {}).get(key, key)
