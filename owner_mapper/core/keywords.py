"""Lookup tables used by the owner classifier.

Everything in here is plain data so a county can extend or override it
without touching the parsing code.
"""

import re

# Company detection keywords (case-insensitive, matched as whole words)
COMPANY_KEYWORDS = [
    # entity types
    "inc", "incorporated", "llc", "l.l.c", "ltd", "limited", "corp", "corporation",
    "co", "company", "lp", "llp", "lllp", "pllc", "plc", "pc", "p.a", "p.c",
    # trusts and estates
    "trust", "trustee", "trustees", "tr", "ttee", "foundation", "fund",
    # business structures
    "alliance", "solutions", "services", "systems", "association", "assn", "group",
    "partners", "partnership", "holdings", "enterprises", "investments", "ventures",
    "properties", "management", "development", "realty",
    # finance
    "bank", "savings", "mortgage", "credit union", "financial",
    # institutions
    "church", "ministries", "mission", "school", "university", "college",
    "council", "initiative", "hoa", "club", "first responders", "veterans",
    # government
    "county", "city of", "state of", "authority", "district", "dist",
]

# Ownership annotations that are not part of a name
NOISE_PATTERNS = [
    r"\bET\s*AL\b\.?",
    r"\bET\s*UX\b",
    r"\bET\s*VIR\b",
    r"\bJT\s*ROS\b",
    r"\bJ/T\b",
    r"\bL/E\b",
    r"\bH/W\b",
    r"\bTBE\b",
    r"\bTEN\s+COM\b",
    r"\bESTATE\s+OF\b",
    r"\bEST\b\.?",
]

# Candidates that only name an ownership relationship, not an owner
PLACEHOLDER_PATTERNS = [
    r"^ESTATE\s+OF$",
    r"^UNKNOWN(\s+OWNER)?$",
    r"^OWNER$",
]

# Property status values that some sites render in the owner box
STATUS_TERMS = {"improved", "vacant", "unimproved", "residential", "commercial", "industrial"}

PERSON_PREFIXES = {
    "MR": "Mr.",
    "MRS": "Mrs.",
    "MS": "Ms.",
    "MISS": "Miss",
    "MX": "Mx.",
    "DR": "Dr.",
    "DOCTOR": "Dr.",
    "PROF": "Prof.",
    "PROFESSOR": "Prof.",
    "REV": "Rev.",
    "FR": "Fr.",
    "FATHER": "Fr.",
    "CAPT": "Capt.",
    "CAPTAIN": "Capt.",
    "COL": "Col.",
    "MAJ": "Maj.",
    "LT": "Lt.",
    "SGT": "Sgt.",
    "HON": "Hon.",
    "JUDGE": "Judge",
    "RABBI": "Rabbi",
    "SIR": "Sir",
    "DAME": "Dame",
}

PERSON_SUFFIXES = {
    "JR": "Jr.",
    "JUNIOR": "Jr.",
    "SR": "Sr.",
    "SENIOR": "Sr.",
    "II": "II",
    "III": "III",
    "IV": "IV",
    "V": "V",
    "ESQ": "Esq.",
    "MD": "MD",
    "PHD": "PhD",
    "DDS": "DDS",
    "DVM": "DVM",
    "RET": "Ret.",
}

# Tokens kept upper-case when a name is re-cased
UPPERCASE_TOKENS = {"II", "III", "IV"}

# Particles that belong to the surname that follows them ("VAN DYKE", "DE LA CRUZ")
SURNAME_PARTICLES = {
    "DE", "DEL", "DELA", "DELLA", "DES", "DI", "DA", "DOS", "DU",
    "LA", "LE", "LAS", "LOS", "VAN", "VON", "DER", "DEN", "TER", "TEN",
    "MAC", "MC", "ST", "SAINT", "SAN", "SANTA", "BIN",
}

# Comma patterns that belong to a single name ("SMITH, JR", "ACME, INC")
SINGLE_NAME_COMMA_PATTERN = re.compile(
    r",\s*(?:JR|SR|II|III|IV|ESQ|INC|LLC|L\.L\.C|LTD|CORP|CO|LP|LLP|PA|P\.A|PC|P\.C|PLLC|NA|N\.A)\b\.?",
    re.IGNORECASE,
)


def build_keyword_set(extra=None):
    """Default company keywords plus jurisdiction-specific additions"""
    keywords = list(COMPANY_KEYWORDS)
    for kw in extra or []:
        kw = kw.strip().lower()
        if kw and kw not in keywords:
            keywords.append(kw)
    return keywords


def compile_keywords(keywords):
    """One case-insensitive pattern matching any keyword bounded by non-letters"""
    alternatives = sorted({kw.lower() for kw in keywords if kw}, key=len, reverse=True)
    body = "|".join(r"\s+".join(re.escape(part) for part in kw.split()) for kw in alternatives)
    return re.compile(rf"(?<![a-z])(?:{body})(?![a-z])", re.IGNORECASE)


def normalize_affix_token(token):
    return re.sub(r"[^A-Za-z]", "", token or "").upper()
