"""
Address / city / postal code / country resolution.

Strategies, in priority order:
  1. An explicit "Address:" label anywhere on a line
  2. Place entities (GPE/LOC) from the NER adapter
  3. Lines starting with a location keyword ("Based in", "City:", ...)

When no usable country comes out of the chain, the institution names parsed
from the education section are scanned for a known country name.
"""

import logging
import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from cvextract.core import nlp
from cvextract.core.text_normalization import clean_fragment, term_pattern
from cvextract.core.vocabulary import COUNTRY_NAMES, LOCATION_LINE_PREFIXES

logger = logging.getLogger(__name__)


class Location(NamedTuple):
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


ADDRESS_LABEL_RE = re.compile(r"(?<!email )(?<!e-mail )\baddress\s*[:\-]\s*(.+)$", re.IGNORECASE)

POSTAL_CODE_RE = re.compile(
    r"\b[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}\b"  # UK: SW1A 1AA, M1 1AE
    r"|\b\d{5,6}\b"  # numeric: 00700, 10115
)

LOCATION_PREFIX_RE = re.compile(
    r"^\s*(" + "|".join(re.escape(p) for p in LOCATION_LINE_PREFIXES) + r")\b\s*[:\-]?\s*(.+)$",
    re.IGNORECASE,
)


def is_postal_code_like(text: str) -> bool:
    """True when a fragment is nothing but a postal code."""
    m = POSTAL_CODE_RE.search(text or "")
    return bool(m) and not clean_fragment(POSTAL_CODE_RE.sub("", text))


def split_parts(value: str) -> List[str]:
    """
    Comma-split a location value, dropping empty and repeated parts.

    Examples:
        "Sri Lanka, Sri Lanka"         -> ["Sri Lanka"]
        "12 Main St, Colombo, , colombo" -> ["12 Main St", "Colombo"]
    """
    value = value.split(" | ", 1)[0]
    seen = set()
    parts: List[str] = []
    for raw in value.split(","):
        part = clean_fragment(raw)
        key = part.lower()
        if part and key not in seen:
            seen.add(key)
            parts.append(part)
    return parts


def parse_location_parts(parts: List[str]) -> Location:
    """
    Derive city / postal code / country from comma-split parts.

    Examples:
        ["45 Galle Road", "Colombo 00300", "Sri Lanka"]
            -> city "Colombo", postal_code "00300", country "Sri Lanka"
        ["10 Downing St", "London", "SW1A 2AA"]
            -> city "London", postal_code "SW1A 2AA", country ""
    """
    if not parts:
        return Location()

    city = ""
    postal = ""
    for i in range(len(parts) - 1, -1, -1):
        m = POSTAL_CODE_RE.search(parts[i])
        if not m:
            continue
        postal = m.group(0)
        rest = clean_fragment(parts[i][:m.start()] + " " + parts[i][m.end():])
        if rest:
            city = rest
        elif i > 0:
            city = parts[i - 1]
        break

    if not postal and len(parts) >= 2:
        city = parts[-2]

    last = parts[-1]
    country = "" if POSTAL_CODE_RE.search(last) else last
    if country and country == city:
        country = ""

    return Location(address=", ".join(parts), city=city, postal_code=postal, country=country)


# ===== STRATEGIES =====

def _from_address_label(lines: List[str], text: str) -> Optional[Location]:
    for line in lines:
        m = ADDRESS_LABEL_RE.search(line)
        if m:
            return parse_location_parts(split_parts(m.group(1)))
    return None


def _from_place_entities(lines: List[str], text: str) -> Optional[Location]:
    places: List[str] = []
    for place in nlp.find_entities(text, {"GPE", "LOC"}):
        if place.lower() not in (p.lower() for p in places):
            places.append(place)
    if not places:
        return None
    if len(places) == 1:
        return Location(country=places[0])
    return Location(city=places[0], country=places[-1])


def _from_keyword_lines(lines: List[str], text: str) -> Optional[Location]:
    for line in lines:
        m = LOCATION_PREFIX_RE.match(line)
        if not m:
            continue
        parts = split_parts(m.group(2))
        if m.group(1).lower() == "city" and len(parts) == 1:
            return Location(city=parts[0])
        return parse_location_parts(parts)
    return None


LOCATION_STRATEGIES: Tuple[Callable[[List[str], str], Optional[Location]], ...] = (
    _from_address_label,
    _from_place_entities,
    _from_keyword_lines,
)


def infer_country(institutions: List[str]) -> str:
    """First known country named inside an institution name, in canonical casing."""
    pattern = term_pattern(COUNTRY_NAMES)
    canonical = {c.lower(): c for c in COUNTRY_NAMES}
    for name in institutions:
        m = pattern.search(name or "")
        if m:
            return canonical[m.group(0).lower()]
    return ""


def resolve_location(lines: List[str], text: str, institutions: Optional[List[str]] = None) -> Location:
    location = Location()
    for strategy in LOCATION_STRATEGIES:
        found = strategy(lines, text)
        if found and any(found):
            logger.debug(f"Location {found} from {strategy.__name__}")
            location = found
            break

    if not location.country or is_postal_code_like(location.country):
        country = infer_country(institutions or [])
        if country:
            logger.debug(f"Country '{country}' inferred from institution names")
            location = location._replace(country=country)

    return location
