"""
Email and phone extraction.

Email: address-list parsing of '@' lines validated with email-validator, then a
bare regex over the whole text. Generic mailbox names (noreply, info, ...) lose
to any personal address.

Phone: locale pattern families are tried in a fixed order (Sri Lanka, UK, North
America, generic +CC). The first family that matches supplies the candidate,
which phonenumbers then validates and formats.
"""

import logging
import re
from email.utils import getaddresses
from typing import List, Optional, Pattern, Tuple

import phonenumbers
from email_validator import EmailNotValidError, validate_email

from cvextract.core.config import get_settings

logger = logging.getLogger(__name__)


# ===== EMAIL =====

EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)

EMAIL_TOKEN_SPLIT_RE = re.compile(r"[\s|;,]+")

GENERIC_MAILBOXES = frozenset({"noreply", "no-reply", "admin", "info"})


def _is_generic(address: str) -> bool:
    return address.split("@", 1)[0].lower() in GENERIC_MAILBOXES


def _prefer_personal(addresses: List[str]) -> str:
    for addr in addresses:
        if not _is_generic(addr):
            return addr
    return addresses[0] if addresses else ""


def _addresses_from_lines(lines: List[str]) -> List[str]:
    found: List[str] = []
    for line in lines:
        if "@" not in line:
            continue
        tokens = [t for t in EMAIL_TOKEN_SPLIT_RE.split(line) if "@" in t]
        for _, addr in getaddresses(tokens):
            addr = re.sub(r"^mailto:", "", addr, flags=re.IGNORECASE).strip(".,:()<>[]")
            try:
                found.append(validate_email(addr, check_deliverability=False).normalized)
            except EmailNotValidError as exc:
                logger.debug(f"Rejected email candidate '{addr}': {exc}")
    return found


def extract_email(text: str, lines: List[str]) -> str:
    """
    Examples:
        "Email: jane.doe@gmail.com | +94 77 123 4567" -> "jane.doe@gmail.com"
        "info@acme.io\\njane@gmail.com"               -> "jane@gmail.com"
    """
    validated = _addresses_from_lines(lines)
    if validated:
        return _prefer_personal(validated)
    return _prefer_personal(EMAIL_RE.findall(text or ""))


# ===== PHONE =====

_SEP = r"[ \t.\-]?"

PHONE_PATTERN_FAMILIES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("LK", re.compile(
        rf"(?:\+94|0094|(?<!\d)0){_SEP}\(?\d{{2}}\)?{_SEP}\d{{3}}{_SEP}\d{{4}}(?!\d)"
    )),
    ("GB", re.compile(
        rf"(?:\+44{_SEP}(?:\(0\))?{_SEP}|(?<!\d)0)\d{{2,4}}{_SEP}\d{{3,4}}{_SEP}\d{{3,4}}(?!\d)"
    )),
    ("US", re.compile(
        rf"(?<![\d+])(?:\+?1{_SEP})?\(?\d{{3}}\)?{_SEP}\d{{3}}{_SEP}\d{{4}}(?!\d)"
    )),
    ("INTL", re.compile(r"\+\d{1,3}[ \t.\-]?\d[\d \t.\-]{5,14}\d(?!\d)")),
)


def _format_number(raw: str) -> Optional[str]:
    for region in get_settings().phone_regions:
        try:
            number = phonenumbers.parse(raw, region)
        except phonenumbers.NumberParseException:
            continue
        if phonenumbers.is_valid_number(number):
            return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.INTERNATIONAL)
    return None


def _strip_to_digits(raw: str) -> str:
    digits = re.sub(r"\D", "", raw)
    return ("+" + digits) if raw.strip().startswith("+") else digits


def extract_phone(text: str) -> str:
    """
    Examples:
        "Phone: +94 77 123 4567"  -> "+94 77 123 4567"
        "Tel: +44 20 7946 0958"   -> "+44 20 7946 0958"
        "Call +999 123 456 789"   -> "+999123456789" (no region accepts it)
    """
    for family, pattern in PHONE_PATTERN_FAMILIES:
        m = pattern.search(text or "")
        if not m:
            continue
        raw = m.group(0).strip()
        logger.debug(f"Phone candidate '{raw}' from {family} patterns")
        return _format_number(raw) or _strip_to_digits(raw)
    return ""
