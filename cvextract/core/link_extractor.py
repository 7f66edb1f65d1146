"""
Profile link extraction and classification (GitHub, LinkedIn, portfolio).
"""

import logging
import re
from typing import Optional
from urllib.parse import urlparse

from cvextract.core.config import get_settings
from cvextract.core.schemas import LinkSet
from cvextract.core.vocabulary import (
    GITHUB_DOMAINS,
    LINKEDIN_DOMAINS,
    PERSONAL_SITE_TLDS,
    PORTFOLIO_DOMAINS,
    SKILL_VOCABULARY,
)

logger = logging.getLogger(__name__)


_URL_CHARS = r"[^\s<>()\[\]\"',|]"

# Scheme or www. prefix, or a bare domain with a TLD commonly seen on CVs
URL_CANDIDATE_RE = re.compile(
    rf"(?:https?://|www\.){_URL_CHARS}+"
    rf"|\b[a-z0-9][a-z0-9\-]*(?:\.[a-z0-9\-]+)*\."
    r"(?:com|net|org|io|dev|me|app|co|site|tech|design|portfolio|page|xyz|lk|uk|in)\b"
    rf"(?:/{_URL_CHARS}*)?",
    re.IGNORECASE,
)

TRAILING_PUNCT = ".,;:!?)'\""

_SKILL_NAMES = frozenset(s.lower() for s in SKILL_VOCABULARY)


def _host(url: str) -> str:
    host = (urlparse(url).hostname or "").lower()
    return host[4:] if host.startswith("www.") else host


def _on_domain(host: str, domains) -> bool:
    return any(host == d or host.endswith("." + d) for d in domains)


def is_personal_site(host: str) -> bool:
    """
    Examples:
        "janedoe.dev" -> True
        "blog.janedoe.dev" -> False
        "acme.com" -> False
    """
    labels = host.split(".")
    return len(labels) == 2 and labels[1] in PERSONAL_SITE_TLDS


def is_library_name(candidate: str) -> bool:
    """
    Bare, path-less candidates that are technology names ("Socket.io", "Node.js").

    Examples:
        "Socket.io"        -> True
        "janedoe.dev"      -> False
        "socket.io/docs"   -> False
    """
    if re.match(r"^(?:https?://|www\.)", candidate, re.IGNORECASE) or "/" in candidate:
        return False
    return candidate.lower() in _SKILL_NAMES


def with_scheme(url: str) -> str:
    if re.match(r"^https?://", url, re.IGNORECASE):
        return url
    return f"{get_settings().default_url_scheme}://{url}"


def classify_link(url: str) -> Optional[str]:
    """Return the LinkSet field name a URL belongs to, or None."""
    host = _host(url)
    if not host:
        return None
    if _on_domain(host, GITHUB_DOMAINS):
        return "github_url"
    if _on_domain(host, LINKEDIN_DOMAINS):
        return "linkedin_url"
    if _on_domain(host, PORTFOLIO_DOMAINS) or is_personal_site(host):
        return "portfolio_url"
    return None


def extract_links(text: str) -> LinkSet:
    """
    First link per category; scheme-less links get the default scheme.

    Examples:
        "github.com/jane | linkedin.com/in/jane | jane.dev"
            -> github_url "https://github.com/jane",
               linkedin_url "https://linkedin.com/in/jane",
               portfolio_url "https://jane.dev"
    """
    links = LinkSet()
    text = text or ""
    for m in URL_CANDIDATE_RE.finditer(text):
        # Email domains and local parts
        before = text[m.start() - 1] if m.start() > 0 else ""
        after = text[m.end()] if m.end() < len(text) else ""
        if before == "@" or after == "@" or "@" in m.group(0):
            continue

        candidate = m.group(0).rstrip(TRAILING_PUNCT)
        if is_library_name(candidate):
            continue

        url = with_scheme(candidate)
        field = classify_link(url)
        if field and not getattr(links, field):
            logger.debug(f"Link {url} -> {field}")
            setattr(links, field, url)
    return links
