"""Tests for link extraction and classification."""

from cvextract.core.link_extractor import (
    classify_link,
    extract_links,
    is_library_name,
    is_personal_site,
    with_scheme,
)


def test_links_classified_and_scheme_added():
    links = extract_links("github.com/janedoe | linkedin.com/in/jane-doe | janedoe.dev")
    assert links.github_url == "https://github.com/janedoe"
    assert links.linkedin_url == "https://linkedin.com/in/jane-doe"
    assert links.portfolio_url == "https://janedoe.dev"


def test_existing_scheme_and_www_kept():
    links = extract_links("Profile: https://www.linkedin.com/in/nimal/ and http://github.com/nimal.")
    assert links.linkedin_url == "https://www.linkedin.com/in/nimal/"
    assert links.github_url == "http://github.com/nimal"


def test_first_link_per_category_wins():
    links = extract_links("https://github.com/first\nhttps://github.com/second")
    assert links.github_url == "https://github.com/first"


def test_portfolio_allowlist():
    assert extract_links("Portfolio: jane.vercel.app").portfolio_url == "https://jane.vercel.app"
    assert extract_links("www.behance.net/jane").portfolio_url == "https://www.behance.net/jane"
    assert extract_links("https://janedoe.github.io/").portfolio_url == "https://janedoe.github.io/"


def test_email_domains_are_not_links():
    links = extract_links("jane@gmail.com\nnimal.me@outlook.com")
    assert links.github_url == ""
    assert links.linkedin_url == ""
    assert links.portfolio_url == ""


def test_unrelated_sites_ignored():
    links = extract_links("Worked at https://acme.com and built ASP.NET apps")
    assert links.portfolio_url == ""


def test_classify_link():
    assert classify_link("https://github.com/x") == "github_url"
    assert classify_link("https://lk.linkedin.com/in/x") == "linkedin_url"
    assert classify_link("https://x.netlify.app") == "portfolio_url"
    assert classify_link("https://acme.com") is None


def test_is_personal_site():
    assert is_personal_site("janedoe.dev")
    assert not is_personal_site("blog.janedoe.dev")
    assert not is_personal_site("acme.com")


def test_with_scheme():
    assert with_scheme("github.com/x") == "https://github.com/x"
    assert with_scheme("HTTP://github.com/x") == "HTTP://github.com/x"


def test_library_names_are_not_portfolio_links():
    assert extract_links("Skills: Node.js, Socket.io, Express").portfolio_url == ""
    links = extract_links("Skills: Socket.io\nPortfolio: janedoe.dev")
    assert links.portfolio_url == "https://janedoe.dev"


def test_is_library_name():
    assert is_library_name("Socket.io")
    assert not is_library_name("janedoe.dev")
    assert not is_library_name("https://socket.io")
    assert not is_library_name("socket.io/docs")
