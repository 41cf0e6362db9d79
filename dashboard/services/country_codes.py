from typing import Optional

DEFAULT_COUNTRY_CODE = "us"

# Country names and codes as reported by the weather provider (or typed by
# a user) mapped to the codes accepted by NewsAPI ``top-headlines``.
# Kazakhstan maps to ``us``; changing it changes which headlines a KZ
# city gets.
COUNTRY_CODES = {
    "US": "us", "USA": "us", "United States": "us",
    "GB": "gb", "UK": "gb", "United Kingdom": "gb",
    "KZ": "us", "Kazakhstan": "us",
    "RU": "ru", "Russia": "ru",
    "CN": "cn", "China": "cn",
    "JP": "jp", "Japan": "jp",
    "IN": "in", "India": "in",
    "FR": "fr", "France": "fr",
    "DE": "de", "Germany": "de",
    "IT": "it", "Italy": "it",
    "CA": "ca", "Canada": "ca",
    "AU": "au", "Australia": "au",
}


def get_country_code(country: Optional[str]) -> str:
    """Return the news country code for ``country``, ``us`` when unknown."""
    return COUNTRY_CODES.get(country or "", DEFAULT_COUNTRY_CODE)
