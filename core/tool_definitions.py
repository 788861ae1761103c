# =============================================================================
# core/tool_definitions.py  —  The Interzoid Tool Registry (static data)
# =============================================================================
#
# One ToolDescriptor per Interzoid API.  This file is pure data: name,
# description (the LLM reads it to decide WHEN to call the tool), target
# endpoint, and the required / optional parameters.
#
# IMPORTANT: remote parameter names MUST match the query parameter names in
# the Interzoid API request formats.  They are sent verbatim in the GET
# query string.
#
# PRICING (x402, USDC on Base), quoted in the descriptions so the agent can
# weigh the cost of a call:
#   Standard APIs:  $0.0125 per call  (12500 atomic units)
#   Premium APIs:   $0.3125 per call  (312500 atomic units)
# =============================================================================

from core.catalog import ToolCatalog, same
from core.models import ToolDescriptor

_STANDARD_COST = "Cost: $0.0125 USDC via x402."
_PREMIUM_COST = "Premium API. Cost: $0.3125 USDC via x402."

_ALGORITHM = "Algorithm variant (optional)"


INTERZOID_TOOLS: list[ToolDescriptor] = [
    # -------------------------------------------------------------------------
    # DATA MATCHING — similarity keys & match scores
    # -------------------------------------------------------------------------
    ToolDescriptor(
        name="interzoid_company_match_advanced",
        description=(
            "Generate an advanced AI-powered similarity key for company/organization name "
            "matching. Names like 'IBM', 'International Business Machines', 'IBM Corp' produce "
            f"the same key for deduplication and record linkage. {_STANDARD_COST}"
        ),
        endpoint="/getcompanymatchadvanced",
        required_params=[same("company", "Company or organization name")],
        optional_params=[same("algorithm", "Algorithm variant (optional, e.g. 'ai-deep')")],
    ),
    ToolDescriptor(
        name="interzoid_fullname_match",
        description=(
            "Generate an AI-powered similarity key for individual/person name matching. Handles "
            "variations like 'Bob Smith', 'Robert Smith', 'Smith, Robert J.' producing the same "
            f"key. {_STANDARD_COST}"
        ),
        endpoint="/getfullnamematch",
        required_params=[same("fullname", "Full individual name")],
    ),
    ToolDescriptor(
        name="interzoid_address_match_advanced",
        description=(
            "Generate an advanced AI-powered similarity key for US street address matching. "
            f"Handles unit numbers, directionals, and abbreviations. {_STANDARD_COST}"
        ),
        endpoint="/getaddressmatchadvanced",
        required_params=[same("address", "Street address")],
        optional_params=[same("algorithm", _ALGORITHM)],
    ),
    ToolDescriptor(
        name="interzoid_global_address_match",
        description=(
            "Generate an AI-powered similarity key for global/international address matching. "
            f"Handles international address formats and variations across countries. {_STANDARD_COST}"
        ),
        endpoint="/getglobaladdressmatch",
        required_params=[same("address", "Full international address string")],
    ),
    ToolDescriptor(
        name="interzoid_product_match",
        description=(
            "Generate an AI-powered similarity key for product name matching. Handles variations "
            f"in product names, model numbers, and descriptions. {_STANDARD_COST}"
        ),
        endpoint="/getproductmatch",
        required_params=[same("product", "Product name, description, or model")],
        optional_params=[same("algorithm", _ALGORITHM)],
    ),
    ToolDescriptor(
        name="interzoid_org_match_score",
        description=(
            "Compare two organization/company names and receive a match score from 0-100 "
            "indicating similarity. Useful for determining if two company names refer to the "
            f"same entity. {_STANDARD_COST}"
        ),
        endpoint="/getorgmatchscore",
        required_params=[
            same("org1", "First organization name"),
            same("org2", "Second organization name to compare"),
        ],
    ),
    ToolDescriptor(
        name="interzoid_fullname_match_score",
        description=(
            "Compare two individual/person names and receive a match score from 0-100 indicating "
            f"similarity. Handles name order, nicknames, and abbreviations. {_STANDARD_COST}"
        ),
        endpoint="/getfullnamematchscore",
        required_params=[
            same("fullname1", "First full name"),
            same("fullname2", "Second full name to compare"),
        ],
    ),

    # -------------------------------------------------------------------------
    # DATA ENRICHMENT — premium, AI-powered
    # -------------------------------------------------------------------------
    ToolDescriptor(
        name="interzoid_business_info",
        description=(
            "Retrieve comprehensive AI-powered business intelligence for a company including "
            f"industry, revenue, employee counts, and executive info. {_PREMIUM_COST}"
        ),
        endpoint="/getbusinessinfo",
        required_params=[same("lookup", "Company name, website, or email")],
    ),
    ToolDescriptor(
        name="interzoid_parent_company_info",
        description=(
            "Retrieve parent company information for a given company or subsidiary. Identifies "
            f"corporate ownership hierarchies and holding company relationships. {_PREMIUM_COST}"
        ),
        endpoint="/getparentcompanyinfo",
        required_params=[same("lookup", "Company name or domain to find parent company for")],
    ),
    ToolDescriptor(
        name="interzoid_executive_profile",
        description=(
            "Retrieve executive profile information for a company including leadership details, "
            f"roles, and professional background. {_PREMIUM_COST}"
        ),
        endpoint="/getexecutiveprofile",
        required_params=[same("lookup", "Company name and job title (e.g. 'Coinbase CEO')")],
    ),
    ToolDescriptor(
        name="interzoid_recent_news",
        description=(
            "Retrieve recent news and developments for a company or topic. AI-powered aggregation "
            f"from multiple real-time sources. {_PREMIUM_COST}"
        ),
        endpoint="/getrecentnews",
        required_params=[same("topic", "Company name or topic to get news for")],
    ),
    ToolDescriptor(
        name="interzoid_email_trust_score",
        description=(
            "Get an email trust score (0-99) and AI-generated risk analysis. Validates "
            "deliverability, identifies disposable addresses, and assesses legitimacy. "
            f"{_PREMIUM_COST}"
        ),
        endpoint="/emailtrustscore",
        required_params=[same("lookup", "Email address to score and validate")],
    ),
    ToolDescriptor(
        name="interzoid_ip_profile",
        description=(
            "Get comprehensive profile for an IP address including geolocation, ISP, organization, "
            f"CIDR block, and reputation assessment. {_PREMIUM_COST}"
        ),
        endpoint="/getipprofile",
        required_params=[same("lookup", "IPv4 or IPv6 address to profile")],
    ),
    ToolDescriptor(
        name="interzoid_phone_profile",
        description=(
            "Get profile for a phone number including carrier, line type, geographic location, "
            f"validation status, and risk assessment. {_PREMIUM_COST}"
        ),
        endpoint="/getphoneprofile",
        required_params=[same("lookup", "Phone number to profile")],
    ),
    ToolDescriptor(
        name="interzoid_company_verification",
        description=(
            "Verify whether a company exists and get a verification score (0-99) with "
            f"AI-generated reasoning about legitimacy and credibility. {_PREMIUM_COST}"
        ),
        endpoint="/getcompanyverification",
        required_params=[same("lookup", "Company or organization name to verify")],
    ),
    ToolDescriptor(
        name="interzoid_stock_info",
        description=(
            "Get AI-powered stock analysis for a ticker symbol including price, market cap, "
            f"P/E ratio, EPS, and analyst assessment. {_PREMIUM_COST}"
        ),
        endpoint="/getstockinfo",
        required_params=[same("lookup", "Stock ticker symbol or company name (e.g. 'AAPL', 'COIN')")],
    ),

    # -------------------------------------------------------------------------
    # DATA STANDARDIZATION
    # -------------------------------------------------------------------------
    ToolDescriptor(
        name="interzoid_org_standard",
        description=(
            "Standardize an organization name to its canonical form. Normalizes abbreviations, "
            f"suffixes, and formatting (e.g. 'b.o.a.' -> 'Bank of America'). {_STANDARD_COST}"
        ),
        endpoint="/getorgstandard",
        required_params=[same("org", "Organization name to standardize")],
    ),
    ToolDescriptor(
        name="interzoid_country_standard",
        description=(
            "Standardize a country name to a consistent canonical form. Handles variations like "
            f"'Great Britain', 'UK', 'United Kingdom'. {_STANDARD_COST}"
        ),
        endpoint="/getcountrystandard",
        required_params=[same("country", "Country name to standardize")],
        optional_params=[same("algorithm", _ALGORITHM)],
    ),
    ToolDescriptor(
        name="interzoid_country_info",
        description=(
            "Standardize a country name and return comprehensive info: ISO codes (2/3-letter, "
            f"3-digit), currency details, internet code, and calling code. {_STANDARD_COST}"
        ),
        endpoint="/getcountryinfo",
        required_params=[same("country", "Country name in any language or format")],
        optional_params=[same("algorithm", "Algorithm variant (optional, defaults to 'ai-medium')")],
    ),
    ToolDescriptor(
        name="interzoid_state_abbreviation",
        description=(
            "Standardize US state/province names to full name plus abbreviation. Handles 'Calif', "
            f"'CA', 'Cal' -> 'California' / 'CA'. {_STANDARD_COST}"
        ),
        endpoint="/getstateabbreviation",
        required_params=[same("state", "State or province name/abbreviation")],
        optional_params=[same("algorithm", _ALGORITHM)],
    ),
    ToolDescriptor(
        name="interzoid_city_standard",
        description=(
            "Standardize city name data to a consistent canonical form. Handles abbreviations, "
            f"alternate spellings, and local variations. {_STANDARD_COST}"
        ),
        endpoint="/getcitystandard",
        required_params=[same("city", "City name to standardize")],
        optional_params=[same("algorithm", _ALGORITHM)],
    ),

    # -------------------------------------------------------------------------
    # DATA ENHANCEMENT
    # -------------------------------------------------------------------------
    ToolDescriptor(
        name="interzoid_entity_type",
        description=(
            "Determine the entity type of a data value - whether it represents a person, "
            f"company/organization, location, or other entity type. {_STANDARD_COST}"
        ),
        endpoint="/getentitytype",
        required_params=[same("data", "Text data value to classify")],
    ),
    ToolDescriptor(
        name="interzoid_gender",
        description=(
            "Determine the likely gender associated with an individual name. Supports "
            f"international names. {_STANDARD_COST}"
        ),
        endpoint="/getgender",
        required_params=[same("name", "First name to determine gender for")],
    ),
    ToolDescriptor(
        name="interzoid_name_origin",
        description=(
            "Determine the likely cultural or geographic origin of an individual name. Useful "
            f"for demographic analysis and internationalization. {_STANDARD_COST}"
        ),
        endpoint="/getnameorigin",
        required_params=[same("name", "Full name to determine origin for")],
    ),
    ToolDescriptor(
        name="interzoid_identify_language",
        description=(
            "Identify the language of a given text string. Supports detection of numerous world "
            f"languages. {_STANDARD_COST}"
        ),
        endpoint="/identifylanguage",
        required_params=[same("text", "Text snippet to identify the language of")],
    ),
    ToolDescriptor(
        name="interzoid_translate_to_english",
        description=(
            "Detect the language of input text and translate it to English. AI-powered "
            f"translation supporting numerous world languages. {_STANDARD_COST}"
        ),
        endpoint="/translatetoenglish",
        required_params=[same("text", "Text in any language to translate to English")],
    ),
    ToolDescriptor(
        name="interzoid_translate_to_any",
        description=(
            "Detect the language of input text and translate it to any specified target "
            f"language. {_STANDARD_COST}"
        ),
        endpoint="/translatetoany",
        required_params=[
            same("text", "Text to translate"),
            same("to", "Target language name (e.g. 'Japanese', 'French', 'Spanish')"),
        ],
    ),
    ToolDescriptor(
        name="interzoid_address_parse",
        description=(
            "Parse a full address string into component parts: street number, street name, "
            f"unit, city, state, zip code. {_STANDARD_COST}"
        ),
        endpoint="/addressparse",
        required_params=[same("address", "Full address string to parse")],
    ),

    # -------------------------------------------------------------------------
    # UTILITY
    # -------------------------------------------------------------------------
    ToolDescriptor(
        name="interzoid_zipcode_info",
        description=(
            "Get detailed info for a US ZIP code: city, state, county, timezone, area codes, "
            f"latitude/longitude. {_STANDARD_COST}"
        ),
        endpoint="/getzipcodeinfo",
        required_params=[same("zip", "US ZIP code (5-digit)")],
    ),
    ToolDescriptor(
        name="interzoid_currency_rate",
        description=(
            "Get live currency exchange rates between two currencies. Returns current "
            f"mid-market rates. {_STANDARD_COST}"
        ),
        endpoint="/getrates",
        required_params=[
            same("from", "Source currency code (e.g. USD, EUR, GBP)"),
            same("to", "Target currency code (e.g. JPY, GBP, EUR)"),
        ],
    ),
    ToolDescriptor(
        name="interzoid_global_weather",
        description=(
            "Get current weather for any city worldwide including temperature (F/C), conditions, "
            f"and wind speed. {_STANDARD_COST}"
        ),
        endpoint="/getglobalweather",
        required_params=[same("location", "City name (e.g. 'London', 'Tokyo', 'San Francisco')")],
    ),
]


def default_catalog() -> ToolCatalog:
    """Build the catalog of every Interzoid tool exposed by this server."""
    return ToolCatalog(INTERZOID_TOOLS)
