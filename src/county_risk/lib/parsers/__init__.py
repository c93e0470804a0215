"""Dataset parsers — decode the two source documents into typed records.

Public API:
    - parse_epi_document: epidemiological ``{"data": [...]}`` feed → EpiRecord list
    - parse_demographic_document: demographic ``{key: record}`` map → DemoRecord list
    - ParseError: whole-document decode failure
"""

from county_risk.lib.parsers.demographic import DemoRecord, parse_demographic_document
from county_risk.lib.parsers.epi import EpiFeed, EpiRecord, parse_epi_document
from county_risk.lib.parsers.errors import ParseError

__all__ = [
    "DemoRecord",
    "EpiFeed",
    "EpiRecord",
    "ParseError",
    "parse_demographic_document",
    "parse_epi_document",
]
