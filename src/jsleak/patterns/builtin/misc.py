"""Whole-resource and crypto-address signatures."""

from jsleak.patterns.models import PatternDefinition

DOCS_FILE_EXTENSION = PatternDefinition(
    name="docs_file_extension",
    pattern=r"^.*\.(?:xls|xlsx|doc|docx)$",
    description="Resource that is itself an office document.",
)

BITCOIN_ADDRESS = PatternDefinition(
    name="bitcoin_address",
    pattern=r"\b[13][a-km-zA-HJ-NP-Z0-9]{26,33}\b",
)

US_CN_ZIPCODE = PatternDefinition(
    name="us_cn_zipcode",
    pattern=r"(^\d{5}(-\d{4})?$)|(^[ABCEGHJKLMNPRSTVXY]\d[A-Z] *\d[A-Z]\d$)",
)

ALL_MISC_PATTERNS = [DOCS_FILE_EXTENSION, BITCOIN_ADDRESS, US_CN_ZIPCODE]
