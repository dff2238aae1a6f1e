"""
Fixed record conversion rules.

This file exists to keep the non-configurable parts of the record format in one place.
"""

RECORD_ENCODING = "utf-8"  # strict, no replacement characters
NEW_LINE = "\n"
DEFAULT_DELIMITER = ","
DIGEST_ALGORITHM = "md5"  # legacy pseudonymization digest, not for security
OPTION_NAME = "CSVTOJSON"
