"""
Trade upload validation.

Ensures an uploaded trades file can be handed to the checker: CSV name,
size limit, decodable text and at least one non-blank line. Individual
lines are not validated here; malformed lines are dropped during analysis.

Time Complexity: O(n) where n = upload size in bytes
Memory: O(1) additional
"""

from typing import Optional

from app.config import INPUT_ENCODING, MAX_UPLOAD_BYTES


def validate_trade_upload(filename: Optional[str], contents: bytes) -> Optional[str]:
    """
    Validate an uploaded trades file. Returns error message if invalid, None if valid.

    Checks:
        1. Filename ends with .csv
        2. Size does not exceed MAX_UPLOAD_BYTES
        3. Contents decode as UTF-8
        4. At least one non-blank line
    """
    if not filename or not filename.endswith(".csv"):
        return "Only CSV files are accepted."

    if len(contents) > MAX_UPLOAD_BYTES:
        return f"File exceeds the {MAX_UPLOAD_BYTES} byte upload limit."

    try:
        text = contents.decode(INPUT_ENCODING)
    except UnicodeDecodeError:
        return f"File must be {INPUT_ENCODING} encoded text."

    if not text.strip():
        return "CSV file is empty."

    return None
