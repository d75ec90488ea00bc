"""Line classifier for extracted statement text.

Each predicate looks at a single physical line and says whether it carries
one of the three positional fields of a credit row: the transaction date,
the document number (a dotted numeric code) and the credit amount.
"""

import re
from typing import Optional

# dd/mm/yyyy
DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)
# <number>.<number>
TRANSACTION_CODE_RE = re.compile(r"\d+\.\d+", re.ASCII)
# A single space followed by a number with dot thousands separators.
# Matched against the raw line: the leading space is what tells an amount
# apart from other numeric lines in the layout.
AMOUNT_RE = re.compile(r" \d{1,3}(?:\.\d{3})*", re.ASCII)

THOUSANDS_SEP = "."
BYTE_ORDER_MARK = "\ufeff"


def trim(text: str) -> str:
  """Strip surrounding whitespace and byte order marks."""
  return text.strip().strip(BYTE_ORDER_MARK).strip()


def is_date(line: str) -> bool:
  return DATE_RE.fullmatch(trim(line)) is not None


def is_transaction_code(line: str) -> bool:
  return TRANSACTION_CODE_RE.fullmatch(trim(line)) is not None


def is_amount(raw_line: str) -> bool:
  """Check the *untrimmed* line for an amount."""
  return AMOUNT_RE.fullmatch(raw_line) is not None


def extract_amount(raw_line: str) -> Optional[str]:
  """Return the amount digits of ``raw_line`` without separators.

  ``" 1.234.567"`` gives ``"1234567"``. None when the first token holds no
  usable digits.
  """
  token = trim(raw_line).split(" ")[0]
  digits = token.replace(THOUSANDS_SEP, "")
  if not digits or not digits.isascii() or not digits.isdigit():
    return None
  return digits
