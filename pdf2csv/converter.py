"""Converts credit-statement PDFs to CSV.

Text is pulled from every page with pdfplumber, split into lines and fed to
the record accumulator. Complete rows are streamed to the CSV emitter.
"""

import logging
import os
import re
from typing import IO, List

import pandas as pd
import pdfplumber

from .csv_writer import CSV_COLUMNS, CsvEmitter
from .records import RecordAccumulator, TransactionRecord, parse_lines

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
  return LINE_BREAK_RE.split(text)


def records_to_dataframe(records: List[TransactionRecord]) -> pd.DataFrame:
  """Tabular view of parsed records, one column per CSV field."""
  data = [
    [r.date, r.code, r.amount, r.detail_text]
    for r in records
  ]
  return pd.DataFrame(data, columns=CSV_COLUMNS)


class StatementConverter:
  def __init__(self, keep_blank_chars: bool = True):
    # Keeps the leading space that marks amount lines.
    self.keep_blank_chars = keep_blank_chars

  def extract_text(self, pdf_path: str) -> str:
    """Return the text of all pages, one page after the other."""
    pages = []
    with pdfplumber.open(pdf_path) as pdf:
      logger.info(f"Extracting text from {len(pdf.pages)} pages of {pdf_path}")
      for page_num, page in enumerate(pdf.pages):
        text = page.extract_text(keep_blank_chars=self.keep_blank_chars) or ""
        logger.debug(f"Page {page_num + 1}: {len(text)} characters")
        pages.append(text)
    return "\n".join(pages)

  def parse_text(self, text: str) -> List[TransactionRecord]:
    return parse_lines(split_lines(text))

  def convert_text(self, text: str, stream: IO[str]) -> int:
    """Write the CSV for ``text`` to ``stream``; returns the row count."""
    lines = split_lines(text)
    logger.info(f"Processing {len(lines)} lines of text")

    emitter = CsvEmitter(stream)
    emitter.write_header()
    accumulator = RecordAccumulator(emitter.emit)
    accumulator.feed(lines)
    accumulator.finalise()

    logger.info(f"Wrote {emitter.rows_written} transaction rows")
    return emitter.rows_written

  def convert(self, pdf_path: str, csv_path: str) -> int:
    """Convert one PDF file into a CSV file."""
    if not os.path.exists(pdf_path):
      raise FileNotFoundError(f"Input PDF not found: {pdf_path}")

    text = self.extract_text(pdf_path)
    with open(csv_path, 'w', newline='', encoding='utf-8') as csvfile:
      rows = self.convert_text(text, csvfile)

    logger.info(f"CSV file has been successfully created at: {csv_path}")
    return rows
