"""
PDF to CSV Converter Package

Rebuilds credit transaction rows from the text of bank statement PDFs.
"""

from .converter import StatementConverter, records_to_dataframe, split_lines
from .csv_writer import HEADER, CsvEmitter, format_record
from .records import ParseState, RecordAccumulator, TransactionRecord, parse_lines

__version__ = "1.0.0"

__all__ = [
  "StatementConverter",
  "RecordAccumulator",
  "TransactionRecord",
  "ParseState",
  "CsvEmitter",
  "HEADER",
  "format_record",
  "parse_lines",
  "records_to_dataframe",
  "split_lines",
]
