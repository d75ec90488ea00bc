"""CSV output for reconstructed statement rows.

Rows are formatted by hand rather than through ``csv.writer``: the detail
column is always wrapped in double quotes and its content is written as is,
without escaping embedded quotes or commas.
"""

from typing import IO, List

from .records import TransactionRecord

HEADER = "TNX Date,Doc No,Credit,Transactions in detail\n"
CSV_COLUMNS: List[str] = HEADER.rstrip("\n").split(",")


def format_record(record: TransactionRecord) -> str:
  return f'{record.date},{record.code},{record.amount},"{record.detail_text}"\n'


class CsvEmitter:
  """Writes the header and one line per record to ``stream``."""

  def __init__(self, stream: IO[str]):
    self.stream = stream
    self.rows_written = 0

  def write_header(self):
    self.stream.write(HEADER)

  def emit(self, record: TransactionRecord):
    self.stream.write(format_record(record))
    self.rows_written += 1
