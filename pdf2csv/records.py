# -*- coding: utf-8 -*-
"""records.py
Stream accumulator that rebuilds credit rows from extracted PDF lines.

PDF text extraction breaks a single statement row into several physical
lines: the date, the document number, the credit amount and one or more
lines of free text. ``RecordAccumulator`` walks the lines in order with a
small state machine and hands every complete ``TransactionRecord`` to a
sink callback as soon as the record is closed.

A record is closed when the next date line arrives or when the input ends.
Incomplete records are dropped without notice.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .patterns import extract_amount, is_amount, is_date, is_transaction_code, trim

__all__ = [
  "ParseState",
  "TransactionRecord",
  "RecordAccumulator",
  "parse_lines",
]


class ParseState(Enum):
  IDLE = "idle"              # no date seen since the last reset
  EMPTY = "empty"            # dated, waiting for the document number
  HAS_CODE = "has_code"      # waiting for the amount
  HAS_AMOUNT = "has_amount"  # waiting for the first detail line
  IN_DETAIL = "in_detail"


@dataclass
class TransactionRecord:
  """A single statement row while it is being assembled."""

  date: str = ""
  code: str = ""
  amount: str = ""
  detail: str = ""
  valid: bool = False

  @property
  def detail_text(self) -> str:
    return trim(self.detail)

  def is_complete(self) -> bool:
    return bool(self.valid and self.date and self.code and self.amount and self.detail_text)


RecordSink = Callable[[TransactionRecord], None]


# ---------------------------------------------------------------------------
# Accumulator
# ---------------------------------------------------------------------------
class RecordAccumulator:
  """Line-by-line record builder.

  ``sink`` receives each complete record once, in input order.
  """

  def __init__(self, sink: RecordSink):
    self.sink = sink
    self.record = TransactionRecord()
    self.state = ParseState.IDLE

  # ------------------------------------------------------------------
  # Public API
  # ------------------------------------------------------------------
  def feed_line(self, line: str):
    """Process one physical line of text."""
    trimmed = trim(line)

    if is_date(trimmed):
      self._start_record(trimmed)
    elif self.state is ParseState.EMPTY and is_transaction_code(trimmed):
      self._set_code(trimmed)
    elif self.state is ParseState.HAS_CODE and is_amount(line):
      self._set_amount(line)
    elif self.state in (ParseState.HAS_AMOUNT, ParseState.IN_DETAIL):
      self._append_detail(trimmed)

  def feed(self, lines: Iterable[str]):
    for line in lines:
      self.feed_line(line)

  def finalise(self):
    """Emit the open record if it is complete, then reset."""
    if self.record.is_complete():
      self.sink(self.record)
    self.record = TransactionRecord()
    self.state = ParseState.IDLE

  # ------------------------------------------------------------------
  # Transitions
  # ------------------------------------------------------------------
  def _start_record(self, date: str):
    self.finalise()
    self.record = TransactionRecord(date=date, valid=True)
    self.state = ParseState.EMPTY

  def _set_code(self, code: str):
    self.record.code = code
    self.state = ParseState.HAS_CODE

  def _set_amount(self, raw_line: str):
    amount = extract_amount(raw_line)
    if amount is None:
      # Poisoned: stays in HAS_CODE and is dropped on finalise.
      self.record.valid = False
      return
    self.record.amount = amount
    self.state = ParseState.HAS_AMOUNT

  def _append_detail(self, text: str):
    self.record.detail += text + " "
    self.state = ParseState.IN_DETAIL


# ---------------------------------------------------------------------------
# Public helper
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str], sink: Optional[RecordSink] = None) -> List[TransactionRecord]:
  """Run *lines* through a fresh accumulator.

  Returns the complete records; when ``sink`` is given it is called for each
  record as well.
  """
  records: List[TransactionRecord] = []

  def _collect(record: TransactionRecord):
    records.append(record)
    if sink is not None:
      sink(record)

  accumulator = RecordAccumulator(_collect)
  accumulator.feed(lines)
  accumulator.finalise()
  return records
