import argparse
import logging
import os
import sys

from .converter import StatementConverter

logger = logging.getLogger("pdf2csv")


def main(argv=None):
  parser = argparse.ArgumentParser(
    prog='pdf2csv',
    description='Convert a credit statement PDF to CSV')
  parser.add_argument('input_pdf', help='Input PDF file')
  parser.add_argument('output_csv', help='Output CSV file')
  parser.add_argument('--log-level', default='INFO',
                      choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                      help='Logging verbosity')
  args = parser.parse_args(argv)

  logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s | %(message)s")

  if not os.path.isfile(args.input_pdf):
    parser.error(f'input PDF not found: {args.input_pdf}')

  converter = StatementConverter()
  try:
    converter.convert(args.input_pdf, args.output_csv)
  except Exception as e:
    logger.error(f"Error while processing the PDF: {e}")
    return 1
  return 0


if __name__ == '__main__':
  sys.exit(main())
