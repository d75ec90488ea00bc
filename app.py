import io
import logging
import os
import tempfile
from datetime import datetime

from flask import Flask, jsonify, request, send_file
from werkzeug.utils import secure_filename

from pdf2csv.converter import StatementConverter, records_to_dataframe

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['UPLOAD_FOLDER'] = None  # a fresh temporary directory per request
app.config['MAX_CONTENT_LENGTH'] = 100 * 1024 * 1024  # 100MB max file size

PREVIEW_ROWS = 5


def _uploaded_pdf():
  """Return the uploaded PDF, or a (response, status) error tuple."""
  if 'file' not in request.files:
    return None, (jsonify({'success': False, 'error': 'No file uploaded'}), 400)

  file = request.files['file']
  if not file or file.filename == '':
    return None, (jsonify({'success': False, 'error': 'No file selected'}), 400)

  if not file.filename.lower().endswith('.pdf'):
    return None, (jsonify({'success': False, 'error': 'Please upload a valid PDF file'}), 400)

  return file, None


def _extract_uploaded_text(file):
  """Save the upload to disk and pull its text."""
  with tempfile.TemporaryDirectory(dir=app.config['UPLOAD_FOLDER']) as tmp:
    file_path = os.path.join(tmp, secure_filename(file.filename) or 'statement.pdf')
    file.save(file_path)
    return StatementConverter().extract_text(file_path)


@app.route('/convert', methods=['POST'])
def convert_statement():
  """Convert an uploaded statement and return the CSV"""
  file, error = _uploaded_pdf()
  if error:
    return error

  try:
    text = _extract_uploaded_text(file)
    buffer = io.StringIO()
    rows = StatementConverter().convert_text(text, buffer)
  except Exception as e:
    logger.error(f"Error processing {file.filename}: {str(e)}")
    return jsonify({'success': False, 'error': f'Processing failed: {str(e)}'}), 500

  timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
  download_name = f'statement_{timestamp}_{rows}records.csv'

  return send_file(
    io.BytesIO(buffer.getvalue().encode('utf-8')),
    as_attachment=True,
    download_name=download_name,
    mimetype='text/csv'
  )


@app.route('/preview', methods=['POST'])
def preview_statement():
  """Parse an uploaded statement and return the first rows as JSON"""
  file, error = _uploaded_pdf()
  if error:
    return error

  try:
    text = _extract_uploaded_text(file)
    records = StatementConverter().parse_text(text)
  except Exception as e:
    logger.error(f"Error processing {file.filename}: {str(e)}")
    return jsonify({'success': False, 'error': f'Processing failed: {str(e)}'}), 500

  results = records_to_dataframe(records)
  return jsonify({
    'success': True,
    'total_records': len(results),
    'columns': list(results.columns),
    'preview': results.head(PREVIEW_ROWS).to_dict('records')
  })


if __name__ == '__main__':
  app.run(debug=True, host='0.0.0.0', port=8080)
