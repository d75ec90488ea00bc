import io
import unittest
from unittest import mock

from app import app
from pdf2csv.converter import StatementConverter
from pdf2csv.csv_writer import HEADER

STATEMENT_TEXT = '\n'.join([
  '01/02/2023', '100.1', ' 1.500', 'Salary payment',
  '03/02/2023', '100.2', ' 20', 'Refund',
])


class AppTest(unittest.TestCase):
  def setUp(self):
    app.config['TESTING'] = True
    self.client = app.test_client()

  def _upload(self, url, filename='statement.pdf'):
    data = {'file': (io.BytesIO(b'%PDF-1.4'), filename)}
    return self.client.post(url, data=data, content_type='multipart/form-data')

  def test_convert_returns_csv(self):
    with mock.patch.object(StatementConverter, 'extract_text', return_value=STATEMENT_TEXT):
      resp = self._upload('/convert')
    self.assertEqual(resp.status_code, 200)
    self.assertTrue(resp.mimetype.startswith('text/csv'))
    body = resp.get_data(as_text=True)
    self.assertTrue(body.startswith(HEADER))
    self.assertIn('03/02/2023,100.2,20,"Refund"\n', body)
    self.assertIn('2records.csv', resp.headers['Content-Disposition'])

  def test_preview_returns_rows(self):
    with mock.patch.object(StatementConverter, 'extract_text', return_value=STATEMENT_TEXT):
      resp = self._upload('/preview')
    payload = resp.get_json()
    self.assertTrue(payload['success'])
    self.assertEqual(payload['total_records'], 2)
    self.assertEqual(payload['preview'][0]['Credit'], '1500')

  def test_rejects_missing_file(self):
    resp = self.client.post('/convert', data={}, content_type='multipart/form-data')
    self.assertEqual(resp.status_code, 400)
    self.assertFalse(resp.get_json()['success'])

  def test_rejects_non_pdf(self):
    resp = self._upload('/preview', filename='statement.txt')
    self.assertEqual(resp.status_code, 400)

  def test_processing_failure(self):
    with mock.patch.object(StatementConverter, 'extract_text', side_effect=ValueError('broken')):
      resp = self._upload('/convert')
    self.assertEqual(resp.status_code, 500)
    self.assertIn('broken', resp.get_json()['error'])


if __name__ == '__main__':
  unittest.main()
