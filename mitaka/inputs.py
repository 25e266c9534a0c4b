"""
Reading selections from files
"""
import io
from logging import getLogger

import chardet
import pdfminer.high_level

from .errors import EncodingDetectionFailure


logger = getLogger(name=__name__)


PDF_MAGIC = b'%PDF-'


def decode_file(file, required_confidence=0.5, fallback='utf_8'):
	"""
	Get the text content of a binary file, extracting PDF text and detecting
	the text encoding where necessary
	"""
	position = file.tell()
	if file.read(len(PDF_MAGIC)) == PDF_MAGIC:
		file.seek(position)
		return pdfminer.high_level.extract_text(pdf_file=file)
	file.seek(position)

	detector = chardet.UniversalDetector()
	for line in file:
		detector.feed(line)
		if detector.done:
			break

	detector.close()
	file.seek(position)
	encoding = detector.result['encoding']
	try:
		if encoding is None:
			raise EncodingDetectionFailure('Failed to detect encoding')

		confidence = detector.result['confidence']
		if confidence < required_confidence:
			raise EncodingDetectionFailure(
				f'Insufficient confidence in detected encoding {encoding}:'
				f' {confidence} < {required_confidence}',
				encoding=encoding,
			)

		return file.read().decode(encoding)
	except (EncodingDetectionFailure, UnicodeDecodeError, LookupError) as error:
		if fallback is None:
			raise

		logger.debug(error, exc_info=error)

	file.seek(position)
	logger.debug('Falling back to %r encoding', fallback)
	return file.read().decode(fallback, errors='replace')


def read_selections(file):
	"""
	Generate one selection per non-blank line of a binary file
	"""
	if isinstance(file, bytes):
		file = io.BytesIO(file)

	text = decode_file(file)
	for line in text.splitlines():
		selection = line.strip()
		if selection:
			yield selection
