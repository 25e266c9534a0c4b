"""
Domain name classification
"""
from functools import lru_cache
from logging import getLogger

import tldextract

from . import ip
from .template import Template


logger = getLogger(name=__name__)


MAX_LABEL_LENGTH = 63
MAX_HOSTNAME_LENGTH = 253

PUNYCODE_PREFIX = 'xn--'

LABEL_TEMPLATE = Template(
	format=r'[a-zA-Z0-9](?:[a-zA-Z0-9\-]{{0,{max_inner}}}[a-zA-Z0-9])?')
LABEL_TEMPLATE['max_inner'] = MAX_LABEL_LENGTH - 2

LENIENT_TLD_TEMPLATE = Template(format=r'(?!\d+$).{{2,}}')


@lru_cache(maxsize=None)
def suffix_extractor():
	"""
	Public suffix lookup using the bundled snapshot, never fetched over the
	network or cached to disk
	"""
	return tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


def is_idn_label(label):
	return not label.isascii() or label.lower().startswith(PUNYCODE_PREFIX)


def to_ascii(label):
	"""
	Get the ASCII-compatible form of an IDN label, or `None` if it cannot be
	encoded
	"""
	try:
		if label.isascii():
			# punycode must round-trip to be a real A-label
			label.encode('ascii').decode('idna')
			return label
		return label.encode('idna').decode('ascii')
	except UnicodeError:
		return None


def is_valid_label(label, enable_idn=False):
	if is_idn_label(label):
		if not enable_idn:
			return False
		label = to_ascii(label)
		if label is None:
			return False

	if len(label) > MAX_LABEL_LENGTH:
		return False

	return LABEL_TEMPLATE.fullmatch(label) is not None


def is_valid_tld(hostname, tld, strict_tld=False):
	if strict_tld:
		return bool(suffix_extractor()(hostname).suffix)

	return LENIENT_TLD_TEMPLATE.fullmatch(tld) is not None


def classify(text, options):
	"""
	Return the text if it is a domain name under the given options
	"""
	if len(text) > MAX_HOSTNAME_LENGTH or ip.parse(text) is not None:
		return None

	labels = text.split('.')
	if len(labels) < 2:
		return None

	if not all(is_valid_label(l, options.enable_idn) for l in labels):
		return None

	if not is_valid_tld(text, labels[-1], strict_tld=options.strict_tld):
		logger.debug('Rejected top-level domain of %r', text)
		return None

	return text
