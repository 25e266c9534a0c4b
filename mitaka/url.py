"""
URL classification
"""
from logging import getLogger
import re
from string import ascii_letters, digits, hexdigits

import regex

from . import hostname, ip
from .template import Template


logger = getLogger(name=__name__)


SCHEMES = ['http', 'https', 'ftp', 'ftps', 'sftp', 'ws', 'wss']

URI_SUB_DELIMS = r"!$&'()*+,;="
URI_UNRESERVED = digits + ascii_letters + r'-._~'

URI_PERCENT_ENCODED = f'%[{hexdigits}]{{{{2}}}}'

MAX_PORT = 65535


PATTERN_TEMPLATE = Template(
	r'(?P<scheme>{scheme})://'
	r'(?P<netloc>{netloc})'
	r'(?P<rest>{rest})?',
	flags=regex.IGNORECASE,
)

# atomic
PATTERN_TEMPLATE['scheme'] = r'(?>{})'.format(
	'|'.join(sorted(SCHEMES, key=len, reverse=True)))

PATTERN_TEMPLATE['netloc'] = (
	r'(?:(?P<userinfo>{userinfo})@)?{host}(?::(?P<port>[0-9]{{1,5}}))?')

PATTERN_TEMPLATE['netloc']['userinfo'] = '{character}+'
PATTERN_TEMPLATE['netloc']['userinfo']['character'] = (
	r'(?>'
		f'[{re.escape(URI_UNRESERVED + URI_SUB_DELIMS + ":")}]'
		f'|{URI_PERCENT_ENCODED}'
	r')'
)

PATTERN_TEMPLATE['netloc']['host'] = (
	r'(?:\[(?P<ipv6>[^\]\s]+)\]|(?P<hostname>[^\s/?#:@\[\]]+))')

PATTERN_TEMPLATE['rest'] = r'[/?#]\S*'


def parse(text):
	"""
	Match the whole of the text against the URL pattern
	"""
	return PATTERN_TEMPLATE.fullmatch(text)


def is_valid_host(match, options):
	if match['ipv6']:
		address = ip.parse(match['ipv6'])
		return address is not None and address.version == 6

	host = match['hostname']
	if ip.parse(host) is not None:
		return True

	return hostname.classify(host, options) is not None


def is_valid_port(port):
	return not port or 0 < int(port) <= MAX_PORT


def classify(text, options):
	"""
	Return the text if it is a URL with a recognised scheme and a valid
	authority
	"""
	match = parse(text)
	if match is None:
		return None

	logger.debug('Parsing URL match: %r', match)
	if not is_valid_port(match['port']):
		return None

	if not is_valid_host(match, options):
		logger.debug('Rejected URL host of %r', text)
		return None

	return text
