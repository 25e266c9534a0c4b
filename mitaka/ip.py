"""
IP address classification
"""
from ipaddress import IPv4Address, IPv6Address, ip_address
from logging import getLogger

from .template import Template


logger = getLogger(name=__name__)


IPV4_TEMPLATE = Template(format=r'{segment}(?:\.{segment}){{3}}')
IPV4_TEMPLATE['segment'] = r'(?>25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])'

IPV6_TEMPLATE = Template(format=r'[0-9a-fA-F:.]{{2,45}}')


def parse(text):
	"""
	Get the IP address denoted by the whole of the text, or `None`
	"""
	if IPV4_TEMPLATE.fullmatch(text):
		return IPv4Address(text)

	if ':' not in text or not IPV6_TEMPLATE.fullmatch(text):
		return None

	try:
		address = ip_address(text)
	except ValueError:
		return None

	if isinstance(address, IPv6Address):
		return address
	return None


def classify(text, options=None):
	"""
	Return the text if it is an IPv4 or IPv6 literal
	"""
	address = parse(text)
	if address is None:
		return None

	logger.debug('Found IPv%d address: %r', address.version, text)
	return text
