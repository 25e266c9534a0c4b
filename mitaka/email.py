"""
Email address classification
"""
from logging import getLogger
from string import ascii_letters, digits

import regex

from . import hostname
from .template import Template


logger = getLogger(name=__name__)


unquoted_local_alphabet = digits + ascii_letters + r"!#$%&'*+/=?^_`{|}~-"

MAX_LOCAL_LENGTH = 64


PATTERN_TEMPLATE = Template(
	format=r'(?P<local>{unquoted})@(?P<domain>[^@\s]+)')

PATTERN_TEMPLATE['unquoted'] = r'{valid}+(?:\.{valid}+)*'
PATTERN_TEMPLATE['unquoted']['valid'] = (
	f'[{regex.escape(unquoted_local_alphabet)}]'
	.replace('{', '{{').replace('}', '}}')
)


def classify(text, options):
	"""
	Return the text if it is an email address whose domain is valid under the
	given options
	"""
	match = PATTERN_TEMPLATE.fullmatch(text)
	if match is None:
		return None

	if len(match['local']) > MAX_LOCAL_LENGTH:
		return None

	if hostname.classify(match['domain'], options) is None:
		logger.debug('Rejected email domain of %r', text)
		return None

	return text
