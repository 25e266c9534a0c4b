"""
Hash value classification
"""
from logging import getLogger
from string import hexdigits

from .template import Template


logger = getLogger(name=__name__)


MD5_SIZE = 32
SHA1_SIZE = 40
SHA256_SIZE = 64

HEX = fr'[{hexdigits}]'


PATTERN_TEMPLATE = Template(
	format=r'(?>(?P<sha256>{sha256})|(?P<sha1>{sha1})|(?P<md5>{md5}))')  # atomic, longest first

PATTERN_TEMPLATE['md5'] = fr'{HEX}{{{{{MD5_SIZE}}}}}'
PATTERN_TEMPLATE['sha1'] = fr'{HEX}{{{{{SHA1_SIZE}}}}}'
PATTERN_TEMPLATE['sha256'] = fr'{HEX}{{{{{SHA256_SIZE}}}}}'


def classify(text, options=None):
	"""
	Return the text if it is an MD5, SHA1 or SHA256 hex digest
	"""
	match = PATTERN_TEMPLATE.fullmatch(text)
	if match is None:
		return None

	group_name, = (k for k, v in match.groupdict().items() if v)
	logger.debug('Found %s: %r', group_name, text)
	return text
