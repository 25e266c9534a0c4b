"""
Reversal of common indicator obfuscation ("refanging")
"""
from logging import getLogger
import unicodedata

import regex
from unidecode import unidecode

from .template import ZERO_WIDTH, Template


logger = getLogger(name=__name__)


PERIOD_TEMPLATE = Template.from_defang_pattern(
	pattern=r'\.|dot', normalised='.', openers='[(', flags=regex.IGNORECASE)

SCHEME_TEMPLATE = Template(r'hxxp', normalised='http', flags=regex.IGNORECASE)

COLON_TEMPLATE = Template.from_defang_pattern(
	pattern=r':', normalised=':', openers='[')

AT_TEMPLATE = Template.from_defang_pattern(
	pattern=r'@|at', normalised='@', openers='[(', flags=regex.IGNORECASE)

# label separators IDNA treats as equivalent to a full stop
IDNA_DOTS = '\u3002\uff0e\uff61'

# applied in this order
RULES = [PERIOD_TEMPLATE, SCHEME_TEMPLATE, COLON_TEMPLATE, AT_TEMPLATE]


def fold_punctuation(text):
	"""
	Strip zero-width spaces and transliterate non-ASCII punctuation and
	spacing to ASCII, leaving letters and digits untouched
	"""
	visible_text = text.replace(ZERO_WIDTH, '')
	for dot in IDNA_DOTS:
		visible_text = visible_text.replace(dot, '.')
	return ''.join(
		unidecode(c, errors='preserve') if _is_foldable(c) else c
		for c in visible_text
	)


def _is_foldable(character):
	if character.isascii():
		return False

	return unicodedata.category(character)[0] in 'PZ'


def _refang_once(text):
	text = fold_punctuation(text)
	for rule in RULES:
		text = rule.normalise(text)
	return text


def refang(text: str):
	"""
	Reverse defanging of the text, e.g. `1[.]1.1.1` -> `1.1.1.1` and
	`hxxp://` -> `http://`

	Rules are reapplied until the text no longer changes, so nested
	obfuscation collapses fully and refang(refang(s)) == refang(s).
	"""
	previous = text
	while True:
		current = _refang_once(previous)
		if current == previous:
			return current
		logger.debug('Refanged %r -> %r', previous, current)
		previous = current
