"""
Top-down composition of regular expression patterns
"""
from copy import deepcopy
from functools import lru_cache
from logging import getLogger

import regex


logger = getLogger(name=__name__)


DEFANG_WRAPPERS = {
	'(': ')',
	'[': ']',
	'{': '}',
	'<': '>',
}

ZERO_WIDTH = chr(0x200b)


class DefaultFormatMap(dict):
	"""
	Reinsert the format string for the specified key if a value is not present
	"""
	def __getitem__(self, key):
		try:
			return super().__getitem__(key)
		except KeyError:
			return f'{{{key}}}'


class Template:
	"""
	Allows top-down composition of strings by mapping format keys to
	recursively-nested subcomponents
	"""
	def __init__(self, format, normalised=None, data=None, flags=0):
		self.format_string = str(format)
		data = {} if data is None else data
		self.data = DefaultFormatMap(data)
		self.normalised = normalised
		self.flags = flags

	def __str__(self):
		escaped = self.expand_format(component_map=self.data)
		return escaped.replace(r'{{', r'{').replace(r'}}', r'}')

	def __repr__(self):
		return f'{self.__class__.__name__}({self.format_string!r})'

	def __setitem__(self, key, value):
		if not isinstance(value, self.__class__):
			value = self.__class__(format=value)

		self.data[key] = value

	def __getitem__(self, key):
		return self.data[key]

	def __deepcopy__(self, memo=None):
		return self.__class__(
			format=self.format_string,
			normalised=self.normalised,
			data=deepcopy(self.data),
			flags=self.flags,
		)

	@property
	def regex(self):
		"""
		A regular expression using the formatted template as a pattern
		"""
		return compile_regex(str(self), self.flags)

	def expand_format(self, component_map):
		"""
		Map the format string values using the specified component map,
		preserving occurrences of `{{` and `}}`
		"""
		format = self.format_string.replace(r'{{', r'{{{{')
		format = format.replace(r'}}', r'}}}}')
		return format.format_map(component_map)

	def fullmatch(self, text):
		"""
		Match the whole of the text against this pattern
		"""
		return self.regex.fullmatch(text)

	def normalise(self, text):
		"""
		Replace text that matches this pattern from the input text with the
		specified normalised representation
		"""
		if self.normalised is None:
			raise ValueError('Missing a normalisation value')

		return self.regex.sub(self.normalised, text)

	@classmethod
	def from_defang_pattern(
			cls, pattern, normalised, openers=None, flags=0):
		"""
		Create a template that matches the specified pattern only when it is
		enclosed in one of the balanced wrappers named by `openers`
		"""
		if openers is None:
			openers = DEFANG_WRAPPERS.keys()

		#atomic
		template_format = '(?>{})'.format(
			'|'.join(f'{o}(?>{pattern}){c}' for o, c in wrapper_patterns(openers)))

		logger.debug('Refanging template format: %r', template_format)
		return cls(format=template_format, normalised=normalised, flags=flags)


def wrapper_patterns(openers):
	"""
	Get opening and closing wrapper patterns
	"""
	for o in openers:
		yield (
			regex.escape(o).replace('{', '{{'),
			regex.escape(DEFANG_WRAPPERS[o]).replace('}', '}}'),
		)


@lru_cache()
def compile_regex(pattern, flags=0):
	"""
	Cache regex compilation results to avoid recomputing values for each
	regex property access
	"""
	return regex.compile(pattern, flags)
