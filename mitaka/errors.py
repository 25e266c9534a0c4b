"""
Exceptions raised at the options, message and dispatch boundaries

Classification itself never raises: an unrecognised selection simply has no
detected types.
"""


class MitakaError(Exception):
	"""
	Base class for all errors raised by this package
	"""


class InvalidOptions(MitakaError):
	"""
	Options failed schema validation
	"""
	def __init__(self, *args, errors=None, **kwargs):
		super().__init__(*args, **kwargs)
		self.errors = errors or []


class InvalidMessage(MitakaError):
	"""
	A runtime message failed schema validation
	"""
	def __init__(self, *args, errors=None, **kwargs):
		super().__init__(*args, **kwargs)
		self.errors = errors or []


class UnknownAnalyzer(MitakaError):
	"""
	No searcher or scanner with the requested name is registered
	"""
	def __init__(self, name, action):
		super().__init__(f'No {action} analyzer named {name!r}')
		self.name = name
		self.action = action


class UnsupportedType(MitakaError):
	"""
	The analyzer exists but does not accept the requested indicator type
	"""
	def __init__(self, name, type):
		super().__init__(f'{name} does not support {type}')
		self.name = name
		self.type = type


class MissingAPIKey(MitakaError):
	"""
	A scan was requested on a scanner whose API key is not configured
	"""
	def __init__(self, name, option):
		super().__init__(f'{name} requires an API key ({option})')
		self.name = name
		self.option = option


class EncodingDetectionFailure(MitakaError):
	"""
	Automatic detection of text encoding in binary data has failed
	"""
	def __init__(self, *args, encoding=None, **kwargs):
		super().__init__(*args, **kwargs)
		self.encoding = encoding
