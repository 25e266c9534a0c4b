"""
Searcher and scanner descriptors, and the read-only registry holding them
"""
from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from urllib.parse import quote

from .errors import UnknownAnalyzer, UnsupportedType
from .types import CommandAction, SelectableType


logger = getLogger(name=__name__)


@dataclass(frozen=True)
class Searcher:
	"""
	A passive lookup service, with one URL template per supported type
	"""
	name: str
	url_templates: Mapping[SelectableType, str]
	action: CommandAction = field(default=CommandAction.SEARCH, init=False)

	def __post_init__(self):
		object.__setattr__(
			self, 'url_templates', MappingProxyType(dict(self.url_templates)))

	@property
	def supported_types(self) -> Tuple[SelectableType, ...]:
		return tuple(t for t in SelectableType if t in self.url_templates)

	def supports(self, type):
		return type in self.url_templates

	def search_url(self, type, query):
		"""
		Build the lookup URL for a query of the given type
		"""
		try:
			template = self.url_templates[type]
		except KeyError:
			raise UnsupportedType(self.name, type) from None

		return template.format(query=quote(query, safe=''))


@dataclass(frozen=True)
class Scanner:
	"""
	An active analysis service that indicators can be submitted to
	"""
	name: str
	supported_types: Tuple[SelectableType, ...]
	endpoint: str
	api_key_option: Optional[str] = None
	action: CommandAction = field(default=CommandAction.SCAN, init=False)

	def supports(self, type):
		return type in self.supported_types


class Registry:
	"""
	Immutable, ordered collection of searchers and scanners

	Disabled names are applied as filters at query time; the registry itself
	never changes after construction.
	"""
	def __init__(self, searchers=(), scanners=()):
		self._searchers = tuple(searchers)
		self._scanners = tuple(scanners)
		for analyzers in (self._searchers, self._scanners):
			names = [a.name for a in analyzers]
			duplicates = sorted({n for n in names if names.count(n) > 1})
			if duplicates:
				raise ValueError(f'Duplicate analyzer names: {duplicates}')

	def __repr__(self):
		return (
			f'{self.__class__.__name__}('
			f'{len(self._searchers)} searchers, {len(self._scanners)} scanners)'
		)

	@property
	def searchers(self):
		return self._searchers

	@property
	def scanners(self):
		return self._scanners

	def searchers_for(self, type, disabled=()):
		"""
		Searchers supporting the type and not disabled, in registry order
		"""
		return _filter(self._searchers, type, disabled)

	def scanners_for(self, type, disabled=()):
		"""
		Scanners supporting the type and not disabled, in registry order
		"""
		return _filter(self._scanners, type, disabled)

	def get_searcher(self, name):
		return _find(self._searchers, name, CommandAction.SEARCH)

	def get_scanner(self, name):
		return _find(self._scanners, name, CommandAction.SCAN)

	def get(self, action, name):
		"""
		Look up an analyzer by the action it performs and its name
		"""
		if CommandAction(action) is CommandAction.SCAN:
			return self.get_scanner(name)
		return self.get_searcher(name)


def _filter(analyzers, type, disabled):
	type = SelectableType.lookup(type)
	if type is None:
		return []

	disabled = set(disabled)
	return [a for a in analyzers if a.supports(type) and a.name not in disabled]


def _find(analyzers, name, action):
	for analyzer in analyzers:
		if analyzer.name == name:
			return analyzer

	raise UnknownAnalyzer(name, action)
