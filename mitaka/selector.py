"""
Classification of a selected string across all indicator types, and its
cross-reference against the analyzer registry
"""
from logging import getLogger
from types import MappingProxyType

from . import crypto, email, hashes, hostname, identifiers, ip, url
from .options import parse_options
from .refang import refang
from .registry import Registry
from .scanners import SCANNERS
from .searchers import SEARCHERS
from .types import AnalyzerEntry, CommandAction, SelectableType


logger = getLogger(name=__name__)


DEFAULT_REGISTRY = Registry(searchers=SEARCHERS, scanners=SCANNERS)


CLASSIFIERS = {
	SelectableType.ASN: identifiers.classify_asn,
	SelectableType.BTC: crypto.classify_btc,
	SelectableType.CVE: identifiers.classify_cve,
	SelectableType.DOMAIN: hostname.classify,
	SelectableType.EMAIL: email.classify,
	SelectableType.ETH: crypto.classify_eth,
	SelectableType.GA_PUB_ID: identifiers.classify_ga_pub_id,
	SelectableType.GA_TRACK_ID: identifiers.classify_ga_track_id,
	SelectableType.HASH: hashes.classify,
	SelectableType.IP: ip.classify,
	SelectableType.URL: url.classify,
}

_missing = set(SelectableType) - set(CLASSIFIERS)
if _missing:
	raise RuntimeError(f'No classifier for {sorted(_missing)}')


class Selector:
	"""
	The classified view of one selected string

	All classification happens at construction; instances are never mutated
	afterwards.
	"""
	__slots__ = ('_raw', '_options', '_registry', '_normalized', '_matches')

	def __init__(self, raw, options=None, registry=None):
		self._raw = raw
		self._options = parse_options(options)
		self._registry = DEFAULT_REGISTRY if registry is None else registry

		if self._options.enable_refang:
			self._normalized = refang(raw)
		else:
			self._normalized = raw

		self._matches = MappingProxyType({
			type: classify(self._normalized, self._options)
			for type, classify in CLASSIFIERS.items()
		})

		if self._options.enable_debug_log:
			logger.debug(
				'Selector(%r) normalized=%r detected=%r',
				self.raw,
				self.normalized,
				[str(t) for t in self.detected_types()],
			)

	def __repr__(self):
		return f'{self.__class__.__name__}({self.raw!r})'

	@property
	def raw(self):
		return self._raw

	@property
	def options(self):
		return self._options

	@property
	def registry(self):
		return self._registry

	@property
	def normalized(self):
		"""
		The refanged selection, or the raw selection when refanging is
		disabled
		"""
		return self._normalized

	@property
	def matches(self):
		"""
		Read-only mapping of every type to its extracted value or `None`
		"""
		return self._matches

	def get(self, type):
		"""
		Get the value extracted for a type, or `None`
		"""
		type = SelectableType.lookup(type)
		if type is None:
			return None
		return self.matches[type]

	def get_asn(self):
		return self.matches[SelectableType.ASN]

	def get_btc(self):
		return self.matches[SelectableType.BTC]

	def get_cve(self):
		return self.matches[SelectableType.CVE]

	def get_domain(self):
		return self.matches[SelectableType.DOMAIN]

	def get_email(self):
		return self.matches[SelectableType.EMAIL]

	def get_eth(self):
		return self.matches[SelectableType.ETH]

	def get_ga_pub_id(self):
		return self.matches[SelectableType.GA_PUB_ID]

	def get_ga_track_id(self):
		return self.matches[SelectableType.GA_TRACK_ID]

	def get_hash(self):
		return self.matches[SelectableType.HASH]

	def get_ip(self):
		return self.matches[SelectableType.IP]

	def get_url(self):
		return self.matches[SelectableType.URL]

	def detected_types(self):
		"""
		Types the selection matched, in enumeration order
		"""
		return [t for t in SelectableType if self.matches[t] is not None]

	def get_searchers_by_type(self, type):
		return self.registry.searchers_for(
			type, disabled=self.options.disabled_searcher_names)

	def get_scanners_by_type(self, type):
		return self.registry.scanners_for(
			type, disabled=self.options.disabled_scanner_names)

	def get_searcher_entries(self):
		"""
		One search entry per (detected type, enabled searcher) pair
		"""
		return [
			AnalyzerEntry(
				searcher_name=searcher.name,
				type=type,
				query=self.matches[type],
				action=CommandAction.SEARCH,
			)
			for type in self.detected_types()
			for searcher in self.get_searchers_by_type(type)
		]

	def get_scanner_entries(self):
		"""
		One scan entry per (detected type, enabled scanner) pair
		"""
		return [
			AnalyzerEntry(
				searcher_name=scanner.name,
				type=type,
				query=self.matches[type],
				action=CommandAction.SCAN,
			)
			for type in self.detected_types()
			for scanner in self.get_scanners_by_type(type)
		]
