"""
Indicator types and analyzer entry values
"""
from dataclasses import dataclass
from enum import Enum


class SelectableType(str, Enum):
	"""
	Indicator types a selection can be classified as, in their fixed order
	"""
	ASN = 'asn'
	BTC = 'btc'
	CVE = 'cve'
	DOMAIN = 'domain'
	EMAIL = 'email'
	ETH = 'eth'
	GA_PUB_ID = 'gaPubID'
	GA_TRACK_ID = 'gaTrackID'
	HASH = 'hash'
	IP = 'ip'
	URL = 'url'

	def __str__(self):
		return self.value

	@classmethod
	def lookup(cls, value):
		"""
		Get the member for a type value, or `None` for anything outside the
		enumeration
		"""
		if isinstance(value, cls):
			return value
		try:
			return cls(value)
		except (TypeError, ValueError):
			return None


class CommandAction(str, Enum):
	"""
	Passive lookup of an existing record vs. submission for active analysis
	"""
	SCAN = 'scan'
	SEARCH = 'search'

	def __str__(self):
		return self.value


@dataclass(frozen=True)
class AnalyzerEntry:
	"""
	One actionable pairing of an analyzer with a detected indicator
	"""
	searcher_name: str
	type: SelectableType
	query: str
	action: CommandAction = CommandAction.SEARCH
