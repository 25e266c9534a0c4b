"""
Behavioural options shared by classification and dispatch
"""
import json
from logging import getLogger
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidOptions


logger = getLogger(name=__name__)


class Options(BaseModel):
	"""
	Validated options, accepting either the camelCase keys used in stored
	configuration or the snake_case attribute names
	"""
	model_config = ConfigDict(
		frozen=True, populate_by_name=True, extra='ignore')

	enable_idn: bool = Field(default=False, alias='enableIDN')
	strict_tld: bool = Field(default=False, alias='strictTLD')
	enable_refang: bool = Field(default=True, alias='enableRefang')
	enable_debug_log: bool = Field(default=False, alias='enableDebugLog')
	prefer_href_value: bool = Field(default=True, alias='preferHrefValue')
	disabled_searcher_names: List[str] = Field(
		default_factory=list, alias='disabledSearcherNames')
	disabled_scanner_names: List[str] = Field(
		default_factory=list, alias='disabledScannerNames')
	hybrid_analysis_api_key: Optional[str] = Field(
		default=None, alias='hybridAnalysisAPIKey')
	urlscan_api_key: Optional[str] = Field(default=None, alias='urlscanAPIKey')
	virus_total_api_key: Optional[str] = Field(
		default=None, alias='virusTotalAPIKey')

	def api_key(self, option):
		"""
		Get a configured API key by its attribute name
		"""
		if option is None:
			return None
		return getattr(self, option, None) or None


def parse_options(value=None):
	"""
	Coerce `None`, a mapping or an `Options` instance into `Options`
	"""
	if value is None:
		return Options()
	if isinstance(value, Options):
		return value

	try:
		return Options.model_validate(value)
	except ValidationError as error:
		raise InvalidOptions(
			f'Invalid options: {error.error_count()} error(s)',
			errors=error.errors(),
		) from error


def load_options(path, **overrides):
	"""
	Read options from a JSON file, with keyword overrides applied on top
	"""
	with open(path, encoding='utf_8') as options_file:
		try:
			data = json.load(options_file)
		except json.JSONDecodeError as error:
			raise InvalidOptions(f'{path}: {error}') from error

	if not isinstance(data, dict):
		raise InvalidOptions(f'{path}: expected a JSON object')

	logger.debug('Loaded options from %s: %r', path, data)
	aliases = {
		name: field.alias or name
		for name, field in Options.model_fields.items()
	}
	overrides = {aliases.get(k, k): v for k, v in overrides.items()}
	return parse_options({**data, **overrides})
