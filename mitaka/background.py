"""
Background logic: turns selection updates into context menu items and
clicked commands into search URLs or scan requests

Nothing here performs network I/O; scan requests describe a submission for
the caller to send.
"""
from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from .errors import InvalidMessage, MissingAPIKey, UnsupportedType
from .messages import Command, CommandMessage, UpdateContextMenuMessage, parse_message
from .options import parse_options
from .selector import DEFAULT_REGISTRY, Selector
from .types import CommandAction


logger = getLogger(name=__name__)


MENU_TITLES = {
	CommandAction.SEARCH: 'Search this {type} on {name}',
	CommandAction.SCAN: 'Scan this {type} on {name}',
}


@dataclass(frozen=True)
class MenuItem:
	id: str
	title: str
	command: Command


@dataclass(frozen=True)
class SearchRequest:
	name: str
	url: str


@dataclass(frozen=True)
class ScanRequest:
	name: str
	type: str
	query: str
	endpoint: str
	api_key: Optional[str]


def build_menu(message, options=None, registry=None):
	"""
	Create context menu items for the selection described by an
	updateContextMenu message, searches first and then scans
	"""
	options = parse_options(options)
	raw = message.selected(prefer_href_value=options.prefer_href_value)
	selector = Selector(raw, options=options, registry=registry)

	entries = selector.get_searcher_entries() + selector.get_scanner_entries()
	items = []
	for entry in entries:
		command = Command(
			action=entry.action,
			query=entry.query,
			type=entry.type,
			name=entry.searcher_name,
		)
		items.append(MenuItem(
			id=command.model_dump_json(),
			title=MENU_TITLES[entry.action].format(
				type=entry.type.value, name=entry.searcher_name),
			command=command,
		))

	logger.debug('Built %d menu item(s) for %r', len(items), raw)
	return items


def dispatch(command, options=None, registry=None):
	"""
	Resolve a command to a search URL or a scan submission
	"""
	options = parse_options(options)
	registry = DEFAULT_REGISTRY if registry is None else registry
	analyzer = registry.get(command.action, command.name)

	if not analyzer.supports(command.type):
		raise UnsupportedType(analyzer.name, command.type)

	if command.action is CommandAction.SEARCH:
		return SearchRequest(
			name=analyzer.name,
			url=analyzer.search_url(command.type, command.query),
		)

	api_key = options.api_key(analyzer.api_key_option)
	if analyzer.api_key_option is not None and api_key is None:
		raise MissingAPIKey(analyzer.name, analyzer.api_key_option)

	return ScanRequest(
		name=analyzer.name,
		type=command.type.value,
		query=command.query,
		endpoint=analyzer.endpoint,
		api_key=api_key,
	)


def handle_message(payload, options=None, registry=None):
	"""
	Route a raw runtime message, rejecting malformed ones without raising

	Returns the menu items for an updateContextMenu message, the search or
	scan request for a command message, or `None` if the message was
	rejected.
	"""
	try:
		message = parse_message(payload)
	except InvalidMessage as error:
		logger.warning('Rejected message %r: %s', payload, error)
		return None

	if isinstance(message, UpdateContextMenuMessage):
		return build_menu(message, options=options, registry=registry)

	if isinstance(message, CommandMessage):
		return dispatch(message.command, options=options, registry=registry)

	raise TypeError(f'Unhandled message type: {type(message).__name__}')
