"""
Command-line interface
"""
import argparse
from importlib.metadata import PackageNotFoundError, version
import io
import logging
from pathlib import Path
import sys

from tqdm import tqdm

from .errors import MitakaError
from .inputs import read_selections
from .options import Options, load_options, parse_options
from .refang import refang
from .selector import Selector
from .types import CommandAction


logger = logging.getLogger(name=__name__)


COMMANDS = ('classify', 'entries', 'refang')
DEFAULT_COMMAND = 'classify'

# root options that consume the following argument
VALUE_OPTIONS = {
	'-l', '--log-level',
	'--options',
	'--disable-searcher',
	'--disable-scanner',
	'-i', '--input',
}


def classify(selection, options, out_file):
	"""
	Write one `type<TAB>value` line per detected type
	"""
	selector = Selector(selection, options=options)
	for type in selector.detected_types():
		out_file.write(f'{type}\t{selector.get(type)}\n')


def entries(selection, options, out_file):
	"""
	Write one line per searcher and scanner entry, with the lookup URL for
	searches
	"""
	selector = Selector(selection, options=options)
	for entry in selector.get_searcher_entries() + selector.get_scanner_entries():
		fields = [entry.action, entry.searcher_name, entry.type, entry.query]
		if entry.action is CommandAction.SEARCH:
			searcher = selector.registry.get_searcher(entry.searcher_name)
			fields.append(searcher.search_url(entry.type, entry.query))
		out_file.write('\t'.join(str(f) for f in fields) + '\n')


def write_refanged(selection, options, out_file):
	out_file.write(f'{refang(selection)}\n')


def build_options(namespace):
	"""
	Combine the options file, if any, with command-line overrides
	"""
	if namespace.options is None:
		options = Options()
	else:
		options = load_options(namespace.options)

	overrides = {}
	if namespace.idn:
		overrides['enable_idn'] = True
	if namespace.strict_tld:
		overrides['strict_tld'] = True
	if namespace.no_refang:
		overrides['enable_refang'] = False
	if namespace.debug_log:
		overrides['enable_debug_log'] = True
	if namespace.disable_searcher:
		overrides['disabled_searcher_names'] = (
			options.disabled_searcher_names + namespace.disable_searcher)
	if namespace.disable_scanner:
		overrides['disabled_scanner_names'] = (
			options.disabled_scanner_names + namespace.disable_scanner)

	return parse_options({**options.model_dump(), **overrides})


def iter_selections(namespace):
	if namespace.selections:
		return list(namespace.selections)

	if namespace.input is None:
		in_file = io.BytesIO(sys.stdin.buffer.read())
	else:
		in_file = namespace.input.open('rb')

	with in_file:
		return list(read_selections(in_file))


def with_default_command(argv):
	"""
	Insert the default subcommand before the first positional argument when
	no subcommand is named, so `mitaka 1.1.1.1` classifies
	"""
	argv = list(argv)
	skip_value = False
	for index, arg in enumerate(argv):
		if skip_value:
			skip_value = False
		elif arg == '--':
			break
		elif arg.startswith('-') and arg != '-':
			skip_value = arg in VALUE_OPTIONS
		elif arg in COMMANDS:
			return argv
		else:
			break
	else:
		return argv

	argv.insert(index, DEFAULT_COMMAND)
	return argv


def build_parser():
	package_name, *_ = __name__.split('.', 1)
	try:
		package_version = version(package_name)
	except PackageNotFoundError:
		package_version = 'unknown'

	root_parser = argparse.ArgumentParser(
		prog=package_name,
		description='Indicator of Compromise (IOC) selection classification',
		allow_abbrev=False,
	)

	root_parser.add_argument(
		'-V', '--version',
		action='version',
		version=f'%(prog)s {package_version}',
	)
	root_parser.add_argument(
		'-l', '--log-level', default='WARNING', help='Set the log level')
	root_parser.add_argument(
		'--options', type=Path, help='JSON options file')
	root_parser.add_argument(
		'--idn', action='store_true', help='Allow internationalized domains')
	root_parser.add_argument(
		'--strict-tld',
		action='store_true',
		help='Require top-level domains to be public suffixes',
	)
	root_parser.add_argument(
		'--no-refang',
		action='store_true',
		help="Don't reverse defanging before classification",
	)
	root_parser.add_argument(
		'--debug-log', action='store_true', help='Log each classification')
	root_parser.add_argument(
		'--disable-searcher',
		action='append',
		default=[],
		metavar='NAME',
		help='Exclude a searcher (repeatable)',
	)
	root_parser.add_argument(
		'--disable-scanner',
		action='append',
		default=[],
		metavar='NAME',
		help='Exclude a scanner (repeatable)',
	)
	root_parser.add_argument(
		'-i', '--input', type=Path, help='Input file, one selection per line')
	root_parser.add_argument(
		'--progress', action='store_true', help='Show a progress bar')

	root_parser.set_defaults(function=classify, selections=[])

	subparsers = root_parser.add_subparsers()

	classify_parser = subparsers.add_parser(
		'classify', description='Print the detected type(s) of each selection')
	classify_parser.set_defaults(function=classify)

	entries_parser = subparsers.add_parser(
		'entries', description='Print the searcher and scanner entries')
	entries_parser.set_defaults(function=entries)

	refang_parser = subparsers.add_parser(
		'refang', description='Print each selection refanged')
	refang_parser.set_defaults(function=write_refanged)

	for parser in (classify_parser, entries_parser, refang_parser):
		parser.add_argument('selections', nargs='*', help='Selected text')

	return root_parser


def main(argv=None):
	root_parser = build_parser()
	argv = sys.argv[1:] if argv is None else argv
	namespace = root_parser.parse_args(with_default_command(argv))

	logging.basicConfig(level=namespace.log_level.upper())
	logger.debug('parsed args: %r', namespace)

	try:
		options = build_options(namespace)
		selections = iter_selections(namespace)
	except (MitakaError, OSError) as error:
		logger.error('%s', error)
		return 2

	out_file = sys.stdout
	command_function = namespace.function
	for selection in tqdm(
			selections, desc='Classifying', disable=not namespace.progress):
		command_function(selection, options=options, out_file=out_file)

	return 0


if __name__ == '__main__':
	sys.exit(main())
