"""
Selection-driven Indicator of Compromise (IOC) classification

Use `Selector` to classify a selected string and list the searchers and
scanners that accept it; `refang` reverses common indicator obfuscation.

Classification of each specific IOC type is implemented in the corresponding
module.
"""
from . import crypto, email, hashes, hostname, identifiers, ip, url
from .options import Options, load_options
from .refang import refang
from .registry import Registry, Scanner, Searcher
from .selector import DEFAULT_REGISTRY, Selector
from .types import AnalyzerEntry, CommandAction, SelectableType
