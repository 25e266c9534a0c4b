import pytest

from mitaka import DEFAULT_REGISTRY, Options, SelectableType


CANONICAL_EXAMPLES = {
	SelectableType.ASN: 'ASN15169',
	SelectableType.BTC: '1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa',
	SelectableType.CVE: 'CVE-2018-8013',
	SelectableType.DOMAIN: 'github.com',
	SelectableType.EMAIL: 'test@test.com',
	SelectableType.ETH: '0x4966db520b0680fc19df5d7774ca96f42e6abd4f',
	SelectableType.GA_PUB_ID: 'pub-9383614236930773',
	SelectableType.GA_TRACK_ID: 'UA-67609351-1',
	SelectableType.HASH: (
		'275a021bbfb6489e54d471899f7db9d1663fc695ec2fe2a2c4538aabf651fd0f'),
	SelectableType.IP: '1.1.1.1',
	SelectableType.URL: 'http://github.com',
}


def number_of_searchers_by_type(type):
	return len([s for s in DEFAULT_REGISTRY.searchers if s.supports(type)])


def number_of_scanners_by_type(type):
	return len([s for s in DEFAULT_REGISTRY.scanners if s.supports(type)])


@pytest.fixture
def options():
	return Options()


@pytest.fixture
def idn_options():
	return Options(enable_idn=True)


@pytest.fixture
def strict_options():
	return Options(strict_tld=True)
