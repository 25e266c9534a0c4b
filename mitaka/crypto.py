"""
Cryptocurrency address classification (Bitcoin, Ethereum)
"""
from logging import getLogger

import base58
import regex

from .template import Template


logger = getLogger(name=__name__)


BASE58_ALPHABET = base58.BITCOIN_ALPHABET.decode('ascii')
BECH32_ALPHABET = 'qpzry9x8gf2tvdw0s3jn54khce6mua7l'

# version byte + 160-bit hash
LEGACY_PAYLOAD_SIZE = 21
LEGACY_VERSIONS = {'1': 0x00, '3': 0x05}

# P2WPKH and P2WSH/P2TR
BECH32_SIZES = [42, 62]

BECH32_HRP = 'bc'
BECH32_GENERATOR = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
# BIP 173 for witness version 0, BIP 350 for later versions
BECH32_CONSTANT = 1
BECH32M_CONSTANT = 0x2bc830a3
MAX_WITNESS_VERSION = 16


LEGACY_TEMPLATE = Template(format=r'[13][{alphabet}]{{24,33}}')
LEGACY_TEMPLATE['alphabet'] = BASE58_ALPHABET

BECH32_TEMPLATE = Template(
	format=r'bc1[{alphabet}]+', flags=regex.IGNORECASE)
BECH32_TEMPLATE['alphabet'] = BECH32_ALPHABET

ETH_TEMPLATE = Template(format=r'0x[0-9a-fA-F]{{40}}')


def is_valid_legacy_address(text):
	"""
	Check the Base58Check checksum and version byte of a P2PKH/P2SH address
	"""
	try:
		payload = base58.b58decode_check(text)
	except ValueError:
		return False

	if len(payload) != LEGACY_PAYLOAD_SIZE:
		return False

	return payload[0] == LEGACY_VERSIONS[text[0]]


def bech32_polymod(values):
	checksum = 1
	for value in values:
		top = checksum >> 25
		checksum = (checksum & 0x1ffffff) << 5 ^ value
		for i, generator in enumerate(BECH32_GENERATOR):
			if (top >> i) & 1:
				checksum ^= generator
	return checksum


def expand_hrp(hrp):
	return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def is_valid_bech32_address(text):
	"""
	Check the case, length and checksum of a segwit address, using bech32 for
	witness version 0 and bech32m for later versions
	"""
	# bech32 forbids mixed case
	if text not in (text.lower(), text.upper()):
		return False

	if len(text) not in BECH32_SIZES:
		return False

	data = [BECH32_ALPHABET.index(c) for c in text.lower()[len(BECH32_HRP) + 1:]]
	witness_version = data[0]
	if witness_version > MAX_WITNESS_VERSION:
		return False

	if witness_version == 0:
		expected = BECH32_CONSTANT
	else:
		expected = BECH32M_CONSTANT

	return bech32_polymod(expand_hrp(BECH32_HRP) + data) == expected


def classify_btc(text, options=None):
	"""
	Return the text if it is a Bitcoin address
	"""
	if LEGACY_TEMPLATE.fullmatch(text):
		valid = is_valid_legacy_address(text)
	elif BECH32_TEMPLATE.fullmatch(text):
		valid = is_valid_bech32_address(text)
	else:
		return None

	if not valid:
		logger.debug('Rejected Bitcoin address candidate: %r', text)
		return None

	return text


def classify_eth(text, options=None):
	"""
	Return the text if it is an Ethereum address
	"""
	if ETH_TEMPLATE.fullmatch(text) is None:
		return None

	return text
