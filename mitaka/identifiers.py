"""
Classification of registry and tracking identifiers: autonomous system
numbers, CVE IDs and Google Analytics / AdSense IDs
"""
import regex

from .template import Template


ASN_TEMPLATE = Template(format=r'ASN?[0-9]+', flags=regex.IGNORECASE)

CVE_TEMPLATE = Template(
	format=r'CVE-{year}-{number}', flags=regex.IGNORECASE)
CVE_TEMPLATE['year'] = r'(?:1999|2[0-9]{{3}})'
CVE_TEMPLATE['number'] = r'(?:0[0-9]{{3}}|[1-9][0-9]{{3,}})'

GA_PUB_ID_TEMPLATE = Template(format=r'pub-[0-9]+')

GA_TRACK_ID_TEMPLATE = Template(format=r'UA-[0-9]+-[0-9]+')


def _fullmatch(template, text):
	if template.fullmatch(text) is None:
		return None
	return text


def classify_asn(text, options=None):
	return _fullmatch(ASN_TEMPLATE, text)


def classify_cve(text, options=None):
	return _fullmatch(CVE_TEMPLATE, text)


def classify_ga_pub_id(text, options=None):
	return _fullmatch(GA_PUB_ID_TEMPLATE, text)


def classify_ga_track_id(text, options=None):
	return _fullmatch(GA_TRACK_ID_TEMPLATE, text)
