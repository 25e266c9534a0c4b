"""
Static table of active analysis services
"""
from .registry import Scanner
from .types import SelectableType as T


SCANNERS = [
	Scanner(
		name='HybridAnalysis',
		supported_types=(T.DOMAIN, T.IP, T.URL),
		endpoint='https://www.hybrid-analysis.com/api/v2/quick-scan/url',
		api_key_option='hybrid_analysis_api_key',
	),
	Scanner(
		name='urlscan.io',
		supported_types=(T.DOMAIN, T.IP, T.URL),
		endpoint='https://urlscan.io/api/v1/scan/',
		api_key_option='urlscan_api_key',
	),
	Scanner(
		name='VirusTotal',
		supported_types=(T.URL,),
		endpoint='https://www.virustotal.com/api/v3/urls',
		api_key_option='virus_total_api_key',
	),
]
