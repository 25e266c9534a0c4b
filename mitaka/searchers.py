"""
Static table of passive lookup services

Order is significant: it is the order entries and menu items are produced in.
"""
from .registry import Searcher
from .types import SelectableType as T


SEARCHERS = [
	Searcher(
		name='AbuseIPDB',
		url_templates={T.IP: 'https://www.abuseipdb.com/check/{query}'},
	),
	Searcher(
		name='ANY.RUN',
		url_templates={
			T.HASH: 'https://app.any.run/submissions/#filehash:{query}'},
	),
	Searcher(
		name='BGPView',
		url_templates={
			T.ASN: 'https://bgpview.io/search/{query}',
			T.IP: 'https://bgpview.io/ip/{query}',
		},
	),
	Searcher(
		name='BlockCypher',
		url_templates={
			T.BTC: 'https://live.blockcypher.com/btc/address/{query}'},
	),
	Searcher(
		name='Censys',
		url_templates={
			T.ASN: 'https://search.censys.io/search?resource=hosts&q=autonomous_system.asn:{query}',
			T.DOMAIN: 'https://search.censys.io/search?resource=hosts&q={query}',
			T.IP: 'https://search.censys.io/hosts/{query}',
		},
	),
	Searcher(
		name='crt.sh',
		url_templates={T.DOMAIN: 'https://crt.sh/?q={query}'},
	),
	Searcher(
		name='DNSlytics',
		url_templates={
			T.ASN: 'https://dnslytics.com/bgp/{query}',
			T.DOMAIN: 'https://dnslytics.com/domain/{query}',
			T.GA_PUB_ID: 'https://dnslytics.com/reverse-adsense/{query}',
			T.GA_TRACK_ID: 'https://dnslytics.com/reverse-analytics/{query}',
			T.IP: 'https://dnslytics.com/ip/{query}',
		},
	),
	Searcher(
		name='EmailRep',
		url_templates={T.EMAIL: 'https://emailrep.io/{query}'},
	),
	Searcher(
		name='Etherscan',
		url_templates={T.ETH: 'https://etherscan.io/address/{query}'},
	),
	Searcher(
		name='GoogleSafeBrowsing',
		url_templates={
			T.DOMAIN: 'https://transparencyreport.google.com/safe-browsing/search?url={query}',
			T.URL: 'https://transparencyreport.google.com/safe-browsing/search?url={query}',
		},
	),
	Searcher(
		name='GreyNoise',
		url_templates={T.IP: 'https://viz.greynoise.io/ip/{query}'},
	),
	Searcher(
		name='HybridAnalysis',
		url_templates={
			T.DOMAIN: 'https://www.hybrid-analysis.com/search?query=domain:{query}',
			T.HASH: 'https://www.hybrid-analysis.com/search?query={query}',
			T.IP: 'https://www.hybrid-analysis.com/search?query=host:{query}',
			T.URL: 'https://www.hybrid-analysis.com/search?query=url:{query}',
		},
	),
	Searcher(
		name='IntelligenceX',
		url_templates={
			T.BTC: 'https://intelx.io/?s={query}',
			T.DOMAIN: 'https://intelx.io/?s={query}',
			T.EMAIL: 'https://intelx.io/?s={query}',
			T.ETH: 'https://intelx.io/?s={query}',
			T.IP: 'https://intelx.io/?s={query}',
			T.URL: 'https://intelx.io/?s={query}',
		},
	),
	Searcher(
		name='ipinfo',
		url_templates={
			T.ASN: 'https://ipinfo.io/{query}',
			T.IP: 'https://ipinfo.io/{query}',
		},
	),
	Searcher(
		name='MalShare',
		url_templates={T.HASH: 'https://malshare.com/search.php?query={query}'},
	),
	Searcher(
		name='Maltiverse',
		url_templates={
			T.DOMAIN: 'https://maltiverse.com/search;query={query}',
			T.HASH: 'https://maltiverse.com/search;query={query}',
			T.IP: 'https://maltiverse.com/search;query={query}',
			T.URL: 'https://maltiverse.com/search;query={query}',
		},
	),
	Searcher(
		name='NVD',
		url_templates={T.CVE: 'https://nvd.nist.gov/vuln/detail/{query}'},
	),
	Searcher(
		name='ONYPHE',
		url_templates={T.IP: 'https://www.onyphe.io/search/?query={query}'},
	),
	Searcher(
		name='OTX',
		url_templates={
			T.CVE: 'https://otx.alienvault.com/indicator/cve/{query}',
			T.DOMAIN: 'https://otx.alienvault.com/indicator/domain/{query}',
			T.HASH: 'https://otx.alienvault.com/indicator/file/{query}',
			T.IP: 'https://otx.alienvault.com/indicator/ip/{query}',
		},
	),
	Searcher(
		name='Pulsedive',
		url_templates={
			T.DOMAIN: 'https://pulsedive.com/indicator/?ioc={query}',
			T.HASH: 'https://pulsedive.com/indicator/?ioc={query}',
			T.IP: 'https://pulsedive.com/indicator/?ioc={query}',
			T.URL: 'https://pulsedive.com/indicator/?ioc={query}',
		},
	),
	Searcher(
		name='SecurityTrails',
		url_templates={
			T.DOMAIN: 'https://securitytrails.com/domain/{query}/dns',
			T.IP: 'https://securitytrails.com/list/ip/{query}',
		},
	),
	Searcher(
		name='Shodan',
		url_templates={T.IP: 'https://www.shodan.io/host/{query}'},
	),
	Searcher(
		name='SpyOnWeb',
		url_templates={
			T.DOMAIN: 'https://spyonweb.com/{query}',
			T.GA_PUB_ID: 'https://spyonweb.com/{query}',
			T.GA_TRACK_ID: 'https://spyonweb.com/{query}',
			T.IP: 'https://spyonweb.com/{query}',
		},
	),
	Searcher(
		name='ThreatMiner',
		url_templates={
			T.DOMAIN: 'https://www.threatminer.org/domain.php?q={query}',
			T.HASH: 'https://www.threatminer.org/sample.php?q={query}',
			T.IP: 'https://www.threatminer.org/host.php?q={query}',
		},
	),
	Searcher(
		name='URLhaus',
		url_templates={
			T.DOMAIN: 'https://urlhaus.abuse.ch/browse.php?search={query}',
			T.HASH: 'https://urlhaus.abuse.ch/browse.php?search={query}',
			T.IP: 'https://urlhaus.abuse.ch/browse.php?search={query}',
			T.URL: 'https://urlhaus.abuse.ch/browse.php?search={query}',
		},
	),
	Searcher(
		name='urlscan.io',
		url_templates={
			T.ASN: 'https://urlscan.io/search/#page.asn:{query}',
			T.DOMAIN: 'https://urlscan.io/domain/{query}',
			T.IP: 'https://urlscan.io/ip/{query}',
			T.URL: 'https://urlscan.io/search/#page.url:{query}',
		},
	),
	Searcher(
		name='VirusTotal',
		url_templates={
			T.DOMAIN: 'https://www.virustotal.com/gui/domain/{query}',
			T.HASH: 'https://www.virustotal.com/gui/file/{query}',
			T.IP: 'https://www.virustotal.com/gui/ip-address/{query}',
			T.URL: 'https://www.virustotal.com/gui/search/{query}',
		},
	),
	Searcher(
		name='Vulmon',
		url_templates={
			T.CVE: 'https://vulmon.com/vulnerabilitydetails?qid={query}'},
	),
	Searcher(
		name='X-Force Exchange',
		url_templates={
			T.DOMAIN: 'https://exchange.xforce.ibmcloud.com/url/{query}',
			T.HASH: 'https://exchange.xforce.ibmcloud.com/malware/{query}',
			T.IP: 'https://exchange.xforce.ibmcloud.com/ip/{query}',
		},
	),
]
