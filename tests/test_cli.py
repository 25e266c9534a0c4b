import json

import pytest

from mitaka import DEFAULT_REGISTRY, SelectableType
from mitaka.cli import main, with_default_command


def run(capsys, *argv):
	code = main(list(argv))
	return code, capsys.readouterr().out


def test_classify(capsys):
	code, out = run(capsys, 'classify', '1.1.1.1', 'github.com')
	assert code == 0
	assert out == 'ip\t1.1.1.1\ndomain\tgithub.com\n'


def test_classify_without_subcommand(capsys):
	code, out = run(capsys, '1.1.1.1')
	assert code == 0
	assert out == 'ip\t1.1.1.1\n'


def test_classify_without_subcommand_after_options(capsys):
	code, out = run(
		capsys, '--disable-searcher', 'Shodan', '-l', 'INFO', 'github.com')
	assert code == 0
	assert out == 'domain\tgithub.com\n'


@pytest.mark.parametrize('argv, expected', [
	(['1.1.1.1'], ['classify', '1.1.1.1']),
	(['--idn', 'a.de'], ['--idn', 'classify', 'a.de']),
	(['-i', 'in.txt'], ['-i', 'in.txt']),
	(['--options', 'classify', 'x'], ['--options', 'classify', 'classify', 'x']),
	(['refang', '1[.]1'], ['refang', '1[.]1']),
	([], []),
])
def test_with_default_command(argv, expected):
	assert with_default_command(argv) == expected


def test_classify_is_default_command(capsys, tmp_path):
	path = tmp_path / 'selections.txt'
	path.write_text('CVE-2018-8013\nhello world\n')
	code, out = run(capsys, '-i', str(path))
	assert code == 0
	assert out == 'cve\tCVE-2018-8013\n'


def test_classify_refangs(capsys):
	_, out = run(capsys, 'classify', 'hxxp://github[.]com')
	assert out == 'url\thttp://github.com\n'


def test_no_refang(capsys):
	_, out = run(capsys, '--no-refang', 'classify', '1[.]1.1.1')
	assert out == ''


def test_refang(capsys):
	_, out = run(capsys, 'refang', '1[.]1.1.1', 'test[at]example[dot]com')
	assert out == '1.1.1.1\ntest@example.com\n'


def test_idn_flag(capsys):
	_, out = run(capsys, 'classify', 'bücher.de')
	assert out == ''
	_, out = run(capsys, '--idn', 'classify', 'bücher.de')
	assert out == 'domain\tbücher.de\n'


def test_entries(capsys):
	_, out = run(capsys, 'entries', '1.1.1.1')
	lines = [l.split('\t') for l in out.splitlines()]
	searches = [l for l in lines if l[0] == 'search']
	scans = [l for l in lines if l[0] == 'scan']

	assert len(searches) == len(DEFAULT_REGISTRY.searchers_for(SelectableType.IP))
	assert len(scans) == len(DEFAULT_REGISTRY.scanners_for(SelectableType.IP))
	assert ['search', 'Shodan', 'ip', '1.1.1.1', 'https://www.shodan.io/host/1.1.1.1'] in lines
	assert all(len(l) == 4 for l in scans)


def test_disable_searcher(capsys):
	_, out = run(capsys, '--disable-searcher', 'Shodan', 'entries', '1.1.1.1')
	assert 'Shodan' not in out
	assert 'AbuseIPDB' in out


def test_options_file(capsys, tmp_path):
	path = tmp_path / 'options.json'
	path.write_text(json.dumps({'disabledScannerNames': ['urlscan.io']}))
	_, out = run(capsys, '--options', str(path), 'entries', 'http://github.com')
	scans = [l for l in out.splitlines() if l.startswith('scan\t')]
	assert scans
	assert not any('\turlscan.io\t' in l for l in scans)


def test_invalid_options_file(capsys, tmp_path):
	path = tmp_path / 'options.json'
	path.write_text('{"enableIDN": "maybe"}')
	code, out = run(capsys, '--options', str(path), 'classify', 'github.com')
	assert code == 2
	assert out == ''


def test_missing_input_file(capsys, tmp_path):
	code, _ = run(capsys, '-i', str(tmp_path / 'missing.txt'))
	assert code == 2


def test_version(capsys):
	with pytest.raises(SystemExit) as exit:
		main(['--version'])
	assert exit.value.code == 0
	assert capsys.readouterr().out.startswith('mitaka ')
