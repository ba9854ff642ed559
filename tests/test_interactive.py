"""Tests for the interactive prompt and command-line entry point."""

import json

from citation_tools.models.citation import (
    CitationRecord,
    IdentifierFormat,
    ResolutionFailure,
    ResolutionResult,
)
from citation_tools.ui import interactive
from citation_tools.ui.interactive import (
    lookup_interactive,
    main,
    process_entry,
    recall,
    run_interactive,
)

from conftest import FakeResponse


class StubResolver:
    """Resolves only DOIs, to a fixed citation."""

    def __init__(self):
        self.seen = []

    def resolve(self, raw):
        self.seen.append(raw)
        result = ResolutionResult(raw=raw)
        if raw.startswith('10.'):
            result.formats = [IdentifierFormat.DOI]
            result.record = CitationRecord(IdentifierFormat.DOI, raw, f'@article{{{raw}}}', 'crossref')
        else:
            result.failure = ResolutionFailure.NO_MATCH
        return result


class TestRecall:

    def test_plain_entry(self):
        assert recall(['a'], ' 10.1000/x ') == '10.1000/x'

    def test_last_entry(self):
        assert recall(['a', 'b'], '') == 'b'
        assert recall(['a', 'b'], '!!') == 'b'
        assert recall([], '') is None

    def test_numbered_entry(self):
        assert recall(['a', 'b', 'c'], '!2') == 'b'
        assert recall(['a'], '!5') is None
        assert recall(['a'], '!0') is None
        assert recall(['a'], '!x') is None


class TestPrompt:

    def test_lookup_interactive(self):
        resolver = StubResolver()
        output = []

        citation, history = lookup_interactive(resolver, ['old'], input_func=lambda prompt: '10.1000/x',
                                               output=output.append)

        assert citation == '@article{10.1000/x}'
        assert history == ['old', '10.1000/x']
        assert output == ['@article{10.1000/x}']

    def test_failure_recorded_in_history(self):
        output = []
        citation, history = process_entry(StubResolver(), [], 'junk', output=output.append)

        assert citation is None
        assert history == ['junk']
        assert 'not a recognized' in output[0]

    def test_bad_recall_leaves_history(self):
        resolver = StubResolver()
        output = []
        citation, history = process_entry(resolver, ['a'], '!9', output=output.append)

        assert citation is None
        assert history == ['a']
        assert resolver.seen == []

    def test_run_interactive_session(self):
        resolver = StubResolver()
        inputs = iter(['10.1000/x', 'h', '!1', 'q', 'never read'])
        output = []

        history = run_interactive(resolver, [], input_func=lambda prompt: next(inputs),
                                  output=output.append)

        assert history == ['10.1000/x', '10.1000/x']
        assert resolver.seen == ['10.1000/x', '10.1000/x']
        assert '    1. 10.1000/x' in output

    def test_run_interactive_stops_at_eof(self):
        def no_input(prompt):
            raise EOFError

        assert run_interactive(StubResolver(), ['a'], input_func=no_input) == ['a']

    def test_ctrl_c_at_prompt_ends_session(self):
        inputs = iter(['10.1000/x'])

        def prompt(text):
            for entry in inputs:
                return entry
            raise KeyboardInterrupt

        assert run_interactive(StubResolver(), [], input_func=prompt, output=lambda line: None) == ['10.1000/x']

    def test_ctrl_c_during_lookup_keeps_prompting(self):
        class SlowResolver(StubResolver):
            def resolve(self, raw):
                if raw == 'slow':
                    raise KeyboardInterrupt
                return super().resolve(raw)

        inputs = iter(['slow', '10.1000/x', 'q'])
        output = []

        history = run_interactive(SlowResolver(), [], input_func=lambda prompt: next(inputs),
                                  output=output.append)

        assert history == ['10.1000/x']
        assert 'Lookup cancelled.' in output


class TestMain:

    def test_classify_only(self, capsys, http):
        status = main(['--classify-only', 'ISBN 978-0-13-468599-1', '2008.06030', 'junk'])
        captured = capsys.readouterr()

        assert status == 1
        assert 'ISBN=9780134685991' in captured.out
        assert 'ARXIV=2008.06030' in captured.out
        assert 'junk: no match' in captured.err
        assert http.calls == []

    def test_resolves_arguments(self, capsys, http, tmp_path):
        http.add('api.crossref.org', FakeResponse(200, text='@article{x}'))

        status = main(['--config', str(tmp_path / 'config.conf'), '10.1000/xyz123'])

        assert status == 0
        assert capsys.readouterr().out.strip() == '@article{x}'

    def test_unresolved_argument(self, capsys, http, tmp_path):
        status = main(['--config', str(tmp_path / 'config.conf'), 'pmid:12345678'])

        assert status == 1
        assert 'pmid:12345678: lookup failed' in capsys.readouterr().err

    def test_interactive_saves_history(self, monkeypatch, capsys, http, tmp_path):
        history_file = tmp_path / 'history.json'
        history_file.write_text(json.dumps(['10.1000/old']), encoding='utf-8')
        config_file = tmp_path / 'config.conf'
        config_file.write_text(f'[HISTORY]\nhistory_file = {history_file}\nmax_entries = 5\n',
                               encoding='utf-8')
        http.add('api.crossref.org', FakeResponse(200, text='@article{old}'))

        inputs = iter(['', 'q'])
        monkeypatch.setattr('builtins.input', lambda prompt: next(inputs))

        assert main(['--config', str(config_file)]) == 0
        assert json.loads(history_file.read_text(encoding='utf-8')) == ['10.1000/old', '10.1000/old']
        assert '@article{old}' in capsys.readouterr().out

    def test_no_history_flag(self, monkeypatch, http, tmp_path):
        history_file = tmp_path / 'history.json'
        config_file = tmp_path / 'config.conf'
        config_file.write_text(f'[HISTORY]\nhistory_file = {history_file}\n', encoding='utf-8')
        monkeypatch.setattr('builtins.input', lambda prompt: 'q')

        assert main(['--config', str(config_file), '--no-history']) == 0
        assert not history_file.exists()

    def test_email_flag_reaches_clients(self, monkeypatch, http, tmp_path):
        created = {}
        original = interactive.CitationResolver.from_config

        def spy(config, email=None):
            created['email'] = email
            return original(config, email=email)

        monkeypatch.setattr(interactive.CitationResolver, 'from_config', staticmethod(spy))
        http.add('api.crossref.org', FakeResponse(200, text='@article{x}'))

        main(['--config', str(tmp_path / 'config.conf'), '--email', 'me@example.org', '10.1000/xyz123'])

        assert created['email'] == 'me@example.org'
        assert http.calls[0]['params'] == {'mailto': 'me@example.org'}

    def test_ctrl_c_still_saves_history(self, monkeypatch, http, tmp_path):
        history_file = tmp_path / 'history.json'
        config_file = tmp_path / 'config.conf'
        config_file.write_text(f'[HISTORY]\nhistory_file = {history_file}\n', encoding='utf-8')
        http.add('api.crossref.org', FakeResponse(200, text='@article{x}'))
        inputs = iter(['10.1000/xyz123'])

        def prompt(text):
            for entry in inputs:
                return entry
            raise KeyboardInterrupt

        monkeypatch.setattr('builtins.input', prompt)

        assert main(['--config', str(config_file)]) == 0
        assert json.loads(history_file.read_text(encoding='utf-8')) == ['10.1000/xyz123']
