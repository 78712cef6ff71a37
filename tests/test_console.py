import io

from responder.config import ResponderConfig
from responder.console import GOODBYE, WELCOME, InputReader, SupportSystem, main
from responder.defaults import FALLBACK_RESPONSE
from responder.selector import Responder


def scripted(lines):
    feed = iter(lines)

    def _read(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return _read


def make_responder(tmp_path):
    response_map = tmp_path / "response_map.txt"
    response_map.write_text("crash,crashes\nIt works for us.\n\n", encoding="ascii")
    return Responder(
        ResponderConfig(
            response_map_path=response_map,
            default_responses_path=tmp_path / "missing.txt",
        )
    )


def test_input_reader_builds_lowercase_word_set():
    reader = InputReader(read=scripted(["  My PC  crashes my PC "]))

    assert reader.get_input() == {"my", "pc", "crashes"}


def test_input_reader_treats_eof_as_bye():
    reader = InputReader(read=scripted([]))

    assert reader.get_input() == {"bye"}


def test_dialog_until_bye(tmp_path):
    output = io.StringIO()
    reader = InputReader(read=scripted(["My system CRASHES", "bye now", "Bye"]))

    replies = SupportSystem(make_responder(tmp_path), reader, output).start()

    text = output.getvalue()
    assert replies == 2
    assert text.startswith(WELCOME)
    assert "\nIt works for us.\n" in text
    assert FALLBACK_RESPONSE in text
    assert text.rstrip().endswith(GOODBYE)


def test_main_runs_with_config(tmp_path, monkeypatch, capsys):
    config = tmp_path / "config.yml"
    config.write_text(
        "resources:\n"
        f"  response_map: {tmp_path / 'missing_map.txt'}\n"
        f"  default_responses: {tmp_path / 'missing_default.txt'}\n",
        encoding="utf-8",
    )
    monkeypatch.setattr("builtins.input", scripted(["hello", "bye"]))

    assert main(["--config", str(config), "--seed", "5"]) == 0

    out = capsys.readouterr().out
    assert FALLBACK_RESPONSE in out
    assert GOODBYE in out
