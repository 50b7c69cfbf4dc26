import pytest

from main import main, build_parser


def feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=''):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr('builtins.input', fake_input)


def test_argument_words_are_joined(capsys):
    assert main(['--no_history', '2', '+', '3', '*', '4']) == 0
    assert capsys.readouterr().out == "14\n"


def test_argument_mode_flag(capsys):
    assert main(['--no_history', '-a', '(2+3)*4']) == 0
    assert capsys.readouterr().out == "20\n"


def test_dash_words_kept_in_order(capsys):
    assert main(['--no_history', '-5+3', '*', '2']) == 0
    assert capsys.readouterr().out == "1\n"


def test_option_value_equal_to_expression_word(capsys):
    assert main(['--no_history', '--log_base', '10', '1', '-', '10']) == 0
    assert capsys.readouterr().out == "-9\n"


def test_inline_option_value_and_double_dash(capsys):
    assert main(['--no_history', '--log_base=10', '--', 'log(100)', '-', '10']) == 0
    assert capsys.readouterr().out == "-8\n"


def test_error_goes_to_stderr(capsys):
    assert main(['--no_history', '5/0']) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip().endswith("Error: Division by zero")


def test_show_postfix(capsys):
    assert main(['--no_history', '--show_postfix', '2+3*4']) == 0
    assert capsys.readouterr().out == "Postfix: 2 3 4 * +\n14\n"


def test_log_base_flag(capsys):
    assert main(['--no_history', '--log_base', '10', 'log(1000)']) == 0
    assert capsys.readouterr().out == "3\n"


def test_history_written_even_on_error(tmp_path, capsys):
    path = tmp_path / "history"
    main(['--history_path', str(path), '1+1'])
    main(['--history_path', str(path), 'foo(1)'])
    assert path.read_text(encoding='utf-8') == "1+1\nfoo(1)\n"


def test_single_mode_default(monkeypatch, capsys):
    feed(monkeypatch, ["sqrt(16)"])
    assert main(['--no_history']) == 0
    assert capsys.readouterr().out == "4\n"


def test_single_mode_eof(monkeypatch, capsys):
    feed(monkeypatch, [])
    assert main(['--no_history', '-s']) == 0
    assert capsys.readouterr().out == ""


def test_argument_flag_without_words_falls_back_to_prompt(monkeypatch, capsys):
    feed(monkeypatch, ["1+1"])
    assert main(['--no_history', '-a']) == 0
    assert capsys.readouterr().out == "2\n"


def test_multiple_mode(monkeypatch, capsys):
    feed(monkeypatch, ["1+1", "y", "", "2*3", "n", "9"])
    assert main(['--no_history', '-m']) == 0
    assert capsys.readouterr().out.splitlines() == ["2", "-" * 24, "6", "-" * 24]


def test_multiple_mode_exit_command(monkeypatch, capsys):
    feed(monkeypatch, ["QUIT", "1+1"])
    assert main(['--no_history', '-m']) == 0
    assert capsys.readouterr().out == ""


def test_multiple_mode_reports_errors_and_continues(monkeypatch, capsys):
    feed(monkeypatch, ["(1+2", "y", "1+2"])
    assert main(['--no_history', '-m']) == 0
    captured = capsys.readouterr()
    assert "Error: Unmatched parenthesis" in captured.err
    assert captured.out.splitlines() == ["-" * 24, "3", "-" * 24]


def test_mode_flags_are_exclusive():
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(['-s', '-m'])
    assert exc_info.value.code == 2


def test_batch_mode(tmp_path, capsys):
    batch = tmp_path / "batch.txt"
    batch.write_text("1+1\n5/0\n", encoding='utf-8')
    output = tmp_path / "results.csv"

    assert main(['--no_history', '-f', str(batch), '--output_path', str(output)]) == 1
    out = capsys.readouterr().out
    assert "Division by zero" in out
    assert output.exists()


def test_batch_mode_all_ok(tmp_path, capsys):
    batch = tmp_path / "batch.txt"
    batch.write_text("2^10\n", encoding='utf-8')
    assert main(['--no_history', '--batch_file', str(batch)]) == 0
    assert "1024" in capsys.readouterr().out
