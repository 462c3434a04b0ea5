import json

import pytest
import responses

from logreasoner.backends import DEFAULT_MODEL, DEFAULT_OLLAMA_URL
from logreasoner.cli import analyze_logs, build_parser, main

LOG_LINES = [
    "2024-01-05T12:01:03Z ERROR Connection to db failed after 3 retries",
    "2024-01-05T12:01:05Z ERROR Connection to db failed after 5 retries",
    "2024-01-05T12:02:00Z INFO User 42 logged in",
    "",
]


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "app.log"
    path.write_text("\n".join(LOG_LINES), encoding="utf-8")
    return path


def _json_from(out):
    return json.loads(out[out.index("\n{") + 1:])


def test_parser_defaults():
    args = build_parser().parse_args(["analyze", "app.log"])
    assert args.command == "analyze"
    assert args.file == "app.log"
    assert args.top == 5
    assert args.min_count == 1
    assert args.output == "text"
    assert args.errors_only is False


def test_parser_flags():
    args = build_parser().parse_args(
        ["analyze", "x.log", "-t", "3", "--min-count", "2", "-o", "json", "--errors-only"]
    )
    assert (args.top, args.min_count, args.output, args.errors_only) == (3, 2, "json", True)


def test_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_rejects_negative_top():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["analyze", "x.log", "--top", "-1"])


def test_main_text_without_ollama(log_file, capsys):
    with responses.RequestsMock():
        status = main(["analyze", str(log_file)])
    captured = capsys.readouterr()
    assert status == 0
    assert "LOG ANALYSIS RESULTS" in captured.out
    assert "✓ Parsed 3 log events" in captured.out
    assert "Ollama not available" in captured.err


def test_main_json_output(log_file, capsys):
    with responses.RequestsMock():
        status = main(["analyze", str(log_file), "-o", "json"])
    document = _json_from(capsys.readouterr().out)
    assert status == 0
    assert document["total_events"] == 3
    assert document["unique_patterns"] == len(document["patterns"])
    assert document["patterns"][0]["count"] == 2
    assert document["patterns"][0]["level"] == "Error"


def test_errors_only_filters(log_file, capsys):
    with responses.RequestsMock():
        status = analyze_logs(str(log_file), 5, 1, "json", True)
    out = capsys.readouterr().out
    assert status == 0
    assert "✓ Filtered to 2 ERROR events" in out
    assert all(p["level"] == "Error" for p in _json_from(out)["patterns"])


def test_min_count_drops_small_groups(log_file, capsys):
    with responses.RequestsMock():
        analyze_logs(str(log_file), 5, 2, "json", False)
    document = _json_from(capsys.readouterr().out)
    assert document["unique_patterns"] == 1
    assert all(p["count"] >= 2 for p in document["patterns"])


def test_missing_file_reports_error(tmp_path, capsys):
    missing = tmp_path / "nope.log"
    assert main(["analyze", str(missing)]) == 1
    assert f"Failed to open log file: {missing}" in capsys.readouterr().err


def test_with_ollama_available(log_file, capsys):
    with responses.RequestsMock() as rsps:
        rsps.get(
            f"{DEFAULT_OLLAMA_URL}/api/tags",
            json={"models": [{"name": f"{DEFAULT_MODEL}:latest"}]},
        )
        rsps.post(f"{DEFAULT_OLLAMA_URL}/api/embeddings", json={"embedding": [0.1, 0.2, 0.3]})
        status = main(["analyze", str(log_file)])
    out = capsys.readouterr().out
    assert status == 0
    assert "✓ Ollama detected, generating embeddings..." in out
    assert "Embedding dimension: 3" in out


def test_embedding_failure_continues(log_file, capsys):
    with responses.RequestsMock() as rsps:
        rsps.get(
            f"{DEFAULT_OLLAMA_URL}/api/tags",
            json={"models": [{"name": DEFAULT_MODEL}]},
        )
        rsps.post(f"{DEFAULT_OLLAMA_URL}/api/embeddings", status=500)
        status = main(["analyze", str(log_file)])
    captured = capsys.readouterr()
    assert status == 0
    assert "Failed to generate embeddings" in captured.err
    assert "SUMMARY" in captured.out