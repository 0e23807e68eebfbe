from __future__ import annotations

import builtins

import saucefinder.logger as sf_logger


def test_debug_drops_when_debug_disabled(monkeypatch):
    log = sf_logger.SauceFinderLogger(debug=False, banner=False)
    captured: list[tuple[str, str]] = []
    monkeypatch.setattr(log, "log", lambda msg, prefix="": captured.append((prefix, msg)))

    log.debug("hidden")
    log.api_request("GET", "https://saucenao.com/search.php", {"api_key": "secret"})
    log.api_response(200, b"{}", 12.0)

    assert captured == []


def test_api_request_redacts_api_key(monkeypatch):
    log = sf_logger.SauceFinderLogger(debug=True, banner=False)
    captured: list[tuple[str, str]] = []
    monkeypatch.setattr(log, "log", lambda msg, prefix="": captured.append((prefix, msg)))

    log.api_request("GET", "https://saucenao.com/search.php", {"api_key": "secret", "db": 999})

    assert captured[0][1] == "API Request: GET https://saucenao.com/search.php"
    assert "secret" not in captured[1][1]
    assert '"db": 999' in captured[1][1]


def test_api_response_truncates_large_bodies(monkeypatch):
    log = sf_logger.SauceFinderLogger(debug=True, banner=False)
    captured: list[tuple[str, str]] = []
    monkeypatch.setattr(log, "log", lambda msg, prefix="": captured.append((prefix, msg)))

    log.api_response(200, b"x" * (sf_logger.MAX_LOGGED_BODY_CHARS + 10), 5.0)

    assert "Status 200" in captured[0][1]
    assert captured[1][1].endswith("... (truncated)")


def test_prefixes(monkeypatch):
    log = sf_logger.SauceFinderLogger(debug=False, banner=False)
    captured: list[tuple[str, str]] = []
    monkeypatch.setattr(log, "log", lambda msg, prefix="": captured.append((prefix, msg)))

    log.warning("careful")
    log.error("broken")
    log.lookup_failed("e-hentai", "Title", "503")

    assert captured == [
        ("[WARNING] ", "careful"),
        ("[ERROR] ", "broken"),
        ("[ERROR] ", "e-hentai lookup failed for Title: 503"),
    ]


def test_log_writes_screen_and_file(monkeypatch, tmp_path):
    printed: list[str] = []
    monkeypatch.setattr(builtins, "print", lambda *args, **kwargs: printed.append(str(args[0])))
    log_file = tmp_path / "logs" / "run.txt"

    with sf_logger.SauceFinderLogger(log_file=log_file) as log:
        log.info("hello")

    contents = log_file.read_text(encoding="utf-8").splitlines()
    assert "Started SauceFinder" in contents[0]
    assert contents[1] == "hello"
    assert "Ended session" in contents[-1]
    assert "hello" in printed


def test_get_logger_falls_back_to_stdout_logger(monkeypatch):
    monkeypatch.setattr(sf_logger, "_logger", None)

    first = sf_logger.get_logger()

    assert isinstance(first, sf_logger.SauceFinderLogger)
    assert sf_logger.get_logger() is first
    replacement = sf_logger.SauceFinderLogger(banner=False)
    sf_logger.set_logger(replacement)
    assert sf_logger.get_logger() is replacement
