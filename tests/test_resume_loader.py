from __future__ import annotations

import requests
import responses

from jobmatch.config import ResumeFetchSettings
from jobmatch.utils.resume_loader import fetch_resume_text, load_resume_text, read_resume_text

RESUME_URL = "https://storage.example.com/resumes/alex.txt"
NO_RETRY = ResumeFetchSettings(timeout=5, max_retries=0)


@responses.activate
def test_fetch_returns_body_text():
    responses.add(responses.GET, RESUME_URL, body="Python automation specialist")
    assert fetch_resume_text(RESUME_URL, settings=NO_RETRY) == "Python automation specialist"
    assert responses.calls[0].request.url == RESUME_URL


@responses.activate
def test_fetch_failures_become_empty_text(caplog):
    responses.add(responses.GET, RESUME_URL, status=404)
    with caplog.at_level("WARNING"):
        assert fetch_resume_text(RESUME_URL, settings=NO_RETRY) == ""
    assert "Error extracting text from resume" in caplog.text


@responses.activate
def test_fetch_connection_errors_become_empty_text():
    responses.add(responses.GET, RESUME_URL, body=requests.ConnectionError("unreachable"))
    assert fetch_resume_text(RESUME_URL, session=requests.Session(), settings=NO_RETRY) == ""


def test_fetch_without_url_does_nothing():
    assert fetch_resume_text("") == ""
    assert fetch_resume_text(None) == ""


def test_read_resume_text(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text("Data engineer", encoding="utf-8")
    assert read_resume_text(path) == "Data engineer"
    assert read_resume_text(tmp_path / "missing.txt") == ""


@responses.activate
def test_load_dispatches_on_source(tmp_path):
    responses.add(responses.GET, RESUME_URL, body="remote resume")
    path = tmp_path / "resume.txt"
    path.write_text("local resume", encoding="utf-8")
    assert load_resume_text(RESUME_URL, settings=NO_RETRY) == "remote resume"
    assert load_resume_text(str(path)) == "local resume"
    assert load_resume_text(path) == "local resume"
    assert load_resume_text(None) == ""


@responses.activate
def test_fetch_closes_the_session_it_creates(monkeypatch):
    responses.add(responses.GET, RESUME_URL, body="resume")
    closed = []
    original_close = requests.Session.close

    def close(self):
        closed.append(self)
        original_close(self)

    monkeypatch.setattr(requests.Session, "close", close)
    assert fetch_resume_text(RESUME_URL, settings=NO_RETRY) == "resume"
    assert len(closed) == 1

    session = requests.Session()
    assert fetch_resume_text(RESUME_URL, session=session, settings=NO_RETRY) == "resume"
    assert session not in closed
