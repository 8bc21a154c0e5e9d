from pathlib import Path

import pytest
import requests
import yaml

from amlrules.cli import check
from amlrules.cli.__main__ import main
from amlrules.config.loader import load_snapshot
from amlrules.models.types import AmlStatuses, AmlTypes
from amlrules.notify import slack

SAMPLE = Path(__file__).resolve().parents[1] / "src" / "amlrules" / "config" / "filing.yaml"

def write_cfg(tmp_path, cfg):
    path = tmp_path / "filing.yaml"
    path.write_text(yaml.safe_dump(cfg))
    return str(path)

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("AMLRULES_STAFF", raising=False)
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)

def test_load_sample_snapshot():
    ctx, candidate = load_snapshot(str(SAMPLE))
    assert ctx.is_type_bc_ulc_company
    assert not ctx.is_role_staff
    assert len(ctx.amalgamating_businesses) == 3
    assert candidate.type == AmlTypes.FOREIGN

def test_staff_env_override(tmp_path, monkeypatch):
    path = write_cfg(tmp_path, {"context": {"is_role_staff": False}, "businesses": []})
    monkeypatch.setenv("AMLRULES_STAFF", "1")
    ctx, candidate = load_snapshot(path)
    assert ctx.is_role_staff
    assert candidate is None

def test_check_sample(capsys):
    assert check.run(str(SAMPLE)) == 1
    out = capsys.readouterr().out
    assert "A0051234 (candidate) ERROR_FOREIGN" in out
    assert "BC0456789 (table) ERROR_FUTURE_EFFECTIVE_FILING" in out
    assert "BC0871227 (table) OK" in out
    assert "checked=4 violations=2" in out

def test_check_clean_snapshot_exits_zero(tmp_path, capsys):
    path = write_cfg(tmp_path, {
        "context": {"is_type_bc_ccc": True},
        "businesses": [{"type": "LEAR", "legal_type": "CC", "name": "GOOD CCC", "address": {"city": "Victoria"}}],
    })
    assert main(["check", "--config", path]) == 0
    assert "GOOD CCC (table) OK" in capsys.readouterr().out

def test_check_notifies_on_violation(tmp_path, monkeypatch):
    sent = []
    monkeypatch.setattr(check, "notify", sent.append)
    path = write_cfg(tmp_path, {"businesses": [{"identifier": "BC1", "type": "LEAR", "legal_type": "BC"}]})
    assert main(["check", "--config", path, "--notify"]) == 1
    assert len(sent) == 1
    assert f"BC1={AmlStatuses.ERROR_NOT_AFFILIATED.value}" in sent[0]

def test_check_does_not_notify_without_flag(tmp_path, monkeypatch):
    sent = []
    monkeypatch.setattr(check, "notify", sent.append)
    path = write_cfg(tmp_path, {"businesses": [{"type": "FOREIGN"}]})
    assert main(["check", "--config", path]) == 1
    assert sent == []

def test_summary(capsys):
    assert main(["summary", "--config", str(SAMPLE)]) == 0
    out = capsys.readouterr().out
    assert "any_limited: true" in out
    assert "any_unlimited: true" in out
    assert "any_foreign: false" in out

def test_missing_businesses_key(tmp_path, capsys):
    path = write_cfg(tmp_path, {"context": {}})
    assert main(["check", "--config", path]) == 2
    assert "config missing key" in capsys.readouterr().out

def test_invalid_business_record(tmp_path, capsys):
    path = write_cfg(tmp_path, {"businesses": [{"type": "DOMESTIC"}]})
    assert main(["check", "--config", path]) == 2
    assert "config invalid" in capsys.readouterr().out

def test_missing_config_file(tmp_path, capsys):
    assert main(["summary", "--config", str(tmp_path / "nope.yaml")]) == 2
    assert "config not found" in capsys.readouterr().out

def test_notify_without_webhook_is_noop(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("should not post")

    monkeypatch.setattr(slack.requests, "post", boom)
    slack.notify("hello")

def test_notify_posts_text(monkeypatch):
    calls = []

    class Resp:
        def raise_for_status(self):
            pass

    def fake_post(url, data, headers, timeout):
        calls.append((url, data, timeout))
        return Resp()

    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example.test/x")
    monkeypatch.setattr(slack.requests, "post", fake_post)
    slack.notify("hello")
    assert calls == [("https://hooks.example.test/x", '{"text": "hello"}', 10)]

def test_notify_raises_on_http_error(monkeypatch):
    class Resp:
        def raise_for_status(self):
            raise requests.HTTPError("500 Server Error")

    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example.test/x")
    monkeypatch.setattr(slack.requests, "post", lambda *a, **kw: Resp())
    with pytest.raises(requests.HTTPError):
        slack.notify("hello")

def test_default_config_outside_repo_root(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["summary"]) == 0
    assert "any_limited: true" in capsys.readouterr().out

@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "just a string\n",
        "context: [1, 2]\nbusinesses: []\n",
        "businesses: []\ncandidate: [1, 2]\n",
        "context:\n  amalgamating_businesses: []\nbusinesses: []\n",
    ],
)
def test_malformed_snapshot_exits_two(tmp_path, capsys, text):
    path = tmp_path / "filing.yaml"
    path.write_text(text)
    assert main(["check", "--config", str(path)]) == 2
    assert "config invalid" in capsys.readouterr().out

def test_config_path_is_directory(tmp_path, capsys):
    assert main(["check", "--config", str(tmp_path)]) == 2
    assert "config unreadable" in capsys.readouterr().out
