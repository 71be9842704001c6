from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import pytest

from strapi_webhook_proxy import ConfigError, SetupResult, StepOutcome, WebhookProxyError
from strapi_webhook_proxy.cli import _build_config, _format_summary, _prompt_events, build_parser, main
from strapi_webhook_proxy.contracts.config import EVENT_CHOICES, default_templates_dir
from tests.helpers import build_fake_questionary


def _make_args(**overrides: Any) -> argparse.Namespace:
    values: dict[str, Any] = {
        "project_root": ".",
        "templates_dir": None,
        "events": None,
        "skip_install": False,
        "verbose": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture(autouse=True)
def _no_install(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "strapi_webhook_proxy.core.install.install_type_declarations",
        lambda *_a, **_kw: StepOutcome.applied("install", "Installed @types/koa"),
    )


def test_build_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.project_root == "."
    assert args.templates_dir is None
    assert args.events is None
    assert args.skip_install is False
    assert args.verbose is False


def test_build_parser_accepts_all_options() -> None:
    args = build_parser().parse_args(
        ["--project-root", "cms", "--events", "entry.create,media.delete", "--skip-install", "-v"]
    )

    assert args.project_root == "cms"
    assert args.events == "entry.create,media.delete"
    assert args.skip_install is True
    assert args.verbose is True


def test_build_parser_version_prints_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("strapi-webhook-proxy ")


class TestBuildConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = _build_config(_make_args(project_root=str(tmp_path)))

        assert config.project_root == tmp_path.resolve()
        assert config.templates_dir == default_templates_dir()
        assert config.events is None
        assert config.install is True

    def test_events_are_split_and_deduplicated(self, tmp_path: Path) -> None:
        config = _build_config(
            _make_args(project_root=str(tmp_path), events=" entry.create, media.delete,,entry.create")
        )

        assert config.events == ["entry.create", "media.delete"]

    def test_unknown_event_is_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="entry.archive"):
            _build_config(_make_args(project_root=str(tmp_path), events="entry.archive"))

    def test_missing_project_root_is_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not a directory"):
            _build_config(_make_args(project_root=str(tmp_path / "nope")))


class TestPromptEvents:
    def test_returns_selection_in_order(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_q = build_fake_questionary(["entry.unpublish", "entry.publish"])
        monkeypatch.setitem(sys.modules, "questionary", fake_q)

        assert _prompt_events(EVENT_CHOICES) == ["entry.unpublish", "entry.publish"]
        assert fake_q.calls[0]["message"] == "Select webhook events to trigger the workflow:"
        assert fake_q.calls[0]["choices"] == list(EVENT_CHOICES)

    def test_cancelled_prompt_aborts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(None))

        with pytest.raises(KeyboardInterrupt):
            _prompt_events(EVENT_CHOICES)


def test_format_summary_includes_counts_and_workflow_reminder(tmp_path: Path) -> None:
    result = SetupResult(
        project_root=tmp_path,
        events=["entry.publish"],
        outcomes=[
            StepOutcome.applied("templates", "Created: src/config.ts"),
            StepOutcome.skipped("env", ".env already contains GitHub variables"),
            StepOutcome.failed("install", "Failed to install @types/koa"),
        ],
    )

    output = _format_summary(result)

    assert f"Project:   {tmp_path}" in output
    assert "Events:    entry.publish" in output
    assert "Steps:     1 applied, 1 skipped, 1 failed" in output
    assert "Attention:" in output
    assert "- configure your .env file." in output
    assert "    repository_dispatch:\n      types: [strapi_triggers_github_workflow]" in output


def test_format_summary_no_events_no_failures(tmp_path: Path) -> None:
    output = _format_summary(SetupResult(project_root=tmp_path))

    assert "Events:    none" in output
    assert "Attention:" not in output


def test_main_scaffolds_project(
    strapi_project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(["entry.publish", "entry.unpublish"]))

    exit_code = main(["--project-root", str(strapi_project)])

    assert exit_code == 0
    webhook = (strapi_project / "src/util/set-up-github-webhook.ts").read_text()
    assert 'events: ["entry.publish","entry.unpublish"]' in webhook
    out = capsys.readouterr().out
    assert "Created: src/config.ts" in out
    assert "setup complete" in out
    assert "types: [strapi_triggers_github_workflow]" in out


def test_main_with_events_flag_skips_prompt(strapi_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(None))

    exit_code = main(["--project-root", str(strapi_project), "--events", "media.create", "--skip-install"])

    assert exit_code == 0
    webhook = (strapi_project / "src/util/set-up-github-webhook.ts").read_text()
    assert 'events: ["media.create"]' in webhook


def test_main_incompatible_project_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--project-root", str(tmp_path)])

    assert exit_code == 3
    assert "doesn't appear to be a Strapi project" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_main_prompt_cancel_exits_two(
    strapi_project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(None))

    assert main(["--project-root", str(strapi_project)]) == 2
    assert "Aborted." in capsys.readouterr().out
    assert not (strapi_project / "src" / "config.ts").exists()


def test_main_enables_verbose_logging(strapi_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []

    def _fake_basic_config(**kwargs: Any) -> None:
        calls.append(kwargs)

    monkeypatch.setattr("strapi_webhook_proxy.cli.logging.basicConfig", _fake_basic_config)

    exit_code = main(["--project-root", str(strapi_project), "--events", "entry.create", "--verbose"])

    assert exit_code == 0
    assert calls == [{"level": logging.DEBUG, "format": "%(name)s %(message)s", "stream": sys.stderr}]


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigError("bad config"), 3),
        (WebhookProxyError("boom"), 1),
    ],
)
def test_main_maps_errors_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    error: Exception,
    code: int,
) -> None:
    def _raise(_args: argparse.Namespace) -> int:
        raise error

    monkeypatch.setattr("strapi_webhook_proxy.cli._run_setup_command", _raise)

    assert main([]) == code
    assert f"error: {error}" in capsys.readouterr().err
