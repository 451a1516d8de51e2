from __future__ import annotations

import json
from pathlib import Path

from loopless.adapters.log_sinks import JsonlLogSink
from loopless.app.cli import EXIT_INVALID, EXIT_OK, apply_overrides, parse_args, run
from loopless.config.loader import load_config
from loopless.main import main


def test_parse_args_reads_flags() -> None:
    args = parse_args(
        [
            "--config",
            "cfg.yml",
            "--max",
            "20",
            "--offset",
            "0",
            "--only",
            "3",
            "7",
            "--format",
            "json",
            "--output",
            "out.py",
            "--no-verify",
            "--tie-break",
            "smallest",
        ]
    )
    assert args.config == "cfg.yml"
    assert args.max == 20
    assert args.offset == 0
    assert args.only == [3, 7]
    assert args.format == "json"
    assert args.output == "out.py"
    assert args.verify is False
    assert args.tie_break == "smallest"


def test_apply_overrides_updates_config() -> None:
    args = parse_args(["--max", "12", "--offset", "5", "--sieve", "eratosthenes", "--optimizer", "disable"])
    config = apply_overrides(load_config(), args)
    assert config.generation.max == 12
    assert config.generation.offset == 5
    assert config.sieve.kind == "eratosthenes"
    assert config.optimizer.enabled is False


def test_apply_overrides_toggles_verify_step() -> None:
    without = apply_overrides(load_config(), parse_args(["--no-verify"]))
    assert "verify_unit" not in [step.name for step in without.pipeline.steps]
    restored = apply_overrides(without, parse_args(["--verify"]))
    names = [step.name for step in restored.pipeline.steps]
    assert names.index("verify_unit") == names.index("emit_call_tree") + 1


def test_cli_prints_python_units_to_stdout(capsys) -> None:
    exit_code = run(["--max", "3", "--log-level", "error"])
    captured = capsys.readouterr()
    assert exit_code == EXIT_OK
    outputs: list[int] = []
    namespace: dict[str, object] = {"print": outputs.append}
    exec(captured.out, namespace)
    namespace["count_to_3"]()  # type: ignore[operator]
    assert outputs == [1, 2, 3]


def test_cli_writes_json_file(tmp_path: Path) -> None:
    output = tmp_path / "units.jsonl"
    exit_code = main(["--max", "101", "--only", "100", "101", "--format", "json", "--output", str(output), "--log-level", "error"])
    assert exit_code == EXIT_OK
    records = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert [(r["number"], r["factorization"], r["extra_addition"], r["operation_count"]) for r in records] == [
        (100, [4, 5, 5], 0, 14),
        (101, [4, 5, 5], 1, 15),
    ]


def test_cli_rejects_invalid_range(capsys) -> None:
    assert run(["--max", "0"]) == EXIT_INVALID
    assert json.loads(capsys.readouterr().err.splitlines()[-1])["message"] == "invalid configuration"


def test_cli_reports_overflow(tmp_path: Path, capsys) -> None:
    # A tiny value limit makes emission fail; the failing step is logged and the exit code is non-zero.
    config_path = tmp_path / "config.yml"
    config_path.write_text(
        "\n".join(
            [
                "version: 1",
                "scenario:",
                "  name: overflow",
                "pipeline:",
                "  steps:",
                "    - name: build_sieve",
                "    - name: build_catalog",
                "    - name: optimize_catalog",
                "    - name: select_targets",
                "    - name: emit_call_tree",
                "generation:",
                "  max: 20",
                "emitter:",
                "  value_limit: 10",
            ]
        ),
        encoding="utf-8",
    )
    assert run(["--config", str(config_path)]) == EXIT_INVALID
    records = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    failure = records[-1]
    assert failure["message"] == "step failed"
    assert failure["fields"]["step"] == "emit_call_tree"
    assert failure["fields"]["error"] == "NumericOverflowError"


def test_cli_rejects_invalid_step_override(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text(
        "\n".join(
            [
                "version: 1",
                "scenario:",
                "  name: bad-override",
                "pipeline:",
                "  steps:",
                "    - name: build_sieve",
                "    - name: build_catalog",
                "    - name: optimize_catalog",
                "      config:",
                "        tie_break: largets",
                "generation:",
                "  max: 20",
            ]
        ),
        encoding="utf-8",
    )
    assert run(["--config", str(config_path)]) == EXIT_INVALID
    failure = json.loads(capsys.readouterr().err.splitlines()[-1])
    assert failure["message"] == "invalid configuration"
    assert "optimize_catalog" in failure["fields"]["detail"]


def test_cli_closes_jsonl_log_file(tmp_path: Path, monkeypatch) -> None:
    # The log file handle is released once the run returns.
    log_path = tmp_path / "logs" / "run.jsonl"
    config_path = tmp_path / "config.yml"
    config_path.write_text(
        "\n".join(
            [
                "version: 1",
                "scenario:",
                "  name: jsonl",
                "pipeline:",
                "  steps:",
                "    - name: build_sieve",
                "    - name: build_catalog",
                "    - name: optimize_catalog",
                "    - name: select_targets",
                "    - name: emit_call_tree",
                "    - name: render_unit",
                "    - name: write_output",
                "generation:",
                "  max: 6",
                "render:",
                "  format: summary",
                "output:",
                f"  file: {tmp_path / 'out.txt'}",
                "logging:",
                "  sink: jsonl",
                f"  path: {log_path}",
            ]
        ),
        encoding="utf-8",
    )
    closed: list[bool] = []
    original_close = JsonlLogSink.close

    def tracking_close(self: JsonlLogSink) -> None:
        original_close(self)
        closed.append(True)

    monkeypatch.setattr(JsonlLogSink, "close", tracking_close)
    assert run(["--config", str(config_path)]) == EXIT_OK
    assert closed == [True]
    messages = [json.loads(line)["message"] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert messages[-1] == "run complete"


def test_cli_verifies_multi_level_units(capsys) -> None:
    # Default pipeline includes verify_unit; 100 = 4*5*5 must pass it.
    assert run(["--max", "100", "--only", "100", "--format", "summary", "--log-level", "error"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "100 = 4*5*5: 14 calls"
