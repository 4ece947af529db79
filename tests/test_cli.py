## argvee — CLI integration tests

import os, sys
import subprocess
from pathlib import Path


def run_cli(*cli_args: str | Path, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "argvee", "--plain"]
    args.extend(str(arg) for arg in cli_args)
    merged_env = os.environ.copy()
    merged_env.pop("ARGVEE_DEBUG", None)
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def test_cli_prints_parsed_options():
    result = run_cli("-o", "count:number/n", "-o", "verbose/v", "--", "-vn", "3", "file.txt")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert "count = 3" in lines
    assert "verbose = true" in lines
    assert '_ = ["file.txt"]' in lines


def test_cli_reads_schema_file(tmp_path):
    schema = tmp_path / "options.argv"
    schema.write_text('name:string/N "Who to greet"\nloud\n', encoding="utf-8")
    result = run_cli("-f", schema, "--", "--name", "joy", "--no-loud")
    assert result.returncode == 0
    assert 'name = "joy"' in result.stdout
    assert "loud = false" in result.stdout


def test_cli_stop_parsing():
    result = run_cli("-s", "-o", "a", "--", "-a", "--", "-a")
    assert result.returncode == 0
    assert '_ = ["--", "-a"]' in result.stdout


def test_cli_verbose_traces_events():
    result = run_cli("-v", "-o", "a", "--", "-a", "--what")
    assert result.returncode == 0
    assert "not-handled \"--what\"" in result.stdout
    assert "a true" in result.stdout


def test_cli_debug_env_traces_events():
    result = run_cli("-o", "a", "--", "--what", env={"ARGVEE_DEBUG": "1"})
    assert "not-handled \"--what\"" in result.stdout


def test_cli_strict_fails_on_unhandled():
    result = run_cli("--strict", "-o", "a", "--", "--what")
    assert result.returncode == 1
    assert "NOT HANDLED." in result.stdout


def test_cli_schema_error_shows_context():
    result = run_cli("-o", "count::number")
    assert result.returncode == 1
    assert "SCHEMA ERROR." in result.stdout
    assert "File \"<option>\", line 1" in result.stdout


def test_cli_invalid_type_is_config_error():
    result = run_cli("-o", "count:bytes")
    assert result.returncode == 1
    assert "CONFIG ERROR." in result.stdout
    assert "bytes" in result.stdout


def test_cli_duplicate_declaration_is_config_error():
    result = run_cli("-o", "a", "-o", "a/x")
    assert result.returncode == 1
    assert "CONFIG ERROR." in result.stdout
