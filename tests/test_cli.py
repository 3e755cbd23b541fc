import json

import pytest

from conftest import VALID_POD
from podlint.cli.main import EXIT_DIAGNOSTICS, PodLintCLI, main


@pytest.fixture
def manifest_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_prints_one_diagnostic_per_line_and_exits_zero(manifest_dir, capsys):
    (manifest_dir / "pod.yaml").write_text(
        VALID_POD.replace("kind: Pod", "kind: Deployment").replace("    resources: {}\n", "")
    )

    assert PodLintCLI().run(["pod.yaml"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "pod.yaml:2 kind has unsupported value 'Deployment'",
        "resources is required",
    ]


def test_valid_manifest_prints_nothing(manifest_dir, capsys):
    (manifest_dir / "pod.yaml").write_text(VALID_POD)

    assert PodLintCLI().run(["pod.yaml"]) == 0
    assert capsys.readouterr().out == ""


def test_fail_on_diagnostics_is_opt_in(manifest_dir, capsys):
    (manifest_dir / "pod.yaml").write_text(VALID_POD.replace("apiVersion: v1", "apiVersion: v2"))

    assert PodLintCLI().run(["pod.yaml"]) == 0
    assert PodLintCLI().run(["pod.yaml", "--fail-on-diagnostics"]) == EXIT_DIAGNOSTICS


def test_json_output(manifest_dir, capsys):
    (manifest_dir / "pod.yaml").write_text(VALID_POD.replace("apiVersion: v1", "apiVersion: v2"))

    assert PodLintCLI().run(["pod.yaml", "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["summary"] == {"UnsupportedValue": 1}
    assert data["diagnostics"][0]["message"] == "pod.yaml:1 apiVersion has unsupported value 'v2'"


def test_table_output(manifest_dir, capsys):
    (manifest_dir / "pod.yaml").write_text(VALID_POD.replace("kind: Pod", "kind: Job"))

    assert PodLintCLI().run(["pod.yaml", "--format", "table"]) == 0
    out = capsys.readouterr().out
    assert "UnsupportedValue" in out
    assert "Summary" in out


def test_missing_file_is_a_setup_failure(manifest_dir, capsys):
    assert PodLintCLI().run(["nope.yaml"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "nope.yaml does not exist" in captured.err


def test_unparseable_file_is_a_setup_failure(manifest_dir, capsys):
    (manifest_dir / "bad.yaml").write_text("kind: Pod\nmetadata: name: x\n")

    assert PodLintCLI().run(["bad.yaml"]) == 1
    assert "cannot parse manifest" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["a.yaml", "b.yaml"]])
def test_wrong_argument_count_aborts(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        PodLintCLI().run(argv)
    assert exc.value.code != 0


def test_main_exits_with_run_status(manifest_dir):
    (manifest_dir / "pod.yaml").write_text(VALID_POD)

    with pytest.raises(SystemExit) as exc:
        main(["pod.yaml"])
    assert exc.value.code == 0
