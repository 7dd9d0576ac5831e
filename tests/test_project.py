import json
import subprocess
from pathlib import Path
from unittest import mock

from rustlings.project import Crate, RustAnalyzerProject


def test_empty_project_json():
    assert RustAnalyzerProject().to_json() == '{"sysroot_src":"","crates":[]}'


def test_crate_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate("exercises/a.rs")])
    data = json.loads(project.to_json())
    assert data["sysroot_src"] == "/src"
    assert data["crates"] == [
        {"root_module": "exercises/a.rs", "edition": "2021", "deps": [], "cfg": ["test"]}
    ]


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate("x.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()


def test_exercises_to_json_collects_rs_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "a").mkdir(parents=True)
    (tmp_path / "exercises" / "b").mkdir()
    (tmp_path / "exercises" / "a" / "x.rs").write_text("")
    (tmp_path / "exercises" / "a" / "notes.txt").write_text("")
    (tmp_path / "exercises" / "b" / "y.rs").write_text("")
    (tmp_path / "exercises" / "c.rs").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    roots = [Path(crate.root_module) for crate in project.crates]
    assert roots == [
        Path("exercises/a/x.rs"),
        Path("exercises/b/y.rs"),
        Path("exercises/c.rs"),
    ]
    assert all(crate.cfg == ["test"] for crate in project.crates)


def test_exercises_to_json_empty_dir(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/rust/src")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/custom/rust/src"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    result = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with mock.patch.object(subprocess, "run", return_value=result) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src) == Path("/opt/toolchain/lib/rustlib/src/rust/library")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_sysroot_from_empty_rustc_output(monkeypatch):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    result = subprocess.CompletedProcess([], 0, stdout=b"", stderr=b"")
    project = RustAnalyzerProject()
    with mock.patch.object(subprocess, "run", return_value=result):
        project.get_sysroot_src()
    assert Path(project.sysroot_src) == Path("lib/rustlib/src/rust/library")