"""JjRunner: process invocation, outcome mapping, audit trail."""

import subprocess

from jj_mcp_server.audit import AuditLogger
from jj_mcp_server.runner import JjResponse, JjRunner, add_repo_args


def test_add_repo_args():
    args = ["status"]
    add_repo_args(args, "/path/to/repo")
    assert args == ["status", "-R", "/path/to/repo"]


def test_add_repo_args_none():
    args = ["status"]
    add_repo_args(args, None)
    assert args == ["status"]


def test_response_text():
    assert JjResponse(success=True, output="ok").text == "ok"
    assert JjResponse(success=False, error="boom").text == "Error: boom"
    assert JjResponse(success=False).text == "Error: "


def test_invocation_details(fake_jj):
    JjRunner(command="/opt/jj").run(["log", "-n", "1"], cwd="/repo")

    call = fake_jj.last
    assert call.argv == ["/opt/jj", "log", "-n", "1"]
    assert call.cwd == "/repo"
    assert call.kwargs["capture_output"] is True
    assert call.kwargs["stdin"] is subprocess.DEVNULL
    assert call.kwargs["errors"] == "replace"


def test_success_trims_stdout(fake_jj):
    fake_jj.stdout = "\n  Working copy changes:\nA new.txt\n\n"
    response = JjRunner().run(["status"])
    assert response.success
    assert response.output == "Working copy changes:\nA new.txt"
    assert response.exit_code == 0


def test_stderr_ignored_on_success(fake_jj):
    fake_jj.stdout = "done"
    fake_jj.stderr = "Working copy now at: abc"
    assert JjRunner().run(["new"]).text == "done"


def test_nonzero_exit(fake_jj):
    fake_jj.returncode = 1
    fake_jj.stdout = "partial"
    fake_jj.stderr = "Error: There is no jj repo in \".\"\n"
    response = JjRunner().run(["status"])
    assert not response.success
    assert response.exit_code == 1
    assert response.text == 'Error: Error: There is no jj repo in "."'


def test_missing_executable_is_reported():
    response = JjRunner(command="jj-mcp-server-no-such-binary").run(["status"])
    assert not response.success
    assert response.exit_code is None
    assert response.text.startswith("Error: ")


def test_missing_cwd_is_reported(fake_jj):
    fake_jj.raises = NotADirectoryError(20, "Not a directory", "/etc/passwd")
    response = JjRunner().run(["status"], cwd="/etc/passwd")
    assert not response.success
    assert "Not a directory" in response.text


def test_audit_entries(fake_jj, tmp_path):
    log_path = tmp_path / "audit.log"
    runner = JjRunner(audit=AuditLogger(str(log_path)))

    runner.run(["status", "-R", "/r"])
    fake_jj.returncode = 1
    runner.run(["rebase", "-d", "main"])
    fake_jj.raises = PermissionError(13, "Permission denied")
    runner.run(["log"])

    lines = log_path.read_text().splitlines()
    assert len(lines) == 3
    assert "ACTION=SUCCESS COMMAND=status" in lines[0]
    assert "argv=jj status -R /r" in lines[0]
    assert "ACTION=FAILED COMMAND=rebase" in lines[1]
    assert "exit=1" in lines[1]
    assert "ACTION=LAUNCH_FAILED COMMAND=log" in lines[2]


def test_audit_disabled_by_default(fake_jj, tmp_path):
    runner = JjRunner()
    assert not runner.audit.enabled
    runner.run(["status"])
    assert list(tmp_path.iterdir()) == []


def test_unwritable_audit_log_does_not_fail_call(fake_jj, tmp_path, capsys):
    fake_jj.stdout = "ok"
    runner = JjRunner(audit=AuditLogger(str(tmp_path / "missing" / "audit.log")))
    assert runner.run(["status"]).text == "ok"
    assert "Could not write to audit log" in capsys.readouterr().err


def test_verbose_echoes_command(fake_jj, capsys):
    JjRunner(verbose=True).run(["commit", "-m", "two words"])
    assert "$ jj commit -m 'two words'" in capsys.readouterr().err
