from tinyparse.cli import main


def test_compiles_named_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "prog.tny").write_text("read x\n")
    assert main(["prog.tny"]) == 0
    out = capsys.readouterr().out
    assert "\nCOMPILATION: prog.tny\n" in out
    assert "   1: read x\n" in out
    assert "\t1: reserved word: read\n" in out
    assert out.endswith("\nSyntax tree:\n  Read: x\n")


def test_default_extension_is_added(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "prog.tny").write_text("write 1\n")
    assert main(["prog"]) == 0
    out = capsys.readouterr().out
    assert "COMPILATION: prog.tny" in out
    assert "  Write\n    Const: 1\n" in out


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing"]) == 1
    assert "File missing.tny not found" in capsys.readouterr().err


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().err


def test_syntax_error_still_prints_tree(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.tny").write_text("x := 1 end\n")
    assert main(["bad.tny"]) == 0
    out = capsys.readouterr().out
    assert "Code ends before file" in out
    assert "Assign to: x" in out