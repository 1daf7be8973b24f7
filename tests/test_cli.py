from pathlib import Path

from progress_lib.cli import main


def write_csv(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "tracking.csv"
    path.write_text("file,module_category,status\n" + body, encoding="utf-8")
    return path


def test_main_prints_report_and_next_steps(tmp_path: Path, capsys) -> None:
    csv_path = write_csv(tmp_path, "a,moduleA,complete\nb,moduleA,in-progress\nc,moduleB,not-started\n")
    rc = main(csv_path=csv_path, todo_path=tmp_path / "todo.md")
    out = capsys.readouterr()
    assert rc == 0
    assert out.err == ""
    assert "📊 Overall Progress:" in out.out
    assert "🎯 Suggested Next Steps:" in out.out
    assert "   - moduleA: 1 files to finish" in out.out
    assert "   - moduleB: 1 files" in out.out
    assert "🔗 For detailed TODO items, see:" in out.out
    assert "todo.md" in out.out


def test_main_missing_file(tmp_path: Path, capsys) -> None:
    rc = main(csv_path=tmp_path / "missing.csv", todo_path=tmp_path / "todo.md")
    out = capsys.readouterr()
    assert rc == 1
    lines = out.err.strip().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("❌ CSV file not found:")
    assert "Traceback" not in out.err
    assert out.out == ""


def test_main_header_only_reports_no_data(tmp_path: Path, capsys) -> None:
    csv_path = write_csv(tmp_path, "")
    rc = main(csv_path=csv_path, todo_path=tmp_path / "todo.md")
    out = capsys.readouterr()
    assert rc == 0
    assert "No data" in out.out
    assert "Suggested Next Steps" not in out.out
    assert "🔗 For detailed TODO items, see:" in out.out


def test_main_invalid_status(tmp_path: Path, capsys) -> None:
    csv_path = write_csv(tmp_path, "a,moduleA,complete\nb,moduleB,done\n")
    rc = main(csv_path=csv_path, todo_path=tmp_path / "todo.md")
    out = capsys.readouterr()
    assert rc == 1
    assert out.err.startswith("❌ Error analyzing translation progress:")
    assert "'done'" in out.err
    assert "row 2" in out.err


def test_main_missing_columns(tmp_path: Path, capsys) -> None:
    csv_path = tmp_path / "tracking.csv"
    csv_path.write_text("file,module\na,core\n", encoding="utf-8")
    rc = main(csv_path=csv_path, todo_path=tmp_path / "todo.md")
    out = capsys.readouterr()
    assert rc == 1
    assert "Missing required columns" in out.err


def test_main_uses_configured_tracking_file(capsys) -> None:
    rc = main()
    out = capsys.readouterr()
    assert rc == 0
    assert "RECONCILER:" in out.out
    assert "react-translation-todo.md" in out.out


def test_main_empty_file_reports_no_data(tmp_path: Path, capsys) -> None:
    csv_path = tmp_path / "tracking.csv"
    csv_path.write_text("", encoding="utf-8")
    rc = main(csv_path=csv_path, todo_path=tmp_path / "todo.md")
    out = capsys.readouterr()
    assert rc == 0
    assert out.err == ""
    assert "No data" in out.out
    assert "🔗 For detailed TODO items, see:" in out.out
