# tests/test_main.py
import io

from lexgraph.loader import load
from main import main, parse_args


def test_parse_args_defaults():
    cfg = parse_args([])
    assert cfg.input is None and cfg.fmt == "dot"
    assert cfg.root is None and not cfg.compare and not cfg.verbose


def test_cli_colors_dot_file(tmp_path, capsys):
    src = tmp_path / "p4.dot"
    src.write_text("graph p4 { A -- B; B -- C; C -- D; }\n", encoding="utf-8")
    out = tmp_path / "out.dot"

    rc = main(["--input", str(src), "--root", "A", "--output", str(out), "--compare"])
    text = capsys.readouterr().out
    assert rc == 0
    assert "[LexBFS] root=A colors=2" in text
    assert "[LexBFS] feasible=True|used_colors=2|conflicts=0" in text
    assert "[Compare]" in text
    g = load(str(out))
    assert g.vertex_count() == 4 and g.edge_count() == 3


def test_cli_dot_to_stdout(tmp_path, capsys):
    src = tmp_path / "k3.dot"
    src.write_text("graph k3 { a -- b; b -- c; a -- c; }\n", encoding="utf-8")
    assert main(["--input", str(src), "--output", "-"]) == 0
    text = capsys.readouterr().out
    body = text[text.index("strict graph"):]
    assert load(io.StringIO(body)).edge_count() == 3


def test_cli_unknown_root(tmp_path, capsys):
    src = tmp_path / "p2.dot"
    src.write_text("graph p2 { a -- b; }\n", encoding="utf-8")
    assert main(["--input", str(src), "--root", "zz"]) == 2
    assert "not found" in capsys.readouterr().err


def test_cli_bad_input(tmp_path, capsys):
    src = tmp_path / "d.dot"
    src.write_text("digraph d { a -> b; }\n", encoding="utf-8")
    assert main(["--input", str(src)]) == 2
    assert "directed" in capsys.readouterr().err


def test_cli_demo_graph_with_picture(tmp_path, capsys):
    rc = main(["--demo-seed", "3", "--viz-out", str(tmp_path)])
    assert rc == 0
    assert list(tmp_path.glob("*.png"))
    assert "[Main] picture=" in capsys.readouterr().out
