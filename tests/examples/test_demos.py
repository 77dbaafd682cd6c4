"""
Smoke tests for the example programs under examples/.
"""

import re
import runpy
from pathlib import Path

import pytest

EXAMPLES = Path(__file__).resolve().parents[2] / "examples"


def load(name):
    return runpy.run_path(str(EXAMPLES / f"{name}.py"))


class TestDemos:

    @pytest.mark.parametrize("name", [
        "f2_demo",
        "linear_system_demo",
        "matrix_operations_demo",
        "eigenvalues_demo",
        "field_p_demo",
    ])
    def test_runs(self, name, capsys):
        load(name)["main"]()
        assert capsys.readouterr().out

    def test_f2_determinants(self, capsys):
        load("f2_demo")["main"]()
        out = capsys.readouterr().out
        assert "The integer 711 becomes 1m2" in out
        assert "det(m2)=0m2" in out
        assert "det(m2)=1m2" in out

    def test_field_p_orthogonal(self, capsys):
        load("field_p_demo")["main"]()
        out = capsys.readouterr().out
        assert out.count("> = 0m7") == 3

    def test_hilbert_errors(self, capsys):
        load("hilbert_matrix_demo")["main"](4)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[0] == "dimension = 1 -> error = 0.0"

    def test_hilbert_matrix(self):
        from pylinalg.elements import RATIONAL
        h = load("hilbert_matrix_demo")["hilbert_matrix"](3, RATIONAL)
        assert h[2, 2] == RATIONAL.get('1/5')

    def test_homepage_links_exist(self):
        from pylinalg.site.app import DEFAULT_PAGE
        text = Path(DEFAULT_PAGE).read_text(encoding="iso-8859-1")
        linked = re.findall(r'href="examples/([a-z0-9_]+\.py)"', text)
        assert len(linked) == 6
        for name in linked:
            assert (EXAMPLES / name).is_file()
