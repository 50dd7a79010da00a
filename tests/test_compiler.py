"""Tests for the ExpressionCompiler driver and the command-line interface."""

import sys

import pytest

from vcc.compiler import MODES, ExpressionCompiler, main
from vcc.errors import EvaluationError, TrailingInput
from vcc.parser.ast_nodes import NumberNode


def run_main(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestExpressionCompiler:

    def test_compile_string(self):
        root = ExpressionCompiler().compile_string("2+3*4")
        assert root.op.symbol == '+'

    def test_run_string_modes(self):
        compiler = ExpressionCompiler()
        assert compiler.run_string("2+3*4") == "14"
        assert compiler.run_string("2+3*4", mode='infix') == "(2 + (3 * 4))"
        assert compiler.run_string("2+3*4", mode='sexpr') == "(+ 2 (* 3 4))"
        assert compiler.run_string("5", mode='tree') == "Number 5"

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            ExpressionCompiler().run_string("1", mode='asm')

    def test_run_unknown_mode_fails_cleanly(self, capsys):
        assert not ExpressionCompiler().run("1", mode='asm')
        assert "Unknown mode: asm" in capsys.readouterr().err

    @pytest.mark.parametrize("mode", MODES)
    def test_long_chain_every_mode(self, mode):
        source = "+".join(["1"] * 3000)
        output = ExpressionCompiler().run_string(source, mode=mode)
        if mode == 'eval':
            assert output == "3000"
        else:
            assert output.count("1") == 3000

    def test_deep_nesting_fails_cleanly(self, capsys):
        source = "(" * 600 + "1" + ")" * 600
        assert not ExpressionCompiler().run(source)
        assert "nested too deeply" in capsys.readouterr().err

    def test_long_literal_fails_cleanly(self, capsys):
        assert not ExpressionCompiler().run("9" * 5000)
        assert "Integer literal too long" in capsys.readouterr().err

    @pytest.mark.skipif(getattr(sys, 'get_int_max_str_digits', lambda: 0)() == 0,
                        reason="no integer string conversion limit")
    def test_unprintable_result_fails_cleanly(self, capsys):
        source = "*".join(["9" * 1000] * 6)
        with pytest.raises(EvaluationError):
            ExpressionCompiler().run_string(source)
        assert not ExpressionCompiler().run(source)
        assert "Result too large to print" in capsys.readouterr().err

    def test_trailing_policy(self):
        with pytest.raises(TrailingInput):
            ExpressionCompiler().compile_string("1+2)")
        root = ExpressionCompiler(allow_trailing=True).compile_string("1+2)")
        assert root.right == NumberNode(2)

    def test_verbose_logs_to_stderr(self, capsys):
        ExpressionCompiler(verbose=True, allow_trailing=True).compile_string("1+2) 3")
        err = capsys.readouterr().err
        assert "[vcc] Lexing..." in err
        assert "[vcc]   6 tokens" in err
        assert "[vcc]   3 nodes (2 numbers, 1 operators)" in err
        assert "Ignoring 2 trailing tokens: ) 3" in err

    def test_quiet_by_default(self, capsys):
        ExpressionCompiler().compile_string("1+2")
        assert capsys.readouterr().err == ""

    def test_run_reports_syntax_error(self, capsys):
        assert not ExpressionCompiler().run("(1+2")
        err = capsys.readouterr().err
        assert err.startswith("Syntax error: (1+2\n")
        assert "    ^ Expect )" in err

    def test_run_reports_evaluation_error(self, capsys):
        assert not ExpressionCompiler().run("4/0")
        assert "Evaluation error: 1:2: Division by zero" in capsys.readouterr().err

    def test_run_file(self, tmp_path, capsys):
        source = tmp_path / "expr.txt"
        source.write_text("(2 + 3)\n* 4\n", encoding='utf-8')
        assert ExpressionCompiler().run_file(str(source))
        assert capsys.readouterr().out == "20\n"

    def test_run_file_missing(self, tmp_path, capsys):
        assert not ExpressionCompiler().run_file(str(tmp_path / "nope.txt"))
        assert "File not found" in capsys.readouterr().err


class TestMain:

    def test_evaluates_expression(self, capsys):
        assert run_main(["2+3*4"]) == 0
        assert capsys.readouterr().out == "14\n"

    def test_mode_flag(self, capsys):
        assert run_main(["8-3-2", "--mode", "sexpr"]) == 0
        assert capsys.readouterr().out == "(- (- 8 3) 2)\n"

    def test_syntax_error_exit_status(self, capsys):
        assert run_main(["1+"]) == 1
        assert "Expression ends after operator '+'" in capsys.readouterr().err

    def test_allow_trailing_flag(self, capsys):
        assert run_main(["1+2)"]) == 1
        capsys.readouterr()
        assert run_main(["--allow-trailing", "1+2)"]) == 0
        assert capsys.readouterr().out == "3\n"

    def test_file_flag(self, tmp_path, capsys):
        source = tmp_path / "expr.txt"
        source.write_text("6/4", encoding='utf-8')
        assert run_main(["-f", str(source)]) == 0
        assert capsys.readouterr().out == "1\n"

    def test_requires_exactly_one_input(self, tmp_path):
        assert run_main([]) == 2
        assert run_main(["1", "-f", str(tmp_path / "x")]) == 2
