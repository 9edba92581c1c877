"""
Unit tests for auto-grading.

Tests set-equality grading for the objective types and the
not-gradable signal for everything else.
"""

import pytest

from src.quiz.grading import can_auto_grade, grade_answer, is_correct_from_status
from src.quiz.models import AnswerStatus, Option, Question, QuestionType


def _question(question_type, correct=(), options=None):
    return Question(
        id="q",
        statement="Statement",
        question_type=question_type,
        options=options if options is not None else [Option("a", "A"), Option("b", "B")],
        correct_option_ids=frozenset(correct),
    )


class TestCanAutoGrade:
    """Test the auto-grade gate."""

    @pytest.mark.parametrize("question_type", [
        QuestionType.ALTERNATIVA,
        QuestionType.MULTIPLA_ESCOLHA,
        QuestionType.VERDADEIRO_FALSO,
    ])
    def test_objective_types_are_gradable(self, question_type):
        assert can_auto_grade(_question(question_type)) is True

    @pytest.mark.parametrize("question_type", [
        QuestionType.DISSERTATIVA,
        QuestionType.LIGAR_PONTOS,
        QuestionType.PREENCHER,
        QuestionType.IMAGEM,
    ])
    def test_other_types_are_not_gradable(self, question_type):
        assert can_auto_grade(_question(question_type)) is False

    def test_empty_options_do_not_matter(self):
        """Type alone decides, even without options."""
        assert can_auto_grade(_question(QuestionType.ALTERNATIVA, options=[])) is True

    def test_plain_string_type(self):
        assert can_auto_grade(_question("MULTIPLA_ESCOLHA")) is True

    def test_unknown_type_string(self):
        assert can_auto_grade(_question("UNKNOWN_TYPE")) is False


class TestGradeAnswer:
    """Test set-equality grading."""

    def test_alternativa_correct(self, alternativa_question):
        assert grade_answer(alternativa_question, ["opt3"]) == AnswerStatus.RESPOSTA_CORRETA

    def test_alternativa_incorrect(self, alternativa_question):
        assert grade_answer(alternativa_question, ["opt1"]) == AnswerStatus.RESPOSTA_INCORRETA

    def test_alternativa_over_selection_is_incorrect(self, alternativa_question):
        """Selecting two options on single-choice fails the match, no error."""
        assert grade_answer(alternativa_question, ["opt3", "opt1"]) == AnswerStatus.RESPOSTA_INCORRETA

    def test_empty_selection_is_blank(self, alternativa_question):
        assert grade_answer(alternativa_question, []) == AnswerStatus.NAO_RESPONDIDO

    def test_multipla_exact_match(self, multipla_question):
        assert grade_answer(multipla_question, ["a", "b"]) == AnswerStatus.RESPOSTA_CORRETA

    def test_multipla_missing_option(self, multipla_question):
        assert grade_answer(multipla_question, ["a"]) == AnswerStatus.RESPOSTA_INCORRETA

    def test_multipla_extra_option(self, multipla_question):
        assert grade_answer(multipla_question, ["a", "b", "c"]) == AnswerStatus.RESPOSTA_INCORRETA

    def test_multipla_blank_distinguished_from_wrong(self, multipla_question):
        assert grade_answer(multipla_question, []) == AnswerStatus.NAO_RESPONDIDO

    def test_order_does_not_matter(self, multipla_question):
        assert grade_answer(multipla_question, ["a", "b"]) == grade_answer(multipla_question, ["b", "a"])

    def test_duplicates_collapse(self, multipla_question):
        assert grade_answer(multipla_question, ["a", "b", "a"]) == AnswerStatus.RESPOSTA_CORRETA

    def test_verdadeiro_falso(self):
        question = _question(QuestionType.VERDADEIRO_FALSO, correct={"a"})
        assert grade_answer(question, {"a"}) == AnswerStatus.RESPOSTA_CORRETA
        assert grade_answer(question, {"a", "b"}) == AnswerStatus.RESPOSTA_INCORRETA

    def test_not_gradable_returns_none(self, dissertativa_question):
        assert grade_answer(dissertativa_question, ["anything"]) is None

    def test_not_gradable_blank_returns_none(self, dissertativa_question):
        """Blank free-text is still a human decision."""
        assert grade_answer(dissertativa_question, []) is None


class TestIsCorrectFromStatus:
    """Test status to correctness flag."""

    def test_correct(self):
        assert is_correct_from_status(AnswerStatus.RESPOSTA_CORRETA) is True

    def test_incorrect(self):
        assert is_correct_from_status("RESPOSTA_INCORRETA") is False

    @pytest.mark.parametrize("status", [
        AnswerStatus.NAO_RESPONDIDO,
        AnswerStatus.PENDENTE_AVALIACAO,
        "SOMETHING_ELSE",
        None,
    ])
    def test_everything_else_is_none(self, status):
        assert is_correct_from_status(status) is None
