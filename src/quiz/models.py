"""
Core data model for the quiz assessment runtime.

Questions, answers and quizzes are plain dataclasses. Payloads coming from
the reporting API are parsed into these shapes by ``src.quiz.schemas``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class QuestionType(str, Enum):
    """Question types known to the platform."""

    ALTERNATIVA = "ALTERNATIVA"
    MULTIPLA_ESCOLHA = "MULTIPLA_ESCOLHA"
    VERDADEIRO_FALSO = "VERDADEIRO_FALSO"
    DISSERTATIVA = "DISSERTATIVA"
    LIGAR_PONTOS = "LIGAR_PONTOS"
    PREENCHER = "PREENCHER"
    IMAGEM = "IMAGEM"


class QuestionDifficulty(str, Enum):
    """Difficulty labels. Carried for display, ignored by grading."""

    FACIL = "FACIL"
    MEDIO = "MEDIO"
    DIFICIL = "DIFICIL"


class AnswerStatus(str, Enum):
    """Canonical grading status of an answer."""

    RESPOSTA_CORRETA = "RESPOSTA_CORRETA"
    RESPOSTA_INCORRETA = "RESPOSTA_INCORRETA"
    NAO_RESPONDIDO = "NAO_RESPONDIDO"
    PENDENTE_AVALIACAO = "PENDENTE_AVALIACAO"


class QuestionStatus(str, Enum):
    """Display projection of AnswerStatus."""

    CORRETA = "CORRETA"
    INCORRETA = "INCORRETA"
    EM_BRANCO = "EM_BRANCO"
    PENDENTE = "PENDENTE"


@dataclass(frozen=True)
class Option:
    """A selectable option of a question."""

    id: str
    text: str


@dataclass(frozen=True)
class KnowledgeMatrixEntry:
    """Subject/topic classification reference."""

    subject_id: str = ""
    area_knowledge_id: str = ""
    topic_id: str = ""
    subtopic_id: str = ""
    content_id: str = ""


@dataclass
class Question:
    """A single assessable item."""

    id: str
    statement: str
    question_type: QuestionType | str
    options: list[Option] = field(default_factory=list)
    correct_option_ids: frozenset[str] = field(default_factory=frozenset)
    knowledge_matrix: list[KnowledgeMatrixEntry] = field(default_factory=list)

    # Display-only metadata
    difficulty: QuestionDifficulty | str | None = None
    solution_explanation: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.correct_option_ids, frozenset):
            self.correct_option_ids = frozenset(self.correct_option_ids)

    @property
    def subject_id(self) -> str | None:
        """Subject of the first knowledge matrix entry, if any."""
        if not self.knowledge_matrix:
            return None
        return self.knowledge_matrix[0].subject_id or None


@dataclass
class Answer:
    """A student's response to one question."""

    question_id: str
    selected_option_ids: frozenset[str] = field(default_factory=frozenset)
    answer_text: str | None = None
    answer_status: AnswerStatus | str = AnswerStatus.PENDENTE_AVALIACAO
    teacher_feedback: str | None = None
    score: float | None = None
    is_skipped: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.selected_option_ids, frozenset):
            self.selected_option_ids = frozenset(self.selected_option_ids)


@dataclass
class Quiz:
    """Quiz payload installed into a session."""

    id: str
    title: str
    questions: list[Question] = field(default_factory=list)

    def find_question(self, question_id: str) -> Question | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None
