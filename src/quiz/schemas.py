"""
Boundary models for quiz and reporting payloads.

Payloads arrive as camelCase JSON from the platform API. These models parse
them into typed values (snake_case field names are accepted too) and
default every optional sub-field, so the core never has to re-validate.

``answerStatus`` and ``questionType`` stay plain strings: an unexpected
value must not abort parsing, the core maps it fail-safe.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import (
    Answer,
    AnswerStatus,
    KnowledgeMatrixEntry,
    Option,
    Question,
    Quiz,
)


class PayloadModel(BaseModel):
    """Base for API payloads: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ========================================
# Knowledge Matrix
# ========================================


class NamedRef(PayloadModel):
    id: str = ""
    name: str = ""

    @field_validator("id", "name", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value


class SubjectRef(NamedRef):
    color: str = ""
    icon: str = ""

    @field_validator("color", "icon", mode="before")
    @classmethod
    def _null_style(cls, value):
        return "" if value is None else value


class KnowledgeMatrixPayload(PayloadModel):
    """
    Knowledge matrix entry.

    Reporting endpoints send nested objects (``subject: {id, name}``), the
    quiz endpoint sends flat ids (``subjectId``). Both are accepted, and
    null nested parts default to empty references.
    """

    area_knowledge: NamedRef = Field(default_factory=NamedRef)
    subject: SubjectRef = Field(default_factory=SubjectRef)
    topic: NamedRef = Field(default_factory=NamedRef)
    subtopic: NamedRef = Field(default_factory=NamedRef)
    content: NamedRef = Field(default_factory=NamedRef)

    area_knowledge_id: str = ""
    subject_id: str = ""
    topic_id: str = ""
    subtopic_id: str = ""
    content_id: str = ""

    @field_validator("area_knowledge", "topic", "subtopic", "content", mode="before")
    @classmethod
    def _null_ref(cls, value):
        return NamedRef() if value is None else value

    @field_validator("subject", mode="before")
    @classmethod
    def _null_subject(cls, value):
        return SubjectRef() if value is None else value

    @field_validator(
        "area_knowledge_id", "subject_id", "topic_id", "subtopic_id", "content_id",
        mode="before",
    )
    @classmethod
    def _null_id(cls, value):
        return "" if value is None else value

    def to_entry(self) -> KnowledgeMatrixEntry:
        return KnowledgeMatrixEntry(
            subject_id=self.subject_id or self.subject.id,
            area_knowledge_id=self.area_knowledge_id or self.area_knowledge.id,
            topic_id=self.topic_id or self.topic.id,
            subtopic_id=self.subtopic_id or self.subtopic.id,
            content_id=self.content_id or self.content.id,
        )


# ========================================
# Answer Records (reporting)
# ========================================


class OptionPayload(PayloadModel):
    id: str
    option: str = ""
    is_correct: bool = False

    @field_validator("option", mode="before")
    @classmethod
    def _null_option(cls, value):
        return "" if value is None else value

    @field_validator("is_correct", mode="before")
    @classmethod
    def _null_is_correct(cls, value):
        return False if value is None else value


class SelectedOptionPayload(PayloadModel):
    option_id: str


class AnswerRecord(PayloadModel):
    """A student's stored answer to one question, as sent by the reporting API."""

    id: str = ""
    question_id: str
    answer: Optional[str] = None
    selected_options: list[SelectedOptionPayload] = Field(default_factory=list)
    answer_status: str = AnswerStatus.PENDENTE_AVALIACAO.value
    statement: str = ""
    question_type: str = ""
    difficulty_level: Optional[str] = None
    solution_explanation: Optional[str] = None
    correct_option: Optional[str] = None
    teacher_feedback: Optional[str] = None
    attachment: Optional[str] = None
    score: Optional[float] = None
    options: list[OptionPayload] = Field(default_factory=list)
    knowledge_matrix: list[KnowledgeMatrixPayload] = Field(default_factory=list)

    @field_validator("selected_options", "options", "knowledge_matrix", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("id", "statement", "question_type", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @property
    def selected_option_ids(self) -> frozenset[str]:
        return frozenset(s.option_id for s in self.selected_options)

    def to_question(self) -> Question:
        """Rebuild the answered question; correct ids come from the option flags."""
        return Question(
            id=self.question_id,
            statement=self.statement,
            question_type=self.question_type,
            options=[Option(id=o.id, text=o.option) for o in self.options],
            correct_option_ids=frozenset(o.id for o in self.options if o.is_correct),
            knowledge_matrix=[k.to_entry() for k in self.knowledge_matrix],
            difficulty=self.difficulty_level,
            solution_explanation=self.solution_explanation,
        )

    def to_answer(self) -> Answer:
        return Answer(
            question_id=self.question_id,
            selected_option_ids=self.selected_option_ids,
            answer_text=self.answer,
            answer_status=self.answer_status,
            teacher_feedback=self.teacher_feedback,
            score=self.score,
        )


class ActivityStatistics(PayloadModel):
    total_answered: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    pending_answers: int = 0
    score: Optional[float] = None
    time_spent: int = 0

    @field_validator(
        "total_answered", "correct_answers", "incorrect_answers", "pending_answers", "time_spent",
        mode="before",
    )
    @classmethod
    def _null_count(cls, value):
        return 0 if value is None else value


class ActivityAnswers(PayloadModel):
    """Answers and statistics of one student for one activity."""

    answers: list[AnswerRecord] = Field(default_factory=list)
    statistics: ActivityStatistics = Field(default_factory=ActivityStatistics)

    @field_validator("answers", mode="before")
    @classmethod
    def _null_answers(cls, value):
        return [] if value is None else value

    @field_validator("statistics", mode="before")
    @classmethod
    def _null_statistics(cls, value):
        return ActivityStatistics() if value is None else value


class ActivityRecord(ActivityAnswers):
    id: str
    title: str = ""
    sequence: int = 0

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value):
        return "" if value is None else value

    @field_validator("sequence", mode="before")
    @classmethod
    def _null_sequence(cls, value):
        return 0 if value is None else value


class LessonRecord(PayloadModel):
    id: str
    title: str = ""
    sequence: int = 0
    progress: float = 0
    completed_at: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value):
        return "" if value is None else value

    @field_validator("sequence", "progress", mode="before")
    @classmethod
    def _null_number(cls, value):
        return 0 if value is None else value


class StudentAnswersBatch(PayloadModel):
    """All activity answers and lesson progress of one student."""

    activities: list[ActivityRecord] = Field(default_factory=list)
    lessons: list[LessonRecord] = Field(default_factory=list)

    @field_validator("activities", "lessons", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value


# ========================================
# Quiz Payload (session source)
# ========================================


class QuizOptionPayload(PayloadModel):
    id: str
    option: str = ""

    @field_validator("option", mode="before")
    @classmethod
    def _null_option(cls, value):
        return "" if value is None else value


class QuestionPayload(PayloadModel):
    id: str
    statement: str = ""
    question_type: str = ""
    options: list[QuizOptionPayload] = Field(default_factory=list)
    correct_option_ids: list[str] = Field(default_factory=list)
    knowledge_matrix: list[KnowledgeMatrixPayload] = Field(default_factory=list)
    difficulty_level: Optional[str] = None
    solution_explanation: Optional[str] = None

    @field_validator("options", "correct_option_ids", "knowledge_matrix", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("statement", "question_type", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            statement=self.statement,
            question_type=self.question_type,
            options=[Option(id=o.id, text=o.option) for o in self.options],
            correct_option_ids=frozenset(self.correct_option_ids),
            knowledge_matrix=[k.to_entry() for k in self.knowledge_matrix],
            difficulty=self.difficulty_level,
            solution_explanation=self.solution_explanation,
        )


class QuizPayload(PayloadModel):
    id: str
    title: str = ""
    questions: list[QuestionPayload] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value):
        return "" if value is None else value

    @field_validator("questions", mode="before")
    @classmethod
    def _null_questions(cls, value):
        return [] if value is None else value

    def to_quiz(self) -> Quiz:
        return Quiz(
            id=self.id,
            title=self.title,
            questions=[q.to_question() for q in self.questions],
        )
