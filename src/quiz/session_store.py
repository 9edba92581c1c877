"""
Live session state for a student taking a quiz.

SessionStore holds one QuizSession and exposes the actions the quiz-taking
flow drives (navigation, answering, skipping, lifecycle, time) plus derived
queries recomputed from the current state on every call.

Out-of-range navigation and answers for unknown questions are ignored
rather than raised: the UI may be momentarily out of sync with the data.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from loguru import logger

from config import get_settings

from .models import Answer, Question, Quiz


class QuizSourceKind(str, Enum):
    """Slots a quiz payload can be installed into."""

    EXAM = "exam"
    ASSIGNMENT = "assignment"
    LESSON = "lesson"


@dataclass
class QuizSession:
    """Mutable state of one quiz-taking session."""

    # Source slots; at most one is expected to be populated
    exam: Optional[Quiz] = None
    assignment: Optional[Quiz] = None
    lesson: Optional[Quiz] = None

    current_question_index: int = 0
    selected_answers: dict[str, str] = field(default_factory=dict)
    skipped_questions: set[str] = field(default_factory=set)
    user_answers: list[Answer] = field(default_factory=list)
    time_elapsed: int = 0
    is_started: bool = False
    is_finished: bool = False

    @property
    def active_quiz(self) -> Optional[Quiz]:
        """First populated slot in exam, assignment, lesson order."""
        return self.exam or self.assignment or self.lesson


def format_elapsed(seconds: int) -> str:
    """Render seconds as MM:SS. Minutes keep growing past 59; negatives show 00:00."""
    minutes, remaining = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remaining:02d}"


class SessionStore:
    """
    Session state machine for the student quiz flow.

    Usage:
        store = SessionStore()
        store.set_source(quiz)
        store.start_quiz()
        store.select_answer("q1", "opt3")
        store.go_to_next()
    """

    def __init__(self, session: Optional[QuizSession] = None):
        self.session = session or QuizSession()

    # ========================================
    # SOURCES
    # ========================================

    def set_source(self, quiz: Quiz, kind: QuizSourceKind = QuizSourceKind.EXAM) -> None:
        """Install a quiz payload. Navigation and answers are left untouched."""
        setattr(self.session, QuizSourceKind(kind).value, quiz)
        logger.debug(f"Installed {QuizSourceKind(kind).value} quiz {quiz.id} ({len(quiz.questions)} questions)")

    def set_exam(self, quiz: Quiz) -> None:
        self.set_source(quiz, QuizSourceKind.EXAM)

    def set_assignment(self, quiz: Quiz) -> None:
        self.set_source(quiz, QuizSourceKind.ASSIGNMENT)

    def set_lesson(self, quiz: Quiz) -> None:
        self.set_source(quiz, QuizSourceKind.LESSON)

    def clear_sources(self) -> None:
        """Remove every installed quiz payload."""
        self.session.exam = None
        self.session.assignment = None
        self.session.lesson = None

    # ========================================
    # NAVIGATION
    # ========================================

    def go_to_next(self) -> None:
        if self.session.current_question_index < self.total_questions() - 1:
            self.session.current_question_index += 1

    def go_to_previous(self) -> None:
        if self.session.current_question_index > 0:
            self.session.current_question_index -= 1

    def go_to_question(self, index: int) -> None:
        """Jump to a 0-based index. Out-of-range indexes are ignored."""
        if 0 <= index < self.total_questions():
            self.session.current_question_index = index
        else:
            logger.debug(f"Ignoring navigation to index {index} (total={self.total_questions()})")

    # ========================================
    # ANSWERS
    # ========================================

    def _upsert_user_answer(self, answer: Answer) -> None:
        for i, existing in enumerate(self.session.user_answers):
            if existing.question_id == answer.question_id:
                self.session.user_answers[i] = answer
                return
        self.session.user_answers.append(answer)

    def _remove_user_answer(self, question_id: str) -> None:
        self.session.user_answers = [
            a for a in self.session.user_answers if a.question_id != question_id
        ]

    def select_answer(self, question_id: str, option_id: str) -> None:
        """
        Record the single-choice answer for a question.

        Overwrites a previous choice and clears the skipped mark. Answers
        for questions outside the active quiz are discarded.
        """
        quiz = self.session.active_quiz
        if quiz is None or quiz.find_question(question_id) is None:
            logger.debug(f"Discarding answer for unknown question {question_id}")
            return

        self.session.selected_answers[question_id] = option_id
        self.session.skipped_questions.discard(question_id)
        self._upsert_user_answer(
            Answer(question_id=question_id, selected_option_ids=frozenset({option_id}))
        )

    def skip_question(self) -> None:
        """Mark the current question as skipped."""
        question = self.current_question()
        if question is None:
            return

        self.session.selected_answers.pop(question.id, None)
        self.session.skipped_questions.add(question.id)
        self._upsert_user_answer(Answer(question_id=question.id, is_skipped=True))

    def clear_answer(self, question_id: str) -> None:
        """Forget a recorded answer. Unknown ids are ignored."""
        if self.session.selected_answers.pop(question_id, None) is None:
            logger.debug(f"No answer recorded for question {question_id}")
            return
        self._remove_user_answer(question_id)

    # ========================================
    # LIFECYCLE
    # ========================================

    def start_quiz(self) -> None:
        self.session.is_started = True
        self.session.time_elapsed = 0
        logger.info(f"Quiz started: {self.quiz_title()}")

    def finish_quiz(self) -> None:
        self.session.is_finished = True
        logger.info(
            f"Quiz finished: {self.quiz_title()} "
            f"({self.answered_count()}/{self.total_questions()} answered, "
            f"{format_elapsed(self.session.time_elapsed)})"
        )

    def reset_quiz(self) -> None:
        """Back to the initial state. Installed sources are kept."""
        self.session.current_question_index = 0
        self.session.selected_answers = {}
        self.session.skipped_questions = set()
        self.session.user_answers = []
        self.session.time_elapsed = 0
        self.session.is_started = False
        self.session.is_finished = False
        logger.info("Quiz session reset")

    def update_time(self, seconds: int) -> None:
        """Set the absolute elapsed time in seconds."""
        self.session.time_elapsed = max(0, int(seconds))

    # ========================================
    # QUERIES
    # ========================================

    def current_question(self) -> Optional[Question]:
        quiz = self.session.active_quiz
        if quiz is None:
            return None
        index = self.session.current_question_index
        if 0 <= index < len(quiz.questions):
            return quiz.questions[index]
        return None

    def total_questions(self) -> int:
        quiz = self.session.active_quiz
        return len(quiz.questions) if quiz else 0

    def answered_count(self) -> int:
        return len(self.session.selected_answers)

    def skipped_count(self) -> int:
        return len(self.session.skipped_questions)

    def progress_percent(self) -> float:
        """Answered share of the quiz, 0-100."""
        total = self.total_questions()
        if total == 0:
            return 0
        return min(self.answered_count(), total) / total * 100

    def is_question_answered(self, question_id: str) -> bool:
        return question_id in self.session.selected_answers

    def is_question_skipped(self, question_id: str) -> bool:
        return question_id in self.session.skipped_questions

    def current_answer(self) -> Optional[str]:
        """Option chosen for the current question, if any."""
        question = self.current_question()
        if question is None:
            return None
        return self.session.selected_answers.get(question.id)

    def user_answers(self) -> list[Answer]:
        return list(self.session.user_answers)

    def unanswered_question_numbers(self) -> list[int]:
        """1-based numbers of questions neither answered nor skipped."""
        quiz = self.session.active_quiz
        if quiz is None:
            return []
        return [
            i + 1
            for i, q in enumerate(quiz.questions)
            if q.id not in self.session.selected_answers
            and q.id not in self.session.skipped_questions
        ]

    def unanswered_question_numbers_from_user_answers(self) -> list[int]:
        """
        1-based numbers of questions without an answer, from user_answers only.

        Used by the review flow, which has no live selection state. A
        skipped entry counts as unanswered.
        """
        quiz = self.session.active_quiz
        if quiz is None:
            return []
        recorded = {a.question_id: a for a in self.session.user_answers}
        numbers = []
        for i, question in enumerate(quiz.questions):
            answer = recorded.get(question.id)
            if answer is None or answer.is_skipped:
                numbers.append(i + 1)
        return numbers

    def grouped_by_subject(self) -> dict[str, list[Question]]:
        """Questions grouped by the subject of their first knowledge matrix entry."""
        quiz = self.session.active_quiz
        if quiz is None:
            return {}

        no_subject = get_settings().quiz_no_subject_key
        grouped: dict[str, list[Question]] = {}
        for question in quiz.questions:
            grouped.setdefault(question.subject_id or no_subject, []).append(question)
        return grouped

    def quiz_title(self) -> str:
        quiz = self.session.active_quiz
        if quiz is None or not quiz.title:
            return get_settings().quiz_default_title
        return quiz.title

    def snapshot(self) -> QuizSession:
        """Deep copy of the current state."""
        return copy.deepcopy(self.session)

    format_elapsed = staticmethod(format_elapsed)
