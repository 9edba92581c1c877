"""
Quiz assessment runtime.

Components:
- grading: Auto-grading for objective question types
- status: Display statuses and badge styles
- session_store: Live quiz-taking session state
- performance: Multi-activity performance reports
- correction: Teacher correction view and manual grades
- schemas: Boundary models for API payloads
"""

from .correction import (
    CorrectionData,
    CorrectionQuestion,
    EssayCorrection,
    ManualGradeNotAllowed,
    apply_manual_grade,
    build_correction_data,
)
from .grading import AUTO_GRADABLE_TYPES, can_auto_grade, grade_answer, is_correct_from_status
from .models import (
    Answer,
    AnswerStatus,
    KnowledgeMatrixEntry,
    Option,
    Question,
    QuestionDifficulty,
    QuestionStatus,
    QuestionType,
    Quiz,
)
from .performance import PerformanceAggregator, PerformanceSummary, summarize
from .schemas import QuizPayload, StudentAnswersBatch
from .session_store import QuizSession, QuizSourceKind, SessionStore, format_elapsed
from .status import BadgeStyle, resolve_display_status, to_badge_style, to_display_status

__all__ = [
    "AUTO_GRADABLE_TYPES",
    "Answer",
    "AnswerStatus",
    "BadgeStyle",
    "CorrectionData",
    "CorrectionQuestion",
    "EssayCorrection",
    "KnowledgeMatrixEntry",
    "ManualGradeNotAllowed",
    "Option",
    "PerformanceAggregator",
    "PerformanceSummary",
    "Question",
    "QuestionDifficulty",
    "QuestionStatus",
    "QuestionType",
    "Quiz",
    "QuizPayload",
    "QuizSession",
    "QuizSourceKind",
    "SessionStore",
    "StudentAnswersBatch",
    "apply_manual_grade",
    "build_correction_data",
    "can_auto_grade",
    "format_elapsed",
    "grade_answer",
    "is_correct_from_status",
    "resolve_display_status",
    "summarize",
    "to_badge_style",
    "to_display_status",
]
