"""
Catalog schemas for ReactPrep.

Defines Pydantic models for question bank content:
- Topics (categories shown on the topic grid)
- Questions with flawed/correct code pairs
- Line-anchored mistake annotations
- Highlighted questions ready for rendering
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

# =============================================================================
# LINE CONVENTION: Mistake.line_number is 1-based and refers to a line of
# Question.suboptimal_code, counted by splitting on "\n".
# =============================================================================


def count_lines(code: str) -> int:
    """Number of lines in a code sample (an empty sample has one line)."""
    return len(code.split("\n"))


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# -----------------------------------------------------------------------------
# Topics
# -----------------------------------------------------------------------------

class Topic(BaseModel):
    """A named category grouping related questions."""
    id: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    name: str
    description: str
    icon: str = "HelpCircle"  # icon name, resolved by viewer.icons


class TopicsFile(BaseModel):
    """Top-level shape of content/topics.yaml."""
    topics: list[Topic]


# -----------------------------------------------------------------------------
# Questions
# -----------------------------------------------------------------------------

class Mistake(BaseModel):
    """Annotation describing one defect in a question's flawed code."""
    id: str = Field(..., min_length=1)
    line_number: int = Field(..., ge=1)
    message: str
    severity: Severity = Severity.WARNING


class Question(BaseModel):
    """
    One unit of content: a flawed code sample, its corrected counterpart,
    annotated mistakes, tips and hints.

    Mistake line numbers are checked against the flawed sample when the
    model is built, so out-of-range annotations fail at content load time
    instead of drawing markers below the code block.
    """
    id: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    title: str
    difficulty: Difficulty
    description: str
    suboptimal_code: str
    correct_code: str
    mistakes: list[Mistake] = Field(default_factory=list)
    pro_tips: list[str] = Field(default_factory=list)
    hints: list[str] = Field(default_factory=list)
    explanation: str = ""

    @field_validator('suboptimal_code', 'correct_code')
    @classmethod
    def code_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Code sample must not be blank')
        return v

    @model_validator(mode='after')
    def mistakes_within_code(self):
        line_count = count_lines(self.suboptimal_code)
        seen = set()
        for mistake in self.mistakes:
            if mistake.id in seen:
                raise ValueError(f'Duplicate mistake id {mistake.id!r} in question {self.id!r}')
            seen.add(mistake.id)
            if mistake.line_number > line_count:
                raise ValueError(
                    f'Mistake {mistake.id!r} points at line {mistake.line_number} '
                    f'but question {self.id!r} has only {line_count} lines'
                )
        return self

    @computed_field
    @property
    def line_count(self) -> int:
        """Line count of the flawed code sample."""
        return count_lines(self.suboptimal_code)


class QuestionBankFile(BaseModel):
    """Top-level shape of content/questions/<topic>.yaml."""
    topic: str = Field(..., min_length=1)
    questions: list[Question]


class HighlightedQuestion(Question):
    """Question plus pre-rendered markup for both code samples."""
    preview_html: str
    solution_html: str

    @classmethod
    def from_question(cls, question: Question, preview_html: str, solution_html: str) -> "HighlightedQuestion":
        data = question.model_dump(exclude={'line_count'})
        return cls(**data, preview_html=preview_html, solution_html=solution_html)
