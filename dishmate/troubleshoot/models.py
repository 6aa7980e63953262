"""Troubleshooting flow node types.

A step in the flow is exactly one of:
- QuestionNode: a question with answer options
- DiagnosisNode: a terminal free-text diagnosis
- SolutionNode: a terminal step wrapping a TroubleshootSolution
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TroubleshootSolution:
    title: str
    summary: str
    steps: tuple[str, ...]
    tips: tuple[str, ...] | None = None
    product_recommendation: str | None = None


@dataclass(frozen=True)
class StepOption:
    """One answer to a question.

    When ``next_step`` is set, choosing this option moves to that node
    regardless of any solution mapped for the answer.
    """

    label: str
    value: str
    next_step: str | None = None


@dataclass(frozen=True)
class QuestionNode:
    id: str
    question: str
    options: tuple[StepOption, ...]

    def get_option(self, value: str) -> StepOption | None:
        for option in self.options:
            if option.value == value:
                return option
        return None


@dataclass(frozen=True)
class DiagnosisNode:
    id: str
    diagnosis: str


@dataclass(frozen=True)
class SolutionNode:
    id: str
    solution: TroubleshootSolution


DiagnosisStep = QuestionNode | DiagnosisNode | SolutionNode


@dataclass(frozen=True)
class CategoryInfo:
    label: str
    description: str
