"""
DTOs for state analysis.

Cross-layer data contracts produced by components/workflows and rendered by
the CLI interface. JSON field naming lives in interfaces/cli/types, not here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class StateKind(str, Enum):
    """State-management primitive families, valued by their output label."""

    LOCAL_STATE = "useState"
    CONTEXT = "useContext"
    REDUCER = "useReducer"
    ZUSTAND = "zustand"  # use<Name>Store hooks
    JOTAI = "jotai"  # useAtom / useAtomValue / useSetAtom
    REDUX = "redux"  # useSelector / useDispatch / useStore


@dataclass(frozen=True)
class StateUsage:
    """One matched state-primitive call site inside a component."""

    kind: StateKind
    token: str  # e.g. "useState", "useCartStore"
    file: str  # POSIX path relative to the analysis root
    line: int  # 1-based, relative to the scanned component text
    component: str


@dataclass
class ComponentRecord:
    """A top-level declaration recognised as a UI component."""

    name: str
    file: str
    usages: list[StateUsage] = field(default_factory=list)
    children: list[str] = field(default_factory=list)  # not populated yet


@dataclass
class Suggestion:
    """Advisory message for a component. Reserved; nothing emits these yet."""

    type: str  # warning | info | improvement
    message: str
    file: str
    component: str


@dataclass
class AnalysisSummary:
    """Project-level counts."""

    total_components: int
    total_state_usages: int
    by_type: dict[str, int]


@dataclass
class AnalysisResult:
    """Result from workflows/analyze_wf.py::analyze_state_workflow."""

    summary: AnalysisSummary
    components: list[ComponentRecord]
    suggestions: list[Suggestion] = field(default_factory=list)
