"""Form state of the customizer front end, expressed as data.

Every transition is ``reduce(state, action) -> state``; nothing here performs
I/O. The caller dispatches :class:`CopyLabelReset` ``COPY_LABEL_RESET_SECONDS``
after a copy attempt so the button label reverts.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Union

Target = Literal["resume", "cover_letter"]

COPY_LABEL_RESET_SECONDS = 2.0

RESUME_COPY_LABEL = "Copy Resume"
COVER_LETTER_COPY_LABEL = "Copy Cover Letter"
COPIED_LABEL = "Copied!"
COPY_FAILED_LABEL = "Copy Failed"

EMPTY_RESUME_MESSAGE = "No resume content received."
EMPTY_COVER_LETTER_MESSAGE = "No cover letter content received."


@dataclass(frozen=True)
class WorkspaceState:
    current_resume: str = ""
    job_description: str = ""
    tailored_resume: str = ""
    cover_letter: str = ""
    is_loading: bool = False
    resume_copy_label: str = RESUME_COPY_LABEL
    cover_letter_copy_label: str = COVER_LETTER_COPY_LABEL


@dataclass(frozen=True)
class EditResume:
    text: str


@dataclass(frozen=True)
class EditJobDescription:
    text: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class GenerationSucceeded:
    tailored_resume: str
    cover_letter: str


@dataclass(frozen=True)
class GenerationFailed:
    message: str


@dataclass(frozen=True)
class CopySucceeded:
    target: Target


@dataclass(frozen=True)
class CopyFailed:
    target: Target


@dataclass(frozen=True)
class CopyLabelReset:
    target: Target


Action = Union[
    EditResume,
    EditJobDescription,
    SubmitStarted,
    GenerationSucceeded,
    GenerationFailed,
    CopySucceeded,
    CopyFailed,
    CopyLabelReset,
]


def can_submit(state: WorkspaceState) -> bool:
    return not state.is_loading and bool(state.current_resume) and bool(state.job_description)


def _with_label(state: WorkspaceState, target: Target, label: str) -> WorkspaceState:
    if target == "resume":
        return replace(state, resume_copy_label=label)
    return replace(state, cover_letter_copy_label=label)


def reduce(state: WorkspaceState, action: Action) -> WorkspaceState:
    if isinstance(action, EditResume):
        return replace(state, current_resume=action.text)
    if isinstance(action, EditJobDescription):
        return replace(state, job_description=action.text)
    if isinstance(action, SubmitStarted):
        return replace(state, is_loading=True, tailored_resume="", cover_letter="")
    if isinstance(action, GenerationSucceeded):
        return replace(
            state,
            is_loading=False,
            tailored_resume=action.tailored_resume or EMPTY_RESUME_MESSAGE,
            cover_letter=action.cover_letter or EMPTY_COVER_LETTER_MESSAGE,
        )
    if isinstance(action, GenerationFailed):
        # Only outputs that are still missing are replaced by the error.
        return replace(
            state,
            is_loading=False,
            tailored_resume=state.tailored_resume or f"Failed to generate resume: {action.message}",
            cover_letter=state.cover_letter or f"Failed to generate cover letter: {action.message}",
        )
    if isinstance(action, CopySucceeded):
        return _with_label(state, action.target, COPIED_LABEL)
    if isinstance(action, CopyFailed):
        return _with_label(state, action.target, COPY_FAILED_LABEL)
    if isinstance(action, CopyLabelReset):
        default = RESUME_COPY_LABEL if action.target == "resume" else COVER_LETTER_COPY_LABEL
        return _with_label(state, action.target, default)
    raise TypeError(f"Unknown workspace action: {action!r}")
