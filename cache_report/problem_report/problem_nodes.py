# Copyright (c) Nex-AGI. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Problem Nodes

Typed semantic nodes that make up the grouping paths of the problem report,
the classifier that turns raw trace entries into nodes, and the helpers that
synthesize severity, exception, message and documentation link nodes.

All node types are frozen dataclasses: equal field values mean equal nodes,
which is what lets identical paths merge when grouped.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..schema.report_schema import RawProblem, RawTraceEntry
from .pretty_text import PrettyText, to_pretty_text

logger = logging.getLogger(__name__)

FIELD = "field"
INPUT_PROPERTY = "input property"
OUTPUT_PROPERTY = "output property"

DOC_LINK_TEXT = " ?"


@dataclass(frozen=True)
class TaskNode:
    path: str
    type: str


@dataclass(frozen=True)
class BeanNode:
    type: str


@dataclass(frozen=True)
class PropertyNode:
    """
    A field or a task input/output property.

    `owner` is the declaring type for a field and the owning task path
    for input and output properties.
    """

    kind: str
    name: str
    owner: str


@dataclass(frozen=True)
class LabelNode:
    text: str


@dataclass(frozen=True)
class MessageNode:
    text: PrettyText


@dataclass(frozen=True)
class ExceptionNode:
    raw_text: str


@dataclass(frozen=True)
class LinkNode:
    url: str
    display_text: str


@dataclass(frozen=True)
class ErrorNode:
    inner: "ProblemNode"
    doc_link: Optional[LinkNode] = None


@dataclass(frozen=True)
class WarningNode:
    inner: "ProblemNode"
    doc_link: Optional[LinkNode] = None


ProblemNode = Union[
    TaskNode,
    BeanNode,
    PropertyNode,
    LabelNode,
    MessageNode,
    ExceptionNode,
    LinkNode,
    ErrorNode,
    WarningNode,
]

# Origin of trace entries the report cannot describe more precisely
GRADLE_RUNTIME = LabelNode("Gradle runtime")


@dataclass(frozen=True)
class ImportedProblem:
    """A raw problem together with its formatted message and classified trace"""

    message: PrettyText
    trace: Tuple[ProblemNode, ...]
    error: Optional[str] = None
    documentation_link: Optional[str] = None


def import_problem(problem: RawProblem) -> ImportedProblem:
    return ImportedProblem(
        message=to_pretty_text(problem.message),
        trace=tuple(to_problem_node(entry) for entry in problem.trace),
        error=problem.error,
        documentation_link=problem.documentation_link,
    )


def _unusable_fields(entry: RawTraceEntry, *names: str) -> Tuple[str, ...]:
    return tuple(
        name for name in names if not isinstance(getattr(entry, name), str)
    )


def to_problem_node(entry: RawTraceEntry) -> ProblemNode:
    """
    Classify one raw trace entry.

    Never raises: unknown or absent kinds, and known kinds lacking text
    values for their fields, map to the Gradle runtime label.
    """
    kind = entry.kind
    if kind == "Task":
        required = ("path", "type")
    elif kind == "Bean":
        required = ("type",)
    elif kind == "Field":
        required = ("name", "declaring_type")
    elif kind in ("InputProperty", "OutputProperty"):
        required = ("name", "task")
    else:
        logger.debug(f"Unknown trace kind '{kind}', using '{GRADLE_RUNTIME.text}'")
        return GRADLE_RUNTIME

    unusable = _unusable_fields(entry, *required)
    if unusable:
        logger.warning(
            f"Trace entry of kind '{kind}' has no usable {', '.join(unusable)}, "
            f"using '{GRADLE_RUNTIME.text}'"
        )
        return GRADLE_RUNTIME

    if kind == "Task":
        return TaskNode(entry.path, entry.type)
    if kind == "Bean":
        return BeanNode(entry.type)
    if kind == "Field":
        return PropertyNode(FIELD, entry.name, entry.declaring_type)
    if kind == "InputProperty":
        return PropertyNode(INPUT_PROPERTY, entry.name, entry.task)
    return PropertyNode(OUTPUT_PROPERTY, entry.name, entry.task)


def error_or_warning_node_for(
    problem: ImportedProblem, label: ProblemNode, doc_link: Optional[LinkNode]
) -> ProblemNode:
    """Wrap `label` as an error if the problem carries error text, else as a warning"""
    if problem.error is not None:
        return ErrorNode(label, doc_link)
    return WarningNode(label, doc_link)


def exception_node_for(problem: ImportedProblem) -> Optional[ExceptionNode]:
    if problem.error is None:
        return None
    return ExceptionNode(problem.error)


def doc_link_for(problem: ImportedProblem) -> Optional[LinkNode]:
    if problem.documentation_link is None:
        return None
    return LinkNode(problem.documentation_link, DOC_LINK_TEXT)


def message_node_for(problem: ImportedProblem) -> MessageNode:
    return MessageNode(problem.message)


def exception_or_message_node_for(problem: ImportedProblem) -> ProblemNode:
    """The exception supersedes the message as terminal node when present"""
    return exception_node_for(problem) or message_node_for(problem)
