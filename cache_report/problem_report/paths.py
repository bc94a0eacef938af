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
Grouping Paths

Builds one node path per problem for each grouping axis. Paths sharing a
prefix end up in the same branch of the report tree.
"""

from typing import Iterable, List

from .problem_nodes import (
    ImportedProblem,
    ProblemNode,
    doc_link_for,
    error_or_warning_node_for,
    exception_node_for,
    exception_or_message_node_for,
    message_node_for,
)


def problem_nodes_by_message(
    problems: Iterable[ImportedProblem],
) -> List[List[ProblemNode]]:
    """
    Paths rooted at the message (wrapped with its severity and doc link),
    followed by the trace and, if any, the exception.
    """
    paths = []
    for problem in problems:
        path: List[ProblemNode] = [
            error_or_warning_node_for(
                problem, message_node_for(problem), doc_link_for(problem)
            )
        ]
        path.extend(problem.trace)
        exception = exception_node_for(problem)
        if exception is not None:
            path.append(exception)
        paths.append(path)
    return paths


def problem_nodes_by_task(
    problems: Iterable[ImportedProblem],
) -> List[List[ProblemNode]]:
    """
    Paths rooted at the outermost trace entry (usually the task), which alone
    carries the severity, ending with the exception or else the message.
    """
    paths = []
    for problem in problems:
        path: List[ProblemNode] = [
            error_or_warning_node_for(problem, node, None) if index == 0 else node
            for index, node in enumerate(reversed(problem.trace))
        ]
        path.append(exception_or_message_node_for(problem))
        paths.append(path)
    return paths
