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
Problem Report Module

Regroups the flat list of configuration cache problems into two trees,
one grouped by message and one grouped by task, for interactive browsing.
"""

from .page_model import ReportPageModel, report_page_model_from_model
from .paths import problem_nodes_by_message, problem_nodes_by_task
from .pretty_text import PrettyText, Reference, Text, to_pretty_text
from .problem_nodes import (
    BeanNode,
    ErrorNode,
    ExceptionNode,
    ImportedProblem,
    LabelNode,
    LinkNode,
    MessageNode,
    ProblemNode,
    PropertyNode,
    TaskNode,
    WarningNode,
    import_problem,
    to_problem_node,
)
from .tree import Tree, ViewState, tree_from_trie, tree_model_for, tree_statistics
from .trie import Trie, TrieBuilder
from .visualizer import ProblemReportVisualizer, create_report_for_model

__all__ = [
    "BeanNode",
    "ErrorNode",
    "ExceptionNode",
    "ImportedProblem",
    "LabelNode",
    "LinkNode",
    "MessageNode",
    "PrettyText",
    "ProblemNode",
    "ProblemReportVisualizer",
    "PropertyNode",
    "Reference",
    "ReportPageModel",
    "TaskNode",
    "Text",
    "Tree",
    "Trie",
    "TrieBuilder",
    "ViewState",
    "WarningNode",
    "create_report_for_model",
    "import_problem",
    "problem_nodes_by_message",
    "problem_nodes_by_task",
    "report_page_model_from_model",
    "to_pretty_text",
    "to_problem_node",
    "tree_from_trie",
    "tree_model_for",
    "tree_statistics",
]
