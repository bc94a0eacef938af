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
Problem Report Visualizer

Creates the static, interactive HTML page of a configuration cache report.
Both grouped trees are embedded as JSON; a small script renders them as
collapsible lists starting in each node's initial view state.
"""

import html
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

from ..schema.loader import load_report_model
from .page_model import (
    MESSAGE_TREE_TITLE,
    TASK_TREE_TITLE,
    ReportPageModel,
    report_page_model_from_model,
)
from .pretty_text import PrettyText, Reference, Text
from .problem_nodes import (
    BeanNode,
    ErrorNode,
    ExceptionNode,
    LabelNode,
    LinkNode,
    MessageNode,
    ProblemNode,
    PropertyNode,
    TaskNode,
    WarningNode,
)
from .tree import Tree, tree_statistics

logger = logging.getLogger(__name__)

ERROR_ICON = "⛔"
WARNING_ICON = "⚠️"
WEB_SCHEMES = ("http", "https")


def _code(text: str) -> str:
    return f"<code>{html.escape(text)}</code>"


def _link(url: str, text: str, css_class: str) -> str:
    """Anchor for web links; anything else is shown as plain text"""
    if urlparse(url.strip()).scheme.lower() not in WEB_SCHEMES:
        logger.warning(f"Not linking to non-web URL: {url}")
        return f'<span class="{css_class}">{html.escape(text)}</span>'
    return (
        f'<a class="{css_class}" href="{html.escape(url, quote=True)}" '
        f'target="_blank">{html.escape(text)}</a>'
    )


def pretty_text_markup(text: PrettyText) -> str:
    """Escaped text fragments, references as code"""
    parts = []
    for fragment in text.fragments:
        if isinstance(fragment, Text):
            parts.append(html.escape(fragment.text))
        elif isinstance(fragment, Reference):
            parts.append(_code(fragment.name))
        else:
            raise TypeError(f"Unsupported message fragment: {fragment!r}")
    return "".join(parts)


def node_markup(node: ProblemNode) -> str:
    """HTML markup of a single tree label"""
    if isinstance(node, TaskNode):
        return f"task {_code(node.path)} of type {_code(node.type)}"
    if isinstance(node, BeanNode):
        return f"bean of type {_code(node.type)}"
    if isinstance(node, PropertyNode):
        return f"{html.escape(node.kind)} {_code(node.name)} of {_code(node.owner)}"
    if isinstance(node, LabelNode):
        return html.escape(node.text)
    if isinstance(node, MessageNode):
        return pretty_text_markup(node.text)
    if isinstance(node, ExceptionNode):
        return f'<pre class="exception">{html.escape(node.raw_text)}</pre>'
    if isinstance(node, LinkNode):
        return _link(node.url, node.display_text, "doc-link")
    if isinstance(node, (ErrorNode, WarningNode)):
        is_error = isinstance(node, ErrorNode)
        icon = ERROR_ICON if is_error else WARNING_ICON
        css_class = "error" if is_error else "warning"
        markup = f'<span class="{css_class}-icon">{icon}</span> {node_markup(node.inner)}'
        if node.doc_link is not None:
            markup += node_markup(node.doc_link)
        return markup
    raise TypeError(f"Unsupported problem node: {node!r}")


class ProblemReportVisualizer:
    """
    Generates the HTML page of a problem report.
    """

    def __init__(self, title: str = "Configuration cache report"):
        self.title = title

    def generate_html(
        self, page_model: ReportPageModel, output_path: Union[str, Path]
    ) -> str:
        """
        Generate the HTML report for a page model.

        Args:
            page_model: Grouped report model
            output_path: Path to save the HTML file

        Returns:
            Path to the generated HTML file
        """
        html_content = self.render(page_model)

        output_file = Path(output_path)
        output_file.parent.mkdir(exist_ok=True, parents=True)

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(html_content)

        logger.info(f"Wrote problem report to {output_file}")
        return str(output_file)

    def convert_tree(self, tree: Tree[ProblemNode]) -> Dict[str, Any]:
        """Convert a report tree to the nested format read by the page script"""
        return {
            "html": node_markup(tree.label),
            "expanded": tree.is_expanded,
            "children": [self.convert_tree(child) for child in tree.children],
        }

    def render(self, page_model: ReportPageModel) -> str:
        """Render the complete HTML page"""
        trees = [
            self.convert_tree(page_model.message_tree),
            self.convert_tree(page_model.task_tree),
        ]
        # Keep embedded exception text from closing the script element
        trees_json = json.dumps(trees, ensure_ascii=False).replace("</", "<\\/")

        return self._generate_html_content(
            page_model=page_model,
            trees_json=trees_json,
            message_stats=tree_statistics(page_model.message_tree),
            task_stats=tree_statistics(page_model.task_tree),
        )

    def _summary(self, page_model: ReportPageModel) -> str:
        count = page_model.total_problems
        noun = "problem was" if count == 1 else "problems were"
        return (
            f"{count} {noun} found {html.escape(page_model.cache_action)} "
            f"the configuration cache"
        )

    def _generate_html_content(
        self,
        page_model: ReportPageModel,
        trees_json: str,
        message_stats: Dict[str, int],
        task_stats: Dict[str, int],
    ) -> str:
        """Generate the complete HTML content with the embedded trees"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        title = html.escape(self.title)
        learn_more = _link(page_model.documentation_link, "Learn more", "learn-more")

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
            background: #f4f5f7;
            padding: 20px;
            color: #212529;
        }}

        .container {{
            max-width: 1400px;
            margin: 0 auto;
            background: white;
            border-radius: 12px;
            box-shadow: 0 8px 24px rgba(0,0,0,0.08);
            overflow: hidden;
        }}

        .header {{
            background: #02303a;
            color: white;
            padding: 30px 40px;
        }}

        .header h1 {{
            font-size: 28px;
            margin-bottom: 10px;
            font-weight: 600;
        }}

        .header .subtitle {{
            font-size: 16px;
            opacity: 0.9;
        }}

        .header a {{
            color: #9be3f0;
        }}

        .stats {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 20px;
            padding: 30px 40px;
            background: #f8f9fa;
            border-bottom: 1px solid #e9ecef;
        }}

        .stat-card {{
            background: white;
            padding: 20px;
            border-radius: 12px;
            box-shadow: 0 2px 8px rgba(0,0,0,0.05);
        }}

        .stat-card .label {{
            font-size: 14px;
            color: #6c757d;
            margin-bottom: 8px;
            font-weight: 500;
        }}

        .stat-card .value {{
            font-size: 28px;
            font-weight: 700;
            color: #02303a;
        }}

        .groups {{
            padding: 20px 40px;
        }}

        .tree, .tree ul {{
            list-style: none;
        }}

        .tree ul {{
            padding-left: 24px;
        }}

        .tree li {{
            margin: 4px 0;
        }}

        .toggle {{
            display: inline-block;
            width: 16px;
            cursor: pointer;
            color: #6c757d;
            user-select: none;
        }}

        .collapsed > ul {{
            display: none;
        }}

        code {{
            background: #eef1f4;
            padding: 1px 4px;
            border-radius: 4px;
        }}

        pre.exception {{
            display: inline-block;
            background: #fff5f5;
            border-left: 3px solid #dc3545;
            padding: 8px 12px;
            font-size: 12px;
            white-space: pre-wrap;
        }}

        .footer {{
            padding: 20px 40px;
            background: #f8f9fa;
            border-top: 1px solid #e9ecef;
            text-align: center;
            color: #6c757d;
            font-size: 14px;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{title}</h1>
            <div class="subtitle">{self._summary(page_model)} | {learn_more} | Generated: {timestamp}</div>
        </div>

        <div class="stats">
            <div class="stat-card">
                <div class="label">Total Problems</div>
                <div class="value">{page_model.total_problems}</div>
            </div>
            <div class="stat-card">
                <div class="label">Distinct Messages</div>
                <div class="value">{len(page_model.message_tree.children)}</div>
            </div>
            <div class="stat-card">
                <div class="label">Message Tree Nodes</div>
                <div class="value">{message_stats.get('total_nodes', 0)}</div>
            </div>
            <div class="stat-card">
                <div class="label">Task Tree Nodes</div>
                <div class="value">{task_stats.get('total_nodes', 0)}</div>
            </div>
            <div class="stat-card">
                <div class="label">Max Depth</div>
                <div class="value">{max(message_stats.get('max_depth', 0), task_stats.get('max_depth', 0))}</div>
            </div>
        </div>

        <div class="groups" id="groups"></div>

        <div class="footer">
            <p><strong>Tip:</strong> Click the arrows to expand or collapse a group.</p>
        </div>
    </div>

    <script>
        const trees = {trees_json};

        function renderNode(node) {{
            const li = document.createElement("li");
            const hasChildren = node.children.length > 0;
            const toggle = document.createElement("span");
            toggle.className = "toggle";
            toggle.textContent = hasChildren ? (node.expanded ? "▼" : "▶") : "";
            li.appendChild(toggle);

            const label = document.createElement("span");
            label.className = "label";
            label.innerHTML = node.html;
            li.appendChild(label);

            if (hasChildren) {{
                const ul = document.createElement("ul");
                node.children.forEach(child => ul.appendChild(renderNode(child)));
                li.appendChild(ul);
                if (!node.expanded) {{
                    li.classList.add("collapsed");
                }}
                toggle.addEventListener("click", () => {{
                    const collapsed = li.classList.toggle("collapsed");
                    toggle.textContent = collapsed ? "▶" : "▼";
                }});
            }}
            return li;
        }}

        const groups = document.getElementById("groups");
        trees.forEach(tree => {{
            const ul = document.createElement("ul");
            ul.className = "tree";
            ul.appendChild(renderNode(tree));
            groups.appendChild(ul);
        }});
    </script>
</body>
</html>"""


def create_report_for_model(
    model_path: Union[str, Path],
    output_path: Union[str, Path],
    message_tree_title: Optional[str] = None,
    task_tree_title: Optional[str] = None,
) -> str:
    """
    Convenience function to load a report model and write its HTML page.

    Args:
        model_path: Path to the `.json` model or `.js` data script
        output_path: Path to save HTML file
        message_tree_title: Optional root label of the by-message tree
        task_tree_title: Optional root label of the by-task tree

    Returns:
        Path to generated HTML file
    """
    page_model = report_page_model_from_model(
        load_report_model(model_path),
        message_tree_title or MESSAGE_TREE_TITLE,
        task_tree_title or TASK_TREE_TITLE,
    )
    return ProblemReportVisualizer().generate_html(page_model, output_path)
