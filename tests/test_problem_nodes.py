"""Tests for trace classification and node synthesis helpers."""
import logging

import pytest

from cache_report.problem_report.pretty_text import PrettyText, Text
from cache_report.problem_report.problem_nodes import (
    GRADLE_RUNTIME,
    BeanNode,
    ErrorNode,
    ExceptionNode,
    LabelNode,
    LinkNode,
    MessageNode,
    PropertyNode,
    TaskNode,
    WarningNode,
    doc_link_for,
    error_or_warning_node_for,
    exception_node_for,
    exception_or_message_node_for,
    import_problem,
    message_node_for,
    to_problem_node,
)
from cache_report.schema import RawTraceEntry

from conftest import imported, raw_problem


def _classify(entry):
    return to_problem_node(RawTraceEntry.model_validate(entry))


@pytest.mark.parametrize(
    "entry, expected",
    [
        ({"kind": "Task", "path": ":a", "type": "Foo"}, TaskNode(":a", "Foo")),
        ({"kind": "Bean", "type": "com.acme.Bean"}, BeanNode("com.acme.Bean")),
        (
            {"kind": "Field", "name": "f", "declaringType": "com.acme.Bean"},
            PropertyNode("field", "f", "com.acme.Bean"),
        ),
        (
            {"kind": "InputProperty", "name": "x", "task": ":a"},
            PropertyNode("input property", "x", ":a"),
        ),
        (
            {"kind": "OutputProperty", "name": "y", "task": ":a"},
            PropertyNode("output property", "y", ":a"),
        ),
    ],
)
def test_known_kinds(entry, expected):
    assert _classify(entry) == expected


@pytest.mark.parametrize("kind", ["Gradle", "BuildLogic", "", "task"])
def test_unknown_kinds_fall_back_to_gradle_runtime(kind):
    assert _classify({"kind": kind, "anything": 42}) == LabelNode("Gradle runtime")


def test_known_kind_missing_fields_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        node = _classify({"kind": "Task", "type": "Foo"})

    assert node is GRADLE_RUNTIME
    assert "no usable path" in caplog.text


def test_nodes_have_structural_equality():
    first = WarningNode(MessageNode(PrettyText((Text("bad"),))), LinkNode("u", " ?"))
    second = WarningNode(MessageNode(PrettyText((Text("bad"),))), LinkNode("u", " ?"))

    assert first == second
    assert len({first, second}) == 1
    assert str(first) == str(second)


def test_import_problem_classifies_whole_trace():
    problem = import_problem(
        raw_problem(
            trace=[
                {"kind": "InputProperty", "name": "x", "task": ":a"},
                {"kind": "Unknown"},
                {"kind": "Task", "path": ":a", "type": "Foo"},
            ],
            error="boom",
            documentation_link="https://example.com/doc",
        )
    )

    assert problem.trace == (
        PropertyNode("input property", "x", ":a"),
        GRADLE_RUNTIME,
        TaskNode(":a", "Foo"),
    )
    assert problem.message == PrettyText((Text("bad value"),))
    assert problem.error == "boom"
    assert problem.documentation_link == "https://example.com/doc"


def test_error_or_warning_depends_on_error_text():
    label = LabelNode("x")
    link = LinkNode("https://example.com", " ?")

    assert error_or_warning_node_for(imported(error="boom"), label, link) == ErrorNode(label, link)
    assert error_or_warning_node_for(imported(), label, None) == WarningNode(label, None)


def test_empty_error_text_still_counts_as_error():
    assert isinstance(error_or_warning_node_for(imported(error=""), LabelNode("x"), None), ErrorNode)


def test_exception_node():
    assert exception_node_for(imported(error="boom")) == ExceptionNode("boom")
    assert exception_node_for(imported()) is None


def test_doc_link():
    assert doc_link_for(imported(documentation_link="https://example.com")) == LinkNode(
        "https://example.com", " ?"
    )
    assert doc_link_for(imported()) is None


def test_message_node():
    assert message_node_for(imported(message="hello")) == MessageNode(PrettyText((Text("hello"),)))


def test_exception_supersedes_message():
    assert exception_or_message_node_for(imported(error="boom")) == ExceptionNode("boom")
    assert exception_or_message_node_for(imported(message="hello")) == MessageNode(
        PrettyText((Text("hello"),))
    )
