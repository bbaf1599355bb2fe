"""Tests for the project logger namespace."""

import logging

from utils.logging import NAMESPACE, get_logger, setup_logging


def test_loggers_live_under_project_namespace():
    assert get_logger("server").name == "interview_eval.server"
    assert get_logger("interview_eval.agent").name == "interview_eval.agent"
    assert get_logger().name == NAMESPACE


def test_setup_installs_one_handler_and_leaves_root_alone():
    root_handlers = list(logging.getLogger().handlers)
    setup_logging("debug")
    setup_logging("warning")

    project = logging.getLogger(NAMESPACE)
    assert len(project.handlers) == 1
    assert project.level == logging.WARNING
    assert logging.getLogger().handlers == root_handlers
