"""Turns a file's task tree into an ordered list of message templates."""

from __future__ import annotations

from teamcity_reporter.classifier import classify
from teamcity_reporter.console_log import ConsoleLogRouter
from teamcity_reporter.escape import escape
from teamcity_reporter.messages import SuiteMessage, TestMessage
from teamcity_reporter.tasks import File, Suite, Task, Test
from teamcity_reporter.templates import DeferredTest, LiteralLine, MessageTemplate
from teamcity_reporter.types import Outcome, TaskMode


class TreeWalker:
    """Builds templates in tree pre-order and renders them on demand.

    Walking never looks at results; only ``render`` does, so templates built
    at registration time see state that arrives later.
    """

    def __init__(self, router: ConsoleLogRouter) -> None:
        self.router = router

    def build_file_messages(self, file: File) -> list[MessageTemplate]:
        bracket = SuiteMessage(file.id, escape(file.name))
        templates: list[MessageTemplate] = [LiteralLine(bracket.started())]
        for task in file.tasks:
            templates.extend(self.walk(task))
        templates.append(LiteralLine(bracket.finished()))
        return templates

    def walk(self, task: Task) -> list[MessageTemplate]:
        if isinstance(task, Test):
            return [self._test_template(task)]
        if isinstance(task, Suite) and task.mode is TaskMode.RUN:
            return self._suite_templates(task)
        # Suites that are not run and custom tasks are left out entirely.
        return []

    def _suite_templates(self, suite: Suite) -> list[MessageTemplate]:
        file = suite.file
        bracket = SuiteMessage(file.id if file is not None else suite.id, escape(suite.name))
        templates: list[MessageTemplate] = [LiteralLine(bracket.started())]
        for child in suite.tasks:
            templates.extend(self.walk(child))
        templates.append(LiteralLine(bracket.finished()))
        return templates

    def _test_template(self, test: Test) -> MessageTemplate:
        if test.mode is TaskMode.SKIP:
            return LiteralLine(TestMessage(test).ignored())
        return DeferredTest(test)

    def render(self, template: MessageTemplate) -> list[str]:
        """Evaluate one template into its lines."""
        if isinstance(template, LiteralLine):
            return [template.text]
        return self._render_test(template.test)

    def _render_test(self, test: Test) -> list[str]:
        message = TestMessage(test)
        classification = classify(test)
        logs = self.router.drain(test.id)

        lines = [message.started()]
        lines.extend(message.log(log.channel, log.content) for log in logs)
        if classification.outcome is Outcome.FAIL:
            lines.extend(message.fail(error) for error in classification.errors)
        lines.append(message.finished(test.result.duration if test.result else 0))
        return [line for line in lines if line]
