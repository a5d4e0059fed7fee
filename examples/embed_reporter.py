"""Example: driving TeamCityReporter from a custom runner.

Run with:
    python examples/embed_reporter.py
"""

import asyncio

from teamcity_reporter import (
    ConsoleLogEvent,
    ErrorRecord,
    File,
    LogChannel,
    Suite,
    TaskResult,
    TaskState,
    TeamCityReporter,
    Test,
    link,
)


async def main() -> None:
    adds = Test(id="t1", name="adds")
    divides = Test(id="t2", name="divides")
    file = link(
        File(id="f1", name="math.test.py", tasks=[adds, Suite(id="s1", name="division", tasks=[divides])])
    )

    reporter = TeamCityReporter()
    await reporter.on_file_registered(file)

    # Tests may finish in any order; output still follows the tree.
    await reporter.on_console_log("t2", ConsoleLogEvent("t2", LogChannel.STDOUT, "dividing"))
    divides.result = TaskResult(TaskState.FAIL, 4, [ErrorRecord(message="ZeroDivisionError")])
    adds.result = TaskResult(TaskState.PASS, 1)
    await reporter.on_task_updates([("t2", divides.result), ("t1", adds.result)])

    file.result = TaskResult(TaskState.FAIL, 5)
    await reporter.on_task_update(file.id, file.result)
    await reporter.on_run_complete([file])


if __name__ == "__main__":
    asyncio.run(main())
