"""
Exercise 4: deferred asynchronous work with Task.

An asyncio future created with ensure_future is already scheduled: the
sleep starts whether or not anyone awaits it. A Task is only a recipe.
Nothing runs while it is built, mapped or chained; the work starts when
the final Task is invoked and awaited.
"""

from __future__ import annotations

import asyncio

import structlog
from fpkit import Task, pipe
from fpkit.pointfree import chain, map_

from fp_exercises.logging_setup import configure_structlog

log = structlog.get_logger()

DEFAULT_DELAY = 1.0


async def _fetch(message: str, delay: float) -> str:
    await asyncio.sleep(delay)
    return message


def fetch_data_eagerly(delay: float = DEFAULT_DELAY) -> asyncio.Future[str]:
    """Promise style: scheduled on the running loop as soon as this is called."""
    return asyncio.ensure_future(_fetch("Data fetched successfully", delay))


def fetch_data_task(delay: float = DEFAULT_DELAY) -> Task[str]:
    return Task.delayed("Data fetched successfully using Task", delay)


def _and_processed(task: Task[str]) -> Task[str]:
    # what map_ does, written out by hand
    async def run() -> str:
        return f"{await task()} and processed"

    return Task(run)


def process_data_task(delay: float = DEFAULT_DELAY) -> Task[str]:
    return pipe(fetch_data_task(delay), _and_processed)


def fetch_data_with_map(delay: float = DEFAULT_DELAY) -> Task[str]:
    return pipe(
        fetch_data_task(delay),
        map_(lambda result: f"{result} and enhanced with map"),
    )


def fetch_data_with_chain(delay: float = DEFAULT_DELAY) -> Task[str]:
    """Fetch, then fetch again and combine both results."""
    return pipe(
        fetch_data_task(delay),
        chain(
            lambda result: pipe(
                fetch_data_task(delay),
                map_(lambda new_result: f"{result} + {new_result}"),
            )
        ),
    )


async def _demo(delay: float) -> None:
    eager = fetch_data_eagerly(delay)
    log.info("task.eager_scheduled", done=eager.done())

    tasks = {
        "task.plain": fetch_data_task(delay),
        "task.composed": process_data_task(delay),
        "task.mapped": fetch_data_with_map(delay),
        "task.chained": fetch_data_with_chain(delay),
    }
    log.info("task.built", count=len(tasks))

    results = await asyncio.gather(eager, *(task() for task in tasks.values()))
    log.info("task.eager", result=results[0])
    for event, result in zip(tasks, results[1:]):
        log.info(event, result=result)


def main(delay: float = DEFAULT_DELAY) -> None:
    configure_structlog()
    asyncio.run(_demo(delay))


if __name__ == "__main__":
    main()
