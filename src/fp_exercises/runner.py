"""
Exercise runner: compile one exercise by name and run it in a child interpreter.

The run is a railway of three stages chained with .chain():

  resolve(name)       → source file of fp_exercises.exercises.<name>
    → compile(source) → byte-compiled artifact in the build directory
      → execute(pyc)  → captured stdout/stderr of the child process

The first failing stage short-circuits the rest. The whole run executes
inside a LoggingExecutionContext, so an unexpected exception also comes back
as a Failure instead of crashing the caller.
"""

from __future__ import annotations

import importlib
import importlib.util
import os
import pkgutil
import py_compile
import subprocess
from dataclasses import dataclass
from pathlib import Path

import fpkit
import structlog
from fpkit import LoggingExecutionContext, Result

import fp_exercises
from fp_exercises.config import RunnerSettings

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class ExerciseOutput:
    """Captured output of one exercise run."""

    exercise: str
    stdout: str
    stderr: str


def normalize_exercise_name(name: str) -> str:
    """
    Map a user-supplied exercise name to its module name.

    "exo3-either", "exo3_either" and "exo3-either.py" all map to "exo3_either".
    """
    normalized = name.strip()
    if normalized.endswith(".py"):
        normalized = normalized[: -len(".py")]
    return normalized.replace("-", "_")


def child_environment() -> dict[str, str]:
    """Current environment with the fpkit / fp_exercises import roots prepended to PYTHONPATH."""
    roots = [
        str(Path(fpkit.__file__).resolve().parent.parent),
        str(Path(fp_exercises.__file__).resolve().parent.parent),
    ]
    env = os.environ.copy()
    existing = env.get("PYTHONPATH")
    if existing:
        roots.append(existing)
    env["PYTHONPATH"] = os.pathsep.join(dict.fromkeys(roots))
    return env


class ExerciseRunner:
    """Resolves, compiles and executes exercise modules."""

    def __init__(self, settings: RunnerSettings) -> None:
        self._settings = settings

    def available_exercises(self) -> list[str]:
        """Names of the runnable exercise modules, sorted."""
        package = importlib.import_module(self._settings.exercises_package)
        return sorted(
            module.name
            for module in pkgutil.iter_modules(package.__path__)
            if not module.name.startswith("_") and not module.ispkg
        )

    def resolve(self, name: str) -> Result[Path, str]:
        """Locate the source file of the named exercise."""
        module_name = normalize_exercise_name(name)
        if not module_name.isidentifier() or module_name.startswith("_"):
            return self._unknown(name)

        qualified = f"{self._settings.exercises_package}.{module_name}"
        spec = importlib.util.find_spec(qualified)
        if spec is None or spec.origin is None or not spec.origin.endswith(".py"):
            return self._unknown(name)

        source = Path(spec.origin)
        log.debug("runner.resolved", exercise=module_name, source=str(source))
        return Result.success(source)

    def compile(self, source: Path) -> Result[Path, str]:
        """Byte-compile source into <build_dir>/<stem>.pyc."""
        build_dir = self._settings.build_dir
        artifact = build_dir / f"{source.stem}.pyc"

        def _compile() -> Path:
            build_dir.mkdir(parents=True, exist_ok=True)
            py_compile.compile(str(source), cfile=str(artifact), doraise=True)
            return artifact

        return (
            Result.from_computation(_compile, on_exception=_describe_compile_error)
            .peek(lambda path: log.debug("runner.compiled", artifact=str(path)))
        )

    def execute(self, artifact: Path) -> Result[ExerciseOutput, str]:
        """Run the compiled artifact in a child interpreter and capture its output."""
        exercise = artifact.stem
        try:
            completed = subprocess.run(  # noqa: S603
                [self._settings.python_executable, str(artifact)],
                capture_output=True,
                text=True,
                timeout=self._settings.timeout_seconds,
                env=child_environment(),
                check=False,
            )
        except subprocess.TimeoutExpired:
            return Result.failure(
                f"Exercise {exercise} timed out after {self._settings.timeout_seconds}s"
            )
        except OSError as e:
            return Result.failure(f"Could not start {self._settings.python_executable}: {e}")

        if completed.returncode != 0:
            captured = [s.rstrip() for s in (completed.stdout, completed.stderr) if s.strip()]
            return Result.failure(
                "\n".join(
                    [f"Exercise {exercise} exited with status {completed.returncode}", *captured]
                )
            )
        log.debug("runner.executed", exercise=exercise)
        return Result.success(
            ExerciseOutput(exercise=exercise, stdout=completed.stdout, stderr=completed.stderr)
        )

    def run(self, name: str) -> Result[ExerciseOutput, str]:
        """Resolve, compile and execute the named exercise."""
        ctx = LoggingExecutionContext(operation=f"RunExercise[{name}]")
        return ctx.execute(
            lambda: self.resolve(name).chain(self.compile).chain(self.execute)
        )

    def _unknown(self, name: str) -> Result[Path, str]:
        available = ", ".join(self.available_exercises())
        return Result.failure(f"Unknown exercise {name!r}. Available exercises: {available}")


def _describe_compile_error(exc: Exception) -> str:
    if isinstance(exc, py_compile.PyCompileError):
        return f"Compilation failed: {exc.msg.strip()}"
    return f"Compilation failed: {exc}"
