"""
fp_exercises: functional programming exercises in Python.

Each exercise contrasts an imperative snippet with its functional
counterpart built on fpkit (pipe, Result, Option, Task). The runner
compiles one exercise by name and executes it in a child interpreter.
"""

__version__ = "0.1.0"
