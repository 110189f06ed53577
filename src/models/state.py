"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field

from .directive import Directive


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the scanning pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, strict, allow, reportFile, show
        - env_check: sourceFiles, reportOutputFile, envOK
        - sources_scan: parsedSources, violations
        - report_write: reportResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing source files to scan
        outputdir: Directory receiving the JSON report
        verbosity: Logging verbosity level (1-3)
        pattern: Glob selecting files under inputdir (None = settings default)
        strict: Reject directive kinds outside the allow-list
        allow: Comma-separated allow-list (None = settings default)
        reportFile: Report filename (None = settings default)
        show: Print each directive line highlighted
        envOK: Environment validation passed
        sourceFiles: Files selected for scanning, sorted
        reportOutputFile: Resolved report path
        parsedSources: Directives per file, keyed by path relative to inputdir
        violations: (relative path, directive) pairs with disallowed kinds
        reportResult: Report summary (output_file, file_count, directive_count, violation_count)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: Optional[str] = field(default=None)
    strict: bool = field(default=False)
    allow: Optional[str] = field(default=None)
    reportFile: Optional[str] = field(default=None)
    show: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    sourceFiles: List[Path] = field(default_factory=list)
    reportOutputFile: Path = field(default=Path("/"))
    parsedSources: Optional[Dict[str, List[Directive]]] = field(default=None)
    violations: List[Any] = field(default_factory=list)
    reportResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (pattern, strict, allow, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for the report

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Only keep options that are ProgramState fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_scan,
            report_write,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
