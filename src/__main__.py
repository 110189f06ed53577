#!/usr/bin/env python3
"""
cttt - Change-this-then-that directive scanner

Scans source files for // @cttt.kind(argument) comments and writes every
directive found to a JSON report.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Philosophy:
    - Comments are the interface: directives live next to the code they describe
    - Best-effort extraction: anything that is not a well-formed directive is skipped
    - Strict mode is opt-in: only then do unknown kinds fail the run

Usage:
    cttt inputdir/ outputdir/ [--pattern GLOB] [--strict] [--allow KINDS]

    The report is written to outputdir/directives.json (see --reportFile).

Examples:
    # Scan every file
    cttt . output/

    # Scan Rust sources, fail on anything other than name/change
    cttt . output/ --pattern '**/*.rs' --strict --allow name,change

    # Show each directive with highlighting
    cttt . output/ --show -vv
"""

import sys
import json
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import parse, violations_find, __version__, LOG, state_connectToLogger
from .lib.lexer import directive_highlight
from .models import ProgramState, DisallowedDirectiveKind, pipeline


DISPLAY_TITLE = r"""
        _   _   _
   ___ | |_| |_| |_
  / __|| __| __| __|
 | (__ | |_| |_| |_
  \___| \__|\__|\__|

  Change this, then that
"""

# Define CLI arguments
parser = ArgumentParser(
    description="cttt - scan source comments for @cttt directives",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    default=None,
    type=str,
    help="Glob (relative to inputdir) selecting files to scan. Defaults to CTTT_FILE_PATTERN",
)

parser.add_argument(
    "--strict",
    action="store_true",
    help="Fail if any directive kind is outside the allow-list",
)

parser.add_argument(
    "--allow",
    default=None,
    type=str,
    help="Comma-separated directive kinds accepted by --strict. Defaults to CTTT_ALLOWED_KINDS",
)

parser.add_argument(
    "--reportFile",
    default=None,
    type=str,
    help="Report filename inside outputdir. Defaults to CTTT_REPORT_FILE",
)

parser.add_argument(
    "--show",
    action="store_true",
    help="Print each directive line with syntax highlighting",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve the files to scan.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - sourceFiles: Sorted files under inputdir matching the pattern
            - reportOutputFile: Resolved report path
            - envOK: True if environment is valid

    Exits:
        1 if inputdir does not exist
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    pattern = state.pattern or appsettings.file_pattern
    report_name = state.reportFile or appsettings.report_file

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.reportOutputFile = state.outputdir / report_name
    LOG(f"Report file: {state.reportOutputFile}", level=2)

    # A previous report inside inputdir must not be rescanned
    report_resolved = state.reportOutputFile.resolve()
    state.sourceFiles = sorted(
        path for path in state.inputdir.glob(pattern)
        if path.is_file() and path.resolve() != report_resolved
    )
    LOG(f"Selected {len(state.sourceFiles)} files matching '{pattern}'", level=2)

    state.envOK = True
    return state


def sources_scan(inputstate: ProgramState) -> ProgramState:
    """
    Read every selected file and extract its directives.

    Files that cannot be read or decoded are skipped.

    Args:
        inputstate: Program state with sourceFiles set

    Returns:
        ProgramState with added fields:
            - parsedSources: Directives per file (only files that have any),
                             keyed by POSIX path relative to inputdir
            - violations: (relative path, Directive) pairs whose kind is not
                          allowed (strict mode only)
    """

    state = inputstate.copy()

    LOG("Scanning source files...", level=1)

    allowed = appsettings.kinds_parse(state.allow) if state.strict else frozenset()
    parsed: dict = {}
    violations: list = []

    for path in state.sourceFiles:
        relpath = path.relative_to(state.inputdir).as_posix()
        try:
            source = path.read_text(encoding=appsettings.encoding)
        except (OSError, UnicodeDecodeError) as e:
            LOG(f"Skipping {relpath}: {e}", level=2)
            continue

        directives = parse(source)
        if not directives:
            continue

        LOG(f"{relpath}: {len(directives)} directives", level=2)
        parsed[relpath] = directives

        if state.strict:
            violations.extend((relpath, directive) for directive in violations_find(directives, allowed))

    state.parsedSources = parsed
    state.violations = violations
    return state


def report_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the JSON report.

    Args:
        inputstate: Program state with parsedSources and violations

    Returns:
        ProgramState with added field:
            - reportResult: Dict containing output_file, file_count,
                            directive_count and violation_count

    Exits:
        1 if parsedSources is None or the report cannot be written
    """

    state = inputstate.copy()

    if state.parsedSources is None:
        print("Error: No scan results available", file=sys.stderr)
        sys.exit(1)

    directive_count = sum(len(directives) for directives in state.parsedSources.values())
    report = {
        "files": {
            relpath: [directive.to_dict() for directive in directives]
            for relpath, directives in state.parsedSources.items()
        },
        "violations": [
            {"file": relpath, **directive.to_dict()} for relpath, directive in state.violations
        ],
        "file_count": len(state.parsedSources),
        "directive_count": directive_count,
        "strict": state.strict,
        "allowed_kinds": sorted(appsettings.kinds_parse(state.allow)) if state.strict else None,
    }

    try:
        state.reportOutputFile.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        print(f"Error writing report: {e}", file=sys.stderr)
        sys.exit(1)

    state.reportResult = {
        "output_file": str(state.reportOutputFile),
        "file_count": len(state.parsedSources),
        "directive_count": directive_count,
        "violation_count": len(state.violations),
    }
    LOG(f"Report written: {state.reportOutputFile}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display scan results to the user.

    Args:
        inputstate: Program state with reportResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if reportResult is None or strict mode found disallowed kinds
    """
    state: ProgramState = inputstate.copy()
    if not state.reportResult:
        print("Error: Scan failed", file=sys.stderr)
        sys.exit(1)

    if state.show:
        for relpath, directives in state.parsedSources.items():
            for directive in directives:
                print(f"{relpath}:{directive.line}:{directive.column}: {directive_highlight(directive)}")

    LOG("\n✓ Scan complete", level=1)
    LOG(f"  Report:     {state.reportResult['output_file']}", level=1)
    LOG(f"  Files:      {state.reportResult['file_count']}", level=1)
    LOG(f"  Directives: {state.reportResult['directive_count']}", level=1)

    if state.violations:
        for relpath, directive in state.violations:
            print(f"{relpath}: {DisallowedDirectiveKind(directive)}", file=sys.stderr)
        sys.exit(1)

    return state


@chris_plugin(
    parser=parser,
    title="cttt - directive comment scanner",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - scan inputdir for directives and report to outputdir.

    Orchestrates the full pipeline:
        1. env_check: Validate paths and select files
        2. sources_scan: Extract directives from each file
        3. report_write: Write the JSON report
        4. results_report: Display results, fail on strict violations

    Args:
        options: CLI arguments from argparse
            - pattern: Optional[str] - File glob
            - strict: bool - Enable allow-list checking
            - allow: Optional[str] - Comma-separated allow-list
            - reportFile: Optional[str] - Report filename
            - show: bool - Print highlighted directive lines
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing source files
        outputdir: Directory where the report will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, sources_scan, report_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
