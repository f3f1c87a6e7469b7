#!/usr/bin/env python3
"""
mdlive - Markup to HTML converter with live reload

Converts a small line-oriented markup language (headings, lists, fenced code,
paragraphs, horizontal rules, bold/italic/link/code spans) into a single
standalone HTML file with an embedded style sheet.

In watch mode the converter keeps running: every change to the source file
re-renders the output, and browsers viewing http://localhost:8080 reload
themselves through a /reload event stream.

Usage:
    mdlive notes.md notes.html

Examples:
    # One-off conversion
    mdlive README.md README.html

    # Custom style sheet
    mdlive README.md README.html --config dark.css

    # Live preview with automatic browser refresh
    mdlive README.md README.html --watch

    # Verbose output
    mdlive README.md README.html -w -vv
"""

import sys
import time
from pathlib import Path
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .config import appsettings
from .lib import Converter, ReloadSignal, server_start, watcher_start, __version__, LOG, state_connectToLogger
from .lib.style import StyleError, style_load
from .models import ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    prog="mdlive",
    description="mdlive - convert markup into a standalone HTML document, optionally with live reload",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument("input", type=str, help="Markup source file")

parser.add_argument("output", type=str, help="HTML file to write")

parser.add_argument(
    "-w",
    "--watch",
    action="store_true",
    help="Keep running: re-convert on change and serve with automatic browser reload",
)

parser.add_argument(
    "-c",
    "--config",
    default=None,
    type=str,
    help="CSS file replacing the built-in style sheet",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markup source
            - outputFile: Path of the HTML output
            - envOK: True if environment is valid

    Exits:
        1 if the input file is missing
    """

    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = Path(state.input)
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.outputFile = Path(state.output)
    LOG(f"Output file: {state.outputFile}", level=2)

    state.envOK = True
    return state


def stylesheet_load(inputstate: ProgramState) -> ProgramState:
    """
    Load the style sheet: the built-in default or the --config override.

    Returns:
        ProgramState with added field:
            - styleText: raw CSS for the <style> block

    Exits:
        1 if the style sheet cannot be read
    """

    state = inputstate.copy()

    try:
        state.styleText = style_load(state.config)
    except StyleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def markdown_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert the markup source and write the HTML document.

    The live-reload script is included only in watch mode.

    Returns:
        ProgramState with added field:
            - convertResult: Dict containing:
                - status: bool (conversion success)
                - output_file: str (path to the written document)
                - line_count: int (number of source lines)

    Exits:
        1 if the source cannot be read or the output cannot be written
    """

    state = inputstate.copy()

    LOG("Converting markup to HTML...", level=1)

    converter = Converter(state.input, state.outputFile, state.styleText, live=state.watch)
    try:
        state.convertResult = converter.convert()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Conversion error: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results.

    Exits:
        1 if convertResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.convertResult:
        print("Error: Conversion failed", file=sys.stderr)
        sys.exit(1)

    LOG("✓ Conversion successful!", level=1)
    LOG(f"  Output: {state.convertResult['output_file']}", level=1)
    LOG(f"  Lines:  {state.convertResult['line_count']}", level=2)
    return state


def live_serve(inputstate: ProgramState) -> ProgramState:
    """
    Serve the document and re-convert on every source change.

    No-op unless --watch was given. Otherwise blocks until interrupted:
    the server and the file watcher run on their own threads and share a
    single ReloadSignal.

    Exits:
        1 if the server cannot bind or the watch cannot be set up
    """
    state: ProgramState = inputstate.copy()
    if not state.watch:
        return state

    signal = ReloadSignal()

    try:
        httpd = server_start(state.outputFile, signal, state=state)
    except OSError as e:
        print(f"Error: Failed to start server: {e}", file=sys.stderr)
        sys.exit(1)
    LOG(f"Serving on {appsettings.serverURL_make()}", level=1)

    converter = Converter(state.input, state.outputFile, state.styleText, live=True)
    try:
        observer = watcher_start(state.inputSourceFile, converter.convert, signal, state=state)
    except OSError as e:
        print(f"Error: Failed to watch {state.inputSourceFile}: {e}", file=sys.stderr)
        httpd.shutdown()
        httpd.server_close()
        sys.exit(1)

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        LOG("Shutting down...", level=1)
    finally:
        observer.stop()
        observer.join()
        httpd.shutdown()
        httpd.server_close()

    return state


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point - convert a markup file, then optionally watch and serve.

    Orchestrates the full pipeline:
        1. env_check: Validate paths
        2. stylesheet_load: Read default or --config CSS
        3. markdown_convert: Render and write the HTML document
        4. results_report: Display results to user
        5. live_serve: Watch, re-convert and push reloads (--watch only)

    Args:
        argv: Argument list (defaults to sys.argv[1:])
    """
    options = parser.parse_args(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, stylesheet_load, markdown_convert, results_report, live_serve)


if __name__ == "__main__":
    main()
