"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the conversion pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the conversion progresses.

    Pipeline stages and their state additions:
        - Initial: input, output, watch, config, verbosity
        - env_check: inputSourceFile, outputFile, envOK
        - stylesheet_load: styleText
        - markdown_convert: convertResult
        - results_report: (no additions)
        - live_serve: (no additions, blocks while watching)

    Attributes:
        input: Markup source path as given on the command line
        output: Rendered HTML path as given on the command line
        watch: Live mode - keep running, re-convert and push reloads
        config: Optional style sheet overriding the built-in default
        verbosity: Logging verbosity level (1-3)
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the markup source
        outputFile: Resolved path to the rendered HTML
        styleText: CSS inserted into the document <style> block
        convertResult: Conversion results (output_file, line_count, status)
    """

    # CLI arguments
    input: str = field(default="")
    output: str = field(default="")
    watch: bool = field(default=False)
    config: Optional[str] = field(default=None)
    verbosity: int = field(default=1)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    outputFile: Path = field(default=Path("/"))
    styleText: str = field(default="")
    convertResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace.

        Args:
            options: Parsed CLI arguments (input, output, watch, etc.)

        Returns:
            ProgramState instance with all matching CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        return cls(**filtered_options)

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
            stylesheet_load,
            markdown_convert,
            results_report,
            live_serve,
        )

    This is equivalent to:
        live_serve(results_report(markdown_convert(stylesheet_load(env_check(initial_state)))))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
