"""
Run configuration for the command line pipeline.
"""

from dataclasses import dataclass
from typing import Optional

from .logging_system import LogLevel


@dataclass
class RunConfig:
    """Everything one parse/differentiate/render run needs"""
    expression: str
    variable: str = 'x'
    optimized: bool = False
    output_stem: str = 'expression'
    render_png: bool = False
    log_level: LogLevel = LogLevel.MODERATE
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate fields after initialization"""
        if not self.expression or not self.expression.strip():
            raise ValueError("expression must not be empty")
        if not self.variable.isidentifier():
            raise ValueError(f"variable must be an identifier, got {self.variable!r}")
        if not self.output_stem:
            raise ValueError("output_stem must not be empty")

    @property
    def derivative_stem(self) -> str:
        return f"{self.output_stem}-derivative"
