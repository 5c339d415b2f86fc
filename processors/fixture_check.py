"""
Self-test against a known pair of subtitle files.

Given an input file that players show incorrectly and the hand-fixed version
of it, converts the input and compares the result line by line.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from core.subtitle_formats import SBVCodec
from utils.constants import FIXTURE_EXPECTED_NAME, FIXTURE_INPUT_NAME, SBV_LINE_SEPARATOR
from utils.file_operations import FileHandler
from utils.logging_config import get_logger
from .converter import RTLConverter, RTLFixError, normalize_ellipsis

logger = get_logger(__name__)

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


@dataclass
class FixtureReport:
    """Result of comparing converted output with the expected output."""
    converted: str
    expected: str
    differences: List[Tuple[int, str, str]] = field(default_factory=list)  # (line index, converted, expected)
    extra_converted: List[Tuple[int, str]] = field(default_factory=list)
    extra_expected: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.converted == self.expected

    def format(self, show_diff: bool = False) -> str:
        """Render the report the way the self-test command prints it."""
        if self.ok:
            return "OK"

        lines = ["FAIL"]
        if not show_diff:
            return lines[0]

        for index, converted_line, expected_line in self.differences:
            lines.append(f"----- {index} -----")
            lines.append(f"converted:\n{converted_line}")
            lines.append(f"expected:\n{expected_line}")

        if self.extra_converted:
            lines.append(f"{len(self.extra_converted)} lines more in converted:")
            lines.extend(f"{index}: {line}" for index, line in self.extra_converted)
        elif self.extra_expected:
            lines.append(f"{len(self.extra_expected)} lines more in expected:")
            lines.extend(f"{index}: {line}" for index, line in self.extra_expected)

        return '\n'.join(lines)


class FixtureChecker:
    """Runs the converter over a known input and checks the known output."""

    def __init__(self, converter: Optional[RTLConverter] = None):
        self.converter = converter or RTLConverter()

    def run(self, input_path: Optional[Path] = None,
            expected_path: Optional[Path] = None) -> FixtureReport:
        """
        Convert input_path and compare it with expected_path.

        Args:
            input_path: Known input (defaults to the bundled original.sbv)
            expected_path: Known output (defaults to the bundled result.sbv)

        Returns:
            FixtureReport with the line differences

        Raises:
            RTLFixError: If either file cannot be read
        """
        input_path = input_path or FIXTURES_DIR / FIXTURE_INPUT_NAME
        expected_path = expected_path or FIXTURES_DIR / FIXTURE_EXPECTED_NAME

        converted = self.converter.convert_path(input_path)
        try:
            expected = FileHandler.read_text(expected_path)
        except IOError as e:
            raise RTLFixError(f"Cannot read {expected_path}: {e}") from e

        expected = SBVCodec.normalize_line_endings(normalize_ellipsis(expected))
        report = self.compare(converted, expected)

        if report.ok:
            logger.info(f"Self-test passed: {input_path.name} matches {expected_path.name}")
        else:
            logger.warning(f"Self-test failed: {len(report.differences)} differing lines")
        return report

    @staticmethod
    def compare(converted: str, expected: str) -> FixtureReport:
        """Compare two documents line by line."""
        converted_lines = converted.split(SBV_LINE_SEPARATOR)
        expected_lines = expected.split(SBV_LINE_SEPARATOR)
        common = min(len(converted_lines), len(expected_lines))

        report = FixtureReport(converted=converted, expected=expected)
        report.differences = [
            (i, converted_lines[i], expected_lines[i])
            for i in range(common)
            if converted_lines[i] != expected_lines[i]
        ]
        report.extra_converted = [(i, converted_lines[i]) for i in range(common, len(converted_lines))]
        report.extra_expected = [(i, expected_lines[i]) for i in range(common, len(expected_lines))]
        return report
