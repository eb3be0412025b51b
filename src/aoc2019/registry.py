"""Dynamic discovery and registry of puzzle driver modules.

Searches for files matching the pattern 'day*.py' in the days/
subpackage, imports them, and validates they have the required
main() function.
"""

import importlib
import pathlib
import re
import sys
from types import ModuleType

from .config import FIRST_DAY, LAST_DAY
from .errors import PuzzleInputError

DAYS_PACKAGE = "aoc2019.days"


def extract_day_from_filename(filename: str) -> int | None:
    """Extract day number from day<N>.py filename."""
    match = re.fullmatch(r'day(\d+)\.py', filename)
    return int(match.group(1)) if match else None


def is_valid_solution(module: ModuleType) -> bool:
    """Validate module has callable main function."""
    return hasattr(module, 'main') and callable(module.main)


def discover_solutions() -> dict[int, ModuleType]:
    """
    Dynamically discover all puzzle driver modules.

    Returns:
        Dictionary mapping day numbers to driver modules, sorted by day.

    Raises:
        RuntimeError: If no valid drivers are found
    """
    solutions: dict[int, ModuleType] = {}
    days_dir = pathlib.Path(__file__).parent.resolve() / 'days'

    for file_path in days_dir.glob('day*.py'):
        day = extract_day_from_filename(file_path.name)
        if day is None:
            continue

        module_name = f'{DAYS_PACKAGE}.{file_path.stem}'
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            print(f"Warning: Failed to import {module_name}: {e} - skipping", file=sys.stderr)
            continue

        if is_valid_solution(module):
            solutions[day] = module

    if not solutions:
        raise RuntimeError("No valid puzzle drivers found")

    return dict(sorted(solutions.items()))


_SOLUTION_REGISTRY = discover_solutions()


def get_available_days() -> list[int]:
    """Return sorted list of days that have a driver."""
    return list(_SOLUTION_REGISTRY.keys())


def get_solution(day: int) -> ModuleType:
    """
    Get the driver module for a given day.

    Raises:
        PuzzleInputError: If the day has no driver or is not an advent day
    """
    if day in _SOLUTION_REGISTRY:
        return _SOLUTION_REGISTRY[day]
    if FIRST_DAY <= day <= LAST_DAY:
        available = ', '.join(map(str, get_available_days()))
        raise PuzzleInputError(f"No implementation for day {day} yet. Available: {available}")
    raise PuzzleInputError(f"Day {day} is not a valid day for advent of code")
