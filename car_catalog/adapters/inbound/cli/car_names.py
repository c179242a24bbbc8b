"""Console utility that appends a car name to a JSON list file."""

import json
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv

from car_catalog.infrastructure.config.settings import settings
from car_catalog.infrastructure.logging.logger import logger


def load_car_names(path: Path) -> list[str]:
    """
    Load the stored car names.

    A missing, unreadable or malformed file yields an empty list.

    Args:
        path: JSON file holding an array of strings

    Returns:
        Stored names in file order
    """
    if not path.exists():
        return []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug(f"Ignoring unreadable car names file {path}: {str(e)}")
        return []

    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        logger.debug(f"Ignoring car names file {path}: expected a JSON array of strings")
        return []
    return data


def save_car_names(path: Path, names: list[str]) -> None:
    """
    Rewrite the whole file with the given names, pretty-printed.

    Args:
        path: Target JSON file
        names: Names to store
    """
    path.write_text(json.dumps(names, indent=2, ensure_ascii=False), encoding="utf-8")


def run(
    path: Optional[Path] = None,
    read_input: Callable[[str], str] = input,
    write_output: Callable[[str], None] = print,
) -> list[str]:
    """
    Prompt for a car name, store it, and print the current list.

    Args:
        path: JSON file to use (defaults to CAR_NAMES_FILE setting)
        read_input: Prompt function
        write_output: Output function

    Returns:
        The current list of names
    """
    path = path or Path(settings.car_names_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    names = load_car_names(path)

    write_output("=== Car management system ===")
    write_output("")

    name = read_input("Enter the car name (e.g., Audi A6): ")

    if name and name.strip():
        names.append(name)
        save_car_names(path, names)
        write_output(f"\nAdded successfully: {name}")
    else:
        write_output("\nError: The name cannot be empty.")

    write_output("\nCurrent car list:")
    for car_name in names:
        write_output(f"- {car_name}")

    return names


def main() -> None:
    """Console script entrypoint."""
    load_dotenv()
    run()


if __name__ == "__main__":
    main()
