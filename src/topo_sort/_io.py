import logging
import tomllib
from collections.abc import Iterable
from pathlib import Path

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._errors import InputError
from ._store import TopoSort

logger = logging.getLogger(__name__)


class DependencyFile(BaseModel):
    """Layout of a dependency file.

    Example:
        [dependencies]
        A = []
        B = ["A"]

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    dependencies: dict[str, list[str]] = Field(default_factory=dict)


class OrderFile(BaseModel):
    """Layout of a sort result file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    cycle_detected: bool
    order: list[str]
    unresolved: list[str] = Field(default_factory=list)


def load_store_from_toml(input_path: Path) -> TopoSort[str]:
    """Load a dependency store from a TOML file.

    Args:
        input_path: Path to a TOML file with a ``[dependencies]`` table.

    Returns:
        A store with one node per key of the table.

    Raises:
        InputError: If the file cannot be read, is not valid TOML or does not
            match `DependencyFile`.

    """
    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except OSError as e:
        msg = f"Cannot read {input_path}: {e.strerror or e}"
        raise InputError(msg) from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise InputError(msg) from e

    try:
        dependency_file = DependencyFile.model_validate(toml_contents)
    except ValidationError as e:
        msg = f"Invalid dependency file {input_path}: {e}"
        raise InputError(msg) from e

    store = TopoSort.from_map(dependency_file.dependencies)
    logger.debug("Loaded %d nodes from %s", len(store), input_path)
    return store


def export_order_to_toml(
    order: Iterable[str],
    output_path: Path,
    *,
    unresolved: Iterable[str] = (),
) -> None:
    """Write a sort result to a TOML file.

    Args:
        order: Nodes in the order they were resolved.
        output_path: Destination file; parent directories are created.
        unresolved: Nodes left over because of a cycle. A non-empty value marks
            the result as cyclic.

    """
    unresolved_nodes = sorted(unresolved)
    result = OrderFile(
        cycle_detected=bool(unresolved_nodes),
        order=list(order),
        unresolved=unresolved_nodes,
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as f:
        tomli_w.dump(result.model_dump(), f)

    logger.debug(f"Exported order to {output_path}")
