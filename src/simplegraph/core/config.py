"""
Graph configuration.

Settings are plain dataclasses. Documents coming from outside the process,
such as CLI input or JSON files, go through :meth:`GraphSettings.from_dict`,
which validates them against :data:`SETTINGS_SCHEMA` before any graph is
built.
"""

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "directed": {"type": "boolean"},
        "synchronized": {"type": "boolean"},
        "fair": {"type": "boolean"},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphSettings:
    """
    Configuration of a graph built by :class:`~simplegraph.core.builder.GraphBuilder`.

    Attributes:
        directed (bool): Orientation of the graph
        synchronized (bool): Wrap the graph in a read/write lock
        fair (bool): Admit lock waiters in arrival order
    """

    directed: bool = False
    synchronized: bool = False
    fair: bool = False

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.fair and not self.synchronized:
            raise ConfigurationError("fair locking requires synchronized=True")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphSettings":
        """
        Build settings from an untrusted mapping.

        Args:
            data (Mapping[str, Any]): Settings document; missing keys keep
                their defaults

        Returns:
            GraphSettings: Validated settings

        Raises:
            ConfigurationError: If the document does not match the schema
        """
        try:
            validate(instance=dict(data), schema=SETTINGS_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph settings: {e.message}") from e
        except TypeError as e:
            raise ConfigurationError(f"Invalid graph settings: {e}") from e

        settings = cls(**data)
        logger.debug("Loaded graph settings %s", settings)
        return settings

    @classmethod
    def from_json(cls, text: str) -> "GraphSettings":
        """Build settings from a JSON document."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in graph settings: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError("Graph settings must be a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
