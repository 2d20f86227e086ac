"""Load DMS config and return schema-conformant error output on failure."""

from typing import Any

from pydantic import BaseModel

from .DmsConfig import DmsConfig


def load_config_with_output(output_cls: type[BaseModel], **empty_fields: Any) -> tuple[DmsConfig | None, dict | None]:
    """Return ``(config, None)`` or ``(None, output)`` where ``output`` carries the load error.

    ``empty_fields`` fill the command-specific fields of ``output_cls``.
    """
    try:
        config = DmsConfig.load()
        return config, None
    except ValueError as e:
        output = output_cls(errors=[str(e)], warnings=[], **empty_fields).model_dump(mode="python")
        return None, output
