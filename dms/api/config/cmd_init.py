"""Write a starter configuration."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigInitOutput
from ..StageResult import StageResult
from .DmsConfig import DmsConfig


def cmd_init(base_dir: str, force: bool = False) -> StageResult:
    """Create ``config.json`` mirroring into ``base_dir``.

    An existing configuration is left alone unless ``force`` is set.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = DmsConfig.get_config_path()
        yield (0.2, "Checking for existing configuration...")
        if config_path.exists() and not force:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration already exists at {config_path}"
            result_obj.output = ConfigInitOutput(
                errors=[],
                warnings=["Use --force to overwrite the existing configuration"],
                config_path=str(config_path),
                created=False,
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.5, "Writing configuration...")
        errors: list[str] = []
        try:
            DmsConfig.default(base_dir).save()
        except (ValueError, RuntimeError) as e:
            errors.append(str(e))

        yield (1.0, "Complete")
        result_obj.result = f"Wrote configuration to {config_path}" if not errors else "Failed to write configuration"
        result_obj.output = ConfigInitOutput(
            errors=errors,
            warnings=[],
            config_path=str(config_path),
            created=not errors,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(announce=f"Initializing configuration for {base_dir}...", progress_callback=do_work)
