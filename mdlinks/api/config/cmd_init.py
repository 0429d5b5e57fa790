"""Init configuration command - writes the platform default config."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigInitOutput
from .default_config_dict import default_config_dict
from .MdlinksConfig import MdlinksConfig


def cmd_init(force: bool = False) -> StageResult:
    """Write a default config file unless one exists (or ``force`` is set)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = MdlinksConfig.get_config_path()

        if config_path.exists() and not force:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration already exists at {config_path}"
            result_obj.output = ConfigInitOutput(
                errors=[],
                warnings=["Configuration already exists; use --force to overwrite"],
                config_path=str(config_path),
                created=False,
                content={},
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.4, "Building default configuration...")
        try:
            config = MdlinksConfig(**default_config_dict())
            yield (0.7, "Writing configuration...")
            config.save()
        except (RuntimeError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to write configuration: {e}"
            result_obj.output = ConfigInitOutput(
                errors=[str(e)], warnings=[], config_path=str(config_path), created=False, content={}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Wrote configuration to {config_path}"
        result_obj.output = ConfigInitOutput(
            errors=[],
            warnings=[],
            config_path=str(config_path),
            created=True,
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
