"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .MdlinksConfig import MdlinksConfig


def cmd_show(section: str = "") -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names, otherwise returns specific section.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(MdlinksConfig.get_config_path())

        yield (0.3, "Loading configuration...")
        try:
            config = MdlinksConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)], warnings=[], section=section, content={}, config_path=config_path
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())

        if section == "":
            yield (1.0, "Complete")
            result_obj.result = f"Found {len(available_sections)} section(s)"
            result_obj.output = ConfigShowOutput(
                errors=[],
                warnings=[],
                section="",
                content={"sections": available_sections},
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.success = True
            return

        if section not in available_sections:
            yield (1.0, "Complete")
            result_obj.result = f"Section '{section}' not found"
            result_obj.output = ConfigShowOutput(
                errors=[f"Unknown section: {section}"],
                warnings=[],
                section=section,
                content={},
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Retrieved configuration for '{section}'"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=[],
            section=section,
            content=config_dict[section],
            config_path=config_path,
        ).model_dump(mode="python")
        result_obj.success = True

    announce = (
        "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    )
    return StageResult(announce=announce, progress_callback=do_work)
