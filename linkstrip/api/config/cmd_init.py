"""Write the default configuration file."""

from collections.abc import Iterator

from ...utils.logger import get_logger
from ..StageResult import StageResult
from .._output_schemas.config import ConfigInitOutput
from .LinkstripConfig import LinkstripConfig

logger = get_logger("config.cmd_init")


def cmd_init(force: bool = False) -> StageResult:
    """Create config.json with default values.

    Args:
        force: Overwrite an existing config file
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = LinkstripConfig.get_config_path()
        yield (0.3, "Checking for existing configuration...")
        if path.exists() and not force:
            yield (1.0, "Complete")
            result_obj.result = f"Config already exists at {path} (use --force to overwrite)"
            result_obj.output = ConfigInitOutput(
                errors=[f"Config file already exists: {path}"],
                warnings=[],
                config_path=str(path),
                created=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Writing default configuration...")
        try:
            LinkstripConfig().save()
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigInitOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(path),
                created=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        logger.info("Wrote default config to %s", path)
        yield (1.0, "Complete")
        result_obj.result = f"Wrote default configuration to {path}"
        result_obj.output = ConfigInitOutput(
            errors=[],
            warnings=[],
            config_path=str(path),
            created=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
