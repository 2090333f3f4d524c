"""Strip file API command.

CLI: linkstrip strip file <path> [--output OUT] [--dry-run] [--[no-]hyperlinks] [--[no-]wikilinks]
"""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from .._output_schemas.strip import StripFileOutput
from .apply_overrides import apply_overrides
from .strip_text import strip_text

logger = get_logger("strip.cmd_file")


def cmd_file(
    path: str,
    output: str | None = None,
    dry_run: bool = False,
    hyperlinks: bool | None = None,
    wikilinks: bool | None = None,
) -> StageResult:
    """Remove links from a Markdown file.

    Args:
        path: File to read (UTF-8)
        output: Write here instead of overwriting path
        dry_run: Report what would change without writing
        hyperlinks: Override the configured hyperlink pass toggle
        wikilinks: Override the configured wikilink pass toggle
    """

    def _failure(result_obj: StageResult, message: str) -> None:
        result_obj.output = StripFileOutput(
            errors=[message],
            warnings=[],
            path=path,
            output_path="",
            changed=False,
            dry_run=dry_run,
            passes=[],
            chars_before=0,
            chars_after=0,
        ).model_dump(mode="python")
        result_obj.result = f"Strip failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.LinkstripConfig import LinkstripConfig

        yield (0.1, "Loading configuration...")
        try:
            config = apply_overrides(LinkstripConfig.load(), hyperlinks, wikilinks)
        except ValueError as e:
            _failure(result_obj, f"Failed to load config: {e}")
            return

        yield (0.3, "Reading file...")
        source = Path(path).expanduser()
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            _failure(result_obj, f"Cannot read {path}: {e}")
            return

        yield (0.6, "Removing links...")
        report = strip_text(text, config)

        target = Path(output).expanduser() if output else source
        warnings: list[str] = []
        if not report.passes:
            warnings.append("All passes are disabled")

        written = ""
        if report.changed or output:
            written = str(target)
            if dry_run:
                yield (0.9, "Dry run, skipping write...")
            else:
                yield (0.9, "Writing file...")
                try:
                    target.write_text(report.text, encoding="utf-8")
                except OSError as e:
                    _failure(result_obj, f"Cannot write {target}: {e}")
                    return
                logger.info("Wrote %s (%d -> %d chars)", target, len(text), len(report.text))

        yield (1.0, "Complete")
        result_obj.output = StripFileOutput(
            errors=[],
            warnings=warnings,
            path=path,
            output_path=written,
            changed=report.changed,
            dry_run=dry_run,
            passes=list(report.passes),
            chars_before=len(text),
            chars_after=len(report.text),
        ).model_dump(mode="python")
        if report.changed:
            result_obj.result = f"Links removed from {path}"
        else:
            result_obj.result = f"No links found in {path}"
        result_obj.success = True

    return StageResult(
        announce=f"Removing links from {path}...",
        progress_callback=do_work,
    )
