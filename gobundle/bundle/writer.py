from pathlib import Path

from loguru import logger


def write_bundle(text: str, output_file: Path) -> Path:
    """Write bundle text to ``output_file`` as UTF-8 and return the path."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    logger.info(f"Wrote {len(text.encode('utf-8'))} bytes to {output_file}")
    return output_file
