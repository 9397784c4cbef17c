"""
Plain-text report rendering.
"""

from pathlib import Path
from typing import List

from revelio.core.logger import logger
from revelio.models import UrlResult


SEPARATOR = "---------------------"


def format_result(result: UrlResult) -> str:
    header = f"<{result.url}>\n{SEPARATOR}\n"
    if not result.ok:
        return f"{header}Error: {result.error}\n"
    return header + "\n".join(str(f) for f in result.findings) + "\n"


def format_results(results: List[UrlResult]) -> str:
    return "\n".join(format_result(r) for r in results)


def write_report(filepath: str, report: str) -> str:
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        f.write(report)

    logger.info(f"Output saved to {path}")
    return str(path)
