# js_scout/report/text_report.py

"""
Списки URL в текстовых файлах: один абсолютный URL на строку, без заголовка.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Union

ALL_JS = "all"
GOOD_JS = "good"
BAD_JS = "bad"


def list_paths(domain: str, output_dir: Union[str, Path] = ".") -> Dict[str, Path]:
    """Имена файлов ``<domain>_all_js.txt``, ``<domain>_good_js.txt``, ``<domain>_bad_js.txt``."""
    base = Path(output_dir)
    return {kind: base / f"{domain}_{kind}_js.txt" for kind in (ALL_JS, GOOD_JS, BAD_JS)}


def render_list(urls: Iterable[str], output_path: Union[str, Path]) -> Path:
    """
    Записывает URL (отсортированные) в файл и возвращает его Path.

    OSError при создании файла не перехватывается.
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        for url in sorted(urls):
            f.write(f"{url}\n")
    return output
