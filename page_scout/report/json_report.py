# page_scout/report/json_report.py

"""
Writing extraction results to JSON files for PageScout.
"""
from pathlib import Path
from typing import Any

from page_scout.serialize import serialize


def render_json(result: Any, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *result* (a snapshot ElementNode, a ContentExtractionResult or plain data)
    as JSON at the given path.

    :param result: extraction result to store
    :param output_path: path of the JSON file
    :param pretty: indent the JSON with two spaces
    :return: Path of the saved file

    Example:
    ```python
    from page_scout.report.json_report import render_json
    report_path = render_json(engine.markdown(capture), 'reports/page.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    # serialize first so a failure leaves no half-written file behind
    text = serialize(result, pretty=pretty)
    output.write_text(text, encoding="utf-8")

    return output
