import html
import time
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from pdfprotect.processor.models import FileRecord

_STYLE = """
  body { font-family: sans-serif; max-width: 800px; margin: 40px auto; color: #1e293b; }
  .entry { border: 1px solid #e2e8f0; border-radius: 8px; padding: 16px; margin-bottom: 16px; }
  .entry img { max-width: 100%; max-height: 80px; margin: 8px 0; }
  td:first-child { font-weight: 600; width: 140px; color: #64748b; }
  .text-ctx { font-family: monospace; font-size: 11px; background: #f1f5f9; padding: 6px 8px; }
"""


def _entry(record: FileRecord) -> str:
    lines = ['<div class="entry">', f"  <h3>{html.escape(record.file_name)}</h3>"]
    if record.screenshot:
        lines.append(f'  <img src="{html.escape(record.screenshot)}" alt="DOB area">')
    output = str(record.output_path) if record.output_path else "Pending"
    rows = [
        ("Extracted DOB:", html.escape(record.dob or "Not found")),
        ("Password:", f"<strong>{html.escape(record.password or 'N/A')}</strong>"),
        ("Detection:", html.escape(record.confidence or "Manual")),
        ("Output file:", html.escape(output)),
    ]
    lines.append("  <table>")
    lines.extend(f"    <tr><td>{label}</td><td>{value}</td></tr>" for label, value in rows)
    lines.append("  </table>")
    if record.text_context:
        lines.append(f'  <div class="text-ctx">{html.escape(record.text_context)}</div>')
    lines.append("</div>")
    return "\n".join(lines)


def build_report_html(records: Iterable[FileRecord], generated_at: datetime | None = None) -> str:
    """Render a review record of every file: DOB, password, detection mode, output and evidence."""
    generated_at = generated_at or datetime.now()
    entries = "\n".join(_entry(record) for record in records)
    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="UTF-8"><title>PDF Protection Report</title>\n'
        f"<style>{_STYLE}</style></head><body>\n"
        "<h1>PDF Protection Report</h1>\n"
        f'<p class="date">Generated: {generated_at:%Y-%m-%d %H:%M:%S}</p>\n'
        f"{entries}\n"
        "</body></html>"
    )


def save_report(output_dir: Path, html_content: str) -> Path:
    report_path = output_dir / f"protection_report_{int(time.time() * 1000)}.html"
    report_path.write_text(html_content, encoding="utf-8")
    return report_path
