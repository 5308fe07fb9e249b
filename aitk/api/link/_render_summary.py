"""Render the human-readable summary of a link run."""

from collections.abc import Sequence

from ...utils.render_template import render_template
from .ReconcileResult import ReconcileResult
from .ReconcileStatus import ReconcileStatus

SUMMARY_TEMPLATE = """
Linked {{ linked }} of {{ total }} {{ 'entry' if total == 1 else 'entries' }} ({{ language }}): \
{{ counts['created'] }} created, {{ counts['relinked'] }} relinked, \
{{ counts['already-linked'] }} already linked, \
{{ counts['conflict'] }} {{ 'conflict' if counts['conflict'] == 1 else 'conflicts' }}, \
{{ counts['error'] }} {{ 'error' if counts['error'] == 1 else 'errors' }}
{% for item in problems %}
  {{ item.status }} {{ item.name }}: {{ item.reason }}
{% endfor %}
"""


def count_statuses(results: Sequence[ReconcileResult]) -> dict[str, int]:
    counts = {status.value: 0 for status in ReconcileStatus}
    for result in results:
        counts[result.status.value] += 1
    return counts


def _render_summary(language: str, results: Sequence[ReconcileResult]) -> str:
    counts = count_statuses(results)
    problems = [
        {"status": r.status.value, "name": r.spec.display_name, "reason": r.reason} for r in results if not r.ok
    ]
    return render_template(
        SUMMARY_TEMPLATE,
        {
            "language": language,
            "total": len(results),
            "linked": sum(1 for r in results if r.ok),
            "counts": counts,
            "problems": problems,
        },
    )
