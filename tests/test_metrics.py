from __future__ import annotations

from components import metrics
from components.metrics import Kpi


class FakeColumn:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_kpi_help_becomes_card_tooltip(monkeypatch):
    rendered = []
    monkeypatch.setattr(metrics.st, "columns", lambda n: [FakeColumn() for _ in range(n)])
    monkeypatch.setattr(metrics.st, "markdown", lambda body, **kwargs: rendered.append(body))

    metrics.render_kpi_row(
        [
            Kpi("Pending", "$1,000.00", help='Awaiting "payment"'),
            Kpi("Total Invoices", "14"),
        ]
    )

    assert len(rendered) == 2
    assert 'title="Awaiting &quot;payment&quot;"' in rendered[0]
    assert "$1,000.00" in rendered[0]
    assert 'title=""' in rendered[1]
