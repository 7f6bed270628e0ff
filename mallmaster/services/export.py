"""Data export: analytics snapshot -> CSV."""

from __future__ import annotations

import csv
import io

from mallmaster.schemas.analytics import AnalyticsSnapshot

CSV_HEADER = ("section", "key", "value")


def export_analytics_csv(snapshot: AnalyticsSnapshot) -> bytes:
    """Flatten a snapshot into section,key,value rows."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_HEADER)

    writer.writerow(("range", snapshot.time_range.value, snapshot.date_range_label))
    for key, value in snapshot.metrics.model_dump().items():
        writer.writerow(("metrics", key, value))

    demo = snapshot.demographics
    for a in demo.age:
        writer.writerow(("age", a.range, f"{a.percentage:.1f}"))
    for g in demo.gender:
        writer.writerow(("gender", g.type, f"{g.percentage:.1f}"))
    for loc in demo.location:
        writer.writerow(("location", loc.area, f"{loc.percentage:.1f}"))

    for area, minutes in zip(snapshot.dwell_time.areas, snapshot.dwell_time.values):
        writer.writerow(("dwell_time", area, f"{minutes:.1f}"))

    for p in snapshot.heatmap:
        writer.writerow(("heatmap", f"{p.floor}:{p.x}:{p.y}", f"{p.intensity:.1f}"))

    return buf.getvalue().encode("utf-8")
