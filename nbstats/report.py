"""Renderers for a :class:`~nbstats.pipeline.Report`.

Renderers only read the report; every number they print is already
computed. ``TextRenderer`` is the console layout, ``JsonRenderer`` the
machine-readable one.
"""
from __future__ import annotations

import abc
import json
from typing import Any, Dict, List

from config import BAR_WIDTH_50, get_int_setting

from .helpers import bar, fmt_g, format_percent
from .pipeline import Report

VERSION = "1.0.0"
BANNER = f"Newcomb-Benford Stats (v{VERSION})"


class Renderer(abc.ABC):
    @abc.abstractmethod
    def render(self, report: Report) -> str:
        raise NotImplementedError


class TextRenderer(Renderer):
    """Plain-ASCII report: standard analysis, raw frequencies, Benford chart."""

    def __init__(self, bar_width: int | None = None, rule: str = "="):
        self.bar_width = bar_width or get_int_setting("BAR_WIDTH_50", BAR_WIDTH_50, minimum=1)
        self.rule = rule

    def _rule(self) -> str:
        return self.rule * (22 + self.bar_width)

    def render(self, report: Report) -> str:
        lines: List[str] = []
        lines.extend(self._standard(report))
        lines.append("")
        lines.extend(self._benford(report))
        return "\n".join(lines) + "\n"

    def _standard(self, report: Report) -> List[str]:
        s = report.summary
        out = ["Standard Analysis", self._rule()]
        out.append(f"# elements = {s.count}")
        out.append(f"Range = [{fmt_g(s.minimum)} .. {fmt_g(s.maximum)}]")
        out.append(f"Arithmetic mean = {fmt_g(s.mean)}")
        out.append(f"Arithmetic median = {fmt_g(s.median)}")
        out.append(f"Variance = {fmt_g(s.variance)}")
        out.append(f"Standard Deviation = {fmt_g(s.std_dev)}")
        if s.modes.has_mode:
            vals = ", ".join(fmt_g(v) for v in s.modes.values)
            out.append(f"Mode = {{ {vals} }}x{s.modes.frequency}")
        else:
            out.append("Mode = no mode")
        out.append("")
        for d, c in enumerate(report.table.counts, start=1):
            out.append(f" [{d}] = {c}")
        return out

    def _benford(self, report: Report) -> List[str]:
        t = report.table
        scale = 100 if t.exceed50 else 50
        per_cell = scale / self.bar_width
        # axis label every 10 percent
        step = max(1, int(round(10 / per_cell)))
        labels = "".join(str(p).ljust(step) for p in range(0, scale, 10)) + str(scale)
        out = ["Newcomb-Benford's Law Analysis", self._rule()]
        out.append(f"{'exp':>7} dig {'freq':>8}  {labels}")
        out.append("-" * 21 + " +" + ("-" * (step - 1) + "+") * (scale // 10))
        width = 7 if t.saturated else 6
        for d, (e, a) in enumerate(zip(t.expected, t.actual), start=1):
            out.append(
                f"{format_percent(e, width=6)} [{d}] = {format_percent(a, width=width)} |{bar(a, per_cell)}"
            )
        out.append("-" * 21 + " +" + ("-" * (step - 1) + "+") * (scale // 10))
        b = report.benford
        out.append(f"Variance = {b.variance * 100:.5f}%")
        out.append(f"Std. Dev. = {b.deviation * 100:.5f}%")
        out.append(b.conformance.value)
        out.append(self._rule())
        return out


class JsonRenderer(Renderer):
    def __init__(self, indent: int | None = 2):
        self.indent = indent

    @staticmethod
    def to_dict(report: Report) -> Dict[str, Any]:
        s = report.summary
        t = report.table
        b = report.benford
        return {
            "count": s.count,
            "min": s.minimum,
            "max": s.maximum,
            "mean": s.mean,
            "median": s.median,
            "variance": s.variance,
            "std_dev": s.std_dev,
            "mode": {
                "has_mode": s.modes.has_mode,
                "values": list(s.modes.values),
                "frequency": s.modes.frequency,
            },
            "frequency": {
                "counts": list(t.counts),
                "expected_pct": list(t.expected),
                "actual_pct": list(t.actual),
            },
            "benford": {
                "variance": b.variance,
                "deviation": b.deviation,
                "conformance": b.conformance.label,
            },
            "rejected": [
                {"index": r.index, "text": r.text, "reason": r.reason.name.lower()}
                for r in report.rejections
            ],
        }

    def render(self, report: Report) -> str:
        return json.dumps(self.to_dict(report), indent=self.indent) + "\n"
