"""Lightweight wall-clock profiling of the phases of one analysis run."""
import time

import pandas as pd
import numpy as np


class PerformanceTimer:
    """
    Tracks which phase of a run is taking a long time, with only a few
    additional lines of monitoring code.

    Use record_timepoint at key moments, supplying a short message that
    indicates what has just completed. Use report (as_string=True) to get a
    markdown table of times, on the basis of *pairs* of consecutive
    timepoints. Included are total time spent (seconds), average time per
    occurrence, frequency of occurrence, and fraction of the whole.
    """
    def __init__(self):
        self.times: dict[tuple[str, str], list[float]] = {}
        self.previous_time: float | None = None
        self.previous_message: str | None = None
        self.message_order: dict[str, int] = {}

    def record_timepoint(self, message: str) -> None:
        now = time.perf_counter()
        if self.previous_time is not None:
            transition = (message, self.previous_message)
            self.times.setdefault(transition, []).append(now - self.previous_time)
        self.previous_time = now
        self.previous_message = message
        if message not in self.message_order:
            self.message_order[message] = len(self.message_order)

    def report(self, as_string=False, by=None):
        transitions = sorted(
            list(self.times.keys()),
            key=lambda x: (self.message_order[x[0]], self.message_order[x[1]]),
        )
        records = []
        all_totals = sum(np.sum(self.times[t]) for t in transitions)
        for transition in transitions:
            total = np.sum(self.times[transition])
            frequency = len(self.times[transition])
            records.append({
                'from': transition[1],
                'to': transition[0],
                'average time spent': total / frequency,
                'total time spent': total,
                'frequency': frequency,
                'fraction': total / all_totals if all_totals > 0 else 0.0,
            })
        df = pd.DataFrame(records)
        if by in ['average time spent', 'total time spent', 'frequency']:
            df.sort_values(by=by, inplace=True, ascending=False)
        if as_string:
            return df.to_markdown(index=False)
        return df
