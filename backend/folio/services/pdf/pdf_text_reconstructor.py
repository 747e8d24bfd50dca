"""
Reading-order reconstruction for PDF pages.

PDF readers report text as unordered runs, each positioned by its baseline
origin in bottom-up page coordinates. Runs are flipped to top-down, sorted
top to bottom, and grouped into lines: a run joins the current line while
its vertical position is at most ``line_threshold`` from the line's first
run. Runs on a line are read left to right.

Only geometry is used: there is no font or script-direction awareness, so
right-to-left scripts and multi-column layouts come out in the wrong order.
"""

from typing import List, Optional, Sequence

from ...config import LINE_THRESHOLD
from ...models.text_runs import Line, TextRun


def escape_text(text: str) -> str:
    """Escape angle brackets only; other characters pass through unchanged"""
    return text.replace("<", "&lt;").replace(">", "&gt;")


class PDFTextReconstructor:
    def __init__(self, line_threshold: float = LINE_THRESHOLD):
        if line_threshold <= 0:
            raise ValueError("line_threshold must be positive")
        self.line_threshold = line_threshold

    def _top_down_y(self, run: TextRun, page_height: Optional[float]) -> float:
        if page_height is None:
            return run.position.y
        return page_height - run.position.y

    def group_lines(
        self, runs: Sequence[TextRun], page_height: Optional[float] = None
    ) -> List[Line]:
        """
        Order runs and split them into lines.

        Args:
            runs: Text runs for one page, in any order
            page_height: Height used to flip bottom-up y into top-down y.
                Pass None when the runs already carry top-down y values.

        Returns:
            List[Line]: Lines from top to bottom, each with runs left to right
        """
        positioned = [(self._top_down_y(run, page_height), run) for run in runs]
        positioned.sort(key=lambda p: (p[0], p[1].position.x, p[1].text))

        lines: List[Line] = []
        current: Optional[Line] = None
        for y, run in positioned:
            if current is None or abs(y - current.anchor_y) > self.line_threshold:
                current = Line(anchor_y=y)
                lines.append(current)
            current.runs.append(run)

        # A line spans up to the threshold in y, so its runs are not yet in x order
        for line in lines:
            line.runs.sort(key=lambda r: r.position.x)

        return lines

    def render_line(self, line: Line) -> str:
        spans = "".join(
            f'<span class="pdf-text">{escape_text(run.text)}</span>' for run in line.runs
        )
        return f'<div class="pdf-line">{spans}</div>'

    def reconstruct(
        self, runs: Sequence[TextRun], page_height: Optional[float] = None
    ) -> str:
        """
        Build page markup from text runs.

        Each line becomes one ``pdf-line`` block inside a ``pdf-page``
        wrapper; lines whose text is blank are dropped.
        """
        blocks = [
            self.render_line(line)
            for line in self.group_lines(runs, page_height)
            if line.text.strip()
        ]
        return '<div class="pdf-page">' + "".join(blocks) + "</div>"
