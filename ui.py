from typing import List

import cv2

from scorer import PostureReport


def format_report_lines(report: PostureReport) -> List[str]:
    lines = [f"Total score: {report.rounded_total}/100 ({report.total_tier.value})"]
    for item in report.details:
        lines.append(
            f"{item.name}: {item.score:.0f}/100 {item.tier.marker} {item.description}"
        )
    return lines


def draw_score_panel(frame, report: PostureReport, panel_width: int = 360) -> None:
    height, width = frame.shape[:2]
    x0 = max(0, width - panel_width)
    cv2.rectangle(frame, (x0, 0), (width, height), (30, 30, 30), -1)
    cv2.rectangle(frame, (x0, 0), (width, height), (80, 80, 80), 2)

    y = 30
    cv2.putText(frame, "Kendall lateral view", (x0 + 12, y), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
    y += 32
    cv2.putText(
        frame,
        f"Total: {report.rounded_total}/100",
        (x0 + 12, y),
        cv2.FONT_HERSHEY_SIMPLEX,
        0.8,
        report.total_tier.color,
        2,
    )
    y += 30

    # OpenCV's Hershey fonts only cover ASCII, so the tier name stands in for the marker.
    for item in report.details:
        cv2.putText(frame, item.name, (x0 + 12, y), cv2.FONT_HERSHEY_SIMPLEX, 0.55, (220, 220, 220), 1)
        cv2.putText(
            frame,
            f"{item.score:.0f}  {item.tier.value}",
            (x0 + 220, y),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.55,
            item.tier.color,
            1,
        )
        y += 24
