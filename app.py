import argparse
import json
import sys
from typing import List, Optional

import cv2

from config import AppSettings, get_settings
from exceptions import LandmarkFileError, PostureAnalysisError
from image_io import load_image, save_image
from log_config import get_logger, setup_logging
from pose_types import LandmarkSet
from scorer import PostureScorer
from ui import draw_score_panel, format_report_lines
from visualization import draw_pose, draw_reference_line

logger = get_logger(__name__)


def load_landmarks_json(path: str) -> LandmarkSet:
    """Read landmarks exported by a detector.

    Accepts a list of 33 ``{x, y, z, visibility}`` objects, or a MoveNet export
    ``{"keypoints": [...], "width": W, "height": H}`` in pixel units.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise LandmarkFileError(f"Could not read landmarks from {path}: {e}") from e

    try:
        if isinstance(data, dict) and "keypoints" in data:
            return LandmarkSet.from_movenet(data["keypoints"], data["width"], data["height"])
        if isinstance(data, dict) and "landmarks" in data:
            data = data["landmarks"]
        if not isinstance(data, list):
            raise LandmarkFileError(f"No landmark list found in {path}")
        return LandmarkSet(data)
    except (KeyError, TypeError, ValueError) as e:
        raise LandmarkFileError(f"Malformed landmark file {path}: {e}") from e


def _detect_landmarks(image, model_path: Optional[str]) -> LandmarkSet:
    # Imported here so landmark-JSON runs never load the MediaPipe runtime.
    from pose_detection import PoseDetector

    with PoseDetector(model_path=model_path) as detector:
        return detector.detect(image)


def build_parser(settings: Optional[AppSettings] = None) -> argparse.ArgumentParser:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(
        prog="kendall-posture",
        description=f"{settings.APP_NAME}: Kendall lateral-view posture assessment from a side photo.",
    )
    parser.add_argument(
        "--version", action="version", version=f"{settings.APP_NAME} {settings.APP_VERSION}"
    )
    parser.add_argument("image", nargs="?", help="Side-view photo of a standing person")
    parser.add_argument("--landmarks", help="Score pre-computed landmarks from a JSON file")
    parser.add_argument("--side", choices=["left", "right"], help="Body side facing the camera")
    parser.add_argument("--min-visibility", type=float, help="Treat landmarks below this visibility as missing")
    parser.add_argument("--model", help="Path to a pose_landmarker .task model")
    parser.add_argument("--output", help="Write an annotated image to this path")
    parser.add_argument("--show", action="store_true", help="Show the annotated image in a window")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if not args.image and not args.landmarks:
        parser.error("an image or --landmarks is required")
    if not args.image and (args.output or args.show):
        parser.error("--output and --show need an image to annotate")

    setup_logging(
        level=args.log_level or settings.LOG_LEVEL,
        json_output=settings.JSON_LOGS,
        log_file=settings.LOG_FILE,
    )

    side = args.side or settings.POSTURE_SIDE
    min_visibility = args.min_visibility if args.min_visibility is not None else settings.POSTURE_MIN_VISIBILITY
    scorer = PostureScorer(side=side, min_visibility=min_visibility)

    try:
        image = load_image(args.image) if args.image else None
        if args.landmarks:
            landmarks = load_landmarks_json(args.landmarks)
        else:
            landmarks = _detect_landmarks(image, args.model or settings.POSTURE_MODEL_PATH)
        report = scorer.evaluate(landmarks)
    except PostureAnalysisError as e:
        logger.debug("Analysis failed", exc_info=True)
        print(f"Analysis failed: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        for line in format_report_lines(report):
            print(line)

    if image is not None and (args.output or args.show):
        draw_reference_line(image, landmarks, side)
        draw_pose(image, landmarks, visibility_threshold=settings.POSTURE_DRAW_VISIBILITY)
        draw_score_panel(image, report)
        if args.output:
            try:
                save_image(args.output, image)
            except PostureAnalysisError as e:
                print(f"Analysis failed: {e}", file=sys.stderr)
                return 1
            logger.info("Annotated image written to %s", args.output)
        if args.show:
            cv2.imshow("Kendall posture", image)
            cv2.waitKey(0)
            cv2.destroyAllWindows()

    return 0


if __name__ == "__main__":
    sys.exit(main())
