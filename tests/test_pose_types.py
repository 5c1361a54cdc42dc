import numpy as np
import pytest

from exceptions import MissingLandmarkError
from pose_types import LANDMARK_COUNT, Landmark, LandmarkSet, PoseLandmark, side_landmark


def test_landmark_set_requires_33_entries():
    with pytest.raises(MissingLandmarkError):
        LandmarkSet([None] * 17)
    with pytest.raises(MissingLandmarkError):
        LandmarkSet([None] * 34)


def test_landmark_set_accepts_mixed_entries():
    entries = [None] * LANDMARK_COUNT
    entries[PoseLandmark.LEFT_EAR] = {"x": 0.4, "y": 0.1, "visibility": 0.8}
    entries[PoseLandmark.LEFT_HIP] = (0.4, 0.5, 0.0, 0.7)
    entries[PoseLandmark.LEFT_KNEE] = Landmark(0.4, 0.7, 0.0, 0.6)
    lms = LandmarkSet(entries)

    assert lms[PoseLandmark.LEFT_EAR] == Landmark(0.4, 0.1, 0.0, 0.8)
    assert lms["left_hip"].visibility == 0.7
    assert lms[PoseLandmark.LEFT_KNEE.value].y == 0.7
    assert lms.get(PoseLandmark.NOSE) is None
    assert len(lms) == LANDMARK_COUNT


def test_mapping_entries_default_to_visible():
    entries = [None] * LANDMARK_COUNT
    entries[PoseLandmark.LEFT_EAR] = {"x": 0.4, "y": 0.1}
    entries[PoseLandmark.LEFT_HIP] = (0.4, 0.5, 0.0)
    lms = LandmarkSet(entries)
    assert lms[PoseLandmark.LEFT_EAR].visibility == 1.0
    assert lms[PoseLandmark.LEFT_HIP].visibility == 1.0


def test_side_landmark():
    assert side_landmark("left", "ear") is PoseLandmark.LEFT_EAR
    assert side_landmark("right", "ankle") is PoseLandmark.RIGHT_ANKLE
    with pytest.raises(ValueError):
        side_landmark("center", "ear")


def test_from_array_round_trip_with_default_visibility():
    arr = np.tile([0.5, 0.25, 0.0], (LANDMARK_COUNT, 1))
    lms = LandmarkSet.from_array(arr)
    assert lms[PoseLandmark.NOSE] == Landmark(0.5, 0.25, 0.0, 1.0)
    out = lms.to_array()
    assert out.shape == (LANDMARK_COUNT, 4)
    assert np.allclose(out[:, 3], 1.0)


def test_from_array_rejects_bad_shape():
    with pytest.raises(ValueError):
        LandmarkSet.from_array(np.zeros((LANDMARK_COUNT, 2)))
    with pytest.raises(MissingLandmarkError):
        LandmarkSet.from_array(np.zeros((17, 4)))


def test_to_array_zero_fills_missing():
    lms = LandmarkSet([None] * LANDMARK_COUNT)
    assert not lms.to_array().any()


def test_from_movenet_maps_and_normalizes():
    keypoints = [{"x": 10.0 * i, "y": 20.0 * i, "score": 0.5} for i in range(17)]
    keypoints[3] = {"x": 80.0, "y": 40.0, "score": 0.9, "name": "left_ear"}
    lms = LandmarkSet.from_movenet(keypoints, width=200, height=400)

    ear = lms[PoseLandmark.LEFT_EAR]
    assert ear.x == pytest.approx(0.4)
    assert ear.y == pytest.approx(0.1)
    assert ear.visibility == 0.9
    assert lms[PoseLandmark.RIGHT_ANKLE].x == pytest.approx(160.0 / 200)
    assert lms[PoseLandmark.LEFT_EYE_INNER] == Landmark(0.0, 0.0, 0.0, 0.0)
    assert lms[PoseLandmark.LEFT_HEEL].visibility == 0.0


def test_from_movenet_accepts_rows_and_missing_scores():
    rows = [(100.0, 100.0, 0.3)] * 17
    lms = LandmarkSet.from_movenet(rows, width=200, height=200)
    assert lms[PoseLandmark.NOSE] == Landmark(0.5, 0.5, 0.0, 0.3)

    dicts = [{"x": 0.0, "y": 0.0, "score": None}] * 17
    assert LandmarkSet.from_movenet(dicts, 100, 100)[PoseLandmark.NOSE].visibility == 0.0


def test_from_movenet_rejects_empty_image():
    with pytest.raises(ValueError):
        LandmarkSet.from_movenet([], width=0, height=100)
