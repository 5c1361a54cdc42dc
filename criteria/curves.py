def distance_threshold_score(metric: float, threshold: float, slope: float) -> float:
    """100 up to ``threshold``, then a linear drop of ``slope`` points per unit, floored at 0."""
    if metric <= threshold:
        return 100.0
    return max(0.0, 100.0 - (metric - threshold) * slope)


def angle_tolerance_score(metric: float, ideal: float, tolerance: float, slope: float) -> float:
    """100 within ``tolerance`` degrees of ``ideal``, then ``slope`` points per degree, floored at 0."""
    deviation = abs(metric - ideal)
    if deviation <= tolerance:
        return 100.0
    return max(0.0, 100.0 - (deviation - tolerance) * slope)
