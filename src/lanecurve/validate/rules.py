"""
Validation rules for lanecurve.

Checks a sampled lane for problems a user placing rails would want to know
about. Rules only report; they never change the lane.
"""

from lanecurve.models import CheckResult, Severity, ValidationReport
from lanecurve.tracer import get_tracer, trace


@trace(label="run_lane_validation")
def run_lane_validation(lane, config):
    """
    Run all validation checks on a lane.

    Returns ValidationReport with all check results.
    """
    tracer = get_tracer()

    checks = [check_rails_present(lane)]

    if lane.right is not None and lane.left is not None:
        subdivisions = config.sampling.subdivisions
        checks.append(check_rails_non_degenerate(lane, subdivisions))
        checks.append(check_rail_sample_counts(lane))
        checks.append(check_rail_lengths(lane, subdivisions))

    report = ValidationReport(checks=checks)

    tracer.event(f"Validation complete: {report.error_count} errors, {report.warning_count} warnings")

    return report


def check_rails_present(lane):
    """Check that both the right and the left rail are set."""
    missing = [side for side in ("right", "left") if getattr(lane, side) is None]

    if missing:
        return CheckResult(
            rule_id="rails_present",
            severity=Severity.ERROR,
            passed=False,
            message=f"Lane is missing {len(missing)} rail(s)",
            evidence={"missing": missing},
        )

    return CheckResult(
        rule_id="rails_present",
        severity=Severity.ERROR,
        passed=True,
        message="Both rails are set",
        evidence={},
    )


def check_rails_non_degenerate(lane, subdivisions):
    """
    Check that neither rail has collapsed to a point.

    A zero-length rail still samples, but only ever yields its end points.
    """
    degenerate = []
    for side in ("right", "left"):
        if getattr(lane, side).estimate_length(subdivisions) == 0.0:
            degenerate.append(side)

    if degenerate:
        return CheckResult(
            rule_id="rails_non_degenerate",
            severity=Severity.WARN,
            passed=False,
            message=f"{len(degenerate)} rail(s) have zero arc length",
            evidence={"degenerate": degenerate},
        )

    return CheckResult(
        rule_id="rails_non_degenerate",
        severity=Severity.WARN,
        passed=True,
        message="Both rails have non-zero arc length",
        evidence={},
    )


def check_rail_sample_counts(lane):
    """
    Check that both rails retained the same number of samples.

    Rails are sampled independently, so distance sampling on rails of
    different length can leave them out of step. Reported, not corrected.
    """
    right, left = lane.get_sample_points()

    if len(right) != len(left):
        return CheckResult(
            rule_id="rail_sample_counts",
            severity=Severity.WARN,
            passed=False,
            message=f"Rails have different sample counts ({len(right)} right, {len(left)} left)",
            evidence={"right": len(right), "left": len(left)},
        )

    return CheckResult(
        rule_id="rail_sample_counts",
        severity=Severity.WARN,
        passed=True,
        message=f"Both rails have {len(right)} samples",
        evidence={"right": len(right), "left": len(left)},
    )


def check_rail_lengths(lane, subdivisions):
    """Report the estimated arc length of each rail."""
    right_length = lane.right.estimate_length(subdivisions)
    left_length = lane.left.estimate_length(subdivisions)

    return CheckResult(
        rule_id="rail_lengths",
        severity=Severity.INFO,
        passed=True,
        message=f"Rail lengths: right {right_length:.3f}, left {left_length:.3f}",
        evidence={
            "right": right_length,
            "left": left_length,
            "subdivisions": subdivisions,
        },
    )
