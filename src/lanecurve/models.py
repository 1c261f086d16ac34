"""
Pydantic data models for lanecurve.

Sampling requests, persisted curve and lane records, and validation results
all flow through these validated models. Content-based ID generation keeps
saved records deterministic.
"""

import hashlib
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lanecurve.geometry.frame import CoordinateFrame


class SamplingMode(str, Enum):
    """Point sampling strategies for a cubic curve."""
    PERCENTAGE = "percentage"  # fixed parameter step
    DISTANCE = "distance"  # fixed arc-length spacing
    COUNT = "count"  # fixed number of points


class Severity(str, Enum):
    """Severity levels for validation checks."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"


class SamplingRequest(BaseModel):
    """A sampling mode together with its one scalar parameter."""
    mode: SamplingMode
    value: float
    subdivisions: int = Field(default=20, ge=1)

    model_config = ConfigDict(extra="forbid")


class CurveRecord(BaseModel):
    """Raw control-point list of one curve, in its local frame."""
    name: str = "curve"
    control_points: List[List[float]] = Field(..., min_length=4, max_length=4)
    frame: CoordinateFrame = Field(default_factory=CoordinateFrame)

    model_config = ConfigDict(extra="forbid")

    @field_validator("control_points")
    @classmethod
    def _check_point_size(cls, value):
        for point in value:
            if len(point) != 3:
                raise ValueError(f"control points must have 3 components, got {len(point)}")
        return value


class LaneRecord(BaseModel):
    """A persisted lane: two curve records."""
    lane_id: str
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    right: CurveRecord
    left: CurveRecord

    model_config = ConfigDict(extra="forbid")


class SampleRecord(BaseModel):
    """World-space sample points produced for a lane."""
    lane_id: str
    request: SamplingRequest
    right: List[List[float]] = Field(default_factory=list)
    left: List[List[float]] = Field(default_factory=list)
    preview_t: float = 0.5
    preview: Dict[str, List[float]] = Field(default_factory=dict)  # side -> point at preview_t

    model_config = ConfigDict(extra="forbid")


class CheckResult(BaseModel):
    """Result of a single validation check."""
    rule_id: str
    severity: Severity
    passed: bool
    message: str
    evidence: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class ValidationReport(BaseModel):
    """Collection of validation check results."""
    checks: List[CheckResult] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def has_errors(self):
        """Check if any errors exist."""
        return any(c.severity == Severity.ERROR and not c.passed for c in self.checks)

    @property
    def error_count(self):
        """Count of failed error-level checks."""
        return sum(1 for c in self.checks if c.severity == Severity.ERROR and not c.passed)

    @property
    def warning_count(self):
        """Count of failed warning-level checks."""
        return sum(1 for c in self.checks if c.severity == Severity.WARN and not c.passed)


def generate_curve_id(control_points, round_digits=4):
    """
    Generate deterministic curve ID from control-point coordinates.

    Rounds coordinates to avoid floating point instability.
    """
    rounded = [[round(float(c), round_digits) for c in p] for p in control_points]
    h = hashlib.sha256(str(rounded).encode()).hexdigest()[:12]
    return f"curve_{h}"


def generate_lane_id(right_points, left_points):
    """Generate deterministic lane ID from both rails' world control points."""
    data = f"{generate_curve_id(right_points)}:{generate_curve_id(left_points)}"
    h = hashlib.sha256(data.encode()).hexdigest()[:12]
    return f"lane_{h}"
