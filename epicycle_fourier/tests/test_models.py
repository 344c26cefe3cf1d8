"""Tests for Point2D, FrequencyBin and TransformProfile."""

from __future__ import annotations

import cmath
import dataclasses
import json

import pytest

from epicycle_fourier.models import FrequencyBin, Point2D, TransformProfile


# -----------------------------------------------------------------------
# Point2D
# -----------------------------------------------------------------------


def test_point_coerce_variants() -> None:
    p = Point2D(1.0, 2.0)
    assert Point2D.coerce(p) is p
    assert Point2D.coerce({"x": 1, "y": 2}) == p
    assert Point2D.coerce((1, 2)) == p
    assert Point2D.coerce([1.0, 2.0]) == p


@pytest.mark.parametrize("bad", [{"x": 1}, (1, 2, 3), 5, None])
def test_point_coerce_rejects(bad) -> None:
    with pytest.raises(TypeError):
        Point2D.coerce(bad)


def test_point_frozen() -> None:
    p = Point2D(0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 1.0  # type: ignore[misc]


# -----------------------------------------------------------------------
# FrequencyBin
# -----------------------------------------------------------------------


def test_bin_as_complex() -> None:
    b = FrequencyBin(freq=-3, amplitude=2.0, phase=0.25)
    assert b.as_complex() == pytest.approx(2.0 * cmath.exp(0.25j))


def test_bin_dict_roundtrip() -> None:
    b = FrequencyBin(freq=4, amplitude=0.5, phase=-1.0)
    d = b.to_dict()
    assert d == {"freq": 4, "amplitude": 0.5, "phase": -1.0}
    assert FrequencyBin.from_dict(json.loads(json.dumps(d))) == b


# -----------------------------------------------------------------------
# TransformProfile
# -----------------------------------------------------------------------


def test_profile_defaults() -> None:
    p = TransformProfile()
    assert p.num_samples == 256
    assert p.kernel == "numpy"
    assert p.sort_by_amplitude is False


def test_profile_frozen() -> None:
    p = TransformProfile()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.num_samples = 512  # type: ignore[misc]


def test_profile_replace() -> None:
    p = TransformProfile(num_samples=64)
    p2 = dataclasses.replace(p, sort_by_amplitude=True)
    assert p2.sort_by_amplitude is True
    assert p2.num_samples == 64  # unchanged


def test_profile_dict_roundtrip() -> None:
    p = TransformProfile(num_samples=1024, kernel="direct", sort_by_amplitude=True)
    d = json.loads(json.dumps(p.to_dict()))
    assert TransformProfile.from_dict(d) == p


def test_profile_from_dict_partial() -> None:
    p = TransformProfile.from_dict({"num_samples": "128"})
    assert p.num_samples == 128
    assert p.kernel == "numpy"
