"""
Tests for chromatic adaptation.
"""

from __future__ import annotations

import numpy as np
import pytest

from rgbxyz import (
    BRADFORD,
    VON_KRIES,
    XYZ_SCALING,
    AdaptationMethod,
    AdaptationMethodType,
    ChromaticAdaptation,
    DivisionByZeroError,
    ReferenceWhite,
    SingularMatrixError,
    XYZColor,
    create_adaptation,
)
from rgbxyz.spaces import illuminants

METHODS = [BRADFORD, VON_KRIES, XYZ_SCALING]


def test_bradford_d65_to_d50_matrix() -> None:
    expected = np.array(
        [
            [1.0478112, 0.0228866, -0.0501270],
            [0.0295424, 0.9904844, -0.0170491],
            [-0.0092345, 0.0150436, 0.7521316],
        ]
    )
    adaptation = ChromaticAdaptation(BRADFORD)
    matrix = adaptation.adaptation_matrix(illuminants.D65, illuminants.D50)
    np.testing.assert_allclose(matrix, expected, atol=1e-5)


@pytest.mark.parametrize("method", METHODS, ids=lambda m: m.name)
def test_source_white_maps_to_destination_white(method: AdaptationMethod) -> None:
    adaptation = ChromaticAdaptation(method)
    for source in (illuminants.D65, illuminants.A, illuminants.F11):
        adapted = adaptation.transform(source.vector, source, illuminants.D50)
        np.testing.assert_allclose(adapted, illuminants.D50.vector, rtol=1e-9)


@pytest.mark.parametrize("method", METHODS, ids=lambda m: m.name)
def test_identity_adaptation(method: AdaptationMethod) -> None:
    adaptation = ChromaticAdaptation(method)
    vector = np.array([0.3, 0.4, 0.5])
    # Same numbers, different object and name
    twin = ReferenceWhite(illuminants.D65.x, illuminants.D65.y, illuminants.D65.z, name="twin")

    assert np.array_equal(adaptation.transform(vector, illuminants.D65, twin), vector)
    assert np.array_equal(adaptation.adaptation_matrix(illuminants.D65, twin), np.eye(3))


def test_xyz_scaling_scales_componentwise() -> None:
    adaptation = ChromaticAdaptation(XYZ_SCALING)
    vector = np.array([0.2, 0.3, 0.4])
    adapted = adaptation.transform(vector, illuminants.D65, illuminants.A)
    expected = vector * illuminants.A.vector / illuminants.D65.vector
    np.testing.assert_allclose(adapted, expected, rtol=1e-12)


def test_round_trip_between_whites() -> None:
    adaptation = ChromaticAdaptation(BRADFORD)
    rng = np.random.default_rng(3)
    values = rng.random((10, 3))
    there = adaptation.transform(values, illuminants.D65, illuminants.D50)
    back = adaptation.transform(there, illuminants.D50, illuminants.D65)
    np.testing.assert_allclose(back, values, atol=1e-12)
    assert there.shape == values.shape


def test_transform_color_tags_destination_white() -> None:
    adaptation = ChromaticAdaptation()
    color = XYZColor(0.4, 0.35, 0.3, illuminants.D65)
    adapted = adaptation.transform_color(color, illuminants.D50)
    assert adapted.reference_white == illuminants.D50
    assert not np.allclose(adapted.vector, color.vector)


def test_zero_cone_response_raises() -> None:
    adaptation = ChromaticAdaptation(XYZ_SCALING)
    degenerate = ReferenceWhite(0.0, 1.0, 1.0)
    with pytest.raises(DivisionByZeroError):
        adaptation.transform([0.3, 0.3, 0.3], degenerate, illuminants.D65)

    # Also a ZeroDivisionError for callers catching the builtin
    with pytest.raises(ZeroDivisionError):
        adaptation.adaptation_matrix(degenerate, illuminants.D50)


def test_singular_cone_matrix_rejected() -> None:
    with pytest.raises(SingularMatrixError):
        ChromaticAdaptation(AdaptationMethod("flat", np.ones((3, 3))))


def test_method_matrix_must_be_3x3() -> None:
    with pytest.raises(ValueError):
        AdaptationMethod("bad", np.eye(2))


def test_create_adaptation() -> None:
    assert create_adaptation(AdaptationMethodType.BRADFORD).method == BRADFORD
    assert create_adaptation(AdaptationMethodType.VON_KRIES).method == VON_KRIES
    with pytest.raises(ValueError):
        create_adaptation("bradford")  # type: ignore[arg-type]


def test_methods_compare_by_matrix() -> None:
    relabelled = AdaptationMethod("bradford_copy", BRADFORD.matrix.copy())
    assert relabelled == BRADFORD
    assert hash(relabelled) == hash(BRADFORD)

    # Same name, different cone response
    impostor = AdaptationMethod("bradford", VON_KRIES.matrix)
    assert impostor != BRADFORD
