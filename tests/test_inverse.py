import logging

import pytest

from geoshift import CoordinatePoint
from geoshift.inverse import (
    encrypted_to_earth_approx, encrypted_to_earth_exact,
    provider_to_earth, provider_to_encrypted
)
from geoshift.transforms import earth_to_encrypted, encrypted_to_provider

from tests.functions import assert_coordinates_equal, in_region_grid, out_of_region_grid


def test_encrypted_to_earth_approx():
    # Zhujiang New Town metro station, Guangzhou
    assert_coordinates_equal(
        encrypted_to_earth_approx(113.321171, 23.119285),
        CoordinatePoint(113.31575575816606, 23.121887917030481)
    )


def test_encrypted_to_earth_approx_round_trip():
    for lng, lat in in_region_grid():
        encrypted = earth_to_encrypted(lng, lat)
        assert_coordinates_equal(
            encrypted_to_earth_approx(encrypted.longitude, encrypted.latitude),
            CoordinatePoint(lng, lat),
            abs_tol=3e-4
        )


def test_encrypted_to_earth_exact():
    assert_coordinates_equal(
        encrypted_to_earth_exact(113.321171, 23.119285),
        CoordinatePoint(113.31576655685519, 23.121896973881732),
        abs_tol=2e-9
    )

    # Known WGS-84 points come back to within the convergence threshold
    for lng, lat in [
        (113.28749670783887, 23.094783676708065),
        (113.21809623603632, 23.15056674737269),
        (116.397128, 39.916527),
        (121.4737, 31.2304),
        (126.642464, 45.756967),
    ]:
        encrypted = earth_to_encrypted(lng, lat)
        assert_coordinates_equal(
            encrypted_to_earth_exact(encrypted.longitude, encrypted.latitude),
            CoordinatePoint(lng, lat),
            abs_tol=1e-9
        )


def test_encrypted_to_earth_exact_round_trip():
    for lng, lat in in_region_grid():
        encrypted = earth_to_encrypted(lng, lat)
        result = encrypted_to_earth_exact(encrypted.longitude, encrypted.latitude)

        # The forward transform of the result lands within the threshold
        assert_coordinates_equal(
            earth_to_encrypted(result.longitude, result.latitude),
            encrypted,
            abs_tol=1e-9
        )
        assert_coordinates_equal(result, CoordinatePoint(lng, lat), abs_tol=1.5e-9)


def test_encrypted_to_earth_exact_beats_approx():
    encrypted = earth_to_encrypted(121.4737, 31.2304)
    approx_point = encrypted_to_earth_approx(encrypted.longitude, encrypted.latitude)
    exact_point = encrypted_to_earth_exact(encrypted.longitude, encrypted.latitude)
    assert abs(exact_point.longitude - 121.4737) < abs(approx_point.longitude - 121.4737)
    assert abs(exact_point.latitude - 31.2304) < abs(approx_point.latitude - 31.2304)


def test_encrypted_to_earth_out_of_region():
    for lng, lat in out_of_region_grid():
        assert encrypted_to_earth_approx(lng, lat) == CoordinatePoint(lng, lat)
        assert encrypted_to_earth_exact(lng, lat) == CoordinatePoint(lng, lat)


def test_encrypted_to_earth_exact_iteration_cap(caplog):
    with caplog.at_level(logging.WARNING, logger='geoshift'):
        result = encrypted_to_earth_exact(113.321171, 23.119285, max_iterations=1)

    assert 'did not converge within 1 iterations' in caplog.text
    # The first candidate is the centre of the starting bracket
    assert_coordinates_equal(result, CoordinatePoint(113.321171, 23.119285))


def test_encrypted_to_earth_exact_converges_silently(caplog):
    with caplog.at_level(logging.WARNING, logger='geoshift'):
        encrypted_to_earth_exact(113.321171, 23.119285)

    assert 'did not converge' not in caplog.text


def test_encrypted_to_earth_exact_invalid_arguments():
    with pytest.raises(ValueError):
        encrypted_to_earth_exact(113.321171, 23.119285, threshold=0.)

    with pytest.raises(ValueError):
        encrypted_to_earth_exact(113.321171, 23.119285, max_iterations=0)

    with pytest.raises(ValueError):
        encrypted_to_earth_exact(113.321171, 23.119285, initial_delta=-0.01)


def test_provider_to_encrypted():
    # Tiyu Xilu metro station, Guangzhou
    assert_coordinates_equal(
        provider_to_encrypted(113.328035, 23.136929),
        CoordinatePoint(113.32151516334878, 23.131126066341263)
    )


def test_provider_round_trip():
    for lng, lat in in_region_grid():
        provider = encrypted_to_provider(lng, lat)
        assert_coordinates_equal(
            provider_to_encrypted(provider.longitude, provider.latitude),
            CoordinatePoint(lng, lat),
            abs_tol=2e-6
        )


def test_provider_to_earth():
    assert_coordinates_equal(
        provider_to_earth(113.328035, 23.136929),
        CoordinatePoint(113.31610922949181, 23.133732637061936),
        abs_tol=2e-9
    )

    encrypted = provider_to_encrypted(113.328035, 23.136929)
    assert provider_to_earth(113.328035, 23.136929) == encrypted_to_earth_exact(
        encrypted.longitude, encrypted.latitude
    )
