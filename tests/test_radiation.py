import numpy as np
import numpy.testing as npt
import pytest

import constants as c
from radiation import (calculate_solar_geometry, day_angle,
                       calculate_solar_declination, calculate_eqn_of_time,
                       round_to_value, calculate_solar_noon,
                       calculate_hour_angle, calc_extra_terrestrial_rad,
                       estimate_clearness, get_diffuse_frac, spitters,
                       diffuse_frac_from_clearness,
                       calculate_absorbed_radiation)


#
## Solar geometry
#

def test_summer_solstice_noon_elevation():
    (cos_zenith, elevation) = calculate_solar_geometry(172, 24, 45.0, 0.0)

    assert elevation == pytest.approx(68.4, abs=0.5)
    assert cos_zenith == pytest.approx(np.sin(np.deg2rad(elevation)))

    # noon on the solstice is as high as the sun gets at this latitude
    for doy in (1, 80, 120, 250, 355):
        (cz, _) = calculate_solar_geometry(doy, 24, 45.0, 0.0)
        assert cz < cos_zenith


def test_southern_hemisphere_winter_noon():
    (_, elevation) = calculate_solar_geometry(172, 24, -45.0, 0.0)
    assert elevation == pytest.approx(90.0 - 45.0 - 23.4, abs=0.5)


def test_night_is_clamped_to_zero():
    (cos_zenith, elevation) = calculate_solar_geometry(172, 0, 45.0, 0.0)

    assert cos_zenith == 0.0
    assert elevation == pytest.approx(0.0)


@pytest.mark.parametrize("lat", [-90.0, -30.0, 0.0, 30.0, 90.0])
def test_cos_zenith_in_range(lat):
    for hod in range(48):
        (cos_zenith, _) = calculate_solar_geometry(100, hod, lat, 20.0)
        assert 0.0 <= cos_zenith <= 1.0


def test_hour_index_is_half_hours():
    # half-hour 24 is midday, the same as the hour angle at 12.0 h
    gamma = day_angle(172)
    et = calculate_eqn_of_time(gamma)
    t0 = calculate_solar_noon(et, 0.0)
    dec = calculate_solar_declination(172, gamma)
    h = calculate_hour_angle(12.0, t0)
    rlat = np.deg2rad(45.0)
    expected = np.sin(rlat) * np.sin(dec) + \
                np.cos(rlat) * np.cos(dec) * np.cos(h)

    (cos_zenith, _) = calculate_solar_geometry(172, 24, 45.0, 0.0)
    assert cos_zenith == pytest.approx(expected)


def test_day_angle():
    assert day_angle(1) == 0.0
    assert day_angle(366) == pytest.approx(2.0 * np.pi)


def test_declination_is_periodic():
    for doy in (1, 91, 172, 300):
        npt.assert_allclose(calculate_solar_declination(doy, day_angle(doy)),
                            calculate_solar_declination(doy + 365,
                                                        day_angle(doy + 365)),
                            atol=1e-12)


def test_declination_de_pury():
    dec = calculate_solar_declination(172, day_angle(172))
    assert np.rad2deg(dec) == pytest.approx(23.4, abs=0.01)

    dec = calculate_solar_declination(355, day_angle(355))
    assert np.rad2deg(dec) == pytest.approx(-23.4, abs=0.01)


def test_declination_spencer():
    dec = calculate_solar_declination(172, day_angle(172), method="spencer")
    assert dec == pytest.approx(np.deg2rad(23.45), abs=0.005)


def test_unknown_declination_method():
    with pytest.raises(ValueError):
        calculate_solar_declination(172, day_angle(172), method="cooper")


def test_eqn_of_time_repeats_sin_gamma():
    gamma = 1.0
    expected = (0.017 + 0.4281 * np.cos(gamma) - 7.351 * np.sin(gamma) -
                3.349 * np.cos(2.0 * gamma) - 9.731 * np.sin(gamma))
    assert calculate_eqn_of_time(gamma) == pytest.approx(expected)


def test_eqn_of_time_spencer():
    # about -1.5 minutes around the June solstice
    et = calculate_eqn_of_time(day_angle(172), method="spencer")
    assert -3.0 < et < 0.0

    with pytest.raises(ValueError):
        calculate_eqn_of_time(1.0, method="noaa")


@pytest.mark.parametrize("number, expected", [(0.0, 0.0),
                                              (7.4, 0.0),
                                              (7.5, 15.0),
                                              (-7.5, -15.0),
                                              (152.524994, 150.0),
                                              (-172.6, -180.0)])
def test_round_to_value(number, expected):
    assert round_to_value(number, 15.0) == expected


def test_solar_noon():
    assert calculate_solar_noon(0.0, 0.0) == 12.0
    assert calculate_solar_noon(0.0, 10.0) == pytest.approx(12.0 + 20.0 / 60.0)
    assert calculate_solar_noon(6.0, 0.0) == pytest.approx(11.9)


def test_hour_angle():
    assert calculate_hour_angle(12.0, 12.0) == 0.0
    assert calculate_hour_angle(18.0, 12.0) == pytest.approx(np.pi / 2.0)


#
## Diffuse fraction
#

def test_extra_terrestrial_rad():
    assert calc_extra_terrestrial_rad(172, 0.0) == 0.0
    assert calc_extra_terrestrial_rad(172, -0.2) == 0.0

    So = calc_extra_terrestrial_rad(365, 1.0)
    assert So == pytest.approx(c.SOLAR_CONSTANT * 1.033)


def test_clearness():
    assert estimate_clearness(500.0, 0.0) == 0.0
    assert estimate_clearness(500.0, 1000.0) == pytest.approx(0.25)
    assert estimate_clearness(5000.0, 1000.0) == 1.0
    assert estimate_clearness(-10.0, 1000.0) == 0.0


@pytest.mark.parametrize("tau", [0.0, 0.5, 1.0])
def test_low_sun_is_all_diffuse(tau):
    assert diffuse_frac_from_clearness(tau, 0.1) == 1.0
    assert diffuse_frac_from_clearness(tau, 0.17) == 1.0


def test_zero_clearness_is_all_diffuse():
    for cos_zenith in np.linspace(0.0, 1.0, 21):
        assert diffuse_frac_from_clearness(0.0, cos_zenith) == 1.0


def test_spitters_branches():
    cos_zenith = 0.6
    R = 0.847 - 1.61 * 0.6 + 1.04 * 0.36

    assert diffuse_frac_from_clearness(0.2, cos_zenith) == 1.0
    assert diffuse_frac_from_clearness(0.30, cos_zenith) == \
            pytest.approx(0.95904)
    assert diffuse_frac_from_clearness(0.5, cos_zenith) == pytest.approx(0.64)
    assert diffuse_frac_from_clearness(0.9, cos_zenith) == pytest.approx(R)


def test_spitters_from_irradiance():
    doy = 172
    cos_zenith = 0.6
    So = calc_extra_terrestrial_rad(doy, cos_zenith)
    sw_rad = 0.30 * So / c.FPAR

    (diffuse_frac, direct_frac) = spitters(doy, sw_rad, cos_zenith)
    assert diffuse_frac == pytest.approx(0.95904)
    assert direct_frac == 1.0 - diffuse_frac


def test_fractions_in_range_and_complementary():
    for cos_zenith in np.linspace(0.0, 1.0, 11):
        for sw_rad in np.linspace(0.0, 1500.0, 16):
            (diffuse_frac,
             direct_frac) = spitters(200, sw_rad, cos_zenith)
            assert 0.0 <= diffuse_frac <= 1.0
            assert direct_frac == 1.0 - diffuse_frac


def test_more_irradiance_never_more_diffuse():
    cos_zenith = 0.6
    So = calc_extra_terrestrial_rad(172, cos_zenith)
    sw_rad = np.linspace(0.0, So / c.FPAR, 200)

    tau = np.array([estimate_clearness(sw, So) for sw in sw_rad])
    diffuse = np.array([spitters(172, sw, cos_zenith).diffuse_frac
                        for sw in sw_rad])

    assert np.all(np.diff(tau) >= 0.0)
    assert np.all(np.diff(diffuse) <= 0.0)


def test_get_diffuse_frac():
    assert get_diffuse_frac(172, 600.0, 0.8) == spitters(172, 600.0, 0.8)

    with pytest.raises(ValueError):
        get_diffuse_frac(172, 600.0, 0.8, method="erbs")


#
## Absorbed radiation
#

def test_no_leaves_absorb_nothing():
    for cos_zenith in (0.0, 0.3, 1.0):
        (apar_leaf,
         lai_leaf, total_apar) = calculate_absorbed_radiation(cos_zenith, 0.7,
                                                              0.3, 0.0, 1.0,
                                                              400.0)
        npt.assert_array_equal(apar_leaf, [0.0, 0.0])
        npt.assert_array_equal(lai_leaf, [0.0, 0.0])
        assert total_apar == 0.0


@pytest.mark.parametrize("lai", [0.1, 1.0, 3.0, 8.0])
@pytest.mark.parametrize("cos_zenith", [0.05, 0.4, 0.9])
def test_sunlit_and_shaded_sum_to_canopy(lai, cos_zenith):
    (apar_leaf,
     lai_leaf, total_apar) = calculate_absorbed_radiation(cos_zenith, 0.6, 0.4,
                                                          lai, 1.0, 450.0)

    assert np.sum(lai_leaf) == pytest.approx(lai, rel=1e-12)
    assert np.sum(apar_leaf) == pytest.approx(total_apar, rel=1e-12)
    assert apar_leaf[c.SHADED] == total_apar - apar_leaf[c.SUNLIT]
    assert 0.0 < lai_leaf[c.SUNLIT] <= lai
    assert 0.0 < total_apar < 450.0


def test_sunlit_leaf_area_saturates():
    cos_zenith = 0.8
    (_, lai_leaf, _) = calculate_absorbed_radiation(cos_zenith, 1.0, 0.0,
                                                    50.0, 1.0, 400.0)
    assert lai_leaf[c.SUNLIT] == pytest.approx(cos_zenith / c.KB_NUM)


def test_all_diffuse_canopy_absorption():
    lai = 2.0
    par = 300.0
    (apar_leaf,
     _, total_apar) = calculate_absorbed_radiation(0.5, 0.0, 1.0, lai, 1.0,
                                                   par)

    expected = (1.0 - c.RHO_CD) * par * (1.0 - np.exp(-c.K_DASH_D * lai))
    assert total_apar == pytest.approx(expected)
    assert apar_leaf[c.SUNLIT] > 0.0
    assert apar_leaf[c.SHADED] > 0.0


def test_sun_below_horizon():
    (apar_leaf,
     lai_leaf, total_apar) = calculate_absorbed_radiation(0.0, 0.0, 1.0, 2.5,
                                                          1.0, 100.0)
    npt.assert_array_equal(apar_leaf, [0.0, 0.0])
    npt.assert_array_equal(lai_leaf, [0.0, 2.5])
    assert total_apar == 0.0


def test_leaf_angle_parameter_not_used():
    a = calculate_absorbed_radiation(0.7, 0.8, 0.2, 2.0, 0.5, 400.0)
    b = calculate_absorbed_radiation(0.7, 0.8, 0.2, 2.0, 2.0, 400.0)

    npt.assert_array_equal(a.apar_leaf, b.apar_leaf)
    npt.assert_array_equal(a.lai_leaf, b.lai_leaf)


def test_per_leaf_area_basis():
    ground = calculate_absorbed_radiation(0.7, 0.8, 0.2, 2.0, 1.0, 400.0)
    leaf = calculate_absorbed_radiation(0.7, 0.8, 0.2, 2.0, 1.0, 400.0,
                                        per_leaf_area=True)

    npt.assert_allclose(leaf.apar_leaf, ground.apar_leaf / ground.lai_leaf)
    npt.assert_array_equal(leaf.lai_leaf, ground.lai_leaf)

    # no leaves, nothing to divide by
    empty = calculate_absorbed_radiation(0.7, 0.8, 0.2, 0.0, 1.0, 400.0,
                                         per_leaf_area=True)
    npt.assert_array_equal(empty.apar_leaf, [0.0, 0.0])
