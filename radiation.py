#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Various radiation funcs needed for the two-leaf approximation: the position
of the sun, the split of the incoming radiation into its direct and diffuse
components, and the PAR absorbed by the sunlit and shaded leaves.

References:
----------
* De Pury & Farquhar (1997) PCE, 20, 537-557.
* Spitters, C. J. T., Toussaint, H. A. J. M. and Goudriaan, J. (1986)
  Separating the diffuse and direct component of global radiation and
  its implications for modeling canopy photosynthesis. Part I.
  Components of incoming radiation. Agricultural Forest Meteorol.,
  38:217-229.
"""

import logging
from collections import namedtuple
import numpy as np

import constants as c

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.11.2018)"
__email__   = "mdekauwe@gmail.com"

logger = logging.getLogger(__name__)

SolarGeometry = namedtuple("SolarGeometry", ["cos_zenith", "elevation"])
DiffuseFraction = namedtuple("DiffuseFraction", ["diffuse_frac",
                                                 "direct_frac"])
AbsorbedRadiation = namedtuple("AbsorbedRadiation", ["apar_leaf", "lai_leaf",
                                                     "total_apar"])


def calculate_solar_geometry(doy, hod, latitude, longitude,
                             declination="de_pury", eqn_of_time="de_pury"):
    """
    The solar zenith angle is the angle between the zenith and the centre
    of the sun's disc. The solar elevation angle is the altitude of the
    sun, the angle between the horizon and the centre of the sun's disc.
    Since these two angles are complementary, the cosine of either one of
    them equals the sine of the other, i.e. cos theta = sin beta. I will
    use cos_zenith throughout code for simplicity.

    Parameters:
    ----------
    doy : int
        day of year
    hod : float
        half-hour of the day [0-47]
    latitude : float
        site latitude (degrees)
    longitude : float
        site longitude (degrees)
    declination : string
        declination formula, see calculate_solar_declination
    eqn_of_time : string
        equation of time formula, see calculate_eqn_of_time

    Returns:
    -------
    cos_zenith : float
        cosine of the zenith angle of the sun, clamped to [0, 1]
    elevation : float
        solar elevation (degrees)

    References:
    ----------
    * De Pury & Farquhar (1997) PCE, 20, 537-557.
    """

    # need to convert 30 min data, 0-47 to 0-23.5
    hod /= 2.0

    gamma = day_angle(doy)
    dec = calculate_solar_declination(doy, gamma, method=declination)
    et = calculate_eqn_of_time(gamma, method=eqn_of_time)
    t0 = calculate_solar_noon(et, longitude)
    h = calculate_hour_angle(hod, t0)
    rlat = latitude * c.DEG_2_RAD

    # A13 - De Pury & Farquhar
    sin_beta = np.sin(rlat) * np.sin(dec) + \
                np.cos(rlat) * np.cos(dec) * np.cos(h)
    cos_zenith = min(max(sin_beta, 0.0), 1.0)

    zenith_angle = np.rad2deg(np.arccos(cos_zenith))
    elevation = 90.0 - zenith_angle

    return SolarGeometry(float(cos_zenith), float(elevation))

def day_angle(doy):
    """
    Calculation of day angle - De Pury & Farquhar, '97: eqn A18

    Returns:
    ---------
    gamma - day angle in radians.

    References:
    ----------
    * De Pury & Farquhar (1997) PCE, 20, 537-557.
    * J. W. Spencer (1971). Fourier series representation of the position of
      the sun.
    """
    return 2.0 * np.pi * (doy - 1.0) / c.DAYS_IN_YEAR

def calculate_solar_declination(doy, gamma, method="de_pury"):
    """
    Solar Declination Angle is a function of day of year and is indepenent
    of location, varying between 23deg45' to -23deg45'

    Parameters:
    ----------
    doy : int
        day of year, 1=jan 1
    gamma : float
        fractional year (radians)
    method : string
        "de_pury" (A14, default) or "spencer" (Fourier series)

    Returns:
    -------
    dec : float
        Solar Declination Angle [radians]

    References:
    ----------
    * De Pury & Farquhar (1997) PCE, 20, 537-557.
    * Leuning et al (1995) Plant, Cell and Environment, 18, 1183-1200.
    * J. W. Spencer (1971). Fourier series representation of the position of
      the sun.
    """
    if method == "de_pury":
        dec = -23.4 * c.DEG_2_RAD * \
                np.cos(2.0 * np.pi * (doy + 10) / c.DAYS_IN_YEAR)
    elif method == "spencer":
        dec = (0.006918 - 0.399912 * np.cos(gamma) +
               0.070257 * np.sin(gamma) - 0.006758 * np.cos(2.0 * gamma) +
               0.000907 * np.sin(2.0 * gamma) -
               0.002697 * np.cos(3.0 * gamma) +
               0.00148 * np.sin(3.0 * gamma))
    else:
        raise ValueError("Unknown declination method: %s" % method)

    return dec

def calculate_eqn_of_time(gamma, method="de_pury"):
    """
    Equation of time - correction for the difference btw solar time
    and the clock time.

    The de Pury & Farquhar form repeats sin(gamma) in its last term. This is
    kept as is, changing it shifts solar noon and everything downstream.

    Parameters:
    ----------
    gamma : float
        fractional year (radians)
    method : string
        "de_pury" (A17, default) or "spencer" (Fourier series)

    Returns:
    -------
    et : float
        equation of time (minutes)

    References:
    ----------
    * De Pury & Farquhar (1997) PCE, 20, 537-557.
    * Campbell, G. S. and Norman, J. M. (1998) Introduction to environmental
      biophysics. Pg 169.
    * J. W. Spencer (1971). Fourier series representation of the position of
      the sun.
    """
    if method == "de_pury":
        et = (0.017 + 0.4281 * np.cos(gamma) - 7.351 * np.sin(gamma) -
              3.349 * np.cos(2.0 * gamma) - 9.731 * np.sin(gamma))
    elif method == "spencer":
        # radians to minutes
        et = 229.18 * (0.000075 + 0.001868 * np.cos(gamma) -
                       0.032077 * np.sin(gamma) -
                       0.014615 * np.cos(2.0 * gamma) -
                       0.04089 * np.sin(2.0 * gamma))
    else:
        raise ValueError("Unknown equation of time method: %s" % method)

    return et

def round_to_value(number, roundto):
    # halves go away from zero, np.round would send 0.5 to 0
    return np.sign(number) * np.floor(np.abs(number) / roundto + 0.5) * roundto

def calculate_solar_noon(et, longitude):
    """
    Calculation solar noon - De Pury & Farquhar, '97: eqn A16

    Returns:
    ---------
    t0 - solar noon (hours).
    """
    # all international standard meridians are multiples of 15deg east/west of
    # greenwich
    Ls = round_to_value(longitude, 15.0)

    return 12.0 + (4.0 * (Ls - longitude) - et) / 60.0

def calculate_hour_angle(t, t0):
    """
    Calculation hour angle - De Pury & Farquhar, '97: eqn A15

    Returns:
    ---------
    h - hour angle (radians).
    """
    return np.pi * (t - t0) / 12.0

def calc_extra_terrestrial_rad(doy, cos_zenith):
    """
    Solar radiation incident outside the earth's atmosphere, e.g.
    extra-terrestrial radiation. The value varies a little with the earths
    orbit.

    Using formula from Spitters not Leuning!

    Parameters:
    ----------
    doy : int
        day of year
    cos_zenith : float
        cosine of zenith angle

    Returns:
    -------
    So : float
        solar radiation normal to the sun's bean outside the Earth's
        atmosphere (J m-2 s-1)

    References:
    ----------
    * Spitters et al. (1986) AFM, 38, 217-229, equation 1.
    """
    if cos_zenith > 0.0:
        # remember sin_beta = cos_zenith
        So = c.SOLAR_CONSTANT * \
                (1.0 + 0.033 * np.cos(doy / c.DAYS_IN_YEAR * 2.0 * np.pi)) * \
                cos_zenith
    else:
        So = 0.0

    return So

def estimate_clearness(sw_rad, So):
    """
    Estimate atmospheric transmisivity - the amount of diffuse radiation
    is a function of the amount of haze and/or clouds in the sky. Estimate
    a proxy for this, i.e. the ratio between global solar radiation on a
    horizontal surface at the ground and the extraterrestrial solar
    radiation
    """

    # catch possible divide by zero when zenith = 90.
    if So <= 0.0:
        tau = 0.0
    else:
        tau = sw_rad * c.FPAR / So

    return min(max(tau, 0.0), 1.0)

def get_diffuse_frac(doy, sw_rad, cos_zenith, method="spitters"):
    """
    Split the measured irradiance into diffuse and direct fractions.
    Spitters is the only method so far.
    """
    if method == "spitters":
        return spitters(doy, sw_rad, cos_zenith)

    raise ValueError("Unknown diffuse fraction method: %s" % method)

def spitters(doy, sw_rad, cos_zenith):
    """
    Spitters algorithm to estimate the diffuse component from the measured
    irradiance.

    Eqn 20a-d.

    Parameters:
    ----------
    doy : int
        day of year
    sw_rad : float
        total incident radiation [J m-2 s-1]
    cos_zenith : float
        cosine of zenith angle

    Returns:
    -------
    diffuse_frac : float
        diffuse component of incoming radiation
    direct_frac : float
        direct component of incoming radiation, 1 - diffuse_frac
    """

    # sine of the elev of the sun above the horizon is the same as cos_zen
    So = calc_extra_terrestrial_rad(doy, cos_zenith)

    # atmospheric transmisivity
    tau = estimate_clearness(sw_rad, So)

    diffuse_frac = diffuse_frac_from_clearness(tau, cos_zenith)
    direct_frac = 1.0 - diffuse_frac

    return DiffuseFraction(diffuse_frac, direct_frac)

def diffuse_frac_from_clearness(tau, cos_zenith):
    """
    Spitters et al. (1986) eqn 20, diffuse fraction from the atmospheric
    transmisivity, clamped to [0, 1].
    """
    if cos_zenith > c.COS_ZENITH_DIFFUSE:
        R = 0.847 - 1.61 * cos_zenith + 1.04 * cos_zenith**2
        K = (1.47 - R) / 1.66
        if tau <= c.TAU_OVERCAST:
            diffuse_frac = 1.0
        elif tau <= c.TAU_BROKEN:
            diffuse_frac = 1.0 - 6.4 * (tau - c.TAU_OVERCAST)**2
        elif tau <= K:
            diffuse_frac = 1.47 - 1.66 * tau
        else:
            diffuse_frac = R
    else:
        diffuse_frac = 1.0

    return min(max(diffuse_frac, 0.0), 1.0)

def calculate_absorbed_radiation(cos_zenith, direct_frac, diffuse_frac, lai,
                                 lad, par, per_leaf_area=False):
    """
    Calculate absorded irradiance of sunlit and shaded fractions of
    the canopy. The total irradiance absorbed by the canopy and the
    sunlit/shaded components are all expressed on a ground-area basis,
    unless per_leaf_area is set.

    NB: lad isn't used, the extinction coefficients assume a spherical
    leaf angle distribution.

    Parameters:
    ----------
    cos_zenith : float
        cosine of zenith angle
    direct_frac : float
        direct component of incoming radiation
    diffuse_frac : float
        diffuse component of incoming radiation
    lai : float
        leaf area index
    lad : float
        leaf angle distribution parameter
    par : float
        photosynthetically active radiation
    per_leaf_area : bool
        divide the absorbed PAR by the sunlit/shaded leaf area

    Returns:
    -------
    apar_leaf : array
        absorbed PAR, sunlit and shaded (same units as par)
    lai_leaf : array
        leaf area index, sunlit and shaded
    total_apar : float
        irradiance absorbed by the canopy

    References:
    -----------
    * De Pury & Farquhar (1997) PCE, 20, 537-557.

    but see also:
    * Wang and Leuning (1998) AFm, 91, 89-111.
    * Dai et al. (2004) Journal of Climate, 17, 2281-2299.
    """
    apar_leaf = np.zeros(2)
    lai_leaf = np.zeros(2)

    # Is the sun up?
    if cos_zenith <= c.COS_ZENITH_MIN:
        logger.debug("Sun below the horizon (cos_zenith=%f), no absorbed "
                     "radiation", cos_zenith)
        lai_leaf[c.SHADED] = lai
        return AbsorbedRadiation(apar_leaf, lai_leaf, 0.0)

    kb = c.KB_NUM / cos_zenith
    k_dash_b = c.K_DASH_B_NUM / cos_zenith
    k_dash_d = c.K_DASH_D

    # Direct-beam irradiance absorbed by sunlit leaves - de P & F, eqn 20b
    Ib = par * direct_frac
    beam = Ib * (1.0 - c.OMEGA_PAR) * (1.0 - np.exp(-kb * lai))

    # Diffuse irradiance absorbed by sunlit leaves - de P & F, eqn 20c
    Id = par * diffuse_frac
    diffuse = Id * (1.0 - c.RHO_CD) * \
                (1.0 - np.exp(-(k_dash_d + kb) * lai)) * \
                (k_dash_d / (k_dash_d + kb))

    # Scattered-beam irradiance abs. by sunlit leaves - de P & F, eqn 20d
    scattered = Ib * ((1.0 - c.RHO_CB) * \
                      (1.0 - np.exp(-(k_dash_b + kb) * lai)) * \
                      k_dash_b / (k_dash_b + kb) - (1.0 - c.OMEGA_PAR) * \
                      (1.0 - np.exp(-2.0 * kb * lai)) / 2.0)

    # Irradiance absorbed by the canopy - de Pury & Farquhar (1997), eqn 13
    Ic = (1.0 - c.RHO_CB) * Ib * (1.0 - np.exp(-k_dash_b * lai)) + \
         (1.0 - c.RHO_CD) * Id * (1.0 - np.exp(-k_dash_d * lai))

    # Irradiance absorbed by the sunlit fraction of the canopy is the sum of
    # direct-beam, diffuse and scattered-beam components
    apar_leaf[c.SUNLIT] = beam + scattered + diffuse

    # Irradiance absorbed by the shaded leaf area is the difference between
    # the total irradiance absorbed by the canopy and that absorbed by the
    # sunlit leaf area
    apar_leaf[c.SHADED] = Ic - apar_leaf[c.SUNLIT]

    # The direct radiation on sunlit leaves is assumed to be equal at all
    # canopy depths but with the fraction of sunlit leaves decreasing with
    # canopy depth. De Pury & Farquhar 1997, eqn 18.
    lai_leaf[c.SUNLIT] = (1.0 - np.exp(-kb * lai)) / kb
    lai_leaf[c.SHADED] = lai - lai_leaf[c.SUNLIT]

    if per_leaf_area:
        # convert apar from unit ground to leaf area
        for i in (c.SUNLIT, c.SHADED):
            if lai_leaf[i] > 0.0:
                apar_leaf[i] /= lai_leaf[i]
            else:
                apar_leaf[i] = 0.0

    return AbsorbedRadiation(apar_leaf, lai_leaf, float(Ic))
