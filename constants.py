#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Constants shared by the solar geometry, diffuse fraction and absorbed
radiation calculations.
"""

import numpy as np

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.11.2018)"
__email__   = "mdekauwe@gmail.com"

# leaf indices
SUNLIT = 0
SHADED = 1

DEG_2_RAD = np.pi / 180.0
RAD_2_DEG = 180.0 / np.pi

DAYS_IN_YEAR = 365.0

# Solar constant (J m-2 s-1)
SOLAR_CONSTANT = 1370.0

# Fraction of global radiation that is PAR
FPAR = 0.5

# conversion from SW (W m-2) to PAR (W m-2)
SW_2_PAR = 0.5
PAR_2_SW = 1.0 / SW_2_PAR
J_TO_UMOL = 4.57
UMOL_TO_J = 1.0 / J_TO_UMOL

# De Pury & Farquhar (1997), Table 2
RHO_CD = 0.036      # canopy reflection coeffcient for diffuse PAR
RHO_CB = 0.029      # canopy reflection coeffcient for direct PAR
OMEGA_PAR = 0.15    # leaf scattering coefficient of PAR
K_DASH_D = 0.718    # diffuse & scattered PAR extinction coeff
KB_NUM = 0.5        # beam radiation ext coeff of canopy, * 1/cos_zenith
K_DASH_B_NUM = 0.46 # beam & scat PAR ext coef, * 1/cos_zenith

# Spitters et al. (1986), eqn 20a-d
COS_ZENITH_DIFFUSE = 0.17   # zenith angles > 80 degrees, diffuse_frac = 1.0
TAU_OVERCAST = 0.22
TAU_BROKEN = 0.35

# sun treated as below the horizon at or under this
COS_ZENITH_MIN = 1E-08
