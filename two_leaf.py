#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Partition the PAR absorbed by the canopy between the sunlit and shaded
leaves for a single 30-minute timestep, using a two-leaf approximation
following de Pury & Farquhar.

References:
----------
* De Pury & Farquhar (1997) PCE, 20, 537-557.
* Wang & Leuning (1998) Agricultural & Forest Meterorology, 91, 89-111.
* Spitters et al. (1986) AFM, 38, 217-229.

"""

import sys
import logging
from collections import namedtuple
import numpy as np

import constants as c
from radiation import calculate_solar_geometry, get_diffuse_frac
from radiation import calculate_absorbed_radiation

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.11.2018)"
__email__   = "mdekauwe@gmail.com"

logger = logging.getLogger(__name__)

CanopyWorkingState = namedtuple("CanopyWorkingState",
                                ["cos_zenith", "elevation", "diffuse_frac",
                                 "direct_frac", "apar_leaf", "lai_leaf"])


class Canopy(object):
    """
    Solar geometry -> diffuse/direct split -> sunlit/shaded absorbed PAR
    """

    def __init__(self, p, diffuse_method="spitters", declination="de_pury",
                 eqn_of_time="de_pury"):

        self.p = p

        self.diffuse_method = diffuse_method
        self.declination = declination
        self.eqn_of_time = eqn_of_time

    def main(self, doy, hod, sw_rad, par=None, lai=None):
        """
        Parameters:
        ----------
        doy : int
            day of year
        hod : float
            half-hour of the day [0-47]
        sw_rad : float
            incident shortwave radiation (W m-2)
        par : float
            Photosynthetically active radiation (W m-2), defaults to a fixed
            fraction of sw_rad
        lai : float
            leaf area index, defaults to the parameter value

        Returns:
        --------
        cw : CanopyWorkingState
            solar geometry, diffuse/direct fractions and the sunlit/shaded
            absorbed PAR (ground-area basis) and leaf area
        """
        if par is None:
            par = sw_rad * c.SW_2_PAR
        if lai is None:
            lai = self.p.lai

        (cos_zenith, elevation) = calculate_solar_geometry(
                                        doy, hod, self.p.lat, self.p.lon,
                                        declination=self.declination,
                                        eqn_of_time=self.eqn_of_time)

        (diffuse_frac,
         direct_frac) = get_diffuse_frac(doy, sw_rad, cos_zenith,
                                         method=self.diffuse_method)

        (apar_leaf,
         lai_leaf, _) = calculate_absorbed_radiation(cos_zenith, direct_frac,
                                                     diffuse_frac, lai,
                                                     self.p.lad, par)

        return CanopyWorkingState(cos_zenith, elevation, diffuse_frac,
                                  direct_frac, apar_leaf, lai_leaf)


if __name__ == "__main__":

    import pandas as pd
    import matplotlib.pyplot as plt
    from read_config_file import LoadConfigFile
    import parameters as p

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) > 1:
        p = LoadConfigFile(sys.argv[1]).get_params()

    doy = 180

    # clear-sky-ish day, SW peaking at 900 W m-2 around midday
    hours = np.arange(48) / 2.0
    sw_rad = np.maximum(0.0, 900.0 * np.sin(np.pi * (hours - 6.0) / 12.0))

    C = Canopy(p)

    out = []
    for i in range(48):
        cw = C.main(doy, float(i), sw_rad[i])
        out.append({"hour": hours[i],
                    "elevation": cw.elevation,
                    "diffuse_frac": cw.diffuse_frac,
                    "apar_sun": cw.apar_leaf[c.SUNLIT],
                    "apar_sha": cw.apar_leaf[c.SHADED],
                    "lai_sun": cw.lai_leaf[c.SUNLIT],
                    "lai_sha": cw.lai_leaf[c.SHADED]})
    df = pd.DataFrame(out).set_index("hour")
    logger.info("Daily mean absorbed PAR (W m-2): sunlit %.2f, shaded %.2f",
                df.apar_sun.mean(), df.apar_sha.mean())

    fig = plt.figure(figsize=(16,4))
    fig.subplots_adjust(hspace=0.1)
    fig.subplots_adjust(wspace=0.2)
    plt.rcParams['text.usetex'] = False
    plt.rcParams['font.family'] = "sans-serif"
    plt.rcParams['axes.labelsize'] = 14
    plt.rcParams['font.size'] = 14
    plt.rcParams['legend.fontsize'] = 14
    plt.rcParams['xtick.labelsize'] = 14
    plt.rcParams['ytick.labelsize'] = 14

    ax1 = fig.add_subplot(131)
    ax2 = fig.add_subplot(132)
    ax3 = fig.add_subplot(133)

    ax1.plot(df.index, df.apar_sun, label="Sunlit")
    ax1.plot(df.index, df.apar_sha, label="Shaded")
    ax1.set_ylabel("APAR (W m$^{-2}$)")
    ax1.legend(numpoints=1, loc="best")

    ax2.plot(df.index, df.lai_sun, label="Sunlit")
    ax2.plot(df.index, df.lai_sha, label="Shaded")
    ax2.set_ylabel("LAI (m$^{2}$ m$^{-2}$)")
    ax2.set_xlabel("Hour of day")

    ax3.plot(df.index, df.diffuse_frac)
    ax3.set_ylabel("Diffuse fraction (-)")

    ax1.locator_params(nbins=6, axis="y")
    ax2.locator_params(nbins=6, axis="y")

    plt.show()
