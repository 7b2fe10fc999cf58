#!/usr/bin/env python
""" Load the site and canopy parameters from a config file """

import os
import logging
from types import SimpleNamespace
from configobj import ConfigObj, ConfigObjError

import parameters

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.11.2018)"
__email__   = "mdekauwe@gmail.com"

logger = logging.getLogger(__name__)

# (section, key in the file, attribute on the returned parameters)
PARAM_KEYS = [("site", "latitude", "lat"),
              ("site", "longitude", "lon"),
              ("canopy", "lai", "lai"),
              ("canopy", "lad", "lad")]


class LoadConfigFile(object):
    """ Read a config file (.cfg/.ini) and return the site and canopy
    parameters, e.g.

        [site]
        latitude = 45.0
        longitude = 0.0

        [canopy]
        lai = 1.5
        lad = 1.0

    Anything missing from the file is taken from parameters.py
    """
    def __init__(self, fname, default_dir=None, ext='.cfg'):
        """
        Parameters:
        ----------
        fname : string
            filename of parameter (CFG) file, without the extension
        default_dir : string
            path to the parameter file
        ext : string
            file extension for parameter file, default = CFG
        """
        self.fname = fname
        self.default_dir = default_dir
        self.ext = ext

        if self.default_dir is None:
            self.default_dir = os.getcwd()
        self.config_file = os.path.join(self.default_dir, '%s%s'
                                        % (self.fname, self.ext))

    def load_files(self):
        """ load config file

        Returns:
        --------
        config : object
            user defined parameter file as an object
        """
        try:
            config = ConfigObj(self.config_file, file_error=True)
        except (ConfigObjError, IOError) as e:
            raise IOError('%s' % e)
        logger.info("Loaded parameters from %s", self.config_file)

        return config

    def get_params(self):
        """ Return the parameters with the defaults filled in

        Returns:
        --------
        p : SimpleNamespace
            lat, lon, lai, lad
        """
        config = self.load_files()

        p = SimpleNamespace(lat=parameters.lat, lon=parameters.lon,
                            lai=parameters.lai, lad=parameters.lad)
        for (section, key, attr) in PARAM_KEYS:
            if section in config and key in config[section]:
                try:
                    setattr(p, attr, config[section].as_float(key))
                except ValueError:
                    raise ValueError("%s: [%s] %s = %r is not a number" %
                                     (self.config_file, section, key,
                                      config[section][key]))

        return p
